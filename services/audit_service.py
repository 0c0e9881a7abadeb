#!/usr/bin/env python3
"""
Audit Service - decision-log payloads for the external audit store
"""
import uuid
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from models import ConflictAssessment, DecisionLog, SimulationResult

ALL = "all"


def build_decision_log(
    assessment: ConflictAssessment,
    override_reason: Optional[str] = None,
    simulation: Optional[SimulationResult] = None,
    timestamp: Optional[datetime] = None,
) -> DecisionLog:
    """
    One audit record for an operator decision.

    The predicted impact quotes the simulation when one is given, otherwise
    the assessment's impact message. Timestamps are UTC ISO strings.
    """
    if timestamp is None:
        timestamp = datetime.now(timezone.utc)

    if simulation is not None:
        predicted_impact = (f"{simulation.affected_population:,} affected, "
                            f"{simulation.fatalities:,} fatalities, "
                            f"loss {simulation.economic_loss:,}")
    else:
        predicted_impact = assessment.impact_message

    return DecisionLog(
        id=str(uuid.uuid4()),
        timestamp=timestamp.isoformat(),
        district=assessment.district,
        disaster_type=assessment.disaster_type,
        user_decision=assessment.user_decision,
        ai_warning=(f"AI recommends {assessment.ai_recommendation.value} "
                    f"({assessment.conflict_level.value} conflict, {assessment.conflict_percentage}%)"),
        override_reason=override_reason or None,
        predicted_impact=predicted_impact,
    )


def _is_unset(value: Optional[str]) -> bool:
    return value is None or value.strip() == "" or value.strip().lower() == ALL


def filter_decision_logs(
    logs: Iterable[DecisionLog],
    search: Optional[str] = None,
    district: Optional[str] = None,
    disaster_type: Optional[str] = None,
) -> List[DecisionLog]:
    """
    Audit view filter

    search matches district, decision or AI warning (case-insensitive
    substring); district and disaster_type match exactly. "all" or an
    empty value disables a filter.
    """
    filtered = list(logs)

    if search:
        needle = search.lower()
        filtered = [
            log for log in filtered
            if needle in log.district.lower()
            or needle in log.user_decision.value.lower()
            or needle in log.ai_warning.lower()
        ]

    if not _is_unset(district):
        filtered = [log for log in filtered if log.district == district.strip()]

    if not _is_unset(disaster_type):
        filtered = [log for log in filtered if log.disaster_type.value == disaster_type.strip()]

    return filtered
