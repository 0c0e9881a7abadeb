#!/usr/bin/env python3
"""
Alert Service - SMS alert text for the external broadcast layer

Builds message bodies only; delivery and subscriber lists live elsewhere.
"""
from typing import Dict, List, Optional

from data import ALERT_TEMPLATES
from models import AlertTemplate, ConflictAssessment, HazardType
from services.numeric import round_half_up


class AlertService:
    """Message templates and red-team warning pre-fill"""

    def __init__(self, templates: List[Dict] = None):
        if templates is None:
            templates = ALERT_TEMPLATES
        self._templates = {t["id"]: t for t in templates}

    def template_ids(self) -> List[str]:
        return list(self._templates.keys())

    def render_template(
        self,
        template_id: str,
        district: Optional[str] = None,
        disaster_type: Optional[HazardType] = None,
    ) -> Optional[AlertTemplate]:
        """Fill a template with the district and hazard; None for an unknown id"""
        template = self._templates.get(template_id)
        if template is None:
            return None

        hazard = HazardType(disaster_type).value if disaster_type else "disaster"
        return AlertTemplate(
            id=template["id"],
            label=template["label"],
            body=template["body"].format(district=district or "District", disaster_type=hazard),
        )

    def render_all(self, district: Optional[str] = None,
                   disaster_type: Optional[HazardType] = None) -> List[AlertTemplate]:
        return [self.render_template(tid, district, disaster_type) for tid in self._templates]

    @staticmethod
    def build_red_team_alert(assessment: ConflictAssessment, risk_score: float) -> str:
        """Pre-filled broadcast text from a red-team assessment"""
        score = round_half_up(risk_score)
        parts = [
            f"[DISASTER ALERT] {assessment.district} - {assessment.disaster_type.value}",
            f"AI Recommendation: {assessment.ai_recommendation.value}. "
            f"Conflict: {assessment.conflict_level.value}.",
            assessment.impact_message,
            f"Risk score: {score}/100. Act accordingly. - SentinelX",
        ]
        return " ".join(parts)
