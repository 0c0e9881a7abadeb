#!/usr/bin/env python3
"""
Conflict Service - red-team audit of an operator decision

The automated recommendation is a step function of the risk score:
  risk > 70        -> Evacuate
  40 < risk <= 70  -> Monitor
  otherwise        -> Ignore

The conflict percentage is the clamped, rounded risk score. It does not
look at the operator decision; agreement is reported separately in
`agrees`.
"""
from models import ConflictAssessment, ConflictLevel, Decision, HazardType
from services.numeric import clamp, round_half_up

HIGH_THRESHOLD = 70
MEDIUM_THRESHOLD = 40

ADVISORY_SUFFIX = {
    ConflictLevel.HIGH: " Consider reviewing the available data and reassessing your approach.",
    ConflictLevel.MEDIUM: " There are some factors that may warrant additional consideration.",
    ConflictLevel.LOW: " Your decision aligns well with the AI assessment.",
}


def recommend_action(risk_score: float) -> Decision:
    if risk_score > HIGH_THRESHOLD:
        return Decision.EVACUATE
    if risk_score > MEDIUM_THRESHOLD:
        return Decision.MONITOR
    return Decision.IGNORE


def conflict_level(percentage: int) -> ConflictLevel:
    if percentage > HIGH_THRESHOLD:
        return ConflictLevel.HIGH
    if percentage > MEDIUM_THRESHOLD:
        return ConflictLevel.MEDIUM
    return ConflictLevel.LOW


def conflict_percentage(risk_score: float) -> int:
    return clamp(round_half_up(risk_score), 0, 100)


def impact_message(percentage: int) -> str:
    return (f"{percentage}% conflict with the automated assessment. "
            f"Acting against it could increase casualties if the hazard escalates.")


class ConflictEvaluator:
    """Scores a human decision against the automated recommendation"""

    def evaluate(
        self,
        risk_score: float,
        user_decision: Decision,
        district: str = "",
        disaster_type: HazardType = HazardType.FLOOD,
    ) -> ConflictAssessment:
        user_decision = Decision(user_decision)
        disaster_type = HazardType(disaster_type)
        ai_recommendation = recommend_action(risk_score)
        percentage = conflict_percentage(risk_score)
        level = conflict_level(percentage)
        agrees = user_decision == ai_recommendation

        advisory = (f"The AI system {'agrees' if agrees else 'disagrees'} with your decision."
                    + ADVISORY_SUFFIX[level])

        assessment = ConflictAssessment(
            district=district,
            disaster_type=disaster_type,
            user_decision=user_decision,
            ai_recommendation=ai_recommendation,
            conflict_percentage=percentage,
            conflict_level=level,
            impact_message=impact_message(percentage),
            agrees=agrees,
            requires_escalation=level == ConflictLevel.HIGH or ai_recommendation == Decision.EVACUATE,
            advisory=advisory,
        )
        if assessment.requires_escalation:
            print(f"[RED-TEAM] {district or 'district'} ({disaster_type.value}): "
                  f"AI recommends {ai_recommendation.value}, conflict {level.value} - escalation suggested")
        return assessment
