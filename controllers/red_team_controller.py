#!/usr/bin/env python3
"""
Red Team Controller - API route for decision conflict analysis
"""
from fastapi import APIRouter, Depends, HTTPException

from controllers.dependencies import get_conflict_evaluator
from models import ConflictAssessment, ConflictRequest
from services.conflict_service import ConflictEvaluator

router = APIRouter(prefix="/api/red-team", tags=["Red Team"])


@router.post("/evaluate", response_model=ConflictAssessment)
async def evaluate_decision(
    request: ConflictRequest,
    evaluator: ConflictEvaluator = Depends(get_conflict_evaluator),
):
    """
    Compare an operator decision with the automated recommendation

    Returns:
        AI recommendation, conflict percentage/level and operator advisory
    """
    try:
        return evaluator.evaluate(
            risk_score=request.risk_score,
            user_decision=request.user_decision,
            district=request.district,
            disaster_type=request.disaster_type,
        )
    except Exception as e:
        print(f"Error in /api/red-team/evaluate: {e}")
        raise HTTPException(status_code=500, detail=str(e))
