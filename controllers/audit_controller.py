#!/usr/bin/env python3
"""
Audit Controller - API routes for decision-log payloads

Records are returned to the caller for storage; nothing is persisted here.
"""
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import List, Optional

from models import DecisionLog, DecisionLogRequest
from services.audit_service import build_decision_log, filter_decision_logs

router = APIRouter(prefix="/api/audit", tags=["Audit"])


class DecisionLogSearch(BaseModel):
    logs: List[DecisionLog]
    search: Optional[str] = None
    district: Optional[str] = None
    disaster_type: Optional[str] = None


@router.post("/decisions", response_model=DecisionLog)
async def create_decision_log(request: DecisionLogRequest):
    """
    Build the audit record for an operator decision

    Returns:
        DecisionLog payload with id and UTC timestamp
    """
    try:
        return build_decision_log(
            request.assessment,
            override_reason=request.override_reason,
            simulation=request.simulation,
        )
    except Exception as e:
        print(f"Error in /api/audit/decisions: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/decisions/search")
async def search_decision_logs(request: DecisionLogSearch):
    """
    Filter decision logs supplied by the audit store

    Returns:
        Matching logs in their original order
    """
    try:
        logs = filter_decision_logs(request.logs, request.search, request.district, request.disaster_type)
        return {"total": len(logs), "logs": logs}
    except Exception as e:
        print(f"Error in /api/audit/decisions/search: {e}")
        raise HTTPException(status_code=500, detail=str(e))
