#!/usr/bin/env python3
"""
Alert Controller - API routes for SMS alert text

Only message bodies are produced here; sending is done by the broadcast
service.
"""
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from controllers.dependencies import get_alert_service
from models import HazardType, RedTeamAlertRequest
from services.alert_service import AlertService

router = APIRouter(prefix="/api/alerts", tags=["Alerts"])


@router.get("/templates")
async def get_alert_templates(
    district: Optional[str] = Query(None, description="District name to fill into the templates"),
    disaster_type: Optional[HazardType] = Query(None, description="flood or earthquake"),
    alert_service: AlertService = Depends(get_alert_service),
):
    """
    List alert templates rendered for a district

    Returns:
        Template id, label and filled-in body
    """
    try:
        templates = alert_service.render_all(district, disaster_type)
        return {"total": len(templates), "templates": templates}
    except Exception as e:
        print(f"Error in /api/alerts/templates: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/templates/{template_id}")
async def get_alert_template(
    template_id: str,
    district: Optional[str] = Query(None),
    disaster_type: Optional[HazardType] = Query(None),
    alert_service: AlertService = Depends(get_alert_service),
):
    """
    Render one alert template

    Args:
        template_id: flood, earthquake, evacuate, monitor or allclear
    """
    try:
        template = alert_service.render_template(template_id, district, disaster_type)
        if template is None:
            raise HTTPException(status_code=404, detail=f"Alert template not found: {template_id}")
        return template
    except HTTPException:
        raise
    except Exception as e:
        print(f"Error in /api/alerts/templates/{template_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/red-team-message")
async def build_red_team_message(
    request: RedTeamAlertRequest,
    alert_service: AlertService = Depends(get_alert_service),
):
    """
    Pre-fill a broadcast message from a red-team assessment

    Returns:
        {"message": "..."}
    """
    try:
        return {"message": alert_service.build_red_team_alert(request.assessment, request.risk_score)}
    except Exception as e:
        print(f"Error in /api/alerts/red-team-message: {e}")
        raise HTTPException(status_code=500, detail=str(e))
