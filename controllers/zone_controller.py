#!/usr/bin/env python3
"""
Zone Controller - API routes for sub-zone ranking and impact detection
"""
from fastapi import APIRouter, Depends, HTTPException

from controllers.dependencies import get_zone_analyzer
from models import ZoneAnalysisRequest
from services.district_registry import DistrictNotFoundError
from services.zone_service import ZoneRiskAnalyzer

router = APIRouter(prefix="/api/zones", tags=["Zones"])


@router.post("/analyze")
async def analyze_zones(request: ZoneAnalysisRequest, analyzer: ZoneRiskAnalyzer = Depends(get_zone_analyzer)):
    """
    Rank a district's sub-zones for a hazard

    Returns:
        District center and zones ordered by priority
    """
    try:
        center = analyzer.district_center(request.district)
        zones = analyzer.analyze(request.district, request.disaster_type)
        return {
            "district": request.district,
            "disaster_type": request.disaster_type,
            "center": center,
            "total": len(zones),
            "zones": zones,
        }
    except DistrictNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        print(f"Error in /api/zones/analyze: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/detect-impact")
async def detect_impact(request: ZoneAnalysisRequest, analyzer: ZoneRiskAnalyzer = Depends(get_zone_analyzer)):
    """
    Detect which zones a hazard hits and where its epicenter is

    Returns:
        Ranked zones, the impact detection and the zones to mark on the map
    """
    try:
        zones = analyzer.analyze(request.district, request.disaster_type)
        center = analyzer.district_center(request.district)
        detection = analyzer.detect_impact(zones, request.disaster_type, center, request.district)
        return {
            "district": request.district,
            "center": center,
            "zones": zones,
            "detection": detection,
            "markers": analyzer.markers(detection),
        }
    except DistrictNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        print(f"Error in /api/zones/detect-impact: {e}")
        raise HTTPException(status_code=500, detail=str(e))
