#!/usr/bin/env python3
"""
District Controller - API routes for the district registry
"""
from fastapi import APIRouter, Depends, HTTPException

from controllers.dependencies import get_registry
from services.district_registry import DistrictNotFoundError, DistrictRegistry

router = APIRouter(prefix="/api", tags=["Districts"])


@router.get("/districts")
async def get_districts(registry: DistrictRegistry = Depends(get_registry)):
    """
    List all districts in the registry

    Returns:
        District names and their center/population records
    """
    try:
        return {
            "total": len(registry),
            "names": registry.names(),
            "districts": registry.all(),
        }
    except Exception as e:
        print(f"Error in /api/districts: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/load-district/{name}")
async def load_district(name: str, registry: DistrictRegistry = Depends(get_registry)):
    """
    Load one district (case-insensitive)

    Args:
        name: District name, e.g. Pune

    Returns:
        District center and population
    """
    try:
        return registry.get(name)
    except DistrictNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        print(f"Error in /api/load-district/{name}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
