#!/usr/bin/env python3
"""
Controller layer - API route handlers
"""
from .district_controller import router as district_router
from .simulation_controller import router as simulation_router
from .zone_controller import router as zone_router
from .red_team_controller import router as red_team_router
from .alert_controller import router as alert_router
from .audit_controller import router as audit_router

__all__ = [
    "district_router",
    "simulation_router",
    "zone_router",
    "red_team_router",
    "alert_router",
    "audit_router",
]
