#!/usr/bin/env python3
"""
Service layer - Business logic
"""
from .district_registry import DistrictRegistry, DistrictNotFoundError
from .simulation_service import ImpactSimulator
from .zone_catalogue import ZoneCatalogue
from .zone_service import ZoneRiskAnalyzer
from .conflict_service import ConflictEvaluator
from .alert_service import AlertService

__all__ = [
    "DistrictRegistry",
    "DistrictNotFoundError",
    "ImpactSimulator",
    "ZoneCatalogue",
    "ZoneRiskAnalyzer",
    "ConflictEvaluator",
    "AlertService",
]
