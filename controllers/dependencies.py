#!/usr/bin/env python3
"""
FastAPI dependency providers

Reference data is built once and shared read-only; tests swap these out
through app.dependency_overrides.
"""
from functools import lru_cache

from services.alert_service import AlertService
from services.conflict_service import ConflictEvaluator
from services.district_registry import DistrictRegistry
from services.simulation_service import ImpactSimulator
from services.zone_catalogue import ZoneCatalogue
from services.zone_service import ZoneRiskAnalyzer


@lru_cache
def get_registry() -> DistrictRegistry:
    return DistrictRegistry.from_table()


@lru_cache
def get_catalogue() -> ZoneCatalogue:
    return ZoneCatalogue.from_tables()


@lru_cache
def get_simulator() -> ImpactSimulator:
    return ImpactSimulator(registry=get_registry())


@lru_cache
def get_zone_analyzer() -> ZoneRiskAnalyzer:
    return ZoneRiskAnalyzer(catalogue=get_catalogue(), registry=get_registry())


@lru_cache
def get_conflict_evaluator() -> ConflictEvaluator:
    return ConflictEvaluator()


@lru_cache
def get_alert_service() -> AlertService:
    return AlertService()
