#!/usr/bin/env python3
"""
Impact Simulation Service - projected human and economic impact of a hazard

Model:
  severity        = rainfall / 300            (flood)
                  = (magnitude - 3) / 6       (earthquake)
  resource_factor = 1 - min(0.5, (rescue_teams + medical_units) / 200)
  affected        = population * severity * 0.05
  fatalities      = affected * 0.03 * resource_factor
  economic_loss   = affected * 5000 * severity

Inputs are not range-checked: out-of-range rainfall or magnitude yields a
severity outside [0, 1] and correspondingly scaled outputs.
"""
from typing import Optional

from config import DEFAULT_POPULATION
from data import INDIA_CENTER
from models import (
    District,
    HazardType,
    RiskOverlay,
    SimulationReport,
    SimulationRequest,
    SimulationResult,
    TimeSeriesPoint,
)
from services.conflict_service import recommend_action
from services.district_registry import DistrictRegistry
from services.numeric import clamp, round_half_up

# Hazard scaling
MAX_RAINFALL_MM = 300.0
MIN_MAGNITUDE = 3.0
MAGNITUDE_SPAN = 6.0
DEFAULT_RAINFALL_MM = 150.0
DEFAULT_MAGNITUDE = 5.0

# Impact coefficients
AFFECTED_RATE = 0.05
FATALITY_RATE = 0.03
LOSS_PER_PERSON = 5000

# Resource mitigation saturates at 50%
RESOURCE_DIVISOR = 200.0
MAX_MITIGATION = 0.5

# Hourly projection
CHECKPOINT_HOURS = (0, 2, 4, 6)
GROWTH_RATE = 0.4
DELAY_PENALTY = 1.2
UNMITIGATED_SHARE = 0.3
MITIGATED_SHARE = 0.2

# Map overlay
OVERLAY_COLORS = {
    HazardType.FLOOD: "#3b82f6",
    HazardType.EARTHQUAKE: "#f97316",
}


def resource_factor(rescue_teams: int, medical_units: int) -> float:
    """Multiplicative fatality mitigation, bounded below by 0.5"""
    return 1 - min(MAX_MITIGATION, (rescue_teams + medical_units) / RESOURCE_DIVISOR)


def hazard_severity(request: SimulationRequest) -> float:
    """Normalised hazard intensity, nominally in [0, 1]"""
    if request.disaster_type == HazardType.FLOOD:
        rainfall = request.rainfall if request.rainfall is not None else DEFAULT_RAINFALL_MM
        return rainfall / MAX_RAINFALL_MM
    magnitude = request.magnitude if request.magnitude is not None else DEFAULT_MAGNITUDE
    return (magnitude - MIN_MAGNITUDE) / MAGNITUDE_SPAN


class ImpactSimulator:
    """Pure impact estimator; one call per user action, no shared state"""

    def __init__(self, registry: DistrictRegistry = None, default_population: int = DEFAULT_POPULATION):
        self.registry = registry if registry is not None else DistrictRegistry.from_table()
        self.default_population = default_population

    def _resolve(self, name: str) -> Optional[District]:
        district = self.registry.find(name)
        if district is None:
            print(f"[SIM] District '{name}' not in registry, using default population "
                  f"{self.default_population:,}")
        return district

    def population_for(self, name: str) -> int:
        district = self._resolve(name)
        return district.population if district else self.default_population

    def simulate(self, request: SimulationRequest) -> SimulationResult:
        """
        Project affected population, fatalities, economic loss and the
        hourly with/without-resources series for one request.

        An unknown district falls back to the default population.
        """
        population = self.population_for(request.district)
        severity = hazard_severity(request)
        factor = resource_factor(request.rescue_teams, request.medical_units)

        affected = round_half_up(population * severity * AFFECTED_RATE)
        fatalities = round_half_up(affected * FATALITY_RATE * factor)
        economic_loss = round_half_up(affected * LOSS_PER_PERSON * severity)

        time_series = []
        for hour in CHECKPOINT_HOURS:
            growth = 1 + hour * GROWTH_RATE * severity
            penalty = DELAY_PENALTY if hour <= request.delay_hours else 1.0
            time_series.append(TimeSeriesPoint(
                hour=hour,
                without_resources=round_half_up(affected * UNMITIGATED_SHARE * growth * penalty),
                with_resources=round_half_up(affected * MITIGATED_SHARE * growth * factor),
            ))

        return SimulationResult(
            affected_population=affected,
            fatalities=fatalities,
            economic_loss=economic_loss,
            time_series=time_series,
        )

    def risk_score(self, request: SimulationRequest) -> int:
        """Dashboard risk score 0-100 from the clamped severity"""
        return round_half_up(clamp(hazard_severity(request), 0.0, 1.0) * 100)

    def build_overlay(self, request: SimulationRequest) -> RiskOverlay:
        """Risk circle drawn on the district map after a simulation"""
        district = self.registry.find(request.district)
        lat, lng = (district.lat, district.lng) if district else INDIA_CENTER
        intensity = hazard_severity(request)
        radius = 15000 + intensity * 35000

        return RiskOverlay(
            lat=lat,
            lng=lng,
            disaster_type=request.disaster_type,
            intensity=intensity,
            radius_m=radius,
            inner_radius_m=radius * 0.4,
            fill_opacity=0.15 + intensity * 0.25,
            inner_fill_opacity=0.3 + intensity * 0.3,
            color=OVERLAY_COLORS[request.disaster_type],
        )

    def report(self, request: SimulationRequest) -> SimulationReport:
        """Simulation result plus risk score, recommended action and overlay"""
        score = self.risk_score(request)
        district = self.registry.find(request.district)

        return SimulationReport(
            district=district.name if district else request.district,
            result=self.simulate(request),
            risk_score=score,
            recommended_action=recommend_action(score),
            overlay=self.build_overlay(request),
        )
