#!/usr/bin/env python3
"""
Data models / Pydantic schemas
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Tuple
from enum import Enum


class HazardType(str, Enum):
    FLOOD = "flood"
    EARTHQUAKE = "earthquake"


class Decision(str, Enum):
    EVACUATE = "Evacuate"
    MONITOR = "Monitor"
    IGNORE = "Ignore"


class ConflictLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


LatLng = Tuple[float, float]


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


# =====================================================
# District Models
# =====================================================

class District(FrozenModel):
    name: str
    lat: float
    lng: float
    population: int


# =====================================================
# Impact Simulation Models
# =====================================================

class SimulationRequest(BaseModel):
    district: str
    disaster_type: HazardType
    rainfall: Optional[float] = Field(None, description="Rainfall in mm (flood only, 0-300)")
    magnitude: Optional[float] = Field(None, description="Richter magnitude (earthquake only, 3.0-9.0)")
    rescue_teams: int = 0
    medical_units: int = 0
    relief_camp_capacity: int = 0
    delay_hours: int = Field(0, description="Official response delay: 0, 2, 4 or 6 hours")


class TimeSeriesPoint(FrozenModel):
    hour: int
    without_resources: int
    with_resources: int


class SimulationResult(FrozenModel):
    affected_population: int
    fatalities: int
    economic_loss: int
    time_series: List[TimeSeriesPoint]


class RiskOverlay(FrozenModel):
    lat: float
    lng: float
    disaster_type: HazardType
    intensity: float
    radius_m: float
    inner_radius_m: float
    fill_opacity: float
    inner_fill_opacity: float
    color: str


class SimulationReport(FrozenModel):
    district: str
    result: SimulationResult
    risk_score: int
    recommended_action: Decision
    overlay: RiskOverlay


# =====================================================
# Zone Models
# =====================================================

class ZoneDefinition(FrozenModel):
    """Catalogue entry for a named sub-zone of a district"""
    name: str
    population: int
    flood_risk: int
    earthquake_risk: int
    coordinates: List[LatLng]
    is_water_adjacent: bool = False
    is_urban_dense: bool = False

    def risk_for(self, hazard: HazardType) -> int:
        if hazard == HazardType.FLOOD:
            return self.flood_risk
        return self.earthquake_risk


class TargetAreas(FrozenModel):
    areas: Tuple[str, ...]
    primary: Optional[str] = None


class Zone(FrozenModel):
    id: str
    name: str
    risk_score: int
    population: int
    priority: int
    recommended_rescue_teams: int
    coordinates: List[LatLng]
    is_water_adjacent: bool = False
    is_urban_dense: bool = False


class ZoneAnalysisRequest(BaseModel):
    district: str
    disaster_type: HazardType


class AffectedZone(FrozenModel):
    id: str
    name: str
    risk_score: int
    population: int
    center: LatLng
    distance_km: float
    highlighted: bool


class ImpactDetection(FrozenModel):
    disaster_type: HazardType
    affected_zone_ids: List[str] = []
    epicenter: Optional[LatLng] = None
    zones: List[AffectedZone] = []


# =====================================================
# Red Team / Conflict Models
# =====================================================

class ConflictRequest(BaseModel):
    district: str
    disaster_type: HazardType
    user_decision: Decision
    risk_score: float = Field(..., description="Hazard risk score, nominally 0-100")


class ConflictAssessment(FrozenModel):
    district: str
    disaster_type: HazardType
    user_decision: Decision
    ai_recommendation: Decision
    conflict_percentage: int
    conflict_level: ConflictLevel
    impact_message: str
    agrees: bool
    requires_escalation: bool
    advisory: str


# =====================================================
# Audit / Alert Models
# =====================================================

class DecisionLog(FrozenModel):
    id: str
    timestamp: str
    district: str
    disaster_type: HazardType
    user_decision: Decision
    ai_warning: str
    override_reason: Optional[str] = None
    predicted_impact: str


class DecisionLogRequest(BaseModel):
    assessment: ConflictAssessment
    override_reason: Optional[str] = None
    simulation: Optional[SimulationResult] = None


class AlertTemplate(FrozenModel):
    id: str
    label: str
    body: str


class RedTeamAlertRequest(BaseModel):
    assessment: ConflictAssessment
    risk_score: float
