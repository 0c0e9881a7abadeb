import pytest
from fastapi.testclient import TestClient

from app import app
from models import HazardType, SimulationRequest
from services.alert_service import AlertService
from services.conflict_service import ConflictEvaluator
from services.district_registry import DistrictRegistry
from services.simulation_service import ImpactSimulator
from services.zone_catalogue import ZoneCatalogue
from services.zone_service import ZoneRiskAnalyzer


@pytest.fixture
def registry():
    return DistrictRegistry.from_table()


@pytest.fixture
def catalogue():
    return ZoneCatalogue.from_tables()


@pytest.fixture
def simulator(registry):
    return ImpactSimulator(registry=registry, default_population=5_000_000)


@pytest.fixture
def analyzer(catalogue, registry):
    return ZoneRiskAnalyzer(catalogue=catalogue, registry=registry, top_limit=4, marker_radius_km=10.0)


@pytest.fixture
def evaluator():
    return ConflictEvaluator()


@pytest.fixture
def alert_service():
    return AlertService()


@pytest.fixture
def pune_flood_request():
    return SimulationRequest(
        district="Pune",
        disaster_type=HazardType.FLOOD,
        rainfall=150,
        rescue_teams=10,
        medical_units=5,
        relief_camp_capacity=500,
        delay_hours=0,
    )


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
