import pytest

from models import District
from services.district_registry import DistrictNotFoundError, DistrictRegistry, normalize_key


def test_lookup_is_case_insensitive(registry):
    assert registry.get("PUNE") == registry.get("pune") == registry.get(" Pune ")
    assert registry.get("Pune").population == 9429408


def test_unknown_district_raises(registry):
    with pytest.raises(DistrictNotFoundError) as exc:
        registry.get("Atlantis")
    assert exc.value.name == "Atlantis"
    assert isinstance(exc.value, LookupError)


def test_find_returns_none_for_unknown(registry):
    assert registry.find("Atlantis") is None
    assert "Atlantis" not in registry
    assert "guwahati" in registry


def test_names_keep_table_order(registry):
    names = registry.names()
    assert len(registry) == 10
    assert names[0] == "Pune"
    assert names[-1] == "Guwahati"


def test_records_are_immutable(registry):
    district = registry.get("Mumbai")
    with pytest.raises(Exception):
        district.population = 0


def test_injected_table():
    custom = DistrictRegistry.from_table({
        "New Town": {"name": "New Town", "lat": 1.0, "lng": 2.0, "population": 10},
    })
    assert custom.get("newtown") == District(name="New Town", lat=1.0, lng=2.0, population=10)
    assert custom.find("Pune") is None


def test_normalize_key():
    assert normalize_key("  Navi Mumbai ") == "navimumbai"
    assert normalize_key(None) == ""
