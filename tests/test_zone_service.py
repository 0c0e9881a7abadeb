import pytest

from models import HazardType, TargetAreas, ZoneDefinition
from services.district_registry import DistrictNotFoundError, DistrictRegistry
from services.zone_catalogue import ZoneCatalogue
from services.zone_service import ZoneRiskAnalyzer, recommended_rescue_teams, zone_id

GUWAHATI_CENTER = (26.1445, 91.7362)
PUNE_CENTER = (18.5204, 73.8567)


def _square(lat, lng, d=0.01):
    return [(lat + d, lng - d), (lat + d, lng + d), (lat - d, lng + d), (lat - d, lng - d)]


def _zone(name, flood, quake=10, water=False, urban=False, lat=10.0, lng=20.0, population=100000):
    return ZoneDefinition(
        name=name,
        population=population,
        flood_risk=flood,
        earthquake_risk=quake,
        coordinates=_square(lat, lng),
        is_water_adjacent=water,
        is_urban_dense=urban,
    )


def _analyzer(zones, targets=None, top_limit=4):
    registry = DistrictRegistry.from_table({
        "testville": {"name": "Testville", "lat": 10.0, "lng": 20.0, "population": 500000},
    })
    catalogue = ZoneCatalogue({"testville": zones}, {"testville": targets or {}})
    return ZoneRiskAnalyzer(catalogue=catalogue, registry=registry, top_limit=top_limit)


# ============ analyze ============

def test_catalogue_scores_give_dense_priorities():
    analyzer = _analyzer([_zone("D", 45), _zone("B", 72), _zone("A", 85), _zone("C", 68)])

    zones = analyzer.analyze("Testville", HazardType.FLOOD)

    assert [z.risk_score for z in zones] == [85, 72, 68, 45]
    assert [z.priority for z in zones] == [1, 2, 3, 4]


def test_guwahati_flood_ranking(analyzer):
    zones = analyzer.analyze("Guwahati", HazardType.FLOOD)

    assert [z.name for z in zones] == [
        "Ganeshguri", "Khanapara", "Paltan Bazaar", "Dispur", "Panjabari", "Jalukbari",
    ]
    assert [z.priority for z in zones] == list(range(1, 7))
    assert zones[0].id == "guwahati-ganeshguri"
    assert zones[2].id == "guwahati-paltan-bazaar"


def test_risk_score_follows_hazard(analyzer):
    flood = {z.name: z.risk_score for z in analyzer.analyze("Guwahati", HazardType.FLOOD)}
    quake = {z.name: z.risk_score for z in analyzer.analyze("Guwahati", HazardType.EARTHQUAKE)}

    assert flood["Dispur"] == 69
    assert quake["Dispur"] == 86


@pytest.mark.parametrize("district", ["Pune", "Mumbai", "Chennai", "Kolkata", "Delhi",
                                      "Bengaluru", "Hyderabad", "Ahmedabad", "Jaipur", "Guwahati"])
@pytest.mark.parametrize("hazard", [HazardType.FLOOD, HazardType.EARTHQUAKE])
def test_every_district_ranks_consistently(analyzer, district, hazard):
    zones = analyzer.analyze(district, hazard)

    assert [z.priority for z in zones] == list(range(1, len(zones) + 1))
    scores = [z.risk_score for z in zones]
    assert scores == sorted(scores, reverse=True)
    assert all(0 <= s <= 100 for s in scores)


def test_ties_broken_by_name():
    analyzer = _analyzer([_zone("Beta", 60), _zone("Alpha", 60)])
    zones = analyzer.analyze("Testville", HazardType.FLOOD)
    assert [(z.name, z.priority) for z in zones] == [("Alpha", 1), ("Beta", 2)]


def test_unknown_district_is_not_defaulted(analyzer):
    with pytest.raises(DistrictNotFoundError):
        analyzer.analyze("Atlantis", HazardType.FLOOD)
    with pytest.raises(DistrictNotFoundError):
        analyzer.district_center("Atlantis")


def test_recommended_rescue_teams():
    assert recommended_rescue_teams(185000, 88) == 7
    assert recommended_rescue_teams(1000, 5) == 1


def test_zone_id_slug():
    assert zone_id("Chennai", "T. Nagar") == "chennai-t-nagar"


# ============ detect_impact ============

def test_guwahati_flood_water_zones_lead(analyzer):
    zones = analyzer.analyze("Guwahati", HazardType.FLOOD)
    detection = analyzer.detect_impact(zones, HazardType.FLOOD, GUWAHATI_CENTER, "Guwahati")

    assert [z.name for z in detection.zones] == ["Ganeshguri", "Khanapara", "Dispur", "Panjabari"]
    assert detection.affected_zone_ids == [z.id for z in detection.zones]
    assert detection.epicenter == pytest.approx((26.1503, 91.7780), abs=1e-6)


def test_guwahati_earthquake_urban_zones_lead(analyzer):
    zones = analyzer.analyze("Guwahati", HazardType.EARTHQUAKE)
    detection = analyzer.detect_impact(zones, HazardType.EARTHQUAKE, GUWAHATI_CENTER, "Guwahati")

    assert [z.name for z in detection.zones] == ["Dispur", "Panjabari", "Ganeshguri", "Khanapara"]
    assert detection.epicenter == pytest.approx((26.1433, 91.7898), abs=1e-6)


def test_zones_outside_marker_radius_stay_affected(analyzer):
    zones = analyzer.analyze("Pune", HazardType.FLOOD)
    detection = analyzer.detect_impact(zones, HazardType.FLOOD, PUNE_CENTER, "Pune")

    assert [z.name for z in detection.zones] == ["Kothrud", "Central Pune", "Baner", "Hinjewadi"]
    hinjewadi = detection.zones[-1]
    assert hinjewadi.distance_km > 10
    assert not hinjewadi.highlighted
    assert hinjewadi.id in detection.affected_zone_ids
    assert [z.name for z in analyzer.markers(detection)] == ["Kothrud", "Central Pune", "Baner"]


def test_distances_are_from_district_center(analyzer):
    zones = analyzer.analyze("Pune", HazardType.FLOOD)
    detection = analyzer.detect_impact(zones, HazardType.FLOOD, PUNE_CENTER, "Pune")
    central = next(z for z in detection.zones if z.name == "Central Pune")
    assert central.distance_km < 0.5


def test_non_target_zones_never_selected(analyzer):
    zones = analyzer.analyze("Guwahati", HazardType.FLOOD)
    detection = analyzer.detect_impact(zones, HazardType.FLOOD, GUWAHATI_CENTER, "Guwahati")
    names = {z.name for z in detection.zones}
    assert "Paltan Bazaar" not in names
    assert "Jalukbari" not in names


def test_no_matching_targets_is_empty(analyzer):
    pune_zones = analyzer.analyze("Pune", HazardType.FLOOD)
    detection = analyzer.detect_impact(pune_zones, HazardType.FLOOD, GUWAHATI_CENTER, "Guwahati")

    assert detection.affected_zone_ids == []
    assert detection.epicenter is None
    assert analyzer.markers(detection) == []


def test_district_without_target_areas_is_empty():
    analyzer = _analyzer([_zone("A", 90)])
    zones = analyzer.analyze("Testville", HazardType.FLOOD)
    detection = analyzer.detect_impact(zones, HazardType.FLOOD, (10.0, 20.0), "Testville")
    assert detection.affected_zone_ids == []
    assert detection.epicenter is None


def test_primary_tagged_zone_beats_higher_risk():
    analyzer = _analyzer(
        [_zone("Ridge", 95), _zone("Lakeside", 40, water=True), _zone("Riverside", 60, water=True)],
        targets={HazardType.FLOOD: TargetAreas(areas=("Ridge", "Lakeside", "Riverside"), primary="Lakeside")},
    )
    zones = analyzer.analyze("Testville", HazardType.FLOOD)
    detection = analyzer.detect_impact(zones, HazardType.FLOOD, (10.0, 20.0), "Testville")

    assert [z.name for z in detection.zones] == ["Lakeside", "Riverside", "Ridge"]


def test_without_primary_tagged_zones_sort_by_risk():
    analyzer = _analyzer(
        [_zone("Old Town", 30, quake=50, urban=True), _zone("Market", 30, quake=80, urban=True),
         _zone("Fields", 30, quake=99)],
        targets={HazardType.EARTHQUAKE: TargetAreas(areas=("Old Town", "Market", "Fields"))},
    )
    zones = analyzer.analyze("Testville", HazardType.EARTHQUAKE)
    detection = analyzer.detect_impact(zones, HazardType.EARTHQUAKE, (10.0, 20.0), "Testville")

    assert [z.name for z in detection.zones] == ["Market", "Old Town", "Fields"]


def test_top_limit_truncates():
    names = ("A", "B", "C", "D", "E", "F")
    analyzer = _analyzer(
        [_zone(name, 90 - i) for i, name in enumerate(names)],
        targets={HazardType.FLOOD: TargetAreas(areas=names)},
        top_limit=4,
    )
    zones = analyzer.analyze("Testville", HazardType.FLOOD)
    detection = analyzer.detect_impact(zones, HazardType.FLOOD, (10.0, 20.0), "Testville")
    assert [z.name for z in detection.zones] == ["A", "B", "C", "D"]


# ============ catalogue validation ============

def test_unknown_target_name_fails_fast():
    with pytest.raises(ValueError, match="Lakesid"):
        ZoneCatalogue(
            {"testville": [_zone("Lakeside", 40, water=True)]},
            {"testville": {HazardType.FLOOD: TargetAreas(areas=("Lakesid",))}},
        )


def test_primary_must_be_a_target_area():
    with pytest.raises(ValueError, match="not a target area"):
        ZoneCatalogue(
            {"testville": [_zone("Lakeside", 40, water=True), _zone("Ridge", 50)]},
            {"testville": {HazardType.FLOOD: TargetAreas(areas=("Ridge",), primary="Lakeside")}},
        )


def test_primary_must_carry_hazard_tag():
    with pytest.raises(ValueError, match="not tagged"):
        ZoneCatalogue(
            {"testville": [_zone("Ridge", 50)]},
            {"testville": {HazardType.FLOOD: TargetAreas(areas=("Ridge",), primary="Ridge")}},
        )


def test_targets_for_unknown_district_fail():
    with pytest.raises(ValueError, match="unknown district"):
        ZoneCatalogue({}, {"nowhere": {}})


def test_shipped_catalogue_is_consistent(catalogue):
    assert len(catalogue.districts()) == 10
    target = catalogue.targets_for("GUWAHATI", HazardType.FLOOD)
    assert target.primary == "Ganeshguri"
    assert catalogue.targets_for("Atlantis", HazardType.FLOOD) is None
