import pytest

from services.geo import distances_km, haversine_km, polygon_centroid
from services.numeric import clamp, round_half_up

PUNE = (18.5204, 73.8567)
MUMBAI = (19.076, 72.8777)


def test_haversine_is_symmetric():
    assert haversine_km(PUNE, MUMBAI) == pytest.approx(haversine_km(MUMBAI, PUNE))


def test_haversine_same_point_is_zero():
    assert haversine_km(PUNE, PUNE) == 0.0


def test_one_degree_of_latitude():
    assert haversine_km((0.0, 0.0), (1.0, 0.0)) == pytest.approx(111.195, abs=0.001)


def test_pune_to_mumbai():
    assert haversine_km(PUNE, MUMBAI) == pytest.approx(120.1, abs=1.0)


def test_vectorised_distances_match_scalar():
    targets = [MUMBAI, (18.5074, 73.8077), PUNE]
    result = distances_km(PUNE, targets)
    assert len(result) == 3
    for target, distance in zip(targets, result):
        assert distance == pytest.approx(haversine_km(PUNE, target))


def test_vectorised_distances_empty():
    assert len(distances_km(PUNE, [])) == 0


def test_centroid_is_vertex_mean():
    ring = [(10.0, 20.0), (10.0, 22.0), (12.0, 22.0), (12.0, 20.0)]
    assert polygon_centroid(ring) == pytest.approx((11.0, 21.0))


def test_centroid_of_irregular_ring():
    ring = [(0.0, 0.0), (3.0, 0.0), (0.0, 6.0)]
    assert polygon_centroid(ring) == pytest.approx((1.0, 2.0))


def test_centroid_of_empty_ring():
    assert polygon_centroid([]) is None


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.4999) == 2
    assert round_half_up(-2.5) == -2


def test_clamp():
    assert clamp(150, 0, 100) == 100
    assert clamp(-3, 0, 100) == 0
    assert clamp(42, 0, 100) == 42
