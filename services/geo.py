#!/usr/bin/env python3
"""
Geo helpers - polygon centroids and great-circle distances

Coordinates are (lat, lng) pairs in decimal degrees; distances are km.
"""
from typing import Optional, Sequence, Tuple

import numpy as np

EARTH_RADIUS_KM = 6371.0

LatLng = Tuple[float, float]


def polygon_centroid(coordinates: Sequence[LatLng]) -> Optional[LatLng]:
    """
    Arithmetic mean of the polygon vertices.

    Returns None for an empty ring.
    """
    if not coordinates:
        return None
    points = np.asarray(coordinates, dtype=np.float64)
    lat, lng = points.mean(axis=0)
    return float(lat), float(lng)


def haversine_km(origin: LatLng, target: LatLng) -> float:
    """Great-circle distance between two points"""
    lat1, lng1 = np.radians(origin)
    lat2, lng2 = np.radians(target)
    dlat = lat2 - lat1
    dlng = lng2 - lng1

    a = np.sin(dlat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlng / 2) ** 2
    return float(2 * EARTH_RADIUS_KM * np.arctan2(np.sqrt(a), np.sqrt(1 - a)))


def distances_km(origin: LatLng, targets: Sequence[LatLng]) -> np.ndarray:
    """Vectorised haversine from one origin to many targets"""
    if len(targets) == 0:
        return np.empty(0)
    lat1, lng1 = np.radians(origin)
    points = np.radians(np.asarray(targets, dtype=np.float64))
    lat2, lng2 = points[:, 0], points[:, 1]

    a = np.sin((lat2 - lat1) / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin((lng2 - lng1) / 2) ** 2
    return 2 * EARTH_RADIUS_KM * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
