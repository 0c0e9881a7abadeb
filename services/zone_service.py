#!/usr/bin/env python3
"""
Zone Risk Service - sub-zone ranking and disaster impact detection

analyze():       catalogue zones for a district, ranked by hazard risk
detect_impact(): picks the zones hit by a hazard and the epicenter
                 1. look up the district's target areas for the hazard
                 2. keep catalogue zones named in that list
                 3. tagged zones first (water-adjacent for floods, urban-dense
                    for earthquakes), the primary zone leading them, then by risk
                 4. keep the top N
                 5. centroid + haversine distance from the district center
"""
import math
import re
from typing import List, Sequence

from config import MARKER_RADIUS_KM, TOP_ZONE_LIMIT
from models import AffectedZone, HazardType, ImpactDetection, LatLng, Zone
from services.district_registry import DistrictRegistry, normalize_key
from services.geo import distances_km, polygon_centroid
from services.zone_catalogue import ZoneCatalogue

PEOPLE_PER_RESCUE_TEAM = 25000


def zone_id(district: str, name: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return f"{normalize_key(district)}-{slug}"


def recommended_rescue_teams(population: int, risk_score: int) -> int:
    """At least one team; one per 25k risk-weighted residents"""
    return max(1, math.ceil(population * risk_score / 100 / PEOPLE_PER_RESCUE_TEAM))


def _is_tagged(zone: Zone, hazard: HazardType) -> bool:
    if hazard == HazardType.FLOOD:
        return zone.is_water_adjacent
    return zone.is_urban_dense


class ZoneRiskAnalyzer:
    """Service for district sub-zone risk ranking and impact overlay selection"""

    def __init__(
        self,
        catalogue: ZoneCatalogue = None,
        registry: DistrictRegistry = None,
        top_limit: int = TOP_ZONE_LIMIT,
        marker_radius_km: float = MARKER_RADIUS_KM,
    ):
        self.catalogue = catalogue if catalogue is not None else ZoneCatalogue.from_tables()
        self.registry = registry if registry is not None else DistrictRegistry.from_table()
        self.top_limit = top_limit
        self.marker_radius_km = marker_radius_km

    def district_center(self, district: str) -> LatLng:
        """Raises DistrictNotFoundError for an unknown district"""
        record = self.registry.get(district)
        return record.lat, record.lng

    def analyze(self, district: str, hazard: HazardType) -> List[Zone]:
        """
        Rank a district's sub-zones for one hazard

        Zones come back ordered by descending risk score (name breaks ties)
        with priority 1..N in that order.

        Raises:
            DistrictNotFoundError: no zone catalogue for the district
        """
        hazard = HazardType(hazard)
        definitions = self.catalogue.zones_for(district)
        ranked = sorted(definitions, key=lambda d: (-d.risk_for(hazard), d.name))

        zones = []
        for priority, definition in enumerate(ranked, start=1):
            risk = definition.risk_for(hazard)
            zones.append(Zone(
                id=zone_id(district, definition.name),
                name=definition.name,
                risk_score=risk,
                population=definition.population,
                priority=priority,
                recommended_rescue_teams=recommended_rescue_teams(definition.population, risk),
                coordinates=list(definition.coordinates),
                is_water_adjacent=definition.is_water_adjacent,
                is_urban_dense=definition.is_urban_dense,
            ))
        return zones

    def rank_targets(self, zones: Sequence[Zone], hazard: HazardType, district: str) -> List[Zone]:
        """Zones named in the district's target areas, in impact order (untruncated)"""
        hazard = HazardType(hazard)
        target = self.catalogue.targets_for(district, hazard)
        if target is None:
            return []

        names = set(target.areas)
        primary = target.primary

        def sort_key(zone: Zone):
            tagged = _is_tagged(zone, hazard)
            return (
                0 if tagged else 1,
                0 if tagged and zone.name == primary else 1,
                -zone.risk_score,
            )

        return sorted((z for z in zones if z.name in names), key=sort_key)

    def detect_impact(
        self,
        zones: Sequence[Zone],
        hazard: HazardType,
        district_center: LatLng,
        district: str,
    ) -> ImpactDetection:
        """
        Select the zones hit by a hazard and the epicenter

        Every selected zone is in the affected set; `highlighted` only marks
        those within the marker radius of the district center. No match is
        a valid empty result with no epicenter.
        """
        hazard = HazardType(hazard)
        top = self.rank_targets(zones, hazard, district)[:self.top_limit]

        located = []
        for zone in top:
            center = polygon_centroid(zone.coordinates)
            if center is None:
                print(f"[ZONES] Zone '{zone.name}' has no geometry, skipped")
                continue
            located.append((zone, center))

        if not located:
            print(f"[ZONES] No {hazard.value} target areas matched for '{district}'")
            return ImpactDetection(disaster_type=hazard)

        distances = distances_km(district_center, [center for _, center in located])
        affected = [
            AffectedZone(
                id=zone.id,
                name=zone.name,
                risk_score=zone.risk_score,
                population=zone.population,
                center=center,
                distance_km=float(distance),
                highlighted=bool(distance <= self.marker_radius_km),
            )
            for (zone, center), distance in zip(located, distances)
        ]

        epicenter = affected[0]
        print(f"[ZONES] {hazard.value} epicenter for '{district}': {epicenter.name} "
              f"({epicenter.distance_km:.2f} km from center)")

        return ImpactDetection(
            disaster_type=hazard,
            affected_zone_ids=[z.id for z in affected],
            epicenter=epicenter.center,
            zones=affected,
        )

    @staticmethod
    def markers(detection: ImpactDetection) -> List[AffectedZone]:
        """Affected zones drawn as map markers (within the marker radius)"""
        return [z for z in detection.zones if z.highlighted]
