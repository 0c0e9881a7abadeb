#!/usr/bin/env python3
"""
Zone Catalogue - per-district sub-zone definitions and impact target areas

Target areas are checked against the catalogue when the catalogue is built,
so a misspelt zone name fails at startup instead of silently producing an
empty impact overlay.
"""
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from data import TARGET_AREAS, ZONE_CATALOGUE
from models import HazardType, TargetAreas, ZoneDefinition
from services.district_registry import DistrictNotFoundError, normalize_key


def _hazard_tag(zone: ZoneDefinition, hazard: HazardType) -> bool:
    if hazard == HazardType.FLOOD:
        return zone.is_water_adjacent
    return zone.is_urban_dense


class ZoneCatalogue:
    """Immutable zone definitions and target-area lookup"""

    def __init__(
        self,
        zones: Mapping[str, List[ZoneDefinition]],
        targets: Mapping[str, Mapping[HazardType, TargetAreas]],
    ):
        self._zones = MappingProxyType(
            {normalize_key(key): tuple(defs) for key, defs in zones.items()}
        )
        self._targets = MappingProxyType(
            {normalize_key(key): MappingProxyType(dict(by_hazard)) for key, by_hazard in targets.items()}
        )
        self.validate()

    @classmethod
    def from_tables(cls, zone_table: Mapping[str, List[Dict]] = None,
                    target_table: Mapping[str, Dict] = None) -> "ZoneCatalogue":
        """Build a catalogue from the raw reference tables in `data`"""
        if zone_table is None:
            zone_table = ZONE_CATALOGUE
        if target_table is None:
            target_table = TARGET_AREAS

        zones = {
            key: [
                ZoneDefinition(
                    name=row["name"],
                    population=row["population"],
                    flood_risk=row["flood_risk"],
                    earthquake_risk=row["earthquake_risk"],
                    coordinates=row["coordinates"],
                    is_water_adjacent=row.get("water", False),
                    is_urban_dense=row.get("urban", False),
                )
                for row in rows
            ]
            for key, rows in zone_table.items()
        }
        targets = {
            key: {
                HazardType(hazard): TargetAreas(areas=tuple(row["areas"]), primary=row.get("primary"))
                for hazard, row in by_hazard.items()
            }
            for key, by_hazard in target_table.items()
        }
        return cls(zones, targets)

    def validate(self) -> None:
        """
        Check every target area against the catalogue.

        Raises:
            ValueError: unknown district key, unknown zone name, or a primary
                zone that is not in its list or lacks the hazard's tag
        """
        for key, by_hazard in self._targets.items():
            if key not in self._zones:
                raise ValueError(f"Target areas defined for unknown district '{key}'")
            by_name = {zone.name: zone for zone in self._zones[key]}

            for hazard, target in by_hazard.items():
                missing = [name for name in target.areas if name not in by_name]
                if missing:
                    raise ValueError(
                        f"{hazard.value} target areas for '{key}' not in zone catalogue: {', '.join(missing)}"
                    )
                if target.primary is None:
                    continue
                if target.primary not in target.areas:
                    raise ValueError(
                        f"Primary {hazard.value} zone '{target.primary}' for '{key}' is not a target area"
                    )
                if not _hazard_tag(by_name[target.primary], hazard):
                    raise ValueError(
                        f"Primary {hazard.value} zone '{target.primary}' for '{key}' "
                        f"is not tagged for {hazard.value}"
                    )

    def zones_for(self, district: str) -> Tuple[ZoneDefinition, ...]:
        zones = self._zones.get(normalize_key(district))
        if zones is None:
            raise DistrictNotFoundError(district)
        return zones

    def targets_for(self, district: str, hazard: HazardType) -> Optional[TargetAreas]:
        """Target areas for a district/hazard pair, None when none are defined"""
        by_hazard = self._targets.get(normalize_key(district))
        if by_hazard is None:
            return None
        return by_hazard.get(HazardType(hazard))

    def districts(self) -> List[str]:
        return list(self._zones.keys())
