#!/usr/bin/env python3
"""
District Registry - read-only lookup of district centers and populations
"""
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from data import DISTRICTS
from models import District


class DistrictNotFoundError(LookupError):
    """Raised when a district name has no registry entry"""

    def __init__(self, name: str):
        super().__init__(f'District "{name}" not found')
        self.name = name


def normalize_key(name: str) -> str:
    """Registry key for a district name: case-insensitive, spaces ignored"""
    return (name or "").strip().lower().replace(" ", "")


class DistrictRegistry:
    """Immutable, case-insensitive district table"""

    def __init__(self, districts: Mapping[str, District]):
        self._districts = MappingProxyType(
            {normalize_key(key): district for key, district in districts.items()}
        )

    @classmethod
    def from_table(cls, table: Mapping[str, Dict] = None) -> "DistrictRegistry":
        """Build a registry from a raw {key: {name, lat, lng, population}} table"""
        if table is None:
            table = DISTRICTS
        return cls({key: District(**row) for key, row in table.items()})

    def find(self, name: str) -> Optional[District]:
        return self._districts.get(normalize_key(name))

    def get(self, name: str) -> District:
        district = self.find(name)
        if district is None:
            raise DistrictNotFoundError(name)
        return district

    def names(self) -> List[str]:
        """Display names in table order"""
        return [d.name for d in self._districts.values()]

    def all(self) -> List[District]:
        return list(self._districts.values())

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def __len__(self) -> int:
        return len(self._districts)
