#!/usr/bin/env python3
"""
Data constants module - India district, sub-zone and alert reference data
"""
from .constants import (
    INDIA_CENTER,
    DISTRICTS,
    ZONE_CATALOGUE,
    TARGET_AREAS,
    ALERT_TEMPLATES,
)

__all__ = [
    "INDIA_CENTER",
    "DISTRICTS",
    "ZONE_CATALOGUE",
    "TARGET_AREAS",
    "ALERT_TEMPLATES",
]
