#!/usr/bin/env python3
"""
Configuration module
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Impact simulation
DEFAULT_POPULATION = int(os.getenv("DSS_DEFAULT_POPULATION", "5000000"))

# Zone analysis
MARKER_RADIUS_KM = float(os.getenv("DSS_MARKER_RADIUS_KM", "10"))
TOP_ZONE_LIMIT = int(os.getenv("DSS_TOP_ZONE_LIMIT", "4"))

# API settings
API_HOST = os.getenv("DSS_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("DSS_API_PORT", "8000"))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "DSS_CORS_ORIGINS",
        "http://localhost:3000,http://localhost:3001,http://localhost:5173,http://localhost:8080",
    ).split(",")
    if origin.strip()
]
