#!/usr/bin/env python3
"""
Disaster Decision Support API - Main Application

Layout:
- controllers/  : API route handlers
- services/     : Business logic layer
- models/       : Data models/schemas
- data/         : Static district and zone reference data
- config/       : Configuration
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from config import API_HOST, API_PORT, CORS_ORIGINS
from controllers import (
    district_router,
    simulation_router,
    zone_router,
    red_team_router,
    alert_router,
    audit_router,
)
from controllers.dependencies import get_catalogue, get_registry


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager.
    - Startup: load reference data once so catalogue errors fail at boot
    """
    registry = get_registry()
    catalogue = get_catalogue()
    print(f"✓ Loaded {len(registry)} districts, {len(catalogue.districts())} zone catalogues")

    yield

    print("🛑 Shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Disaster Decision Support API",
    description="""
    Decision support for district-level disaster response.

    ## Features:
    - **Impact simulation**: affected population, fatalities, economic loss, hourly projection
    - **Zone analysis**: sub-zone risk ranking and impact/epicenter detection
    - **Red team**: conflict between an operator decision and the automated recommendation
    - **Alerts / audit**: SMS text pre-fill and decision-log payloads

    ## Hazards:
    - flood (rainfall 0-300 mm)
    - earthquake (magnitude 3.0-9.0)
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(district_router)
app.include_router(simulation_router)
app.include_router(zone_router)
app.include_router(red_team_router)
app.include_router(alert_router)
app.include_router(audit_router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint - API information"""
    return {
        "name": "Disaster Decision Support API",
        "version": "1.0.0",
        "endpoints": {
            "docs": "/docs",
            "districts": "/api/districts",
            "simulate": "/api/simulate",
            "zones": "/api/zones/analyze",
            "impact": "/api/zones/detect-impact",
            "red_team": "/api/red-team/evaluate",
            "alert_templates": "/api/alerts/templates",
            "audit": "/api/audit/decisions"
        }
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


# Entry point
if __name__ == "__main__":
    print("=" * 50)
    print("  DISASTER DECISION SUPPORT API - v1.0")
    print("=" * 50)
    print(f"API: http://localhost:{API_PORT}")
    print(f"Docs: http://localhost:{API_PORT}/docs")
    print("=" * 50)

    uvicorn.run(
        "app:app",
        host=API_HOST,
        port=API_PORT,
        reload=True
    )
