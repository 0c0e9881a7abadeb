#!/usr/bin/env python3
"""
Simulation Controller - API route for impact simulation
"""
from fastapi import APIRouter, Depends, HTTPException

from controllers.dependencies import get_simulator
from models import SimulationReport, SimulationRequest
from services.simulation_service import ImpactSimulator

router = APIRouter(prefix="/api", tags=["Simulation"])


@router.post("/simulate", response_model=SimulationReport)
async def simulate(request: SimulationRequest, simulator: ImpactSimulator = Depends(get_simulator)):
    """
    Run the impact simulation for a district and hazard

    An unknown district is simulated with the default population.

    Returns:
        Impact projection, risk score, recommended action and map overlay
    """
    try:
        return simulator.report(request)
    except Exception as e:
        print(f"Error in /api/simulate: {e}")
        raise HTTPException(status_code=500, detail=str(e))
