"""
API routes for the simulator.
"""

from fastapi import APIRouter

from simulador.api import simulations, calculations

router = APIRouter()

# Include sub-routers
router.include_router(simulations.router, prefix="/simulations", tags=["simulations"])
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
