"""
Simulation storage API endpoints.
"""

import logging

from fastapi import APIRouter, Body, Depends, HTTPException

from simulador.api.calculations import build_emission_response, pdf_response
from simulador.api.dependencies import get_store
from simulador.calculations.emission import calculate_financials
from simulador.reports import generate_pdf
from simulador.schemas import EmissionResponse, SimulationInput, SimulationRecord
from simulador.storage import SimulationStore, StorageError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_simulation_or_404(
    simulation_id: str, store: SimulationStore
) -> SimulationRecord:
    """Look up a stored simulation, raising 404 if it doesn't exist."""
    try:
        record = store.get_simulation(simulation_id)
    except StorageError:
        raise HTTPException(status_code=500, detail="Internal server error")

    if not record:
        raise HTTPException(status_code=404, detail="Simulation not found")

    return record


@router.post("/", response_model=SimulationRecord, status_code=201)
async def create_simulation(
    simulation: SimulationInput = Body(..., discriminator="profile"),
    store: SimulationStore = Depends(get_store),
):
    """Store a simulation submission."""
    try:
        return store.create_simulation(simulation)
    except StorageError:
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{simulation_id}", response_model=SimulationRecord)
async def get_simulation(
    simulation_id: str,
    store: SimulationStore = Depends(get_store),
):
    """Get a stored simulation by ID."""
    return get_simulation_or_404(simulation_id, store)


@router.get(
    "/{simulation_id}/results",
    response_model=EmissionResponse,
    response_model_exclude_none=True,
)
async def get_simulation_results(
    simulation_id: str,
    store: SimulationStore = Depends(get_store),
):
    """Recalculate the results of a stored simulation."""
    record = get_simulation_or_404(simulation_id, store)
    results = calculate_financials(record.to_input().to_simulation_data())
    return build_emission_response(results)


@router.get("/{simulation_id}/report")
async def get_simulation_report(
    simulation_id: str,
    store: SimulationStore = Depends(get_store),
):
    """Download the PDF report of a stored simulation."""
    record = get_simulation_or_404(simulation_id, store)
    data = record.to_input().to_simulation_data()
    filename, content = generate_pdf(calculate_financials(data), data)
    logger.info(f"Report requested for simulation {simulation_id}")
    return pdf_response(filename, content)
