"""
Financial calculation API endpoints.

These endpoints accept simulation inputs and return calculated results
without storing anything.
"""

from fastapi import APIRouter, Body, Response

from simulador.calculations import breakdown
from simulador.calculations.emission import CalculationResults, calculate_financials
from simulador.reports import generate_pdf
from simulador.schemas import (
    EmissionResponse,
    SimulationInput,
)

router = APIRouter()


def build_emission_response(results: CalculationResults) -> EmissionResponse:
    """Bundle results with the breakdown and chart data shown alongside them."""
    return EmissionResponse(
        results=results.to_dict(),
        cost_breakdown=[
            {"concepto": label, "monto": amount}
            for label, amount in breakdown.cost_items(results)
        ],
        chart=breakdown.chart_slices(results),
    )


def pdf_response(filename: str, content: bytes) -> Response:
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post(
    "/emission",
    response_model=EmissionResponse,
    response_model_exclude_none=True,
)
async def calculate_emission(
    simulation: SimulationInput = Body(..., discriminator="profile"),
):
    """Calculate emission costs and investor returns."""
    data = simulation.to_simulation_data()
    results = calculate_financials(data)
    return build_emission_response(results)


@router.post("/report")
async def calculate_report(
    simulation: SimulationInput = Body(..., discriminator="profile"),
):
    """Calculate and render the PDF report for the simulation's profile."""
    data = simulation.to_simulation_data()
    results = calculate_financials(data)
    filename, content = generate_pdf(results, data)
    return pdf_response(filename, content)
