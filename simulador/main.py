"""
Main FastAPI application entry point.
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.templating import Jinja2Templates
from fastapi.responses import HTMLResponse

from simulador.api import router as api_router
from simulador.api.dependencies import get_store
from simulador.api.simulations import get_simulation_or_404
from simulador.calculations import breakdown
from simulador.calculations.emission import calculate_financials
from simulador.calculations.formatting import format_currency, format_percentage
from simulador.config import Settings, get_settings
from simulador.storage import SimulationStore, create_store

logger = logging.getLogger(__name__)

# Set up templates
templates = Jinja2Templates(directory=str(Path(__file__).parent / "ui" / "templates"))
templates.env.filters["currency"] = format_currency
templates.env.filters["percentage"] = format_percentage


def configure_logging(settings: Settings):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its own simulation store."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Commercial paper emission cost and return simulator",
        version="0.1.0",
        debug=settings.debug,
    )
    app.state.store = create_store(settings)
    logger.info(f"Using {settings.storage_backend} simulation store")

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.get("/", response_class=HTMLResponse)
    async def home(request: Request):
        """Render the home page."""
        return templates.TemplateResponse(
            request,
            "index.html",
            {"title": settings.app_name},
        )

    @app.get("/simulations/{simulation_id}", response_class=HTMLResponse)
    async def simulation_view(
        request: Request,
        simulation_id: str,
        store: SimulationStore = Depends(get_store),
    ):
        """Render the detailed results of a stored simulation."""
        record = get_simulation_or_404(simulation_id, store)
        data = record.to_input().to_simulation_data()
        results = calculate_financials(data)

        return templates.TemplateResponse(
            request,
            "results.html",
            {
                "title": settings.app_name,
                "record": record,
                "data": data,
                "results": results,
                "rows": breakdown.result_rows(results, data.moneda),
                "show_bolivares": breakdown.shows_bolivares(results, data.moneda),
                "summary": breakdown.investor_summary(results),
                "chart": breakdown.chart_slices(results),
            },
        )

    @app.get("/health")
    async def health_check():
        """Health check endpoint for monitoring."""
        return {"status": "healthy", "version": "0.1.0"}

    return app


app = create_app()
