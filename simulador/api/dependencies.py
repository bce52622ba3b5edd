"""
FastAPI dependencies shared by the API routers.
"""

from fastapi import Request

from simulador.storage import SimulationStore


def get_store(request: Request) -> SimulationStore:
    """Dependency for getting the application's simulation store."""
    return request.app.state.store
