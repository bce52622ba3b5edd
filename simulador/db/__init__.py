"""
Database configuration and models.
"""

from simulador.db.database import (
    create_db_engine,
    create_session_factory,
    get_db_context,
    init_db,
)
from simulador.db.models import Base, Simulation

__all__ = [
    "create_db_engine",
    "create_session_factory",
    "get_db_context",
    "init_db",
    "Base",
    "Simulation",
]
