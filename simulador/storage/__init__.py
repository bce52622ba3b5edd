"""
Simulation storage backends.
"""

from simulador.config import Settings
from simulador.db.database import create_db_engine, create_session_factory, init_db
from simulador.storage.base import SimulationStore, StorageError
from simulador.storage.database import DatabaseStore
from simulador.storage.memory import MemoryStore


def create_store(settings: Settings) -> SimulationStore:
    """Build the store selected by ``settings.storage_backend``."""
    if settings.storage_backend == "database":
        engine = create_db_engine(settings.database_url)
        init_db(engine)
        return DatabaseStore(create_session_factory(engine))
    if settings.storage_backend == "memory":
        return MemoryStore()
    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")


__all__ = [
    "SimulationStore",
    "StorageError",
    "MemoryStore",
    "DatabaseStore",
    "create_store",
]
