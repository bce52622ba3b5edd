"""
SQL-backed simulation store.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from simulador.db.database import get_db_context
from simulador.db.models import Simulation
from simulador.schemas import (
    SimulationInput,
    SimulationRecord,
    record_fields,
)
from simulador.storage.base import SimulationStore, StorageError

logger = logging.getLogger(__name__)


class DatabaseStore(SimulationStore):
    """Stores simulations in the ``simulations`` table, one session per call."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def create_simulation(self, simulation: SimulationInput) -> SimulationRecord:
        try:
            with get_db_context(self.session_factory) as db:
                db_simulation = Simulation(**record_fields(simulation))
                db.add(db_simulation)
                db.flush()
                db.refresh(db_simulation)
                record = SimulationRecord.model_validate(db_simulation)
        except SQLAlchemyError as e:
            logger.error(f"Error storing simulation: {str(e)}")
            raise StorageError("Could not store simulation") from e

        logger.info(f"Stored {record.profile} simulation {record.id}")
        return record

    def get_simulation(self, simulation_id: str) -> Optional[SimulationRecord]:
        try:
            with get_db_context(self.session_factory) as db:
                db_simulation = (
                    db.query(Simulation).filter(Simulation.id == simulation_id).first()
                )
                if not db_simulation:
                    return None
                return SimulationRecord.model_validate(db_simulation)
        except SQLAlchemyError as e:
            logger.error(f"Error reading simulation {simulation_id}: {str(e)}")
            raise StorageError("Could not read simulation") from e
