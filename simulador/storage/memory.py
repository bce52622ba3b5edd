"""
In-process simulation store.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Dict, Optional

from simulador.db.models import generate_uuid
from simulador.schemas import (
    SimulationInput,
    SimulationRecord,
    record_fields,
)
from simulador.storage.base import SimulationStore

logger = logging.getLogger(__name__)


class MemoryStore(SimulationStore):
    """Dictionary-backed store that lives as long as its owner."""

    def __init__(self):
        self._simulations: Dict[str, SimulationRecord] = {}
        self._lock = threading.Lock()

    def create_simulation(self, simulation: SimulationInput) -> SimulationRecord:
        record = SimulationRecord(
            id=generate_uuid(),
            results=None,
            created_at=datetime.now(timezone.utc),
            **record_fields(simulation),
        )
        with self._lock:
            self._simulations[record.id] = record

        logger.info(f"Stored {record.profile} simulation {record.id}")
        return record

    def get_simulation(self, simulation_id: str) -> Optional[SimulationRecord]:
        return self._simulations.get(simulation_id)

    def __len__(self) -> int:
        return len(self._simulations)
