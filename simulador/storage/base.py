"""
Storage interface for simulation submissions.
"""

from typing import Optional

from simulador.schemas import SimulationInput, SimulationRecord


class StorageError(Exception):
    """Raised when the backing store fails to read or write."""


class SimulationStore:
    """Keeps submitted simulations keyed by a generated identifier."""

    def create_simulation(self, simulation: SimulationInput) -> SimulationRecord:
        """Store a validated simulation and return the new record."""
        raise NotImplementedError

    def get_simulation(self, simulation_id: str) -> Optional[SimulationRecord]:
        """Return the stored record, or None if the id is unknown."""
        raise NotImplementedError
