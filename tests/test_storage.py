"""
Tests for the simulation stores.
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError

from simulador.config import Settings
from simulador.schemas import InvestorInput, IssuerInput
from simulador.storage import (
    DatabaseStore,
    MemoryStore,
    StorageError,
    create_store,
)


@pytest.fixture
def investor_input():
    return InvestorInput(profile="inversionista", valor_nominal=25000)


@pytest.fixture
def issuer_input(issuer_payload):
    return IssuerInput(**issuer_payload)


@pytest.fixture(params=["memory", "database"])
def store(request, db_store):
    """Run each store test against both backends."""
    if request.param == "memory":
        return MemoryStore()
    return db_store


class TestSimulationStore:
    """Behavior shared by every store."""

    def test_create_assigns_id_and_timestamp(self, store, issuer_input):
        record = store.create_simulation(issuer_input)
        assert record.id
        assert record.created_at is not None
        assert record.results is None

    def test_timestamps_are_utc(self, store, investor_input):
        created = store.create_simulation(investor_input)
        record = store.get_simulation(created.id)
        assert record.created_at.utcoffset() == timedelta(0)
        assert datetime.now(timezone.utc) - record.created_at < timedelta(minutes=1)

    def test_ids_are_unique(self, store, investor_input):
        first = store.create_simulation(investor_input)
        second = store.create_simulation(investor_input)
        assert first.id != second.id

    def test_get_returns_stored_fields(self, store, issuer_input):
        created = store.create_simulation(issuer_input)
        record = store.get_simulation(created.id)

        assert record.id == created.id
        assert record.profile == "empresa"
        assert record.valor_nominal == 100000
        assert record.plazo == 360
        assert record.nombre_empresa == "Alimentos del Centro C.A."
        assert record.entorno is None

    def test_investor_fields_are_null(self, store, investor_input):
        record = store.get_simulation(store.create_simulation(investor_input).id)
        assert record.profile == "inversionista"
        assert record.valor_nominal == 25000
        assert record.plazo is None
        assert record.moneda is None
        assert record.tipo_cambio_inicial is None

    def test_unknown_id(self, store):
        assert store.get_simulation("nonexistent-id") is None

    def test_record_rebuilds_input(self, store, issuer_input):
        record = store.get_simulation(store.create_simulation(issuer_input).id)
        rebuilt = record.to_input()
        assert isinstance(rebuilt, IssuerInput)
        assert rebuilt.to_simulation_data() == issuer_input.to_simulation_data()

    def test_investor_record_rebuilds_input(self, store, investor_input):
        record = store.get_simulation(store.create_simulation(investor_input).id)
        rebuilt = record.to_input()
        assert isinstance(rebuilt, InvestorInput)
        assert rebuilt.to_simulation_data().plazo == 360


class TestMemoryStore:
    def test_stores_are_independent(self, investor_input):
        first = MemoryStore()
        second = MemoryStore()
        record = first.create_simulation(investor_input)
        assert len(first) == 1
        assert len(second) == 0
        assert second.get_simulation(record.id) is None


class TestDatabaseStore:
    def test_database_errors_raise_storage_error(self, db_store, investor_input):
        def broken_session():
            raise OperationalError("SELECT 1", {}, Exception("database is locked"))

        store = DatabaseStore(broken_session)
        with pytest.raises(StorageError):
            store.create_simulation(investor_input)
        with pytest.raises(StorageError):
            store.get_simulation("any-id")


class TestCreateStore:
    def test_memory_backend(self):
        assert isinstance(create_store(Settings(storage_backend="memory")), MemoryStore)

    def test_database_backend(self):
        store = create_store(
            Settings(storage_backend="database", database_url="sqlite:///:memory:")
        )
        assert isinstance(store, DatabaseStore)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_store(Settings(storage_backend="redis"))


class TestSettings:
    def test_server_defaults(self, monkeypatch):
        monkeypatch.delenv("HOST", raising=False)
        monkeypatch.delenv("PORT", raising=False)
        settings = Settings()
        assert settings.host == "0.0.0.0"
        assert settings.port == 8000

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("STORAGE_BACKEND", "database")
        settings = Settings()
        assert settings.port == 9000
        assert settings.storage_backend == "database"
