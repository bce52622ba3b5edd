"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from simulador.calculations.emission import SimulationData
from simulador.config import Settings
from simulador.db.models import Base
from simulador.main import create_app
from simulador.storage import DatabaseStore


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: marks integration tests")


# Create a shared test database engine
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test and drop after."""
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db_store():
    """Database store bound to the in-memory test database."""
    return DatabaseStore(TestingSessionLocal)


@pytest.fixture
def client():
    """Test client for an app with a fresh in-memory store."""
    app = create_app(Settings(storage_backend="memory"))
    return TestClient(app)


@pytest.fixture
def db_client(db_store):
    """Test client for an app backed by the test database."""
    app = create_app(Settings(storage_backend="memory"))
    app.state.store = db_store
    return TestClient(app)


@pytest.fixture
def issuer_data():
    """Reference emission: 100,000 USD at 13% for 360 days, non-SME issuer."""
    return SimulationData(
        profile="empresa",
        valor_nominal=100000,
        plazo=360,
        tasa_interes=13,
        frecuencia_pago="anual",
        frecuencia_amortizacion="vencimiento",
        tipo_empresa="no_pyme",
        moneda="dolares",
        tipo_cupon="con_cupon",
        nombre_empresa="Alimentos del Centro C.A.",
    )


@pytest.fixture
def issuer_payload():
    """Issuer request body matching issuer_data."""
    return {
        "profile": "empresa",
        "valor_nominal": 100000,
        "plazo": 360,
        "tasa_interes": 13,
        "frecuencia_pago": "anual",
        "frecuencia_amortizacion": "vencimiento",
        "tipo_empresa": "no_pyme",
        "moneda": "dolares",
        "tipo_cupon": "con_cupon",
        "nombre_empresa": "Alimentos del Centro C.A.",
        "descripcion_empresa": "Procesadora de alimentos con 20 años en el mercado.",
        "uso_fondos": "Capital de trabajo",
    }


@pytest.fixture
def bolivares_payload(issuer_payload):
    """Issuer request body for an emission in bolívares."""
    return {
        **issuer_payload,
        "moneda": "bolivares",
        "tipo_cambio_inicial": 36.50,
        "tipo_cambio_vencimiento": 38.00,
    }
