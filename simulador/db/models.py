"""
SQLAlchemy ORM models for stored simulations.
"""

from datetime import datetime, timezone
from sqlalchemy import Column, String, Float, Integer, DateTime, JSON, Text
from sqlalchemy.orm import declarative_base
import uuid

Base = declarative_base()


def generate_uuid():
    return str(uuid.uuid4())


class Simulation(Base):
    """A submitted simulation. Results are not computed server-side."""

    __tablename__ = "simulations"

    id = Column(String, primary_key=True, default=generate_uuid)
    profile = Column(String(20), nullable=False)  # inversionista | empresa
    valor_nominal = Column(Float, nullable=False)

    # Emission terms (null for investor simulations)
    plazo = Column(Integer)
    tasa_interes = Column(Float)
    frecuencia_pago = Column(String(20))
    frecuencia_amortizacion = Column(String(20))
    tipo_empresa = Column(String(20))
    moneda = Column(String(20))
    tipo_cupon = Column(String(20))
    tipo_cambio_inicial = Column(Float)
    tipo_cambio_vencimiento = Column(Float)

    # Issuer information
    nombre_empresa = Column(String(255))
    descripcion_empresa = Column(Text)
    uso_fondos = Column(Text)
    entorno = Column(Text)

    results = Column(JSON, nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
