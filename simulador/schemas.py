"""
Request and response schemas for simulations.

Inputs are a tagged union on ``profile``: investors submit only the amount
they invest, issuers submit the full emission terms.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
    model_validator,
)

from simulador.calculations.emission import SimulationData

VALOR_NOMINAL_MINIMO = 1000

# Terms offered to investors, who don't choose them
INVESTOR_DEFAULTS = {
    "plazo": 360,
    "tasa_interes": 13.0,
    "frecuencia_pago": "anual",
    "frecuencia_amortizacion": "vencimiento",
    "tipo_empresa": "no_pyme",
    "moneda": "dolares",
    "tipo_cupon": "con_cupon",
}

FrecuenciaPago = Literal["mensual", "trimestral", "semestral", "anual"]
FrecuenciaAmortizacion = Literal["anual", "vencimiento"]
TipoEmpresa = Literal["pyme", "no_pyme"]
Moneda = Literal["dolares", "bolivares"]
TipoCupon = Literal["con_cupon", "cero_cupon"]


class _SimulationInputBase(BaseModel):
    """Fields shared by every profile."""

    valor_nominal: float = Field(..., allow_inf_nan=False)

    @field_validator("valor_nominal")
    @classmethod
    def validate_valor_nominal(cls, v: float) -> float:
        if not v >= VALOR_NOMINAL_MINIMO:
            raise ValueError("El monto debe ser mayor a $1,000")
        return v


class InvestorInput(_SimulationInputBase):
    """Investor simulation: only the invested amount is chosen."""

    profile: Literal["inversionista"]

    def to_simulation_data(self) -> SimulationData:
        return SimulationData(
            profile=self.profile,
            valor_nominal=self.valor_nominal,
            **INVESTOR_DEFAULTS,
        )


class IssuerInput(_SimulationInputBase):
    """Issuer simulation with the full emission terms."""

    profile: Literal["empresa"]
    plazo: int = Field(..., ge=30, le=365, description="Plazo en días")
    tasa_interes: float = Field(..., ge=1, le=50, description="Tasa anual (%)")
    frecuencia_pago: FrecuenciaPago
    frecuencia_amortizacion: FrecuenciaAmortizacion
    tipo_empresa: TipoEmpresa
    moneda: Moneda
    tipo_cupon: TipoCupon
    tipo_cambio_inicial: Optional[float] = Field(
        None, gt=0, allow_inf_nan=False, description="Bs por USD"
    )
    tipo_cambio_vencimiento: Optional[float] = Field(
        None, gt=0, allow_inf_nan=False, description="Bs por USD"
    )
    nombre_empresa: str = Field(..., min_length=1)
    descripcion_empresa: str = ""
    uso_fondos: str = ""
    entorno: str = ""

    @model_validator(mode="after")
    def validate_tipos_de_cambio(self) -> "IssuerInput":
        if self.moneda == "bolivares" and not (
            self.tipo_cambio_inicial and self.tipo_cambio_vencimiento
        ):
            raise ValueError(
                "Los tipos de cambio son obligatorios para emisiones en Bolívares."
            )
        return self

    def to_simulation_data(self) -> SimulationData:
        return SimulationData(**self.model_dump())


SimulationInput = Union[InvestorInput, IssuerInput]

simulation_input_adapter = TypeAdapter(
    Annotated[SimulationInput, Field(discriminator="profile")]
)


class SimulationRecord(BaseModel):
    """A stored simulation submission."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    profile: str
    valor_nominal: float
    plazo: Optional[int] = None
    tasa_interes: Optional[float] = None
    frecuencia_pago: Optional[str] = None
    frecuencia_amortizacion: Optional[str] = None
    tipo_empresa: Optional[str] = None
    moneda: Optional[str] = None
    tipo_cupon: Optional[str] = None
    tipo_cambio_inicial: Optional[float] = None
    tipo_cambio_vencimiento: Optional[float] = None
    nombre_empresa: Optional[str] = None
    descripcion_empresa: Optional[str] = None
    uso_fondos: Optional[str] = None
    entorno: Optional[str] = None
    results: Optional[Dict[str, Any]] = None
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def validate_created_at(cls, v: datetime) -> datetime:
        # SQLite drops the offset; stored timestamps are always UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    def to_input(self) -> SimulationInput:
        """Rebuild the validated input this record was created from."""
        fields = self.model_dump(exclude={"id", "results", "created_at"}, exclude_none=True)
        return simulation_input_adapter.validate_python(fields)


def record_fields(simulation: SimulationInput) -> Dict[str, Any]:
    """Column values for storing a validated input; empty values become None."""
    return {
        field: value if value != "" else None
        for field, value in simulation.model_dump().items()
    }


class BolivaresResponse(BaseModel):
    """Headline figures in bolívares."""

    valor_nominal: float
    intereses_totales: float
    capital_mas_intereses: float
    costo_total_emision: float


class CalculationResultsResponse(BaseModel):
    """Calculated emission costs and investor returns."""

    valor_nominal: float
    valor_efectivo: float
    plazo: int
    tasa_interes: float
    intereses_totales: float
    registro_nacional: float
    contribucion_anual: float
    calificacion_riesgo: float
    estructuracion: float
    colocacion: float
    representacion: float
    inscripcion_isin: float
    publicacion_aviso: float
    cvv: float
    iva: float
    bvcc: float
    liquidacion: float
    costo_total_emision: float
    costo_financiamiento: float
    ganancia_neta: float
    capital_mas_intereses: float
    roi_total: float
    roi_anualizado: float
    bolivares: Optional[BolivaresResponse] = None


class CostItem(BaseModel):
    concepto: str
    monto: float


class ChartSlice(BaseModel):
    name: str
    value: float
    percentage: float


class EmissionResponse(BaseModel):
    """Results plus the cost breakdown and chart data built from them."""

    results: CalculationResultsResponse
    cost_breakdown: List[CostItem]
    chart: List[ChartSlice]
