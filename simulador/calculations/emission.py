"""
Commercial Paper Emission Calculations

Derives the issuer's emission costs and the investor's returns from a
single set of simulation inputs.

Conventions:
- Simple interest on a 360-day base
- Fees are charged on nominal value unless listed as flat amounts
- IVA applies to the CVV fee only
- Bolívar figures use the exchange rate at maturity
"""

import math
from dataclasses import dataclass, asdict
from typing import Dict, Optional

DIAS_BASE = 360

# Fixed commission rates and flat costs
FIXED_COSTS = {
    "registro_nacional_pyme": 0.01,  # 1%
    "registro_nacional": 0.02,  # 2%
    "contribucion_anual": 0.005,  # 0.5%
    "calificacion_riesgo": 1500.0,  # flat
    "estructuracion": 0.02,  # 2%
    "colocacion": 0.04,  # 4%
    "representacion": 0.0025,  # 0.25%
    "publicacion_aviso": 25.0,  # flat
    "cvv_mensual": 0.0003,  # 0.03% per complete month
    "iva": 0.16,  # 16% on CVV only
    "bvcc": 0.005,  # 0.5%
    "liquidacion_bolivares": 0.0025,  # 0.25%
    "liquidacion_dolares": 0.0,
}

# ISIN registration cost by term tier (upper bound in days, inclusive)
ISIN_COSTS = [
    (90, 38.0),
    (180, 80.0),
    (270, 118.0),
]
ISIN_COST_MAX = 160.0


@dataclass
class SimulationData:
    """Inputs for one emission simulation."""

    profile: str
    valor_nominal: float
    plazo: int
    tasa_interes: float  # Annual rate as percentage (e.g., 13.0 for 13%)
    frecuencia_pago: str = "anual"
    frecuencia_amortizacion: str = "vencimiento"
    tipo_empresa: str = "no_pyme"
    moneda: str = "dolares"
    tipo_cupon: str = "con_cupon"
    tipo_cambio_inicial: Optional[float] = None  # Bs per USD
    tipo_cambio_vencimiento: Optional[float] = None  # Bs per USD
    nombre_empresa: str = ""
    descripcion_empresa: str = ""
    uso_fondos: str = ""
    entorno: str = ""


@dataclass(frozen=True)
class BolivaresResults:
    """Headline figures re-expressed in bolívares."""

    valor_nominal: float
    intereses_totales: float
    capital_mas_intereses: float
    costo_total_emision: float


@dataclass(frozen=True)
class CalculationResults:
    """Emission costs and investor returns for one simulation."""

    valor_nominal: float
    valor_efectivo: float
    plazo: int
    tasa_interes: float
    intereses_totales: float

    # Issuer fees
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

    # Issuer totals
    costo_total_emision: float
    costo_financiamiento: float  # Percentage of nominal

    # Investor returns
    ganancia_neta: float
    capital_mas_intereses: float
    roi_total: float  # Percentage
    roi_anualizado: float  # Percentage

    bolivares: Optional[BolivaresResults] = None

    def to_dict(self) -> Dict:
        """Serialize results, omitting the bolívares block when absent."""
        result = asdict(self)
        if self.bolivares is None:
            del result["bolivares"]
        return result


def get_isin_cost(plazo: float) -> float:
    """Return the ISIN registration cost for a term in days."""
    for max_days, cost in ISIN_COSTS:
        if plazo <= max_days:
            return cost
    return ISIN_COST_MAX


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: x/0 is +/-inf and 0/0 is nan."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def annualize_return(roi_total: float, plazo: float) -> float:
    """
    Annualize a holding-period return by compounding over the 360-day base.

    Args:
        roi_total: Return over the full term as percentage
        plazo: Term in days

    Returns:
        Annualized return as percentage. Non-finite when plazo is 0 or the
        growth factor is outside the real domain.
    """
    exponent = _divide(DIAS_BASE, plazo)
    if not math.isfinite(exponent):
        return math.nan
    try:
        growth = math.pow(1 + roi_total / 100, exponent)
    except OverflowError:
        growth = math.inf
    except ValueError:
        growth = math.nan
    return (growth - 1) * 100


def calculate_financials(data: SimulationData) -> CalculationResults:
    """
    Calculate emission costs and investor returns.

    The result is a fresh, immutable record; nothing is rounded. Inputs the
    form layer would reject (zero nominal or term) produce inf/nan figures
    instead of raising.

    Args:
        data: Simulation inputs

    Returns:
        CalculationResults with all fee lines, totals and returns
    """
    valor_nominal = data.valor_nominal
    valor_efectivo = valor_nominal  # Issued at par
    plazo = data.plazo
    tasa_interes = data.tasa_interes

    intereses_totales = valor_nominal * (tasa_interes / 100) * plazo / DIAS_BASE

    # Fees
    if data.tipo_empresa == "pyme":
        registro_nacional = valor_nominal * FIXED_COSTS["registro_nacional_pyme"]
    else:
        registro_nacional = valor_nominal * FIXED_COSTS["registro_nacional"]
    contribucion_anual = valor_nominal * FIXED_COSTS["contribucion_anual"]
    calificacion_riesgo = FIXED_COSTS["calificacion_riesgo"]
    estructuracion = valor_nominal * FIXED_COSTS["estructuracion"]
    colocacion = valor_nominal * FIXED_COSTS["colocacion"]
    representacion = valor_nominal * FIXED_COSTS["representacion"]
    publicacion_aviso = FIXED_COSTS["publicacion_aviso"]
    inscripcion_isin = get_isin_cost(plazo)

    meses_completos = math.floor(plazo / 30)
    cvv = valor_nominal * FIXED_COSTS["cvv_mensual"] * meses_completos
    iva = cvv * FIXED_COSTS["iva"]

    bvcc = valor_nominal * FIXED_COSTS["bvcc"]

    if data.moneda == "bolivares":
        liquidacion = valor_nominal * FIXED_COSTS["liquidacion_bolivares"]
    else:
        liquidacion = valor_nominal * FIXED_COSTS["liquidacion_dolares"]

    costo_total_emision = (
        intereses_totales
        + registro_nacional
        + contribucion_anual
        + calificacion_riesgo
        + estructuracion
        + colocacion
        + representacion
        + inscripcion_isin
        + publicacion_aviso
        + cvv
        + iva
        + bvcc
        + liquidacion
    )
    costo_financiamiento = _divide(costo_total_emision, valor_nominal) * 100

    # Investor side
    ganancia_neta = intereses_totales
    capital_mas_intereses = valor_nominal + ganancia_neta
    roi_total = _divide(ganancia_neta, valor_nominal) * 100
    roi_anualizado = annualize_return(roi_total, plazo)

    # tipo_cambio_inicial only gates the conversion; maturity rate is applied
    bolivares = None
    if (
        data.moneda == "bolivares"
        and data.tipo_cambio_inicial
        and data.tipo_cambio_vencimiento
    ):
        tipo_cambio = data.tipo_cambio_vencimiento
        bolivares = BolivaresResults(
            valor_nominal=valor_nominal * tipo_cambio,
            intereses_totales=intereses_totales * tipo_cambio,
            capital_mas_intereses=capital_mas_intereses * tipo_cambio,
            costo_total_emision=costo_total_emision * tipo_cambio,
        )

    return CalculationResults(
        valor_nominal=valor_nominal,
        valor_efectivo=valor_efectivo,
        plazo=plazo,
        tasa_interes=tasa_interes,
        intereses_totales=intereses_totales,
        registro_nacional=registro_nacional,
        contribucion_anual=contribucion_anual,
        calificacion_riesgo=calificacion_riesgo,
        estructuracion=estructuracion,
        colocacion=colocacion,
        representacion=representacion,
        inscripcion_isin=inscripcion_isin,
        publicacion_aviso=publicacion_aviso,
        cvv=cvv,
        iva=iva,
        bvcc=bvcc,
        liquidacion=liquidacion,
        costo_total_emision=costo_total_emision,
        costo_financiamiento=costo_financiamiento,
        ganancia_neta=ganancia_neta,
        capital_mas_intereses=capital_mas_intereses,
        roi_total=roi_total,
        roi_anualizado=roi_anualizado,
        bolivares=bolivares,
    )
