"""
Presentation data derived from calculation results.

Groups and labels the figures for the results table, the cost pie chart
and the PDF report. Nothing here recomputes costs.
"""

from typing import List, Dict, Optional, Tuple

from simulador.calculations.emission import CalculationResults

# Ordered cost lines that make up costo_total_emision
COST_ITEMS = [
    ("Intereses Totales", "intereses_totales"),
    ("Registro Nacional de Valores", "registro_nacional"),
    ("Contribución Anual", "contribucion_anual"),
    ("Calificación de Riesgo", "calificacion_riesgo"),
    ("Estructuración", "estructuracion"),
    ("Colocación", "colocacion"),
    ("Representación", "representacion"),
    ("Inscripción Código ISIN", "inscripcion_isin"),
    ("Publicación Aviso de Prensa", "publicacion_aviso"),
    ("CVV", "cvv"),
    ("IVA", "iva"),
    ("BVCC", "bvcc"),
    ("Liquidación", "liquidacion"),
]

# Pie chart groups: slice name -> result fields summed into it.
# Interest is a financing cost, not a fee, so it has no slice.
CHART_GROUPS = [
    ("Estructuración", ["estructuracion"]),
    ("Colocación", ["colocacion"]),
    ("Representación", ["representacion"]),
    ("Calificación Riesgo", ["calificacion_riesgo"]),
    ("Contribución Anual", ["contribucion_anual"]),
    ("Registro Nacional", ["registro_nacional"]),
    ("CVV + IVA", ["cvv", "iva"]),
    ("BVCC", ["bvcc"]),
    ("Liquidación y Otros", ["liquidacion", "inscripcion_isin", "publicacion_aviso"]),
]

# Rows that also show a bolívar amount
BOLIVARES_FIELDS = {"valor_nominal", "intereses_totales"}


def cost_items(results: CalculationResults) -> List[Tuple[str, float]]:
    """Return the labelled cost lines in report order."""
    return [(label, getattr(results, field)) for label, field in COST_ITEMS]


def shows_bolivares(results: CalculationResults, moneda: Optional[str]) -> bool:
    """Whether a Bs column should be displayed alongside USD."""
    return results.bolivares is not None and moneda == "bolivares"


def result_rows(results: CalculationResults, moneda: Optional[str] = None) -> List[Dict]:
    """
    Build the rows of the detailed results table.

    Args:
        results: Calculated results
        moneda: Currency of the originating simulation

    Returns:
        List of {concepto, usd, bs, is_total} rows; bs is None unless the
        bolívar column is shown and the row has a converted amount.
    """
    show_bs = shows_bolivares(results, moneda)
    rows = [("Valor Nominal", "valor_nominal")] + COST_ITEMS

    table = []
    for label, field in rows:
        bs = None
        if show_bs and field in BOLIVARES_FIELDS:
            bs = getattr(results.bolivares, field)
        table.append(
            {
                "concepto": label,
                "usd": getattr(results, field),
                "bs": bs,
                "is_total": False,
            }
        )

    table.append(
        {
            "concepto": "COSTO TOTAL EMISIÓN",
            "usd": results.costo_total_emision,
            "bs": results.bolivares.costo_total_emision if show_bs else None,
            "is_total": True,
        }
    )
    return table


def chart_slices(results: CalculationResults) -> List[Dict]:
    """
    Build the financing cost pie chart slices.

    Each slice carries its amount and its share of costo_total_emision.
    Slices with no cost are left out.
    """
    total = results.costo_total_emision or 1

    slices = []
    for name, fields in CHART_GROUPS:
        value = sum(getattr(results, field) or 0 for field in fields)
        if value > 0:
            slices.append(
                {
                    "name": name,
                    "value": value,
                    "percentage": value / total * 100,
                }
            )
    return slices


def investor_summary(results: CalculationResults) -> List[Tuple[str, float, str]]:
    """Headline investor figures as (label, value, kind) with kind 'currency' or 'percentage'."""
    return [
        ("Capital Invertido", results.valor_nominal, "currency"),
        ("Capital + Intereses", results.capital_mas_intereses, "currency"),
        ("Rentabilidad (ROI)", results.roi_total, "percentage"),
        ("Rentabilidad Anualizada", results.roi_anualizado, "percentage"),
    ]
