"""
PDF reports for simulation results.

Investors get a one-page summary of their return; issuers get the full
cost breakdown with a pie chart of the emission fees.
"""

import logging
from datetime import datetime
from io import BytesIO
from typing import List, Tuple
from xml.sax.saxutils import escape

from reportlab.graphics.charts.piecharts import Pie
from reportlab.graphics.shapes import Drawing
from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import (
    PageBreak,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from simulador.calculations.breakdown import (
    chart_slices,
    cost_items,
    investor_summary,
    shows_bolivares,
)
from simulador.calculations.emission import CalculationResults, SimulationData
from simulador.calculations.formatting import (
    capitalize_first,
    format_currency,
    format_percentage,
)

logger = logging.getLogger(__name__)

INVESTOR_FILENAME = "reporte-inversion.pdf"
ISSUER_FILENAME = "reporte-emision-detallado.pdf"

CHART_COLORS = [
    colors.HexColor("#1e40af"),
    colors.HexColor("#3b82f6"),
    colors.HexColor("#60a5fa"),
    colors.HexColor("#93c5fd"),
    colors.HexColor("#dbeafe"),
    colors.HexColor("#1e3a8a"),
    colors.HexColor("#2563eb"),
]

TEXT_DARK = colors.Color(40 / 255, 40 / 255, 40 / 255)
TEXT_MUTED = colors.Color(100 / 255, 100 / 255, 100 / 255)


def generate_pdf(results: CalculationResults, data: SimulationData) -> Tuple[str, bytes]:
    """
    Render the report matching the simulation's profile.

    Args:
        results: Calculated results
        data: Inputs the results were calculated from

    Returns:
        Tuple of (filename, PDF bytes)
    """
    if data.profile == "inversionista":
        content = build_investor_report(results)
        filename = INVESTOR_FILENAME
    else:
        content = build_issuer_report(results, data)
        filename = ISSUER_FILENAME

    logger.info(f"Generated {filename} ({len(content)} bytes)")
    return filename, content


def _draw_footer(canvas, doc):
    canvas.saveState()
    canvas.setFont("Helvetica", 8)
    canvas.setFillColor(TEXT_MUTED)
    canvas.drawString(
        doc.leftMargin,
        doc.bottomMargin / 2,
        f"Generado el {datetime.now().strftime('%d/%m/%Y')}",
    )
    canvas.restoreState()


def _render(elements: List, title: str) -> bytes:
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=letter,
        rightMargin=40,
        leftMargin=40,
        topMargin=50,
        bottomMargin=50,
        title=title,
    )
    doc.build(elements, onFirstPage=_draw_footer, onLaterPages=_draw_footer)
    return buffer.getvalue()


def _format_value(value: float, kind: str) -> str:
    if kind == "percentage":
        return format_percentage(value)
    return format_currency(value)


def _header(title: str, subtitle: str) -> List:
    styles = getSampleStyleSheet()
    return [
        Paragraph(f"<b>{title}</b>", styles["Title"]),
        Paragraph(subtitle, styles["Heading3"]),
        Spacer(1, 18),
    ]


def build_investor_report(results: CalculationResults) -> bytes:
    """Investment summary: capital, capital plus interest and ROI."""
    styles = getSampleStyleSheet()
    elements = _header("Reporte de Inversión", "Papeles Comerciales")
    elements.append(Paragraph("Resumen de Inversión", styles["Heading2"]))

    data = [
        [label, _format_value(value, kind)]
        for label, value, kind in investor_summary(results)
    ]
    table = Table(data, colWidths=[200, 200])
    table.setStyle(
        TableStyle(
            [
                ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
                ("FONTSIZE", (0, 0), (-1, -1), 12),
                ("TEXTCOLOR", (0, 0), (0, -1), TEXT_MUTED),
                ("TEXTCOLOR", (1, 0), (1, -1), TEXT_DARK),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 8),
            ]
        )
    )
    elements.append(table)

    return _render(elements, "Reporte de Inversión")


def cost_chart(results: CalculationResults) -> Drawing:
    """Pie chart of the emission fees."""
    slices = chart_slices(results)

    drawing = Drawing(400, 220)
    pie = Pie()
    pie.x = 120
    pie.y = 20
    pie.width = 180
    pie.height = 180
    pie.data = [s["value"] for s in slices]
    pie.labels = [f"{s['name']} ({s['percentage']:.1f}%)" for s in slices]
    pie.sideLabels = True
    pie.slices.strokeColor = colors.white
    for i in range(len(slices)):
        pie.slices[i].fillColor = CHART_COLORS[i % len(CHART_COLORS)]
        pie.slices[i].fontSize = 7
    drawing.add(pie)
    return drawing


def build_issuer_report(results: CalculationResults, data: SimulationData) -> bytes:
    """Detailed emission report with cost breakdown and fee chart."""
    styles = getSampleStyleSheet()
    elements = _header(
        "Reporte Detallado de Emisión",
        "Papeles Comerciales - " + escape(data.nombre_empresa or "Empresa Emisora"),
    )

    # Simulation data
    elements.append(Paragraph("Datos de la Simulación", styles["Heading2"]))
    datos = [
        "Valor Nominal: " + format_currency(results.valor_nominal),
        f"Plazo: {results.plazo} días",
        "Tasa de Interés: " + format_percentage(results.tasa_interes),
        "Frecuencia de Pago: " + capitalize_first(data.frecuencia_pago),
        "Tipo de Empresa: " + ("PYME" if data.tipo_empresa == "pyme" else "No PYME"),
        "Moneda: " + capitalize_first(data.moneda),
    ]
    if data.moneda == "bolivares" and data.tipo_cambio_vencimiento:
        datos.append(f"Tipo de Cambio al Vencimiento: {data.tipo_cambio_vencimiento:,.2f} Bs/USD")
    for line in datos:
        elements.append(Paragraph(line, styles["Normal"]))
    elements.append(Spacer(1, 18))

    # Issuer
    if data.nombre_empresa:
        elements.append(Paragraph("El Emisor", styles["Heading2"]))
        elements.append(Paragraph("Nombre: " + escape(data.nombre_empresa), styles["Normal"]))
        if data.descripcion_empresa:
            elements.append(Paragraph("Descripción:", styles["Normal"]))
            elements.append(Paragraph(escape(data.descripcion_empresa), styles["Normal"]))

    elements.append(PageBreak())

    # Cost breakdown
    elements.append(Paragraph("Desglose de Costos", styles["Heading2"]))
    show_bs = shows_bolivares(results, data.moneda)

    header = ["Concepto", "Monto (USD)"]
    if show_bs:
        header.append("Monto (Bs)")
    rows = [header]
    for label, amount in cost_items(results):
        row = [label, format_currency(amount)]
        if show_bs:
            bs = results.bolivares.intereses_totales if label == "Intereses Totales" else None
            row.append(format_currency(bs, "Bs") if bs else "-")
        rows.append(row)

    total_row = ["COSTO TOTAL EMISIÓN", format_currency(results.costo_total_emision)]
    if show_bs:
        total_row.append(format_currency(results.bolivares.costo_total_emision, "Bs"))
    rows.append(total_row)

    financing_row = ["COSTO FINANCIAMIENTO", format_percentage(results.costo_financiamiento)]
    if show_bs:
        financing_row.append("")
    rows.append(financing_row)

    table = Table(rows, hAlign="LEFT")
    table.setStyle(
        TableStyle(
            [
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#1e40af")),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
                ("FONTSIZE", (0, 1), (-1, -1), 10),
                ("LINEABOVE", (0, -2), (-1, -2), 1, TEXT_DARK),
                ("FONTNAME", (0, -2), (-1, -1), "Helvetica-Bold"),
                ("GRID", (0, 0), (-1, -3), 0.25, colors.lightgrey),
            ]
        )
    )
    elements.append(table)
    elements.append(Spacer(1, 24))

    # Fee chart
    if chart_slices(results):
        elements.append(Paragraph("Distribución de Costos", styles["Heading2"]))
        elements.append(cost_chart(results))

    # Use of funds
    if data.uso_fondos:
        elements.append(Spacer(1, 24))
        elements.append(Paragraph("Uso de Fondos (Detallado)", styles["Heading2"]))
        elements.append(Paragraph(escape(data.uso_fondos), styles["Normal"]))

    return _render(elements, "Reporte Detallado de Emisión")
