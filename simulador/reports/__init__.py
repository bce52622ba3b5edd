"""
Printable reports.
"""

from simulador.reports.pdf import generate_pdf

__all__ = ["generate_pdf"]
