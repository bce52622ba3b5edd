"""
Financial Calculation Engine

Emission cost and investor return calculations for commercial paper,
plus the presentation data derived from them.
"""

from simulador.calculations import emission, breakdown, formatting

__all__ = ["emission", "breakdown", "formatting"]
