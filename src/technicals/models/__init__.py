"""Technicals data models."""

from technicals.models.bar import Bar, IndicatorBar
from technicals.models.snapshot import IndicatorSnapshot

__all__ = [
    "Bar",
    "IndicatorBar",
    "IndicatorSnapshot",
]
