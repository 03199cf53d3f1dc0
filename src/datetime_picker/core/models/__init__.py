"""
Core Models Package

Immutable, validated data models shared by the engine and the GUI.

All models in this package are frozen dataclasses. The selection engine
never mutates them; every edit produces a new Instant.
"""

from .columns import (
    ColumnBounds,
    ColumnSpec,
    Mode,
    Unit,
    UNITS_BY_SIGNIFICANCE,
    columns_for_mode,
    reachable_values,
)
from .instant import Instant
from .date_range import DateRange, DEFAULT_MAX_INSTANT, DEFAULT_MIN_INSTANT

__all__ = [
    "ColumnBounds",
    "ColumnSpec",
    "Mode",
    "Unit",
    "UNITS_BY_SIGNIFICANCE",
    "columns_for_mode",
    "reachable_values",
    "Instant",
    "DateRange",
    "DEFAULT_MIN_INSTANT",
    "DEFAULT_MAX_INSTANT",
]
