"""
Module: engine.propagation

Purpose:
    Compute each active column's selectable [low, high] from the range and
    the current value, clamping values as it goes, in one top-down pass.

    A column is pinned to the range minimum (maximum) only while every
    more significant column sits exactly on the minimum's (maximum's)
    value. Two flags carry that state down the column list; they are
    recomputed from the clamped value of each column before moving on.

Key Classes:
    - BoundaryPropagator: Runs the pass for a fixed range and column list
    - Propagation: Result of one pass (value, bounds, adjusted units)

Key Functions:
    - propagate(value, date_range, columns): One-shot helper

Dependencies:
    - core.models: Instant, DateRange, ColumnSpec, ColumnBounds
    - core.calendar_math: Month lengths for the day column
    - engine.clamping

Used By:
    - engine.controller
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Sequence, Tuple

from datetime_picker.core.calendar_math import clamp_day
from datetime_picker.core.models import ColumnBounds, ColumnSpec, DateRange, Instant, Unit

from .clamping import clamp_column


@dataclass(frozen=True)
class Propagation:
    """
    Result of one propagation pass (immutable).

    Attributes:
        value: Fully resolved instant
        bounds: Selectable bounds per active unit
        adjusted: Active units whose value had to be clamped or snapped
    """

    value: Instant
    bounds: Dict[Unit, ColumnBounds]
    adjusted: Tuple[Unit, ...] = ()


class BoundaryPropagator:
    """
    Top-down boundary propagation for one range and column list.

    Example:
        >>> columns = columns_for_mode(Mode.DATE)
        >>> r = DateRange.create(Instant(2000, 1, 1), Instant(2025, 12, 31))
        >>> result = BoundaryPropagator(r, columns).propagate(Instant(2000, 6, 15).fields())
        >>> result.bounds[Unit.MONTH], result.bounds[Unit.DAY]
        (ColumnBounds(1, 12), ColumnBounds(1, 30))
    """

    def __init__(self, date_range: DateRange, columns: Sequence[ColumnSpec]):
        self.date_range = date_range
        self.columns = tuple(columns)

    def propagate(self, fields: Mapping[Unit, int]) -> Propagation:
        """
        Resolve every active column.

        Args:
            fields: Value of every unit; active ones may be out of bounds
                (raw edits), inactive ones must already be valid

        Returns:
            Propagation with the clamped instant and per-column bounds
        """
        values = dict(fields)
        bounds: Dict[Unit, ColumnBounds] = {}
        adjusted = []
        at_min = at_max = True

        for column in self.columns:
            unit = column.unit
            min_edge = self.date_range.minimum.get(unit)
            max_edge = self.date_range.maximum.get(unit)

            low = min_edge if at_min else unit.domain_min
            if at_max:
                high = max_edge
            else:
                high = unit.domain_max(values[Unit.YEAR], values[Unit.MONTH])
            if unit is Unit.DAY:
                high = clamp_day(values[Unit.YEAR], values[Unit.MONTH], high)

            column_bounds = ColumnBounds(low, high, low_is_edge=at_min, high_is_edge=at_max)
            resolved = clamp_column(values[unit], column_bounds, column.step)
            if resolved != values[unit]:
                adjusted.append(unit)
                values[unit] = resolved
            bounds[unit] = column_bounds

            at_min = at_min and resolved == low and resolved == min_edge
            at_max = at_max and resolved == high and resolved == max_edge

        return Propagation(
            value=Instant.from_fields(values),
            bounds=bounds,
            adjusted=tuple(adjusted),
        )


def propagate(
    value: Instant,
    date_range: DateRange,
    columns: Sequence[ColumnSpec],
) -> Propagation:
    """Run a single pass without keeping a propagator around."""
    return BoundaryPropagator(date_range, columns).propagate(value.fields())
