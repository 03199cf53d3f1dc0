"""
Module: engine.clamping

Purpose:
    Pure clamping and minute snapping used on every recomputation.
    Same (value, bounds, step) always gives the same result.

Key Functions:
    - clamp_value(value, bounds): Saturate into [low, high]
    - snap_to_step(value, bounds, step): Nearest reachable value, lower on ties
    - clamp_column(value, bounds, step): clamp_value then snap_to_step

Used By:
    - engine.propagation
"""

from __future__ import annotations

from datetime_picker.core.models import ColumnBounds


def clamp_value(value: int, bounds: ColumnBounds) -> int:
    """Saturate value into bounds (below low -> low, above high -> high)."""
    return bounds.clamp(value)


def snap_to_step(value: int, bounds: ColumnBounds, step: int) -> int:
    """
    Snap a value already inside bounds to the nearest reachable value.

    Reachable values are the multiples of step inside [low, high] plus the
    range edges of bounds. On a tie the lower neighbour wins. When bounds
    hold neither a multiple nor an edge, low is returned.

    Args:
        value: Value inside bounds
        bounds: Column bounds
        step: Minute divider

    Returns:
        Snapped value

    Example:
        >>> snap_to_step(37, ColumnBounds(0, 59), 15)
        30
        >>> snap_to_step(58, ColumnBounds(0, 59), 15)
        45
        >>> snap_to_step(58, ColumnBounds(0, 59, high_is_edge=True), 15)
        59
    """
    if step <= 1 or value % step == 0 or value in bounds.edges:
        return value
    below = value - value % step
    candidates = list(bounds.edges)
    for multiple in (below, below + step):
        if bounds.contains(multiple):
            candidates.append(multiple)
    if not candidates:
        return bounds.low
    return min(candidates, key=lambda c: (abs(c - value), c))


def clamp_column(value: int, bounds: ColumnBounds, step: int = 1) -> int:
    """Interval clamp followed by step snapping."""
    return snap_to_step(clamp_value(value, bounds), bounds, step)
