"""
Module: columns

Purpose:
    Column vocabulary for the picker: the Unit each column edits, the Mode
    that decides which columns are active, the ColumnSpec describing a
    column's domain and step, and the ColumnBounds produced by propagation.

Key Classes:
    - Unit: YEAR > MONTH > DAY > HOUR > MINUTE, ordered by significance
    - Mode: DATE / TIME / DATETIME and their active units
    - ColumnSpec: Unit plus step (minute divider for MINUTE)
    - ColumnBounds: Inclusive [low, high] currently selectable in a column

Key Functions:
    - reachable_values(bounds, step): Values a column offers inside bounds

Dependencies:
    - dataclasses (std)
    - enum (std)
    - core.calendar_math

Used By:
    - core.models.instant, core.models.date_range
    - engine.propagation, engine.controller
    - formatting.formatter
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import List, Tuple

from ..calendar_math import days_in_month
from ..errors import ConfigurationError, InvalidArgument

MIN_YEAR = 1
MAX_YEAR = 9999


@total_ordering
class Unit(Enum):
    """
    One column of the picker.

    The value is the name of the matching Instant field. Units compare by
    significance, so ``Unit.YEAR > Unit.MONTH`` holds.
    """

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"

    @property
    def significance(self) -> int:
        """5 for YEAR down to 1 for MINUTE."""
        return len(UNITS_BY_SIGNIFICANCE) - UNITS_BY_SIGNIFICANCE.index(self)

    @property
    def domain_min(self) -> int:
        """Absolute minimum of the unit, independent of any range."""
        if self is Unit.YEAR:
            return MIN_YEAR
        if self in (Unit.MONTH, Unit.DAY):
            return 1
        return 0

    def domain_max(self, year: int, month: int) -> int:
        """
        Absolute maximum of the unit.

        Args:
            year: Year used for the DAY length
            month: Month used for the DAY length

        Returns:
            9999, 12, days_in_month(year, month), 23 or 59
        """
        if self is Unit.YEAR:
            return MAX_YEAR
        if self is Unit.MONTH:
            return 12
        if self is Unit.DAY:
            return days_in_month(year, month)
        if self is Unit.HOUR:
            return 23
        return 59

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.significance < other.significance


UNITS_BY_SIGNIFICANCE: Tuple[Unit, ...] = (
    Unit.YEAR,
    Unit.MONTH,
    Unit.DAY,
    Unit.HOUR,
    Unit.MINUTE,
)


class Mode(Enum):
    """
    Composite shape edited by a picker session.

    Example:
        >>> Mode.TIME.units
        (<Unit.HOUR: 'hour'>, <Unit.MINUTE: 'minute'>)
    """

    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"

    @property
    def units(self) -> Tuple[Unit, ...]:
        """Active units in significance order."""
        if self is Mode.DATE:
            return (Unit.YEAR, Unit.MONTH, Unit.DAY)
        if self is Mode.TIME:
            return (Unit.HOUR, Unit.MINUTE)
        return UNITS_BY_SIGNIFICANCE

    @classmethod
    def parse(cls, value: object) -> Mode:
        """Accept a Mode, its value ("date") or its name ("DATE")."""
        if isinstance(value, Mode):
            return value
        if isinstance(value, str):
            text = value.strip()
            for mode in cls:
                if text.lower() == mode.value:
                    return mode
        raise ConfigurationError(f"unknown picker mode: {value!r}")


@dataclass(frozen=True, slots=True)
class ColumnBounds:
    """
    Inclusive range of values a column currently allows.

    Attributes:
        low: Smallest selectable value
        high: Largest selectable value
        low_is_edge: low comes from the range minimum, not the unit domain
        high_is_edge: high comes from the range maximum, not the unit domain

    Only edge endpoints stay selectable when they fall between minute steps.
    The edge flags take no part in equality.

    Invariants:
        - low <= high
    """

    low: int
    high: int
    low_is_edge: bool = field(default=False, compare=False)
    high_is_edge: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        """Validate bounds on construction."""
        if self.high < self.low:
            raise InvalidArgument(f"high must be >= low: {self.high} < {self.low}")

    def contains(self, value: int) -> bool:
        return self.low <= value <= self.high

    def clamp(self, value: int) -> int:
        """Saturate value into [low, high]."""
        if value < self.low:
            return self.low
        if value > self.high:
            return self.high
        return value

    @property
    def edges(self) -> Tuple[int, ...]:
        """Endpoints that come from the range rather than the unit domain."""
        values = []
        if self.low_is_edge:
            values.append(self.low)
        if self.high_is_edge and self.high not in values:
            values.append(self.high)
        return tuple(values)

    def __repr__(self) -> str:
        return f"ColumnBounds({self.low}, {self.high})"


def reachable_values(bounds: ColumnBounds, step: int = 1) -> List[int]:
    """
    Values a column offers inside its bounds.

    Multiples of step in [low, high], plus range edges that are not
    multiples, so the range extremes stay selectable. Domain endpoints
    (minute 59) are not added.

    Example:
        >>> reachable_values(ColumnBounds(7, 50, low_is_edge=True, high_is_edge=True), 15)
        [7, 15, 30, 45, 50]
        >>> reachable_values(ColumnBounds(0, 59), 15)
        [0, 15, 30, 45]
    """
    if step == 1:
        return list(range(bounds.low, bounds.high + 1))
    first = -(-bounds.low // step) * step
    values = set(range(first, bounds.high + 1, step))
    values.update(bounds.edges)
    return sorted(values) or [bounds.low]


@dataclass(frozen=True, slots=True)
class ColumnSpec:
    """
    Describes one picker column.

    Attributes:
        unit: Unit edited by the column
        step: Spacing of offered values; only MINUTE may use a step above 1

    Invariants:
        - 1 <= step <= 60
        - step == 1 unless unit is MINUTE

    Example:
        >>> spec = ColumnSpec(Unit.MINUTE, step=15)
        >>> spec.values(ColumnBounds(0, 59))
        [0, 15, 30, 45]
    """

    unit: Unit
    step: int = 1

    def __post_init__(self) -> None:
        """Validate step on construction."""
        if isinstance(self.step, bool) or not isinstance(self.step, int):
            raise ConfigurationError(f"step must be an integer: {self.step!r}")
        if not 1 <= self.step <= 60:
            raise ConfigurationError(f"step must be in 1..60: {self.step}")
        if self.step != 1 and self.unit is not Unit.MINUTE:
            raise ConfigurationError(f"only the minute column takes a step: {self.unit.value}")

    def values(self, bounds: ColumnBounds) -> List[int]:
        """Values this column offers within bounds."""
        return reachable_values(bounds, self.step)


def columns_for_mode(mode: Mode, minute_divider: int = 1) -> Tuple[ColumnSpec, ...]:
    """Build the fixed column list of a session."""
    return tuple(
        ColumnSpec(unit, minute_divider if unit is Unit.MINUTE else 1)
        for unit in mode.units
    )
