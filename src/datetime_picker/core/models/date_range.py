"""
Module: date_range

Purpose:
    Provides the DateRange dataclass - the validated, immutable
    [minimum, maximum] pair every picker value must stay inside.

Key Functions:
    - DateRange.create(minimum, maximum): Validated construction
    - DateRange.default(): The built-in 1900-2100 span
    - DateRange.contains(instant, units): Mode precision containment
    - DateRange.clamp(instant, units): Saturate to the nearest endpoint
    - DateRange.is_ordered(units): Check ordering under a projection

Dependencies:
    - dataclasses (std)
    - .instant.Instant

Used By:
    - engine.config
    - engine.propagation
    - engine.controller
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..calendar_math import days_in_month
from ..errors import RangeError
from .columns import UNITS_BY_SIGNIFICANCE, Unit
from .instant import Instant

DEFAULT_MIN_INSTANT = Instant(1900, 1, 1, 0, 0)
DEFAULT_MAX_INSTANT = Instant(2100, 12, 31, 23, 59)


@dataclass(frozen=True, slots=True)
class DateRange:
    """
    Inclusive range of instants.

    Attributes:
        minimum: Earliest allowed instant
        maximum: Latest allowed instant

    Invariants:
        - minimum <= maximum under full chronological ordering
        - both endpoints are real calendar dates

    Example:
        >>> r = DateRange.create(Instant(2000, 1, 1), Instant(2025, 12, 31))
        >>> r.clamp(Instant(1999, 5, 5))
        Instant(year=2000, month=1, day=1, hour=0, minute=0)
    """

    minimum: Instant
    maximum: Instant

    def __post_init__(self) -> None:
        """Validate endpoints and ordering on construction."""
        for name, endpoint in (("minimum", self.minimum), ("maximum", self.maximum)):
            if endpoint.day > days_in_month(endpoint.year, endpoint.month):
                raise RangeError(
                    f"range {name} {endpoint} is not a calendar date",
                    minimum=self.minimum,
                    maximum=self.maximum,
                )
        if self.minimum > self.maximum:
            raise RangeError(
                f"range minimum {self.minimum} is after maximum {self.maximum}",
                minimum=self.minimum,
                maximum=self.maximum,
            )

    @classmethod
    def create(cls, minimum: Instant, maximum: Instant) -> DateRange:
        """
        Build a range.

        Raises:
            RangeError: If minimum > maximum or an endpoint is not a
                calendar date (Feb 30)
        """
        return cls(minimum, maximum)

    @classmethod
    def default(cls) -> DateRange:
        """1900-01-01 00:00 to 2100-12-31 23:59."""
        return cls(DEFAULT_MIN_INSTANT, DEFAULT_MAX_INSTANT)

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def contains(self, instant: Instant, units: Iterable[Unit] = UNITS_BY_SIGNIFICANCE) -> bool:
        """Check minimum <= instant <= maximum over the given units only."""
        units = tuple(units)
        key = instant.key(units)
        return self.minimum.key(units) <= key <= self.maximum.key(units)

    def is_ordered(self, units: Iterable[Unit]) -> bool:
        """
        Check minimum <= maximum when only the given units are compared.

        A range can be valid chronologically yet inverted for a projection,
        e.g. 2020-01-01 18:00 to 2020-01-02 06:00 compared on time only.
        """
        units = tuple(units)
        return self.minimum.key(units) <= self.maximum.key(units)

    def clamp(self, instant: Instant, units: Iterable[Unit] = UNITS_BY_SIGNIFICANCE) -> Instant:
        """
        Saturate an instant into the range.

        Only the given units take part in the comparison. When the instant
        falls outside, the whole endpoint is returned, inactive fields
        included.

        Args:
            instant: Value to clamp
            units: Units compared (the mode's active units)

        Returns:
            minimum, maximum, or instant unchanged
        """
        units = tuple(units)
        key = instant.key(units)
        if key < self.minimum.key(units):
            return self.minimum
        if key > self.maximum.key(units):
            return self.maximum
        return instant

    def to_dict(self) -> dict:
        return {"min": self.minimum.to_dict(), "max": self.maximum.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> DateRange:
        return cls(Instant.from_dict(data["min"]), Instant.from_dict(data["max"]))

    def __repr__(self) -> str:
        return f"DateRange({self.minimum}, {self.maximum})"
