"""
Module: instant

Purpose:
    Provides the Instant dataclass - the composite value edited by the
    picker. Depending on the mode only the date fields, only the time
    fields, or all of them are meaningful.

Key Functions:
    - Instant.key(units): Comparison key restricted to some units
    - Instant.get(unit) / Instant.with_value(unit, value): Per-column access
    - Instant.from_datetime(dt) / Instant.to_datetime(): datetime bridge
    - Instant.parse(text): ISO-8601 parsing
    - Instant.to_dict() / Instant.from_dict(data): Serialization

Dependencies:
    - dataclasses (std)
    - datetime (std)

Used By:
    - core.models.date_range
    - engine (every module)
    - formatting.formatter
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Iterable, Mapping, Tuple

from ..errors import InvalidArgument
from .columns import MAX_YEAR, MIN_YEAR, UNITS_BY_SIGNIFICANCE, Unit


@dataclass(frozen=True, slots=True, order=True)
class Instant:
    """
    Calendar date plus time of day, minute precision.

    Field order is significance order, so the generated ordering is the
    chronological one.

    Attributes:
        year: 1-9999
        month: 1-12
        day: 1-31 (month length is enforced by propagation, not here)
        hour: 0-23
        minute: 0-59

    Example:
        >>> Instant(2024, 2, 29) < Instant(2024, 3, 1)
        True
        >>> Instant(2024, 2, 29, 10, 30).key((Unit.HOUR, Unit.MINUTE))
        (10, 30)
    """

    year: int
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0

    def __post_init__(self) -> None:
        """Validate nominal field ranges on construction."""
        for unit, low, high in (
            (Unit.YEAR, MIN_YEAR, MAX_YEAR),
            (Unit.MONTH, 1, 12),
            (Unit.DAY, 1, 31),
            (Unit.HOUR, 0, 23),
            (Unit.MINUTE, 0, 59),
        ):
            value = getattr(self, unit.value)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgument(f"{unit.value} must be an integer: {value!r}")
            if not low <= value <= high:
                raise InvalidArgument(f"{unit.value} must be in {low}..{high}: {value}")

    # ─────────────────────────────────────────────────────────────────────────
    # Field Access
    # ─────────────────────────────────────────────────────────────────────────

    def get(self, unit: Unit) -> int:
        """Value of the field edited by unit."""
        return getattr(self, unit.value)

    def with_value(self, unit: Unit, value: int) -> Instant:
        """Copy with one field replaced."""
        return replace(self, **{unit.value: value})

    def key(self, units: Iterable[Unit] = UNITS_BY_SIGNIFICANCE) -> Tuple[int, ...]:
        """
        Comparison key over the given units.

        Units outside the tuple are ignored, which gives mode precision
        comparisons (time-only compares hour and minute only).
        """
        return tuple(getattr(self, unit.value) for unit in units)

    def fields(self) -> dict:
        """Plain mapping of unit to value, used as propagation scratch space."""
        return {unit: getattr(self, unit.value) for unit in UNITS_BY_SIGNIFICANCE}

    @classmethod
    def from_fields(cls, fields: Mapping[Unit, int]) -> Instant:
        return cls(**{unit.value: value for unit, value in fields.items()})

    # ─────────────────────────────────────────────────────────────────────────
    # datetime Bridge
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_datetime(cls, value: datetime) -> Instant:
        """Truncate a datetime to minute precision. tzinfo is ignored."""
        return cls(value.year, value.month, value.day, value.hour, value.minute)

    def to_datetime(self) -> datetime:
        """
        Naive datetime for this instant.

        Raises:
            ValueError: If day exceeds the month length
        """
        return datetime(self.year, self.month, self.day, self.hour, self.minute)

    @classmethod
    def now(cls) -> Instant:
        return cls.from_datetime(datetime.now())

    @classmethod
    def parse(cls, text: str) -> Instant:
        """
        Parse an ISO-8601 date or date-time string.

        Accepts "2024-02-29", "2024-02-29T10:30", "2024-02-29 10:30:15".
        Seconds are discarded.

        Raises:
            InvalidArgument: If the text is not ISO-8601
        """
        try:
            return cls.from_datetime(datetime.fromisoformat(text.strip()))
        except (AttributeError, ValueError) as e:
            raise InvalidArgument(f"not an ISO-8601 date/time: {text!r}") from e

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "hour": self.hour,
            "minute": self.minute,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Instant:
        """
        Deserialize from dictionary. Missing time fields default to 0.

        Raises:
            InvalidArgument: If year is missing
        """
        if "year" not in data:
            raise InvalidArgument(f"instant needs a year: {data!r}")
        return cls(
            year=data["year"],
            month=data.get("month", 1),
            day=data.get("day", 1),
            hour=data.get("hour", 0),
            minute=data.get("minute", 0),
        )

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}"
        )
