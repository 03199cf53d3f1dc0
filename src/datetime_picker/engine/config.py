"""
Module: engine.config

Purpose:
    Configuration dataclass for a picker session. Immutable configuration
    with validation on construction; optional host parameters are turned
    into concrete values once, by the resolve helpers.

Key Classes:
    - PickerConfig: Every option a host can pass to a session

Key Functions:
    - load_config(path): Read a PickerConfig from a JSON file

Dependencies:
    - dataclasses (std)
    - json (std)
    - core.models
    - formatting: pattern defaults and locale validation

Used By:
    - engine.controller: SelectionController.from_config
    - engine.session: PickerSession
    - gui.widgets.picker_dialog: show_date_picker
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

from datetime_picker.core.calendar_math import days_in_month
from datetime_picker.core.errors import ConfigurationError, InvalidArgument
from datetime_picker.core.models import ColumnSpec, DateRange, Instant, Mode, columns_for_mode
from datetime_picker.formatting import DEFAULT_LOCALE, generate_date_format, get_locale

logger = logging.getLogger(__name__)

# Host-facing option names accepted in addition to the field names
_OPTION_ALIASES = {
    "minDateTime": "min_datetime",
    "maxDateTime": "max_datetime",
    "initialDateTime": "initial_datetime",
    "minuteDivider": "minute_divider",
    "pickerMode": "mode",
    "dateFormat": "date_format",
}


def coerce_instant(value: Any, name: str) -> Optional[Instant]:
    """
    Turn a host value into an Instant.

    Accepts None, Instant, datetime, ISO-8601 string or an Instant dict.

    Raises:
        ConfigurationError: If the value cannot be interpreted
    """
    if value is None or isinstance(value, Instant):
        return value
    try:
        if isinstance(value, datetime):
            return Instant.from_datetime(value)
        if isinstance(value, str):
            return Instant.parse(value)
        if isinstance(value, Mapping):
            return Instant.from_dict(dict(value))
    except InvalidArgument as e:
        raise ConfigurationError(f"{name}: {e}") from e
    raise ConfigurationError(f"{name} must be a date/time, got {type(value).__name__}")


@dataclass(frozen=True)
class PickerConfig:
    """
    Configuration for one picker session (immutable).

    Attributes:
        min_datetime: Lower bound (None = 1900-01-01 00:00)
        max_datetime: Upper bound (None = 2100-12-31 23:59)
        initial_datetime: Starting value (None = now); clamped, never rejected
        mode: DATE, TIME or DATETIME
        minute_divider: Minute column step
        date_format: Display pattern (None = mode default)
        locale: Locale table name for display strings

    Invariants:
        - 1 <= minute_divider <= 60
        - resolved minimum <= resolved maximum (full ordering and mode precision)
        - locale is a known locale table

    Example:
        >>> config = PickerConfig(mode=Mode.TIME, minute_divider=15)
        >>> [c.step for c in config.columns()]
        [1, 15]
    """

    min_datetime: Optional[Instant] = None
    max_datetime: Optional[Instant] = None
    initial_datetime: Optional[Instant] = None
    mode: Mode = Mode.DATE
    minute_divider: int = 1

    # Presentation
    date_format: Optional[str] = None
    locale: str = DEFAULT_LOCALE

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.mode, Mode):
            raise ConfigurationError(f"mode must be a Mode: {self.mode!r}")
        divider = self.minute_divider
        if isinstance(divider, bool) or not isinstance(divider, int):
            raise ConfigurationError(f"minute_divider must be an integer: {divider!r}")
        if divider <= 0:
            raise ConfigurationError(f"minute_divider must be positive: {divider}")
        if divider > 60:
            raise ConfigurationError(f"minute_divider must be <= 60: {divider}")
        for name in ("min_datetime", "max_datetime", "initial_datetime"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, Instant):
                raise ConfigurationError(f"{name} must be an Instant: {value!r}")
        for name in ("min_datetime", "max_datetime"):
            value = getattr(self, name)
            if value is not None and value.day > days_in_month(value.year, value.month):
                raise ConfigurationError(f"{name} is not a calendar date: {value}")

        date_range = self.resolved_range()  # raises RangeError
        if not date_range.is_ordered(self.mode.units):
            raise ConfigurationError(
                f"range {date_range} is inverted when compared on "
                f"{', '.join(u.value for u in self.mode.units)}"
            )
        get_locale(self.locale)  # raises ConfigurationError

    # ─────────────────────────────────────────────────────────────────────────
    # Resolved Values
    # ─────────────────────────────────────────────────────────────────────────

    def resolved_range(self) -> DateRange:
        """Range with the built-in defaults filled in."""
        default = DateRange.default()
        return DateRange.create(
            default.minimum if self.min_datetime is None else self.min_datetime,
            default.maximum if self.max_datetime is None else self.max_datetime,
        )

    def resolved_initial(self) -> Instant:
        """Initial value, current time when unset. Not yet clamped."""
        if self.initial_datetime is None:
            return Instant.now()
        return self.initial_datetime

    def resolved_date_format(self) -> str:
        return generate_date_format(self.date_format, self.mode)

    def columns(self) -> Tuple[ColumnSpec, ...]:
        return columns_for_mode(self.mode, self.minute_divider)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PickerConfig:
        """
        Build a config from host options.

        Keys may be the field names or the host aliases (``minDateTime``,
        ``minuteDivider``, ...). Date values may be ISO-8601 strings,
        datetimes, Instants or Instant dicts. Unknown keys are ignored with
        a warning.

        Raises:
            ConfigurationError: On any invalid option
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict = {}
        for key, value in data.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                logger.warning(f"Ignoring unknown picker option: {key}")
                continue
            kwargs[name] = value

        for name in ("min_datetime", "max_datetime", "initial_datetime"):
            if name in kwargs:
                kwargs[name] = coerce_instant(kwargs[name], name)
        if "mode" in kwargs:
            kwargs["mode"] = Mode.parse(kwargs["mode"])
        return cls(**kwargs)

    def to_dict(self) -> dict:
        d: dict = {"mode": self.mode.value, "minute_divider": self.minute_divider}
        for name in ("min_datetime", "max_datetime", "initial_datetime"):
            value = getattr(self, name)
            if value is not None:
                d[name] = value.to_dict()
        if self.date_format is not None:
            d["date_format"] = self.date_format
        if self.locale != DEFAULT_LOCALE:
            d["locale"] = self.locale
        return d


def load_config(path: Path) -> PickerConfig:
    """
    Read a PickerConfig from a JSON file.

    Raises:
        ConfigurationError: If the file is unreadable, not JSON, or invalid
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Failed to read picker config {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Picker config {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Picker config {path} must be a JSON object")
    return PickerConfig.from_dict(data)
