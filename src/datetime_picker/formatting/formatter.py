"""
Module: formatting.formatter

Purpose:
    Render instants and column items as display strings from a pattern.

    Pattern tokens:
        yyyy yy          year (4 digits / last 2 digits)
        MMMM MMM MM M    month (name / short name / 2 digits / number)
        dd d             day
        HH H             hour
        mm m             minute
        EEEE EEE         weekday (name / short name)
        'text'           literal text ('' for a single quote)

Key Functions:
    - generate_date_format(pattern, mode): Pattern or the mode default
    - format_instant(instant, pattern, locale): Whole value as text
    - column_formats(pattern, mode): Token used by each active column
    - format_column_value(unit, value, token, locale): One column item
"""

from __future__ import annotations

import re
from datetime import date
from typing import Dict, List, Optional

from datetime_picker.core.models import Instant, Mode, Unit

from .locales import DEFAULT_LOCALE, PickerLocale, get_locale

DEFAULT_PATTERNS: Dict[Mode, str] = {
    Mode.DATE: "yyyy-MM-dd",
    Mode.TIME: "HH:mm",
    Mode.DATETIME: "yyyy-MM-dd HH:mm",
}

_TOKEN_RE = re.compile(r"'(?:[^']|'')*'|yyyy|yy|MMMM|MMM|MM|M|dd|d|HH|H|mm|m|EEEE|EEE")

_UNIT_TOKENS: Dict[str, Unit] = {
    "yyyy": Unit.YEAR,
    "yy": Unit.YEAR,
    "MMMM": Unit.MONTH,
    "MMM": Unit.MONTH,
    "MM": Unit.MONTH,
    "M": Unit.MONTH,
    "dd": Unit.DAY,
    "d": Unit.DAY,
    "HH": Unit.HOUR,
    "H": Unit.HOUR,
    "mm": Unit.MINUTE,
    "m": Unit.MINUTE,
}

_DEFAULT_COLUMN_TOKENS: Dict[Unit, str] = {
    Unit.YEAR: "yyyy",
    Unit.MONTH: "MM",
    Unit.DAY: "dd",
    Unit.HOUR: "HH",
    Unit.MINUTE: "mm",
}


def generate_date_format(pattern: Optional[str], mode: Mode) -> str:
    """Return pattern, or the default pattern of mode when pattern is blank."""
    if pattern and pattern.strip():
        return pattern
    return DEFAULT_PATTERNS[mode]


def _render_token(token: str, value: int, locale: PickerLocale) -> str:
    if token == "yyyy":
        return f"{value:04d}"
    if token == "yy":
        return f"{value % 100:02d}"
    if token == "MMMM":
        return locale.months[value - 1]
    if token == "MMM":
        return locale.months_short[value - 1]
    if token in ("MM", "dd", "HH", "mm"):
        return f"{value:02d}"
    return str(value)


def _tokens(pattern: str) -> List[str]:
    return [m.group(0) for m in _TOKEN_RE.finditer(pattern)]


def format_instant(instant: Instant, pattern: str, locale: str = DEFAULT_LOCALE) -> str:
    """
    Render an instant with a pattern.

    Example:
        >>> format_instant(Instant(2024, 2, 29, 9, 5), "EEE d MMM yyyy, H:mm")
        'Thu 29 Feb 2024, 9:05'
    """
    table = get_locale(locale)

    def _replace(match: re.Match) -> str:
        token = match.group(0)
        if token.startswith("'"):
            return token[1:-1].replace("''", "'")
        if token in ("EEEE", "EEE"):
            weekday = date(instant.year, instant.month, instant.day).weekday()
            names = table.weekdays if token == "EEEE" else table.weekdays_short
            return names[weekday]
        return _render_token(token, instant.get(_UNIT_TOKENS[token]), table)

    return _TOKEN_RE.sub(_replace, pattern)


def column_formats(pattern: str, mode: Mode) -> Dict[Unit, str]:
    """
    Token each active column uses for its items.

    The first token of the pattern that belongs to a unit wins; units the
    pattern does not mention use the 2-digit (4 for year) default.

    Example:
        >>> column_formats("d MMMM yyyy", Mode.DATE)[Unit.MONTH]
        'MMMM'
    """
    found: Dict[Unit, str] = {}
    for token in _tokens(pattern):
        unit = _UNIT_TOKENS.get(token)
        if unit is not None and unit not in found:
            found[unit] = token
    return {unit: found.get(unit, _DEFAULT_COLUMN_TOKENS[unit]) for unit in mode.units}


def format_column_value(
    unit: Unit,
    value: int,
    token: Optional[str] = None,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Render one column item; token defaults to the unit's numeric token."""
    token = token or _DEFAULT_COLUMN_TOKENS[unit]
    if _UNIT_TOKENS.get(token) is not unit:
        token = _DEFAULT_COLUMN_TOKENS[unit]
    return _render_token(token, value, get_locale(locale))
