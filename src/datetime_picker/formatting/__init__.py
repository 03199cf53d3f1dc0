"""
Module: formatting

Purpose:
    Display strings for the picker: the value shown in the title bar and
    the labels of column items. Pattern and locale driven; the selection
    engine never depends on the strings produced here.
"""

from .locales import DEFAULT_LOCALE, PickerLocale, get_locale, supported_locales
from .formatter import (
    DEFAULT_PATTERNS,
    column_formats,
    format_column_value,
    format_instant,
    generate_date_format,
)

__all__ = [
    "DEFAULT_LOCALE",
    "PickerLocale",
    "get_locale",
    "supported_locales",
    "DEFAULT_PATTERNS",
    "column_formats",
    "format_column_value",
    "format_instant",
    "generate_date_format",
]
