"""
Module: formatting.locales

Purpose:
    Locale tables for display strings: month names, weekday names and the
    title bar button labels.

Key Classes:
    - PickerLocale: One locale table

Key Functions:
    - get_locale(name): Look up a table, case and separator insensitive
    - supported_locales(): Names of all tables
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from datetime_picker.core.errors import ConfigurationError

DEFAULT_LOCALE = "en_us"


@dataclass(frozen=True)
class PickerLocale:
    """
    Display strings for one locale.

    Attributes:
        name: Table key, e.g. "en_us"
        months: Full month names, January first
        months_short: Abbreviated month names
        weekdays: Full weekday names, Monday first
        weekdays_short: Abbreviated weekday names
        confirm: Confirm button label
        cancel: Cancel button label
    """

    name: str
    months: Tuple[str, ...]
    months_short: Tuple[str, ...]
    weekdays: Tuple[str, ...]
    weekdays_short: Tuple[str, ...]
    confirm: str
    cancel: str

    def __post_init__(self) -> None:
        if len(self.months) != 12 or len(self.months_short) != 12:
            raise ValueError(f"{self.name}: month tables need 12 entries")
        if len(self.weekdays) != 7 or len(self.weekdays_short) != 7:
            raise ValueError(f"{self.name}: weekday tables need 7 entries")


_LOCALES: Dict[str, PickerLocale] = {
    locale.name: locale
    for locale in (
        PickerLocale(
            name="en_us",
            months=("January", "February", "March", "April", "May", "June", "July",
                    "August", "September", "October", "November", "December"),
            months_short=("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
            weekdays=("Monday", "Tuesday", "Wednesday", "Thursday",
                      "Friday", "Saturday", "Sunday"),
            weekdays_short=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
            confirm="Done",
            cancel="Cancel",
        ),
        PickerLocale(
            name="zh_cn",
            months=("一月", "二月", "三月", "四月", "五月", "六月",
                    "七月", "八月", "九月", "十月", "十一月", "十二月"),
            months_short=("1月", "2月", "3月", "4月", "5月", "6月",
                          "7月", "8月", "9月", "10月", "11月", "12月"),
            weekdays=("星期一", "星期二", "星期三", "星期四", "星期五", "星期六", "星期日"),
            weekdays_short=("周一", "周二", "周三", "周四", "周五", "周六", "周日"),
            confirm="确定",
            cancel="取消",
        ),
        PickerLocale(
            name="de",
            months=("Januar", "Februar", "März", "April", "Mai", "Juni", "Juli",
                    "August", "September", "Oktober", "November", "Dezember"),
            months_short=("Jan", "Feb", "Mär", "Apr", "Mai", "Jun",
                          "Jul", "Aug", "Sep", "Okt", "Nov", "Dez"),
            weekdays=("Montag", "Dienstag", "Mittwoch", "Donnerstag",
                      "Freitag", "Samstag", "Sonntag"),
            weekdays_short=("Mo", "Di", "Mi", "Do", "Fr", "Sa", "So"),
            confirm="Fertig",
            cancel="Abbrechen",
        ),
        PickerLocale(
            name="fr",
            months=("janvier", "février", "mars", "avril", "mai", "juin", "juillet",
                    "août", "septembre", "octobre", "novembre", "décembre"),
            months_short=("janv.", "févr.", "mars", "avr.", "mai", "juin",
                          "juil.", "août", "sept.", "oct.", "nov.", "déc."),
            weekdays=("lundi", "mardi", "mercredi", "jeudi",
                      "vendredi", "samedi", "dimanche"),
            weekdays_short=("lun.", "mar.", "mer.", "jeu.", "ven.", "sam.", "dim."),
            confirm="Valider",
            cancel="Annuler",
        ),
        PickerLocale(
            name="es",
            months=("enero", "febrero", "marzo", "abril", "mayo", "junio", "julio",
                    "agosto", "septiembre", "octubre", "noviembre", "diciembre"),
            months_short=("ene", "feb", "mar", "abr", "may", "jun",
                          "jul", "ago", "sep", "oct", "nov", "dic"),
            weekdays=("lunes", "martes", "miércoles", "jueves",
                      "viernes", "sábado", "domingo"),
            weekdays_short=("lun", "mar", "mié", "jue", "vie", "sáb", "dom"),
            confirm="Confirmar",
            cancel="Cancelar",
        ),
    )
}


def _normalise(name: str) -> str:
    return name.strip().lower().replace("-", "_")


def get_locale(name: str) -> PickerLocale:
    """
    Look up a locale table. "en-US", "EN_us" and "en_us" are the same.

    Raises:
        ConfigurationError: If no table exists for name
    """
    if not isinstance(name, str) or _normalise(name) not in _LOCALES:
        raise ConfigurationError(
            f"unsupported locale {name!r}; expected one of {', '.join(supported_locales())}"
        )
    return _LOCALES[_normalise(name)]


def supported_locales() -> List[str]:
    return sorted(_LOCALES)
