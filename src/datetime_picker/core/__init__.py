"""
Date/Time Picker Core Package

Calendar math, the value models and the error hierarchy. Nothing in this
package holds session state; see ``datetime_picker.engine`` for that.
"""

from .calendar_math import clamp_day, days_in_month, is_leap_year
from .errors import ConfigurationError, InvalidArgument, PickerError, RangeError
from .models import ColumnBounds, ColumnSpec, DateRange, Instant, Mode, Unit

__all__ = [
    "clamp_day",
    "days_in_month",
    "is_leap_year",
    "ConfigurationError",
    "InvalidArgument",
    "PickerError",
    "RangeError",
    "ColumnBounds",
    "ColumnSpec",
    "DateRange",
    "Instant",
    "Mode",
    "Unit",
]
