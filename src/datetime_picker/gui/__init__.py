"""PySide6 presentation layer for the picker.

Provides:
- DateTimePickerWidget – column lists bound to a PickerSession
- DateTimePickerDialog / show_date_picker – modal picker
- PickerTheme – sizes and colours
"""

from .styles.theme import DEFAULT_THEME, PickerTheme
from .widgets.picker_widget import DateTimePickerWidget
from .widgets.picker_dialog import DateTimePickerDialog, show_date_picker

__all__ = [
    "DEFAULT_THEME",
    "PickerTheme",
    "DateTimePickerWidget",
    "DateTimePickerDialog",
    "show_date_picker",
]
