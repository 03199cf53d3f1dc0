"""
Modal dialog hosting DateTimePickerWidget, and the show_date_picker entry point.
"""
import logging
from typing import Optional

from PySide6.QtWidgets import QDialog, QVBoxLayout

from datetime_picker.core.models import Instant
from datetime_picker.engine import PickerConfig, PickerSession
from datetime_picker.gui.styles.theme import DEFAULT_THEME, PickerTheme
from datetime_picker.gui.widgets.picker_widget import DateTimePickerWidget

logger = logging.getLogger(__name__)


class DateTimePickerDialog(QDialog):
    """Dialog that accepts on confirm and rejects on cancel."""

    def __init__(self, session: PickerSession, theme: PickerTheme = DEFAULT_THEME, parent=None):
        super().__init__(parent)
        self.session = session
        self.setModal(True)
        self.setMinimumWidth(320)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.picker = DateTimePickerWidget(session, theme, self)
        self.picker.confirmed.connect(lambda _value: self.accept())
        self.picker.cancelled.connect(self._on_cancelled)
        layout.addWidget(self.picker)

    def reject(self) -> None:
        """Closing without a button dismisses the session (close only)."""
        if not self.session.is_closed:
            self.session.dismiss()
        super().reject()

    def _on_cancelled(self) -> None:
        # Session is finishing its own cancel; only close the dialog.
        super().reject()

    def result_value(self) -> Optional[Instant]:
        """Confirmed value, or None if the dialog was not accepted."""
        if self.result() == QDialog.DialogCode.Accepted:
            return self.session.value
        return None


def show_date_picker(
    parent=None,
    config: Optional[PickerConfig] = None,
    *,
    theme: PickerTheme = DEFAULT_THEME,
    on_change=None,
    on_confirm=None,
    on_cancel=None,
    on_close=None,
    **options,
) -> Optional[Instant]:
    """
    Open a modal picker and wait for it to close.

    Args:
        parent: Parent widget
        config: Session configuration; built from options when None
        theme: Sizes and colours
        on_change, on_confirm, on_cancel, on_close: Session listeners
        **options: PickerConfig.from_dict options (min_datetime, mode, ...)

    Returns:
        Confirmed Instant, or None when cancelled or dismissed
    """
    if config is None:
        config = PickerConfig.from_dict(options)
    session = PickerSession(
        config,
        on_change=on_change,
        on_confirm=on_confirm,
        on_cancel=on_cancel,
        on_close=on_close,
    )
    dialog = DateTimePickerDialog(session, theme, parent)
    dialog.exec()
    return dialog.result_value()
