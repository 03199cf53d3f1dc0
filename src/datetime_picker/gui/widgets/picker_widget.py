"""
Scrollable column picker bound to a PickerSession.
"""
import logging
from typing import Dict, List, Optional

from PySide6.QtCore import QSize, Qt, Signal
from PySide6.QtWidgets import (
    QAbstractItemView, QHBoxLayout, QLabel, QListWidget, QListWidgetItem,
    QPushButton, QVBoxLayout, QWidget,
)

from datetime_picker.core.models import Instant, Unit
from datetime_picker.engine import PickerSession
from datetime_picker.formatting import get_locale
from datetime_picker.gui.styles.theme import DEFAULT_THEME, PickerTheme

logger = logging.getLogger(__name__)


class DateTimePickerWidget(QWidget):
    """
    One QListWidget per active column plus an optional title bar.

    Selecting an item edits the session; after every edit each column is
    re-read from the session, since one edit can change the bounds of every
    less significant column. Only columns whose values changed are rebuilt.
    """

    dateTimeChanged = Signal(object)  # Instant
    confirmed = Signal(object)  # Instant
    cancelled = Signal()

    def __init__(self, session: PickerSession, theme: PickerTheme = DEFAULT_THEME, parent=None):
        super().__init__(parent)
        self.session = session
        self.theme = theme
        self._lists: Dict[Unit, QListWidget] = {}
        self._shown: Dict[Unit, List[int]] = {}
        self._updating = False

        self.title_label: Optional[QLabel] = None
        self.confirm_button: Optional[QPushButton] = None
        self.cancel_button: Optional[QPushButton] = None

        self._setup_ui()
        self.setStyleSheet(theme.stylesheet())

        session.subscribe(
            on_change=self._on_session_changed,
            on_confirm=self.confirmed.emit,
            on_cancel=self.cancelled.emit,
        )
        self._refresh()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        if self.theme.show_title:
            locale = get_locale(self.session.config.locale)
            title_bar = QHBoxLayout()
            title_bar.setContentsMargins(12, 0, 12, 0)

            self.cancel_button = QPushButton(locale.cancel)
            self.cancel_button.setObjectName("pickerCancel")
            self.cancel_button.setFixedHeight(self.theme.title_height)
            self.cancel_button.clicked.connect(self.cancel)
            title_bar.addWidget(self.cancel_button)

            self.title_label = QLabel()
            self.title_label.setObjectName("pickerTitle")
            self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            title_bar.addWidget(self.title_label, 1)

            self.confirm_button = QPushButton(locale.confirm)
            self.confirm_button.setObjectName("pickerConfirm")
            self.confirm_button.setFixedHeight(self.theme.title_height)
            self.confirm_button.clicked.connect(self.confirm)
            title_bar.addWidget(self.confirm_button)

            layout.addLayout(title_bar)

        columns = QHBoxLayout()
        columns.setSpacing(0)
        for unit in self.session.units:
            column = QListWidget(self)
            column.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
            column.setVerticalScrollMode(QAbstractItemView.ScrollMode.ScrollPerPixel)
            column.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
            column.setFixedHeight(self.theme.picker_height)
            column.currentRowChanged.connect(
                lambda row, unit=unit: self._on_row_changed(unit, row)
            )
            self._lists[unit] = column
            columns.addWidget(column)
        layout.addLayout(columns)

        self.setFixedHeight(self.theme.total_height)

    # ─────────────────────────────────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────────────────────────────────

    def column_list(self, unit: Unit) -> QListWidget:
        return self._lists[unit]

    def set_column_value(self, unit: Unit, value: int) -> Instant:
        """Edit a column programmatically; the session clamps as usual."""
        return self.session.set_column_value(unit, value)

    def confirm(self) -> None:
        if not self.session.is_closed:
            self.session.confirm()

    def cancel(self) -> None:
        if not self.session.is_closed:
            self.session.cancel()

    # ─────────────────────────────────────────────────────────────────────────
    # Internal
    # ─────────────────────────────────────────────────────────────────────────

    def _on_row_changed(self, unit: Unit, row: int) -> None:
        if self._updating or row < 0 or self.session.is_closed:
            return
        item = self._lists[unit].item(row)
        value = item.data(Qt.ItemDataRole.UserRole)
        if value != self.session.value.get(unit):
            self.session.set_column_value(unit, value)

    def _on_session_changed(self, value: Instant) -> None:
        self._refresh()
        self.dateTimeChanged.emit(value)

    def _refresh(self) -> None:
        """Repopulate columns whose values changed and select the current values."""
        self._updating = True
        try:
            current = self.session.value
            for unit, column in self._lists.items():
                labels = self.session.column_labels(unit)
                values = [value for value, _label in labels]
                if values != self._shown.get(unit):
                    column.clear()
                    for value, label in labels:
                        item = QListWidgetItem(label)
                        item.setData(Qt.ItemDataRole.UserRole, value)
                        item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
                        item.setSizeHint(QSize(0, self.theme.item_height))
                        column.addItem(item)
                    self._shown[unit] = values
                selected = current.get(unit)
                selected_row = values.index(selected) if selected in values else 0
                column.setCurrentRow(selected_row)
                column.scrollToItem(
                    column.item(selected_row),
                    QAbstractItemView.ScrollHint.PositionAtCenter,
                )
            if self.title_label is not None:
                self.title_label.setText(self.session.format_value())
        finally:
            self._updating = False
