"""
Module: engine.session

Purpose:
    Host-facing wrapper around SelectionController for one picker
    invocation: accepts configuration, exposes change/confirm/cancel/close
    notifications, and refuses further use once finished.

Key Classes:
    - PickerSession: One picker invocation

Dependencies:
    - engine.controller: SelectionController
    - engine.config: PickerConfig
    - formatting: Display strings for the value and column items

Used By:
    - gui.widgets.picker_widget: DateTimePickerWidget
    - gui.widgets.picker_dialog: show_date_picker
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Tuple, Union

from datetime_picker.core.errors import InvalidArgument, PickerError
from datetime_picker.core.models import Instant, Mode, Unit
from datetime_picker.formatting import column_formats, format_column_value, format_instant

from .config import PickerConfig
from .controller import CancelListener, SelectionController, ValueListener

logger = logging.getLogger(__name__)

CloseListener = Callable[[], None]


class PickerSession:
    """
    One picker invocation, from configuration to confirm or cancel.

    Notifications fire synchronously:
    - on_change(instant) after every accepted column edit
    - on_confirm(instant) then on_close() on confirm
    - on_cancel() then on_close() on cancel
    - on_close() alone on dismiss

    Example:
        >>> session = PickerSession(PickerConfig(mode=Mode.TIME, minute_divider=15,
        ...                                      initial_datetime=Instant(2024, 1, 1, 10, 37)))
        >>> session.value.minute
        30
        >>> session.confirm()
        Instant(year=2024, month=1, day=1, hour=10, minute=30)
    """

    def __init__(
        self,
        config: Optional[PickerConfig] = None,
        *,
        on_change: Optional[ValueListener] = None,
        on_confirm: Optional[ValueListener] = None,
        on_cancel: Optional[CancelListener] = None,
        on_close: Optional[CloseListener] = None,
    ):
        self.config = config or PickerConfig()
        self.controller = SelectionController.from_config(self.config)
        self.date_format = self.config.resolved_date_format()
        self._column_tokens = column_formats(self.date_format, self.config.mode)
        self._close_listeners: List[CloseListener] = []
        self._closed = False

        self.subscribe(
            on_change=on_change,
            on_confirm=on_confirm,
            on_cancel=on_cancel,
            on_close=on_close,
        )

        if self.controller.initial_was_clamped:
            logger.warning(
                f"Initial value {self.config.initial_datetime} outside "
                f"{self.controller.date_range}; starting at {self.value}"
            )
        logger.info(f"Opened {self.config.mode.value} picker at {self.value}")

    @classmethod
    def open(cls, **options: Any) -> PickerSession:
        """
        Build a session from host options.

        Callback options (on_change, on_confirm, on_cancel, on_close) are
        subscribed; everything else goes to PickerConfig.from_dict.
        """
        callbacks = {
            name: options.pop(name)
            for name in ("on_change", "on_confirm", "on_cancel", "on_close")
            if name in options
        }
        return cls(PickerConfig.from_dict(options), **callbacks)

    def subscribe(
        self,
        on_change: Optional[ValueListener] = None,
        on_confirm: Optional[ValueListener] = None,
        on_cancel: Optional[CancelListener] = None,
        on_close: Optional[CloseListener] = None,
    ) -> None:
        """Register additional listeners."""
        if on_change is not None:
            self.controller.add_change_listener(on_change)
        if on_confirm is not None:
            self.controller.add_confirm_listener(on_confirm)
        if on_cancel is not None:
            self.controller.add_cancel_listener(on_cancel)
        if on_close is not None:
            self._close_listeners.append(on_close)

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def value(self) -> Instant:
        return self.controller.value

    @property
    def mode(self) -> Mode:
        return self.config.mode

    @property
    def units(self) -> Tuple[Unit, ...]:
        return self.controller.units

    @property
    def is_closed(self) -> bool:
        return self._closed

    # ─────────────────────────────────────────────────────────────────────────
    # Editing
    # ─────────────────────────────────────────────────────────────────────────

    def set_column_value(self, unit: Union[Unit, str], value: int) -> Instant:
        """
        Edit one column; unit may be given by name ("minute").

        Raises:
            PickerError: If the session is finished
            InvalidArgument: If the unit is unknown or inactive
        """
        self._ensure_open()
        return self.controller.set_column_value(_as_unit(unit), value)

    def column_values(self, unit: Union[Unit, str]) -> List[int]:
        return self.controller.column_values(_as_unit(unit))

    def column_labels(self, unit: Union[Unit, str]) -> List[Tuple[int, str]]:
        """(value, display label) pairs for a column, in display order."""
        unit = _as_unit(unit)
        values = self.controller.column_values(unit)
        token = self._column_tokens[unit]
        return [
            (value, format_column_value(unit, value, token, self.config.locale))
            for value in values
        ]

    def format_value(self) -> str:
        """Current value rendered with the session's pattern and locale."""
        return format_instant(self.value, self.date_format, self.config.locale)

    # ─────────────────────────────────────────────────────────────────────────
    # Termination
    # ─────────────────────────────────────────────────────────────────────────

    def confirm(self) -> Instant:
        """Report the current value and finish the session."""
        self._ensure_open()
        value = self.controller.confirm()
        logger.info(f"Picker confirmed {value}")
        self._close()
        return value

    def cancel(self) -> None:
        """Report cancellation and finish the session."""
        self._ensure_open()
        self.controller.cancel()
        logger.info("Picker cancelled")
        self._close()

    def dismiss(self) -> None:
        """Finish without confirm or cancel (host closed the picker)."""
        self._ensure_open()
        logger.info("Picker dismissed")
        self._close()

    def _close(self) -> None:
        self._closed = True
        for listener in list(self._close_listeners):
            listener()

    def _ensure_open(self) -> None:
        if self._closed:
            raise PickerError("picker session is already finished")


def _as_unit(unit: Union[Unit, str]) -> Unit:
    if isinstance(unit, Unit):
        return unit
    try:
        return Unit(unit)
    except ValueError as e:
        raise InvalidArgument(f"unknown column: {unit!r}") from e
