"""
Module: engine.controller

Purpose:
    Own the current value of one picker session and keep it valid.
    Every column edit re-runs boundary propagation over all active columns,
    clamps them, and notifies listeners before returning.

Key Classes:
    - SelectionController: Edit/confirm/cancel state machine
    - SelectionState: Immutable snapshot of a session's selection
    - EditPhase: IDLE / EDITING

Dependencies:
    - engine.propagation: BoundaryPropagator
    - engine.config: PickerConfig
    - core.models: Instant, DateRange, Mode, ColumnSpec

Used By:
    - engine.session: PickerSession
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, List, Optional, Tuple

from datetime_picker.core.errors import InvalidArgument
from datetime_picker.core.models import (
    ColumnBounds,
    ColumnSpec,
    DateRange,
    Instant,
    Mode,
    Unit,
    columns_for_mode,
)

from .config import PickerConfig
from .propagation import BoundaryPropagator, Propagation

logger = logging.getLogger(__name__)

ValueListener = Callable[[Instant], None]
CancelListener = Callable[[], None]


class EditPhase(Enum):
    """Controller phase. EDITING is only visible from inside listeners' callers."""

    IDLE = auto()
    EDITING = auto()


@dataclass(frozen=True)
class SelectionState:
    """
    Snapshot of a session's selection (immutable).

    Attributes:
        value: Current resolved instant
        range: Allowed range
        mode: Active mode
        columns: Active columns in significance order
    """

    value: Instant
    range: DateRange
    mode: Mode
    columns: Tuple[ColumnSpec, ...]


class SelectionController:
    """
    Keeps a composite value inside its range while columns are edited.

    The initial value is clamped into the range (mode precision) and then
    propagated, so the controller is valid from construction on.

    Example:
        >>> r = DateRange.create(Instant(2000, 1, 1), Instant(2025, 12, 31))
        >>> controller = SelectionController(r, Instant(2020, 6, 15), Mode.DATE)
        >>> controller.set_column_value(Unit.YEAR, 2025)
        Instant(year=2025, month=6, day=15, hour=0, minute=0)
        >>> controller.column_bounds(Unit.MONTH)
        ColumnBounds(1, 12)
    """

    def __init__(
        self,
        date_range: DateRange,
        initial: Instant,
        mode: Mode = Mode.DATE,
        minute_divider: int = 1,
    ):
        self._range = date_range
        self._mode = mode
        self._columns = columns_for_mode(mode, minute_divider)
        self._propagator = BoundaryPropagator(date_range, self._columns)
        self._phase = EditPhase.IDLE

        self._change_listeners: List[ValueListener] = []
        self._confirm_listeners: List[ValueListener] = []
        self._cancel_listeners: List[CancelListener] = []

        start = date_range.clamp(initial, mode.units)
        self.initial_was_clamped = start != initial
        result = self._propagator.propagate(start.fields())
        self._apply(result)
        logger.debug(f"Selection initialised at {self._value} ({mode.value}, range {date_range})")

    @classmethod
    def from_config(cls, config: PickerConfig) -> SelectionController:
        """Resolve the config's defaults and build a controller."""
        return cls(
            config.resolved_range(),
            config.resolved_initial(),
            config.mode,
            config.minute_divider,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def value(self) -> Instant:
        return self._value

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def date_range(self) -> DateRange:
        return self._range

    @property
    def columns(self) -> Tuple[ColumnSpec, ...]:
        return self._columns

    @property
    def units(self) -> Tuple[Unit, ...]:
        return self._mode.units

    @property
    def phase(self) -> EditPhase:
        return self._phase

    @property
    def state(self) -> SelectionState:
        return SelectionState(self._value, self._range, self._mode, self._columns)

    # ─────────────────────────────────────────────────────────────────────────
    # Column Queries
    # ─────────────────────────────────────────────────────────────────────────

    def column(self, unit: Unit) -> ColumnSpec:
        """
        Active column for a unit.

        Raises:
            InvalidArgument: If the unit is not active in this mode
        """
        for column in self._columns:
            if column.unit is unit:
                return column
        raise InvalidArgument(
            f"{getattr(unit, 'value', unit)} is not a column in {self._mode.value} mode"
        )

    def column_bounds(self, unit: Unit) -> ColumnBounds:
        """Selectable [low, high] of a column after the last propagation."""
        self.column(unit)
        return self._bounds[unit]

    def column_values(self, unit: Unit) -> List[int]:
        """Ordered values a column currently offers."""
        return self.column(unit).values(self.column_bounds(unit))

    # ─────────────────────────────────────────────────────────────────────────
    # Listeners
    # ─────────────────────────────────────────────────────────────────────────

    def add_change_listener(self, listener: ValueListener) -> None:
        self._change_listeners.append(listener)

    def add_confirm_listener(self, listener: ValueListener) -> None:
        self._confirm_listeners.append(listener)

    def add_cancel_listener(self, listener: CancelListener) -> None:
        self._cancel_listeners.append(listener)

    # ─────────────────────────────────────────────────────────────────────────
    # Transitions
    # ─────────────────────────────────────────────────────────────────────────

    def set_column_value(self, unit: Unit, raw_value: int) -> Instant:
        """
        Edit one column.

        The raw value is written tentatively, every active column is
        re-propagated and clamped, then change listeners receive the
        resolved instant.

        Args:
            unit: Column to edit
            raw_value: Requested value, may be out of bounds

        Returns:
            Resolved instant

        Raises:
            InvalidArgument: If unit is not active or raw_value is not an
                integer; nothing is changed
        """
        self.column(unit)
        if isinstance(raw_value, bool) or not isinstance(raw_value, int):
            raise InvalidArgument(f"{unit.value} value must be an integer: {raw_value!r}")

        self._phase = EditPhase.EDITING
        try:
            fields = self._value.fields()
            fields[unit] = raw_value
            result = self._propagator.propagate(fields)
            self._apply(result)
        finally:
            self._phase = EditPhase.IDLE

        if result.adjusted:
            logger.debug(
                f"{unit.value}={raw_value} adjusted "
                f"{', '.join(u.value for u in result.adjusted)} -> {self._value}"
            )
        else:
            logger.debug(f"{unit.value}={raw_value} -> {self._value}")

        for listener in list(self._change_listeners):
            listener(self._value)
        return self._value

    def confirm(self) -> Instant:
        """Notify confirm listeners with the current value. No mutation."""
        for listener in list(self._confirm_listeners):
            listener(self._value)
        return self._value

    def cancel(self) -> None:
        """Notify cancel listeners. No payload, no mutation."""
        for listener in list(self._cancel_listeners):
            listener()

    def _apply(self, result: Propagation) -> None:
        self._value = result.value
        self._bounds: Dict[Unit, ColumnBounds] = result.bounds
