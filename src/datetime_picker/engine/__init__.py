"""
Module: engine

Purpose:
    Range-and-selection synchronization engine. Computes each column's
    selectable bounds from the range and the current value, clamps values
    after every edit, and reports the resolved value to the host.

Key Functions:
    - propagate(): One boundary propagation pass
    - load_config(): Read a PickerConfig from JSON

Key Classes:
    - PickerConfig: Session configuration
    - BoundaryPropagator: Top-down bounds computation
    - SelectionController: Edit state machine
    - PickerSession: Host-facing session with notifications

Dependencies:
    - datetime_picker.core: Models, calendar math, errors
    - datetime_picker.formatting: Display strings

Used By:
    - datetime_picker.gui: PySide6 widget and dialog
"""

from .config import PickerConfig, load_config
from .propagation import BoundaryPropagator, Propagation, propagate
from .clamping import clamp_column, clamp_value, snap_to_step
from .controller import EditPhase, SelectionController, SelectionState
from .session import PickerSession

__all__ = [
    # Config
    "PickerConfig",
    "load_config",
    # Propagation
    "BoundaryPropagator",
    "Propagation",
    "propagate",
    "clamp_column",
    "clamp_value",
    "snap_to_step",
    # Controller
    "EditPhase",
    "SelectionController",
    "SelectionState",
    "PickerSession",
]
