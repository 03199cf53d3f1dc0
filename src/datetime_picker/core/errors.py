"""
Module: core.errors

Purpose:
    Exception hierarchy shared by every picker module.

Key Classes:
    - PickerError: Base class for all picker errors
    - ConfigurationError: Invalid session configuration (fatal to construction)
    - RangeError: Range minimum after range maximum
    - InvalidArgument: Caller contract violation, rejected before any mutation

Used By:
    - core.calendar_math
    - core.models
    - engine.config, engine.controller, engine.session
    - formatting.locales
"""


class PickerError(Exception):
    """Base error for the picker."""
    pass


class ConfigurationError(PickerError, ValueError):
    """Session configuration is invalid; no session is created."""
    pass


class RangeError(ConfigurationError):
    """Range endpoint is not a calendar date, or minimum is after maximum."""

    def __init__(self, message: str, minimum: object = None, maximum: object = None):
        super().__init__(message)
        self.minimum = minimum
        self.maximum = maximum


class InvalidArgument(PickerError, ValueError):
    """Argument outside the caller contract (e.g. month 13, inactive column)."""
    pass
