import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import datetime_picker
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from datetime_picker.core.models import DateRange, Instant


class EventRecorder:
    """Collects picker notifications in arrival order."""

    def __init__(self):
        self.events = []

    def on_change(self, value):
        self.events.append(("change", value))

    def on_confirm(self, value):
        self.events.append(("confirm", value))

    def on_cancel(self):
        self.events.append(("cancel", None))

    def on_close(self):
        self.events.append(("close", None))

    def names(self):
        return [name for name, _ in self.events]

    def last(self, name):
        for event, value in reversed(self.events):
            if event == name:
                return value
        return None


# Common test fixtures
@pytest.fixture
def range_2000_2025():
    """2000-01-01 00:00 to 2025-12-31 23:59."""
    return DateRange.create(Instant(2000, 1, 1), Instant(2025, 12, 31, 23, 59))


@pytest.fixture
def recorder():
    return EventRecorder()
