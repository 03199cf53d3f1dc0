"""
Unit tests for the Instant model.
"""

from datetime import datetime

import pytest

from datetime_picker.core.errors import InvalidArgument
from datetime_picker.core.models import Instant, Unit


class TestInstant:
    """Tests for Instant dataclass."""

    # ─────────────────────────────────────────────────────────────────────────
    # Constructor Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_init_when_only_year_then_defaults_remaining_fields(self):
        i = Instant(2024)
        assert (i.month, i.day, i.hour, i.minute) == (1, 1, 0, 0)

    @pytest.mark.parametrize(
        "kwargs, field",
        [
            ({"month": 13}, "month"),
            ({"month": 0}, "month"),
            ({"day": 32}, "day"),
            ({"hour": 24}, "hour"),
            ({"minute": 60}, "minute"),
            ({"minute": -1}, "minute"),
        ],
    )
    def test_init_when_field_out_of_range_then_raises_error(self, kwargs, field):
        with pytest.raises(InvalidArgument, match=field):
            Instant(2024, **kwargs)

    def test_init_when_year_zero_then_raises_error(self):
        with pytest.raises(InvalidArgument, match="year"):
            Instant(0)

    def test_init_when_bool_field_then_raises_error(self):
        with pytest.raises(InvalidArgument, match="integer"):
            Instant(2024, True)

    def test_init_when_day_exceeds_month_then_allowed(self):
        """Month length is enforced by propagation, not by the model."""
        assert Instant(2023, 2, 31).day == 31

    # ─────────────────────────────────────────────────────────────────────────
    # Ordering Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_ordering_when_compared_then_chronological(self):
        assert Instant(2024, 2, 29) < Instant(2024, 3, 1)
        assert Instant(2024, 3, 1, 0, 0) < Instant(2024, 3, 1, 0, 1)
        assert Instant(2023, 12, 31, 23, 59) < Instant(2024, 1, 1)

    def test_key_when_time_units_then_ignores_date(self):
        a = Instant(1999, 1, 1, 10, 30)
        b = Instant(2030, 6, 6, 10, 30)
        assert a.key((Unit.HOUR, Unit.MINUTE)) == b.key((Unit.HOUR, Unit.MINUTE))
        assert a.key() < b.key()

    # ─────────────────────────────────────────────────────────────────────────
    # Field Access Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_get_when_unit_then_returns_field(self):
        i = Instant(2024, 2, 29, 10, 45)
        assert [i.get(u) for u in Unit] == [2024, 2, 29, 10, 45]

    def test_with_value_when_called_then_returns_copy(self):
        i = Instant(2024, 2, 29)
        j = i.with_value(Unit.MONTH, 3)
        assert j == Instant(2024, 3, 29)
        assert i.month == 2

    def test_fields_when_round_tripped_then_equal(self):
        i = Instant(2024, 2, 29, 10, 45)
        assert Instant.from_fields(i.fields()) == i

    # ─────────────────────────────────────────────────────────────────────────
    # datetime / Parsing Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_from_datetime_when_seconds_then_truncates(self):
        i = Instant.from_datetime(datetime(2024, 2, 29, 10, 45, 59))
        assert i == Instant(2024, 2, 29, 10, 45)

    def test_to_datetime_when_valid_then_returns_naive_datetime(self):
        assert Instant(2024, 2, 29, 10, 45).to_datetime() == datetime(2024, 2, 29, 10, 45)

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("2024-02-29", Instant(2024, 2, 29)),
            ("2024-02-29T10:30", Instant(2024, 2, 29, 10, 30)),
            ("2024-02-29 10:30:45", Instant(2024, 2, 29, 10, 30)),
        ],
    )
    def test_parse_when_iso_then_returns_instant(self, text, expected):
        assert Instant.parse(text) == expected

    def test_parse_when_not_iso_then_raises_error(self):
        with pytest.raises(InvalidArgument, match="ISO-8601"):
            Instant.parse("29/02/2024")

    def test_from_dict_when_missing_year_then_raises_error(self):
        with pytest.raises(InvalidArgument, match="year"):
            Instant.from_dict({"month": 2})

    def test_from_dict_when_partial_then_defaults(self):
        assert Instant.from_dict({"year": 2024, "month": 2}) == Instant(2024, 2, 1)

    def test_str_when_called_then_iso_like(self):
        assert str(Instant(2024, 2, 9, 7, 5)) == "2024-02-09 07:05"
