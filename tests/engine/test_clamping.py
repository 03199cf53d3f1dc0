"""
Unit tests for clamping and minute snapping.
"""

import pytest

from datetime_picker.core.models import ColumnBounds
from datetime_picker.engine.clamping import clamp_column, clamp_value, snap_to_step

FULL_HOUR = ColumnBounds(0, 59)


def _edges(low, high):
    """Bounds whose endpoints both come from the range."""
    return ColumnBounds(low, high, low_is_edge=True, high_is_edge=True)


class TestClampValue:
    """Tests for clamp_value()."""

    def test_clamp_value_when_below_then_low(self):
        assert clamp_value(-5, ColumnBounds(1, 12)) == 1

    def test_clamp_value_when_above_then_high(self):
        assert clamp_value(40, ColumnBounds(1, 31)) == 31

    def test_clamp_value_when_inside_then_unchanged(self):
        assert clamp_value(6, ColumnBounds(1, 12)) == 6

    def test_clamp_value_when_repeated_then_same_result(self):
        bounds = ColumnBounds(3, 9)
        assert [clamp_value(12, bounds) for _ in range(3)] == [9, 9, 9]


class TestSnapToStep:
    """Tests for snap_to_step()."""

    def test_snap_when_closer_to_lower_multiple_then_lower(self):
        assert snap_to_step(37, FULL_HOUR, 15) == 30

    def test_snap_when_closer_to_upper_multiple_then_upper(self):
        assert snap_to_step(38, FULL_HOUR, 15) == 45

    def test_snap_when_tie_then_prefers_lower(self):
        assert snap_to_step(25, FULL_HOUR, 10) == 20
        assert snap_to_step(35, FULL_HOUR, 10) == 30

    def test_snap_when_already_multiple_then_unchanged(self):
        assert snap_to_step(45, FULL_HOUR, 15) == 45

    def test_snap_when_step_one_then_unchanged(self):
        assert snap_to_step(37, FULL_HOUR, 1) == 37

    def test_snap_when_value_is_range_edge_then_kept(self):
        bounds = _edges(7, 50)
        assert snap_to_step(7, bounds, 15) == 7
        assert snap_to_step(50, bounds, 15) == 50

    def test_snap_when_range_edge_nearer_than_multiple_then_edge(self):
        assert snap_to_step(8, ColumnBounds(7, 59, low_is_edge=True), 15) == 7
        assert snap_to_step(58, ColumnBounds(0, 59, high_is_edge=True), 15) == 59

    def test_snap_when_domain_maximum_then_not_offered(self):
        """Minute 59 of an unbounded hour is not a step value."""
        assert snap_to_step(53, FULL_HOUR, 15) == 45
        assert snap_to_step(59, FULL_HOUR, 15) == 45
        assert snap_to_step(58, FULL_HOUR, 15) == 45

    def test_snap_when_low_not_edge_then_next_multiple(self):
        assert snap_to_step(8, ColumnBounds(7, 59), 15) == 15

    def test_snap_when_upper_multiple_out_of_bounds_then_lower(self):
        assert snap_to_step(40, ColumnBounds(0, 41), 15) == 30
        assert snap_to_step(40, ColumnBounds(0, 41, high_is_edge=True), 15) == 41
        assert snap_to_step(36, ColumnBounds(0, 44), 15) == 30

    @pytest.mark.parametrize("value, expected", [(57, 56), (58, 56), (4, 7), (3, 0)])
    def test_snap_when_step_does_not_divide_sixty_then_nearest(self, value, expected):
        assert snap_to_step(value, FULL_HOUR, 7) == expected

    def test_snap_when_no_multiple_and_no_edge_then_low(self):
        assert snap_to_step(8, ColumnBounds(7, 9), 15) == 7


class TestClampColumn:
    """Tests for clamp_column()."""

    def test_clamp_column_when_above_domain_then_last_multiple(self):
        assert clamp_column(75, FULL_HOUR, 15) == 45

    def test_clamp_column_when_above_range_edge_then_edge(self):
        assert clamp_column(75, ColumnBounds(0, 52, high_is_edge=True), 15) == 52

    def test_clamp_column_when_below_range_edge_then_edge(self):
        assert clamp_column(2, ColumnBounds(7, 59, low_is_edge=True), 15) == 7

    def test_clamp_column_when_inside_then_snapped(self):
        assert clamp_column(37, FULL_HOUR, 15) == 30

    def test_clamp_column_when_repeated_then_deterministic(self):
        bounds = ColumnBounds(7, 52)
        results = {clamp_column(v, bounds, 15) for v in [22] * 5}
        assert results == {15}
