"""
Unit tests for PickerConfig and load_config.
"""

import json
import logging
from datetime import datetime

import pytest

from datetime_picker.core.errors import ConfigurationError, RangeError
from datetime_picker.core.models import DateRange, Instant, Mode
from datetime_picker.engine import PickerConfig, load_config


class TestPickerConfigValidation:
    """Validation on construction."""

    def test_create_when_defaults_then_valid(self):
        config = PickerConfig()
        assert config.mode is Mode.DATE
        assert config.minute_divider == 1
        assert config.resolved_range() == DateRange.default()
        assert config.resolved_date_format() == "yyyy-MM-dd"

    @pytest.mark.parametrize("divider", [0, -5, 61])
    def test_create_when_divider_out_of_range_then_raises(self, divider):
        with pytest.raises(ConfigurationError, match="minute_divider"):
            PickerConfig(minute_divider=divider)

    @pytest.mark.parametrize("divider", [1.5, "15", True])
    def test_create_when_divider_not_integer_then_raises(self, divider):
        with pytest.raises(ConfigurationError, match="must be an integer"):
            PickerConfig(minute_divider=divider)

    def test_create_when_range_inverted_then_raises_range_error(self):
        with pytest.raises(RangeError):
            PickerConfig(min_datetime=Instant(2025, 1, 1), max_datetime=Instant(2020, 1, 1))

    @pytest.mark.parametrize("name, value", [
        ("min_datetime", Instant(2023, 2, 30)),
        ("max_datetime", Instant(2023, 2, 29)),
    ])
    def test_create_when_bound_not_calendar_date_then_raises(self, name, value):
        with pytest.raises(ConfigurationError, match=f"{name} is not a calendar date"):
            PickerConfig(**{name: value})

    def test_create_when_bound_is_leap_day_then_valid(self):
        config = PickerConfig(min_datetime=Instant(2024, 2, 29))
        assert config.resolved_range().minimum == Instant(2024, 2, 29)

    def test_create_when_time_projection_inverted_then_raises(self):
        with pytest.raises(ConfigurationError, match="inverted"):
            PickerConfig(
                mode=Mode.TIME,
                min_datetime=Instant(2020, 1, 1, 18, 0),
                max_datetime=Instant(2020, 1, 2, 9, 0),
            )

    def test_create_when_same_range_in_datetime_mode_then_valid(self):
        config = PickerConfig(
            mode=Mode.DATETIME,
            min_datetime=Instant(2020, 1, 1, 18, 0),
            max_datetime=Instant(2020, 1, 2, 9, 0),
        )
        assert config.resolved_range().minimum.hour == 18

    def test_create_when_mode_not_enum_then_raises(self):
        with pytest.raises(ConfigurationError, match="mode"):
            PickerConfig(mode="date")

    def test_create_when_unknown_locale_then_raises(self):
        with pytest.raises(ConfigurationError, match="unsupported locale"):
            PickerConfig(locale="xx_yy")

    def test_columns_when_time_mode_then_step_on_minute(self):
        config = PickerConfig(mode=Mode.TIME, minute_divider=15)
        assert [c.step for c in config.columns()] == [1, 15]

    def test_resolved_initial_when_unset_then_now(self):
        before = Instant.now()
        value = PickerConfig().resolved_initial()
        assert value >= before


class TestPickerConfigFromDict:
    """Host option parsing."""

    def test_from_dict_when_aliases_then_mapped(self):
        config = PickerConfig.from_dict({
            "minDateTime": "2000-01-01",
            "maxDateTime": datetime(2025, 12, 31, 23, 59),
            "initialDateTime": {"year": 2020, "month": 6, "day": 15},
            "minuteDivider": 5,
            "pickerMode": "DATETIME",
            "dateFormat": "dd/MM/yyyy HH:mm",
        })
        assert config.min_datetime == Instant(2000, 1, 1)
        assert config.max_datetime == Instant(2025, 12, 31, 23, 59)
        assert config.initial_datetime == Instant(2020, 6, 15)
        assert config.minute_divider == 5
        assert config.mode is Mode.DATETIME
        assert config.resolved_date_format() == "dd/MM/yyyy HH:mm"

    def test_from_dict_when_unknown_key_then_warns_and_ignores(self, caplog):
        with caplog.at_level(logging.WARNING, logger="datetime_picker.engine.config"):
            config = PickerConfig.from_dict({"mode": "time", "pickerTheme": {}})
        assert config.mode is Mode.TIME
        assert any("pickerTheme" in r.message for r in caplog.records)

    def test_from_dict_when_bad_date_then_raises(self):
        with pytest.raises(ConfigurationError, match="min_datetime"):
            PickerConfig.from_dict({"min_datetime": "not a date"})

    def test_from_dict_when_bound_not_calendar_date_then_configuration_error(self):
        with pytest.raises(ConfigurationError, match="not a calendar date"):
            PickerConfig.from_dict({
                "minDateTime": {"year": 2023, "month": 2, "day": 30},
                "initialDateTime": "2023-02-15",
            })

    def test_from_dict_when_bad_mode_then_raises(self):
        with pytest.raises(ConfigurationError, match="unknown picker mode"):
            PickerConfig.from_dict({"mode": "week"})

    def test_to_dict_when_round_tripped_then_equal(self):
        config = PickerConfig(
            min_datetime=Instant(2000, 1, 1),
            initial_datetime=Instant(2010, 5, 5, 8, 30),
            mode=Mode.DATETIME,
            minute_divider=10,
            locale="fr",
        )
        assert PickerConfig.from_dict(config.to_dict()) == config


class TestLoadConfig:
    """Reading configuration files."""

    def test_load_when_valid_json_then_config(self, tmp_path):
        path = tmp_path / "picker.json"
        path.write_text(json.dumps({"pickerMode": "time", "minuteDivider": 30}), encoding="utf-8")
        config = load_config(path)
        assert config.mode is Mode.TIME
        assert config.minute_divider == 30

    def test_load_when_missing_then_raises(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Failed to read"):
            load_config(tmp_path / "missing.json")

    def test_load_when_invalid_json_then_raises(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="not valid JSON"):
            load_config(path)

    def test_load_when_not_object_then_raises(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="JSON object"):
            load_config(path)
