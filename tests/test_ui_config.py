"""Tests for accordion settings and their persistence."""

import json

import pytest

from accordion.config.models import AccordionConfig, PanelConfig, parse_gap
from accordion.config.ui_config import (
    DEFAULT_CONFIG,
    get_accordion_defaults,
    get_theme,
    load_ui_config,
    set_accordion_defaults,
    set_theme,
)
from accordion.exceptions import AccordionError, ConfigurationError


class TestModels:

    def test_defaults(self):
        config = AccordionConfig()
        assert config.one_at_a_time is False
        assert config.gap_cells == 0
        assert PanelConfig().start_open is False

    @pytest.mark.parametrize("gap, cells", [("0", 0), ("1", 1), (" 3 ", 3)])
    def test_parse_gap(self, gap, cells):
        assert parse_gap(gap) == cells

    @pytest.mark.parametrize("gap", ["8px", "-1", "", "one", "\u00b2", "\u0663"])
    def test_invalid_gap_rejected(self, gap):
        with pytest.raises(ConfigurationError) as exc_info:
            AccordionConfig(layout_gap=gap)
        assert isinstance(exc_info.value, AccordionError)
        assert "layout_gap" in str(exc_info.value)


class TestPersistence:

    def test_load_returns_defaults_without_file(self, ui_config_path):
        assert load_ui_config() == DEFAULT_CONFIG
        assert get_accordion_defaults() == AccordionConfig(one_at_a_time=True, layout_gap="1")

    def test_round_trip(self, ui_config_path):
        set_accordion_defaults(AccordionConfig(one_at_a_time=False, layout_gap="2"))
        set_theme("nord")

        assert get_accordion_defaults() == AccordionConfig(one_at_a_time=False, layout_gap="2")
        assert get_theme() == "nord"
        assert json.loads(ui_config_path.read_text())["layout_gap"] == "2"

    def test_corrupt_file_falls_back(self, ui_config_path):
        ui_config_path.write_text("{not json")
        assert load_ui_config() == DEFAULT_CONFIG

    def test_invalid_gap_in_file_falls_back(self, ui_config_path):
        ui_config_path.write_text(json.dumps({"layout_gap": "8px", "one_at_a_time": False}))
        assert get_accordion_defaults() == AccordionConfig(one_at_a_time=True, layout_gap="1")

    def test_open_state_is_not_persisted(self, ui_config_path):
        set_accordion_defaults(AccordionConfig())
        assert set(json.loads(ui_config_path.read_text())) == {"theme", "one_at_a_time", "layout_gap"}

    def test_non_boolean_exclusivity_in_file_falls_back(self, ui_config_path):
        ui_config_path.write_text(json.dumps({"one_at_a_time": "false", "layout_gap": "2"}))
        assert get_accordion_defaults() == AccordionConfig(one_at_a_time=True, layout_gap="2")

    def test_superscript_gap_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError):
            parse_gap("\u00b2")
