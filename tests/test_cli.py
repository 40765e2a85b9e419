"""CLI tests using Typer's runner."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from accordion import __version__
from accordion.config.models import AccordionConfig
from accordion.main import app

runner = CliRunner()


class TestCLIBasics:

    def test_cli_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "demo" in result.stdout

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestDemoCommand:

    def test_flags_override_config(self, ui_config_path):
        with patch("accordion.ui.demo.run_demo") as run_demo:
            result = runner.invoke(app, ["demo", "--independent", "--gap", "2"])

        assert result.exit_code == 0
        config = run_demo.call_args.args[0]
        assert config == AccordionConfig(one_at_a_time=False, layout_gap="2")

    def test_config_defaults_used(self, ui_config_path):
        with patch("accordion.ui.demo.run_demo") as run_demo:
            result = runner.invoke(app, ["demo"])

        assert result.exit_code == 0
        assert run_demo.call_args.args[0] == AccordionConfig(one_at_a_time=True, layout_gap="1")

    @pytest.mark.parametrize("gap", ["8px", "\u00b2"])
    def test_invalid_gap_exits_with_error(self, ui_config_path, gap):
        with patch("accordion.ui.demo.run_demo") as run_demo:
            result = runner.invoke(app, ["demo", "--gap", gap])

        assert result.exit_code == 1
        assert "Layout gap" in result.stdout
        run_demo.assert_not_called()


class TestConfigCommand:

    def test_show(self, ui_config_path):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "one_at_a_time" in result.stdout

    def test_update(self, ui_config_path):
        result = runner.invoke(app, ["config", "--independent", "--gap", "3", "--theme", "nord"])
        assert result.exit_code == 0

        result = runner.invoke(app, ["config"])
        assert "False" in result.stdout
        assert "nord" in result.stdout
