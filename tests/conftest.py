"""Shared pytest fixtures for accordion tests."""

import pytest


@pytest.fixture
def ui_config_path(tmp_path, monkeypatch):
    """Point the UI config at a temporary file."""
    config_path = tmp_path / "ui_config.json"
    monkeypatch.setattr(
        "accordion.config.ui_config.get_ui_config_path",
        lambda: config_path,
    )
    return config_path
