"""
Accordion UI Configuration.

Handles persistence of demo preferences: theme, exclusivity and panel gap.
Config is stored in ~/.config/accordion/ui_config.json

Open/closed panel state is deliberately not stored here.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..exceptions import ConfigurationError
from .constants import (
    ACCORDION_CONFIG_DIR,
    DEFAULT_THEME,
    DEMO_LAYOUT_GAP,
    DEMO_ONE_AT_A_TIME,
)
from .models import AccordionConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "theme": DEFAULT_THEME,
    "one_at_a_time": DEMO_ONE_AT_A_TIME,
    "layout_gap": DEMO_LAYOUT_GAP,
}


def get_ui_config_path() -> Path:
    """
    Get path to UI config file.

    Returns:
        Path to ~/.config/accordion/ui_config.json
    """
    ACCORDION_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return ACCORDION_CONFIG_DIR / "ui_config.json"


def load_ui_config() -> dict[str, Any]:
    """
    Load UI configuration from file.

    Returns:
        Config dict, or defaults if file doesn't exist or is invalid
    """
    path = get_ui_config_path()
    if path.exists():
        try:
            config = json.loads(path.read_text())
            if not isinstance(config, dict):
                return DEFAULT_CONFIG.copy()
            # Merge with defaults to handle missing keys
            return {**DEFAULT_CONFIG, **config}
        except (json.JSONDecodeError, OSError):
            return DEFAULT_CONFIG.copy()
    return DEFAULT_CONFIG.copy()


def save_ui_config(config: dict[str, Any]) -> None:
    """
    Save UI configuration to file.

    Args:
        config: Configuration dict to save
    """
    path = get_ui_config_path()
    try:
        path.write_text(json.dumps(config, indent=2) + "\n")
    except OSError as e:
        # Config is non-critical
        logger.debug(f"Could not save UI config to {path}: {e}")


def get_theme() -> str:
    """Get current theme name from config."""
    return str(load_ui_config().get("theme", DEFAULT_THEME))


def set_theme(theme_name: str) -> None:
    """Set and persist theme preference."""
    config = load_ui_config()
    config["theme"] = theme_name
    save_ui_config(config)


def get_accordion_defaults() -> AccordionConfig:
    """Accordion settings from config, falling back to the demo defaults."""
    raw = load_ui_config()
    one_at_a_time = raw.get("one_at_a_time", DEMO_ONE_AT_A_TIME)
    if not isinstance(one_at_a_time, bool):
        logger.warning(f"Ignoring non-boolean one_at_a_time in UI config: {one_at_a_time!r}")
        one_at_a_time = DEMO_ONE_AT_A_TIME
    layout_gap = raw.get("layout_gap", DEMO_LAYOUT_GAP)
    try:
        return AccordionConfig(one_at_a_time=one_at_a_time, layout_gap=str(layout_gap))
    except ConfigurationError as e:
        logger.warning(f"Ignoring invalid accordion settings in UI config: {e}")
        return AccordionConfig(one_at_a_time=DEMO_ONE_AT_A_TIME, layout_gap=DEMO_LAYOUT_GAP)


def set_accordion_defaults(config: AccordionConfig) -> None:
    """Persist accordion settings used by the demo."""
    raw = load_ui_config()
    raw["one_at_a_time"] = config.one_at_a_time
    raw["layout_gap"] = config.layout_gap
    save_ui_config(raw)
