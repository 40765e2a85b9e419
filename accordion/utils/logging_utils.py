"""Simple logging utilities for accordion.

Standard Logger Initialization Pattern
--------------------------------------
For most modules, use the standard Python pattern:

    import logging
    logger = logging.getLogger(__name__)

Use `get_logger()` only when a module needs file logging without the
demo having configured it (e.g. when run standalone).

Note: This module uses inline Path construction instead of importing
ACCORDION_CONFIG_DIR so it can be used before config is loaded.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Max log file size: 5MB, keep 2 backups
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 2

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _log_dir() -> Path:
    log_dir = Path(os.environ.get("ACCORDION_CONFIG_DIR", Path.home() / ".config" / "accordion"))
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def get_logger(name: str) -> logging.Logger:
    """Get a logger that writes to accordion.log in the config directory."""
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = RotatingFileHandler(
            _log_dir() / "accordion.log", maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
        )
        handler.setLevel(logging.INFO)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def setup_tui_logging(module_name: str, verbose: bool = False) -> logging.Logger:
    """
    Set up logging for the Textual demo.

    The root logger is set to WARNING to avoid noise from third-party libs.
    accordion's own loggers (accordion.*) are set to INFO, or DEBUG when
    ``verbose`` is on, which records every toggle and bus delivery.

    Returns:
        The logger for ``module_name``
    """
    try:
        log_file = _log_dir() / "tui_debug.log"

        if not logging.getLogger().handlers:
            handler = RotatingFileHandler(
                log_file, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT
            )
            handler.setFormatter(logging.Formatter(_FORMAT))
            logging.basicConfig(level=logging.WARNING, handlers=[handler])

        logging.getLogger("accordion").setLevel(logging.DEBUG if verbose else logging.INFO)
        return logging.getLogger(module_name)

    except OSError as e:
        # Logging itself is what failed, so report on stderr
        print(f"Warning: TUI logging setup failed: {e}", file=sys.stderr)
        return logging.getLogger(module_name)
