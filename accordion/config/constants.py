"""
Centralized constants for accordion.

Defaults and paths used by the configuration layer and the demo app.
"""

import os
from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

ACCORDION_CONFIG_DIR = Path(
    os.environ.get("ACCORDION_CONFIG_DIR", Path.home() / ".config" / "accordion")
)

# =============================================================================
# ACCORDION DEFAULTS
# =============================================================================

DEFAULT_ONE_AT_A_TIME = False  # Library default: panels are independent
DEFAULT_LAYOUT_GAP = "0"  # Blank cells between panels

# The demo opts into exclusivity, like the original three-panel tree
DEMO_ONE_AT_A_TIME = True
DEMO_LAYOUT_GAP = "1"
DEFAULT_THEME = "textual-dark"
