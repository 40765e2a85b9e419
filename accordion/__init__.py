"""
accordion - collapsible panels with an optional one-at-a-time policy
"""

import hashlib
import logging
import time
from pathlib import Path

__version__ = "0.3.0"


def _generate_build_id():
    """Generate a unique build identifier for version tracking."""
    try:
        current_file = Path(__file__)
        mtime = current_file.stat().st_mtime

        build_data = f"{__version__}-{mtime}-{time.time()}"
        build_hash = hashlib.md5(build_data.encode()).hexdigest()[:8]
        return f"{__version__}-{build_hash}"
    except OSError as e:
        # Logging may not be configured yet at import time
        logging.getLogger(__name__).debug(f"Build ID generation fell back to timestamp: {e}")
        return f"{__version__}-{int(time.time())}"


__build_id__ = _generate_build_id()
