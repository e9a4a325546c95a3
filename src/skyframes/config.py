"""Runtime configuration.

Values come from environment variables. Entry points call
``dotenv.load_dotenv()`` before anything reads them, so a ``.env`` file in the
working directory works as well:

    SKYFRAMES_MAX_EPOCH=2100
    SKYFRAMES_LOG_LEVEL=DEBUG
"""

import logging
import os

log = logging.getLogger(__name__)

MIN_EPOCH: float = 1.0  # Earliest accepted equinox year
DEFAULT_MAX_EPOCH: float = 2100.0  # Practical "not yet reached" ceiling

ARCSEC_FULL_CIRCLE: float = 1296000.0  # 360°
ARCSEC_QUARTER_CIRCLE: float = 324000.0  # 90°


def max_epoch() -> float:
    """Latest accepted equinox year, overridable with SKYFRAMES_MAX_EPOCH."""
    raw = os.environ.get("SKYFRAMES_MAX_EPOCH", "").strip()
    if not raw:
        return DEFAULT_MAX_EPOCH
    try:
        return float(raw)
    except ValueError:
        log.warning(
            "Ignoring SKYFRAMES_MAX_EPOCH=%r, using %g", raw, DEFAULT_MAX_EPOCH
        )
        return DEFAULT_MAX_EPOCH


def log_level() -> int:
    """Logging level named by SKYFRAMES_LOG_LEVEL (default INFO)."""
    name = os.environ.get("SKYFRAMES_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
