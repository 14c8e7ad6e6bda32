# =============================================================================
# ReadBench -- Logging
# =============================================================================

from __future__ import annotations

import logging
import sys

logger = logging.getLogger("readbench")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Send ``readbench`` logs to stdout.  Only the CLI calls this."""
    if any(getattr(h, "_readbench", False) for h in logger.handlers):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._readbench = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
