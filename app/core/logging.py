from __future__ import annotations

import logging
import sys

from app.core.config import settings


# Centralized app logging configuration (format + level).
# Logs go to stderr so the build CLI can keep stdout for JSON and XML output.
def configure_logging(level: str | None = None) -> None:
    resolved = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, resolved, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
