from __future__ import annotations

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
# checked in order; the first one set wins
LEVEL_ENV_VARS = ("COLLATOR_LOG_LEVEL", "LOG_LEVEL")

_configured = False


def resolve_level(name: Optional[str] = None) -> int:
    """Map a level name to its numeric value, falling back to the environment, then INFO."""
    if not name:
        name = next((os.environ[v] for v in LEVEL_ENV_VARS if os.environ.get(v)), "INFO")
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: Optional[str] = None) -> None:
    """Install the root handler on first use; later calls only adjust the level.

    Modules call this implicitly through ``get_logger`` at import time, so a
    ``--log_level`` given on the command line arrives after the handler
    exists and is applied to the root logger instead.
    """
    global _configured
    if not _configured:
        logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT)
        _configured = True
    elif level:
        logging.getLogger().setLevel(resolve_level(level))


def get_logger(name: str) -> logging.Logger:
    setup_logging()
    return logging.getLogger(name)
