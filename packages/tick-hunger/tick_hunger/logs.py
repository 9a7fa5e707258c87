"""Root logger setup for hosts and the CLI."""
from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "TICK_HUNGER_LOG_LEVEL"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def configure_logging(default_level: int = logging.INFO) -> None:
    """Configure the root logger with a sane default format.

    Respects TICK_HUNGER_LOG_LEVEL if present.
    """
    level = default_level
    level_name = os.getenv(LOG_LEVEL_ENV)
    if level_name:
        level = getattr(logging, level_name.upper(), default_level)
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
