"""Logging configuration for the context compression core."""

import logging
import sys
from typing import Optional

from superagent.infrastructure.config import get_settings


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging to stdout.

    Args:
        level: Log level name. Defaults to the configured SUPERAGENT_LOG_LEVEL.
    """
    log_level = (level or get_settings().log_level).upper()
    log_format = "%(asctime)s %(levelname)-4s [%(name)s:%(lineno)d] : %(message)s"

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(log_format, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # Suppress verbose provider client logs
    for name in ["httpx", "httpcore", "openai", "anthropic"]:
        logging.getLogger(name).setLevel(logging.WARNING)
