"""Logging setup for the command line entry point."""

import logging
import sys

logger = logging.getLogger(__name__)


def configure_logging(log_level: str = "WARNING"):
    """Configure logging for the composer.

    Log records go to stderr so stdout only carries the composed message.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    if hasattr(configure_logging, "has_run"):
        return

    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    logging.basicConfig(level=numeric_level, force=True, handlers=[handler])

    configure_logging.has_run = True
    logger.debug(f"Logging configured at level: {log_level}")
