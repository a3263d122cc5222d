"""Logging configuration. Outputs to stderr to avoid conflict with stdio MCP transport."""

import logging
import sys


def setup_logger(name: str = "linear_mcp", level: str = "INFO") -> logging.Logger:
    """Return the stderr logger for ``name`` at ``level``.

    The handler is attached once; later calls only change the level, so the
    LINEAR_LOG_LEVEL setting applies even if an earlier call configured the
    logger before settings were loaded.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(name)s] %(levelname)s: %(message)s")
    )
    logger.addHandler(handler)
    return logger
