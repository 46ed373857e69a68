"""Package-local logging for the pq-system decision procedure.

Classification is silent by default: the package logger only has a
``NullHandler`` until a host application (or the CLI) opts in. The scanner
traces every scan at DEBUG and the classifier summarises batches at INFO.

Level resolution, first match wins:

1. explicit ``level`` (CLI ``--log-level``)
2. ``verbosity`` count (CLI ``-v`` → INFO, ``-vv`` → DEBUG)
3. ``PQSYSTEM_LOG_LEVEL`` environment variable
"""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "pqsystem"
ENV_LOG_LEVEL = "PQSYSTEM_LOG_LEVEL"
VERBOSITY_LEVELS = {1: "INFO", 2: "DEBUG"}

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def resolve_log_level(level: str | None = None, verbosity: int = 0) -> str:
    """Return the level name to configure, or "" when logging stays off."""
    if level:
        return level.strip()
    if verbosity > 0:
        return VERBOSITY_LEVELS[min(verbosity, max(VERBOSITY_LEVELS))]
    return os.getenv(ENV_LOG_LEVEL, "").strip()


def configure_logging(level: str | None = None, verbosity: int = 0) -> None:
    """Route scan and classification logs to stderr.

    Without a level, a verbosity or ``PQSYSTEM_LOG_LEVEL`` the package logger
    is reset to silent.
    """
    resolved_level = resolve_log_level(level, verbosity)
    # Repeated CLI calls must not keep writing to a stale stderr stream.
    logger.handlers = []
    logger.propagate = False

    if not resolved_level:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, resolved_level.upper(), logging.INFO))
