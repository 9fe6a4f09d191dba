"""Stderr logging for the lighthouse-graph CLI.

Library modules only create `logging.getLogger(__name__)` loggers; nothing
is emitted until a host (the CLI's --verbose flag) attaches a handler here.
"""

import logging
import sys

PACKAGE_LOGGER = "lighthousegraph"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> None:
    """Route lighthousegraph records (fetches, rebuilds, layout settling) to stderr.

    Repeat calls only change the level, so the CLI callback can run once
    per invocation without stacking handlers.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
