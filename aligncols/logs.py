import logging
import sys
from typing import Any

import structlog


def setup_logging(verbose: bool = False) -> None:
    """
    Configure structlog for the CLI.

    Logs go to stderr since stdout carries the aligned text. Only warnings
    are shown unless verbose is set.
    """
    processors: list[Any] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(colors=False),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if verbose else logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


# library use without the CLI still keeps stdout clean
setup_logging()

log = structlog.get_logger()
