from __future__ import annotations

import logging
import sys
from typing import Iterable

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

LOG_LEVEL_CHOICES: Iterable[str] = tuple(LOG_LEVELS.keys())

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def add_logging_args(parser) -> None:
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVEL_CHOICES,
        help="Set log verbosity (debug, info, warning, error, critical)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    parser.add_argument("-q", "--quiet", action="count", default=0, help="Reduce log verbosity")


def resolve_log_level(log_level: str | None = None, verbose: int = 0, quiet: int = 0, base: int = logging.INFO) -> int:
    """Resolve a numeric level from an explicit name or from -v/-q counts around ``base``."""
    if log_level:
        return LOG_LEVELS[log_level.lower()]
    level = base - 10 * (verbose - quiet)
    return min(max(level, logging.DEBUG), logging.CRITICAL)


def configure_logging(log_level: str | None = None, verbose: int = 0, quiet: int = 0, base: int = logging.INFO) -> int:
    """Configure root logging on stderr and return the active level."""
    level = resolve_log_level(log_level=log_level, verbose=verbose, quiet=quiet, base=base)
    root_logger = logging.getLogger()

    if root_logger.handlers:
        root_logger.setLevel(level)
        for handler in root_logger.handlers:
            handler.setLevel(level)
        return level

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", stream=sys.stderr)
    return level
