"""
Logging configuration for Bacon Score.

Scores are the program's output and go to stdout; every log record goes to
stderr through rich so the two never interleave on one stream.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import Verbosity

_LEVELS: dict[str, int] = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: Verbosity = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure logging for a CLI run.

    Args:
        verbosity: "verbose" for DEBUG (graph build summary, per-query misses),
            "quiet" for ERROR only, "normal" for WARNING
        log_file: Optional file path to also write logs to

    Returns:
        Configured logger instance for bacon_score
    """
    level = _LEVELS[verbosity]
    verbose = verbosity == "verbose"

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            # Actor names and titles may contain [brackets]
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=handlers)

    logger = logging.getLogger("bacon_score")
    logger.setLevel(level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the ``bacon_score`` namespace.

    Args:
        name: Module name, e.g. 'bacon_score.graph.builder' or 'graph.builder'

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger("bacon_score")

    if not name.startswith("bacon_score"):
        name = f"bacon_score.{name}"

    return logging.getLogger(name)
