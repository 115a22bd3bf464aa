"""CLI entry point.

Typer reports command-line usage errors (unknown options and the like) with
exit status 2; ``main`` folds that into 1 like every other failure.
"""

import sys
from typing import Optional

import typer

app = typer.Typer(
    name="bacon-score",
    help="Bacon Score - degrees of separation from Kevin Bacon",
    add_completion=False,
    rich_markup_mode="rich",
)

USAGE_ERROR_EXIT_CODE = 2


# Import the command to register it
from .score import score as _score  # noqa: F401, E402


def main(argv: Optional[list[str]] = None) -> None:
    try:
        app(args=argv, prog_name="bacon-score")
    except SystemExit as e:
        sys.exit(1 if e.code == USAGE_ERROR_EXIT_CODE else e.code)
    sys.exit(0)
