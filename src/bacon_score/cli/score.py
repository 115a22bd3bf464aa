"""Score command: load a dataset, then answer actor queries from stdin."""

import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from .. import __version__
from ..config import load_config
from ..exceptions import BaconScoreError, CLIUsageError
from ..graph import load_dataset
from ..logging_config import setup_logging
from ..query import BaconScorer, QueryResult
from . import app
from ._common import dump_lines, err_console, format_step, report_not_found


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"bacon-score {__version__}")
        raise typer.Exit(0)


@app.command()
def score(
    dataset: Optional[List[Path]] = typer.Argument(
        None,
        help="Movie dataset: 'Movie: <title>' headings followed by one actor per line",
        show_default=False,
    ),
    show_path: int = typer.Option(
        0,
        "-l",
        "--show-path",
        count=True,
        help="Also print the chain of movies behind each score",
    ),
    reference: Optional[str] = typer.Option(
        None,
        "--reference",
        "-r",
        help="Actor to measure against (default: Kevin Bacon)",
    ),
    encoding: Optional[str] = typer.Option(
        None,
        "--encoding",
        help="Dataset text encoding (default: utf-8)",
    ),
    dump: bool = typer.Option(
        False,
        "--dump",
        help="Print every movie with its cast and exit",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        dir_okay=False,
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """
    Read actor names from stdin, one per line, and print each actor's
    Bacon number.

    Exits 1 if any queried actor is not in the dataset.

    [bold cyan]Examples:[/bold cyan]

      echo "John Lithgow" | bacon-score movies.txt

      bacon-score -l movies.txt < queries.txt
    """
    if verbose and quiet:
        err_console.print("[red]Error:[/red] --verbose and --quiet are mutually exclusive")
        raise typer.Exit(1)

    try:
        if not dataset:
            raise CLIUsageError("A dataset file is required.")
        if len(dataset) > 1:
            raise CLIUsageError("Too many Files were given.")
        if show_path > 1:
            raise CLIUsageError("Too many optional Arguments.")

        settings = load_config(
            config_file=config,
            reference_actor=reference,
            encoding=encoding,
            show_path=True if show_path else None,
            verbose=verbose,
            quiet=quiet,
        )
        logger = setup_logging(settings.verbosity, log_file=str(log_file) if log_file else None)
        logger.debug("Loaded settings: %s", settings)

        store = load_dataset(dataset[0], encoding=settings.encoding)

        if dump:
            for line in dump_lines(store):
                typer.echo(line)
            return

        scorer = BaconScorer(
            store, reference=settings.reference_actor, suggestions=settings.suggestions
        )
        summary = scorer.run_queries(
            sys.stdin,
            with_path=settings.show_path,
            on_result=_print_result,
            on_not_found=report_not_found,
        )
        logger.debug(
            "Answered %d queries, %d not found", len(summary.results), len(summary.not_found)
        )

    except BaconScoreError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(e.exit_code)

    if summary.exit_code:
        raise typer.Exit(summary.exit_code)


def _print_result(result: QueryResult) -> None:
    typer.echo(f"Score: {result.display_score}")
    if result.path:
        for step in result.path:
            typer.echo(format_step(step))
