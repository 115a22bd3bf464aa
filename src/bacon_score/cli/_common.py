"""Shared CLI helpers."""

from rich.console import Console

from ..exceptions import ActorNotFoundError
from ..graph import EntityStore, PathStep

# Scores go to stdout through typer.echo; everything human-facing goes here.
err_console = Console(stderr=True, highlight=False)


def report_not_found(error: ActorNotFoundError) -> None:
    err_console.print(f"[red]{error.message}[/red]", end="")
    err_console.print(f" ({error.name})", markup=False)
    if len(error.suggestions) == 1:
        err_console.print(f"  Did you mean: {error.suggestions[0]}?", markup=False)
    elif error.suggestions:
        err_console.print("  Did you mean one of these?")
        for s in error.suggestions:
            err_console.print(f"    - {s}", markup=False)


def format_step(step: PathStep) -> str:
    return f"  {step.actor} was in {step.movie} with {step.co_star}"


def dump_lines(store: EntityStore) -> list[str]:
    """Every movie followed by its cast, one line each."""
    lines: list[str] = []
    for movie in store.movies:
        lines.append(f"MOVIE: {movie.name}")
        for actor_id in movie.cast:
            lines.append(f"\tACTOR: {store.actor(actor_id).name}")
    return lines
