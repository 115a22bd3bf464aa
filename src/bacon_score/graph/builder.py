"""Graph construction from the line-oriented movie dataset.

Dataset format:

    Movie: Footloose
    Kevin Bacon
    John Lithgow

    Movie: Diner
    Kevin Bacon

A line containing ``:`` starts a movie block; the title is what follows the
first colon and its separating space. Every other line up to the next
heading names one actor of that movie. Lines starting with whitespace
(blank lines included) separate blocks and are skipped.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from ..exceptions import FileOpenError, MalformedInputError, OutOfMemoryError
from ..logging_config import get_logger
from .models import Movie
from .store import EntityStore

logger = get_logger(__name__)

MOVIE_SEPARATOR = ":"


def is_movie_heading(line: str) -> bool:
    return MOVIE_SEPARATOR in line


def parse_movie_title(line: str) -> str:
    """Return the title from a heading line: the text after ``": "``.

    Only the single character following the colon is dropped; the rest is
    kept verbatim.
    """
    start = line.index(MOVIE_SEPARATOR) + 2
    return line[start:]


def _strip_newline(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def parse_dataset(lines: Iterable[str], store: Optional[EntityStore] = None) -> EntityStore:
    """Build a graph from dataset lines.

    Args:
        lines: Dataset lines, with or without trailing newlines
        store: Existing store to extend (a fresh one by default)

    Returns:
        The populated EntityStore

    Raises:
        MalformedInputError: If an actor line precedes the first movie heading
        OutOfMemoryError: If allocation fails during the build
    """
    if store is None:
        store = EntityStore()

    current: Optional[Movie] = None
    duplicates = 0

    try:
        for line_number, raw in enumerate(lines, start=1):
            if not raw or raw[0].isspace():
                continue

            line = _strip_newline(raw)

            if is_movie_heading(line):
                if current is not None:
                    store.register_movie(current)
                current = store.new_movie(parse_movie_title(line))
                continue

            if current is None:
                raise MalformedInputError(line_number, line)

            actor = store.get_or_create_actor(line)
            if not store.link(actor, current):
                duplicates += 1
                logger.debug(
                    "Line %d: %r already listed in %r, skipped", line_number, line, current.name
                )

        if current is not None:
            store.register_movie(current)
    except MemoryError:
        raise OutOfMemoryError("building the movie graph") from None

    stats = store.stats()
    logger.debug(
        "Built graph: %d actors, %d movies, %d memberships (%d duplicate lines)",
        stats.actor_count,
        stats.movie_count,
        stats.membership_count,
        duplicates,
    )
    return store


def load_dataset(path: Path, encoding: str = "utf-8") -> EntityStore:
    """Open and parse a dataset file.

    Raises:
        FileOpenError: If the file cannot be opened or decoded
        MalformedInputError: If the file content is malformed
        OutOfMemoryError: If allocation fails during the build
    """
    path = Path(path)
    logger.debug("Loading dataset %s", path)
    try:
        with open(path, encoding=encoding, newline="") as f:
            return parse_dataset(f)
    except OSError as e:
        raise FileOpenError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise FileOpenError(path, f"not valid {encoding} text: {e.reason}") from e
