"""Query driver: scores actor names against the reference actor.

Each query is independent. An unknown name fails that query alone; the
summary collects the failures so the caller can pick an exit status.
"""

from __future__ import annotations

import difflib
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Optional

from .config import DEFAULT_REFERENCE_ACTOR
from .exceptions import ActorNotFoundError
from .graph import (
    UNREACHABLE,
    EntityStore,
    PathStep,
    levels_from,
    shortest_distance,
    shortest_path,
)
from .logging_config import get_logger

logger = get_logger(__name__)

NO_BACON = "No Bacon!"


@dataclass(frozen=True)
class QueryResult:
    """Outcome of one successful lookup."""

    name: str
    distance: int
    path: Optional[list[PathStep]] = None

    @property
    def reachable(self) -> bool:
        return self.distance != UNREACHABLE

    @property
    def display_score(self) -> str:
        return str(self.distance) if self.reachable else NO_BACON


@dataclass
class QuerySummary:
    """All results of a query run, in input order."""

    results: list[QueryResult] = field(default_factory=list)
    not_found: list[ActorNotFoundError] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        return 1 if self.not_found else 0


def did_you_mean(
    unknown: str,
    candidates: list[str],
    threshold: float = 0.6,
    max_suggestions: int = 3,
) -> list[str]:
    """Close matches for an unknown name, best first."""
    if max_suggestions <= 0:
        return []
    return list(difflib.get_close_matches(unknown, candidates, n=max_suggestions, cutoff=threshold))


class BaconScorer:
    """Answers "how far is this actor from the reference actor?".

    The reference actor is resolved once. If it is not in the graph, every
    known actor scores as unreachable and no search runs.
    """

    def __init__(
        self,
        store: EntityStore,
        reference: str = DEFAULT_REFERENCE_ACTOR,
        suggestions: int = 3,
    ) -> None:
        self.store = store
        self.reference = store.find_actor(reference)
        self.suggestions = suggestions
        self._names_by_initial: Optional[dict[str, list[str]]] = None

        if self.reference is None:
            logger.warning("Reference actor %r is not in the dataset", reference)
        elif logger.isEnabledFor(logging.DEBUG):
            reachable = len(levels_from(store, self.reference)) - 1
            logger.debug(
                "%d of %d other actors are connected to %s", reachable, len(store) - 1, reference
            )

    def score(self, name: str, with_path: bool = False) -> QueryResult:
        """Score one actor name.

        Raises:
            ActorNotFoundError: If no actor has exactly this name
        """
        actor = self.store.find_actor(name)
        if actor is None:
            raise ActorNotFoundError(name, self._suggest(name))

        if self.reference is None:
            return QueryResult(name=name, distance=UNREACHABLE, path=None)

        if with_path:
            path = shortest_path(self.store, self.reference, actor)
            distance = len(path) if path is not None else UNREACHABLE
            return QueryResult(name=name, distance=distance, path=path)

        return QueryResult(name=name, distance=shortest_distance(self.store, self.reference, actor))

    def _suggest(self, name: str) -> list[str]:
        """Close matches among actors whose name shares the query's first letter."""
        if self.suggestions <= 0 or not name:
            return []
        if self._names_by_initial is None:
            self._names_by_initial = {}
            for actor_name in self.store.actor_names:
                self._names_by_initial.setdefault(actor_name[:1].casefold(), []).append(actor_name)
        candidates = self._names_by_initial.get(name[:1].casefold(), [])
        return did_you_mean(name, candidates, max_suggestions=self.suggestions)

    def run_queries(
        self,
        names: Iterable[str],
        with_path: bool = False,
        on_result: Optional[Callable[[QueryResult], None]] = None,
        on_not_found: Optional[Callable[[ActorNotFoundError], None]] = None,
    ) -> QuerySummary:
        """Score every name, isolating not-found errors per query.

        Args:
            names: Actor names; a trailing newline on each is removed
            with_path: Also reconstruct the chain of movies
            on_result: Called with each result as soon as it is computed
            on_not_found: Called with each not-found error as it happens

        Returns:
            QuerySummary with results and failures in input order
        """
        summary = QuerySummary()
        for raw in names:
            name = raw[:-1] if raw.endswith("\n") else raw
            try:
                result = self.score(name, with_path=with_path)
            except ActorNotFoundError as e:
                logger.debug("Query %r: %s", name, e)
                summary.not_found.append(e)
                if on_not_found is not None:
                    on_not_found(e)
                continue
            summary.results.append(result)
            if on_result is not None:
                on_result(result)
        return summary
