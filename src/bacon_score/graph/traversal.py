"""Breadth-first search over the actor co-appearance graph.

Two actors are adjacent when they share at least one movie. Adjacency is
never materialized: each dequeued actor walks its movies, then each movie's
cast, both in insertion order. That order makes results repeatable for a
given dataset.

Traversal state (actor id -> level) is local to each call, so searches
never write to the store and may run concurrently against one graph.
"""

from collections import deque
from typing import Optional

from .models import UNREACHABLE, Actor, PathStep
from .store import EntityStore


def shortest_distance(store: EntityStore, source: Actor, target: Actor) -> int:
    """Number of shared-movie hops between two actors.

    Returns 0 when ``source`` is ``target`` and ``UNREACHABLE`` (-1) when no
    chain of movies joins them. The search stops as soon as the target is
    first discovered.
    """
    if source is target:
        return 0

    level: dict[int, int] = {source.id: 0}
    queue: deque[Actor] = deque([source])

    while queue:
        actor = queue.popleft()
        next_level = level[actor.id] + 1
        for _movie, co_star in store.co_stars(actor):
            if co_star.id in level:
                continue
            level[co_star.id] = next_level
            if co_star is target:
                return next_level
            queue.append(co_star)

    return UNREACHABLE


def shortest_path(store: EntityStore, source: Actor, target: Actor) -> Optional[list[PathStep]]:
    """Shortest chain of movies from ``source`` to ``target``.

    Runs the same search as ``shortest_distance`` while remembering, for
    each discovered actor, who discovered it and through which movie. The
    path is rebuilt by walking those links back from the target.

    Returns:
        One PathStep per hop (empty when source is target), or None when
        the target is unreachable.
    """
    if source is target:
        return []

    # actor id -> (predecessor id, connecting movie id)
    parent: dict[int, tuple[int, int]] = {}
    seen: set[int] = {source.id}
    queue: deque[Actor] = deque([source])

    while queue:
        actor = queue.popleft()
        for movie, co_star in store.co_stars(actor):
            if co_star.id in seen:
                continue
            seen.add(co_star.id)
            parent[co_star.id] = (actor.id, movie.id)
            if co_star is target:
                return _backtrack(store, parent, source, target)
            queue.append(co_star)

    return None


def _backtrack(
    store: EntityStore,
    parent: dict[int, tuple[int, int]],
    source: Actor,
    target: Actor,
) -> list[PathStep]:
    steps: list[PathStep] = []
    current = target.id
    while current != source.id:
        prev, movie_id = parent[current]
        steps.append(
            PathStep(
                actor=store.actor(prev).name,
                movie=store.movie(movie_id).name,
                co_star=store.actor(current).name,
            )
        )
        current = prev
    steps.reverse()
    return steps


def levels_from(store: EntityStore, source: Actor) -> dict[int, int]:
    """Level of every actor reachable from ``source`` (full search, no early exit).

    Actors absent from the result are unreachable.
    """
    level: dict[int, int] = {source.id: 0}
    queue: deque[Actor] = deque([source])

    while queue:
        actor = queue.popleft()
        next_level = level[actor.id] + 1
        for _movie, co_star in store.co_stars(actor):
            if co_star.id not in level:
                level[co_star.id] = next_level
                queue.append(co_star)

    return level
