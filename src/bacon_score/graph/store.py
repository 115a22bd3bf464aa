"""EntityStore: the single owner of all actors and movies.

Actors and movies live in two append-only arenas (lists indexed by id).
Membership is stored twice, as ``Actor.movies`` and ``Movie.cast``, and the
two sides are always updated together by ``link``.

Usage:
    store = EntityStore()
    movie = store.new_movie("Footloose")
    store.link(store.get_or_create_actor("Kevin Bacon"), movie)
    store.register_movie(movie)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from ..exceptions import GraphIntegrityError
from .models import Actor, GraphStats, Movie


class EntityStore:
    """Registry of actors (unique by name) and movies (insertion ordered)."""

    def __init__(self) -> None:
        self._actors: list[Actor] = []
        self._actor_index: dict[str, int] = {}
        self._movies: list[Movie] = []
        self._next_movie_id = 0
        # Per-movie cast ids for O(1) duplicate checks in link()
        self._cast_ids: dict[int, set[int]] = {}

    # ── Actors ─────────────────────────────────────────────────────

    def find_actor(self, name: str) -> Optional[Actor]:
        """Exact, case-sensitive lookup by name."""
        idx = self._actor_index.get(name)
        return self._actors[idx] if idx is not None else None

    def get_or_create_actor(self, name: str) -> Actor:
        actor = self.find_actor(name)
        if actor is None:
            actor = Actor(id=len(self._actors), name=name)
            self.register_actor(actor)
        return actor

    def register_actor(self, actor: Actor) -> None:
        """Append ``actor`` to the arena. Its id must be the next free slot."""
        if actor.name in self._actor_index:
            raise GraphIntegrityError(f"duplicate actor name {actor.name!r}")
        if actor.id != len(self._actors):
            raise GraphIntegrityError(
                f"actor {actor.name!r} has id {actor.id}, expected {len(self._actors)}"
            )
        self._actors.append(actor)
        self._actor_index[actor.name] = actor.id

    def actor(self, actor_id: int) -> Actor:
        return self._actors[actor_id]

    @property
    def actors(self) -> Iterator[Actor]:
        return iter(self._actors)

    @property
    def actor_names(self) -> list[str]:
        return [a.name for a in self._actors]

    # ── Movies ─────────────────────────────────────────────────────

    def new_movie(self, name: str) -> Movie:
        """Allocate an unregistered movie with the next id.

        Titles are not deduplicated: two headings with the same title give
        two distinct movies.
        """
        movie = Movie(id=self._next_movie_id, name=name)
        self._next_movie_id += 1
        self._cast_ids[movie.id] = set()
        return movie

    def register_movie(self, movie: Movie) -> None:
        if movie.id != len(self._movies):
            raise GraphIntegrityError(
                f"movie {movie.name!r} has id {movie.id}, expected {len(self._movies)}"
            )
        self._movies.append(movie)

    def movie(self, movie_id: int) -> Movie:
        return self._movies[movie_id]

    @property
    def movies(self) -> Iterator[Movie]:
        return iter(self._movies)

    # ── Membership ─────────────────────────────────────────────────

    def link(self, actor: Actor, movie: Movie) -> bool:
        """Add ``actor`` to ``movie``'s cast and ``movie`` to ``actor``'s movies.

        Returns False, changing nothing, if the actor is already in the cast.
        Actor names are unique in the store, so this also rejects a repeated
        name.
        """
        cast_ids = self._cast_ids.setdefault(movie.id, set())
        if actor.id in cast_ids:
            return False
        cast_ids.add(actor.id)
        movie.cast.append(actor.id)
        actor.movies.append(movie.id)
        return True

    def co_stars(self, actor: Actor) -> Iterator[tuple[Movie, Actor]]:
        """Yield (movie, co-star) pairs in insertion order, movies first.

        The actor itself appears among its own co-stars; callers filter.
        """
        for movie_id in actor.movies:
            movie = self._movies[movie_id]
            for cast_id in movie.cast:
                yield movie, self._actors[cast_id]

    # ── Introspection ──────────────────────────────────────────────

    def stats(self) -> GraphStats:
        return GraphStats(
            actor_count=len(self._actors),
            movie_count=len(self._movies),
            membership_count=sum(len(m.cast) for m in self._movies),
        )

    def check_integrity(self) -> None:
        """Verify every membership is recorded on both sides.

        Raises:
            GraphIntegrityError: on the first inconsistency found
        """
        for movie in self._movies:
            for actor_id in movie.cast:
                if movie.id not in self._actors[actor_id].movies:
                    raise GraphIntegrityError(
                        f"{self._actors[actor_id].name!r} is in the cast of "
                        f"{movie.name!r} but does not list it"
                    )
        for actor in self._actors:
            for movie_id in actor.movies:
                if movie_id >= len(self._movies):
                    raise GraphIntegrityError(
                        f"{actor.name!r} lists unregistered movie id {movie_id}"
                    )
                if actor.id not in self._movies[movie_id].cast:
                    raise GraphIntegrityError(
                        f"{actor.name!r} lists {self._movies[movie_id].name!r} "
                        f"but is not in its cast"
                    )

    def __len__(self) -> int:
        return len(self._actors)

    def __contains__(self, name: object) -> bool:
        return name in self._actor_index
