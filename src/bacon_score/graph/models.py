"""Data models for the actor/movie graph.

The graph is bipartite in storage (actors and movies) and unipartite in use:
two actors are adjacent when they share a movie. Entities refer to each
other by integer id into the store's arenas, never by object reference.
"""

from dataclasses import dataclass, field

# Distance reported when no chain of shared movies connects two actors
UNREACHABLE = -1


@dataclass
class Actor:
    """A graph node. Identity is the name; ``id`` is its arena slot."""

    id: int
    name: str
    movies: list[int] = field(default_factory=list)  # movie ids, insertion order


@dataclass
class Movie:
    """A grouping entity. Every pair of actors in ``cast`` is adjacent."""

    id: int
    name: str
    cast: list[int] = field(default_factory=list)  # actor ids, insertion order


@dataclass(frozen=True)
class PathStep:
    """One hop of a shortest path: ``actor`` appeared in ``movie`` with ``co_star``."""

    actor: str
    movie: str
    co_star: str


@dataclass(frozen=True)
class GraphStats:
    """Size summary of a built graph."""

    actor_count: int
    movie_count: int
    membership_count: int  # total actor-movie links (sum of cast sizes)
