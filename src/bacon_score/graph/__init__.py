"""Movie graph: entity store, dataset builder and breadth-first search."""

from .builder import load_dataset, parse_dataset
from .models import UNREACHABLE, Actor, GraphStats, Movie, PathStep
from .store import EntityStore
from .traversal import levels_from, shortest_distance, shortest_path

__all__ = [
    "Actor",
    "EntityStore",
    "GraphStats",
    "Movie",
    "PathStep",
    "UNREACHABLE",
    "levels_from",
    "load_dataset",
    "parse_dataset",
    "shortest_distance",
    "shortest_path",
]
