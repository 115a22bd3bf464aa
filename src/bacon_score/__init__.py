"""
Bacon Score - degrees of separation in a movie/actor graph.

Builds an in-memory graph from a line-oriented movie dataset and answers,
per query, how many shared-movie hops separate an actor from Kevin Bacon.
"""

__version__ = "0.1.0"

from .graph import EntityStore, load_dataset, parse_dataset, shortest_distance, shortest_path
from .query import BaconScorer, QueryResult, QuerySummary

__all__ = [
    "BaconScorer",  # Main entry point
    "EntityStore",
    "QueryResult",
    "QuerySummary",
    "load_dataset",
    "parse_dataset",
    "shortest_distance",
    "shortest_path",
]
