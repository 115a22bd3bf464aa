"""Tests for graph/traversal.py.

Distances are checked against a brute-force all-pairs computation on the
explicit actor adjacency.
"""

import itertools
import random

import pytest

from bacon_score.graph import (
    UNREACHABLE,
    EntityStore,
    levels_from,
    parse_dataset,
    shortest_distance,
    shortest_path,
)


def brute_force_distances(store: EntityStore) -> dict[tuple[int, int], int]:
    """Floyd-Warshall over actors adjacent through any shared movie."""
    ids = [a.id for a in store.actors]
    inf = float("inf")
    dist = {(a, b): (0 if a == b else inf) for a in ids for b in ids}
    for movie in store.movies:
        for a, b in itertools.permutations(movie.cast, 2):
            dist[(a, b)] = 1
    for k in ids:
        for i in ids:
            for j in ids:
                if dist[(i, k)] + dist[(k, j)] < dist[(i, j)]:
                    dist[(i, j)] = dist[(i, k)] + dist[(k, j)]
    return {key: (UNREACHABLE if d == inf else int(d)) for key, d in dist.items()}


def random_dataset(seed: int, actors: int, movies: int, max_cast: int) -> list[str]:
    rng = random.Random(seed)
    names = [f"Actor {i}" for i in range(actors)]
    lines = []
    for m in range(movies):
        lines.append(f"Movie: Film {m}\n")
        for name in rng.sample(names, rng.randint(1, max_cast)):
            lines.append(f"{name}\n")
    return lines


class TestShortestDistance:
    def test_footloose(self, footloose_store):
        bacon = footloose_store.find_actor("Kevin Bacon")
        lithgow = footloose_store.find_actor("John Lithgow")
        assert shortest_distance(footloose_store, bacon, lithgow) == 1

    def test_self_distance_zero(self, web_store):
        for actor in web_store.actors:
            assert shortest_distance(web_store, actor, actor) == 0

    def test_two_hops(self, chain_store):
        bacon = chain_store.find_actor("Kevin Bacon")
        y = chain_store.find_actor("Y")
        assert shortest_distance(chain_store, bacon, y) == 2

    def test_shortcut_wins(self, web_store):
        bacon = web_store.find_actor("Kevin Bacon")
        assert shortest_distance(web_store, bacon, web_store.find_actor("C")) == 1
        assert shortest_distance(web_store, bacon, web_store.find_actor("D")) == 2
        assert shortest_distance(web_store, bacon, web_store.find_actor("B")) == 2

    def test_unreachable(self, disconnected_lines):
        store = parse_dataset(disconnected_lines)
        bacon = store.find_actor("Kevin Bacon")
        assert shortest_distance(store, bacon, store.find_actor("Cher")) == UNREACHABLE
        assert shortest_distance(store, store.find_actor("Cher"), bacon) == UNREACHABLE

    def test_isolated_actor(self, web_store):
        bacon = web_store.find_actor("Kevin Bacon")
        assert shortest_distance(web_store, bacon, web_store.find_actor("E")) == UNREACHABLE

    def test_cycle_terminates(self):
        lines = [
            "Movie: 1\n", "A\n", "B\n",
            "Movie: 2\n", "B\n", "C\n",
            "Movie: 3\n", "C\n", "A\n",
            "Movie: 4\n", "Z\n",
        ]
        store = parse_dataset(lines)
        a, z = store.find_actor("A"), store.find_actor("Z")
        assert shortest_distance(store, a, z) == UNREACHABLE

    def test_repeated_queries_agree(self, web_store):
        bacon = web_store.find_actor("Kevin Bacon")
        d = web_store.find_actor("D")
        first = shortest_distance(web_store, bacon, d)
        e = web_store.find_actor("E")
        shortest_distance(web_store, bacon, e)
        assert shortest_distance(web_store, bacon, d) == first

    def test_search_does_not_mutate_store(self, web_store):
        before = [(a.name, list(a.movies)) for a in web_store.actors]
        bacon = web_store.find_actor("Kevin Bacon")
        for actor in web_store.actors:
            shortest_distance(web_store, bacon, actor)
            shortest_path(web_store, bacon, actor)
        assert [(a.name, list(a.movies)) for a in web_store.actors] == before

    def test_symmetric(self, web_store):
        actors = list(web_store.actors)
        for a, b in itertools.combinations(actors, 2):
            assert shortest_distance(web_store, a, b) == shortest_distance(web_store, b, a)

    def test_matches_brute_force(self, web_store, chain_store, footloose_store):
        for store in (web_store, chain_store, footloose_store):
            expected = brute_force_distances(store)
            for a in store.actors:
                for b in store.actors:
                    assert shortest_distance(store, a, b) == expected[(a.id, b.id)]

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_matches_brute_force_random(self, seed):
        store = parse_dataset(random_dataset(seed, actors=15, movies=8, max_cast=3))
        expected = brute_force_distances(store)
        for a in store.actors:
            for b in store.actors:
                assert shortest_distance(store, a, b) == expected[(a.id, b.id)]

    @pytest.mark.slow
    def test_matches_brute_force_large(self):
        store = parse_dataset(random_dataset(42, actors=80, movies=60, max_cast=4))
        expected = brute_force_distances(store)
        for a in store.actors:
            for b in store.actors:
                assert shortest_distance(store, a, b) == expected[(a.id, b.id)]


class TestShortestPath:
    def test_same_actor_empty_path(self, web_store):
        bacon = web_store.find_actor("Kevin Bacon")
        assert shortest_path(web_store, bacon, bacon) == []

    def test_unreachable_is_none(self, web_store):
        bacon = web_store.find_actor("Kevin Bacon")
        assert shortest_path(web_store, bacon, web_store.find_actor("E")) is None

    def test_two_hop_path(self, chain_store):
        bacon = chain_store.find_actor("Kevin Bacon")
        path = shortest_path(chain_store, bacon, chain_store.find_actor("Y"))
        assert [(s.actor, s.movie, s.co_star) for s in path] == [
            ("Kevin Bacon", "A", "X"),
            ("X", "B", "Y"),
        ]

    def test_path_uses_shortcut(self, web_store):
        bacon = web_store.find_actor("Kevin Bacon")
        path = shortest_path(web_store, bacon, web_store.find_actor("D"))
        assert [(s.actor, s.movie, s.co_star) for s in path] == [
            ("Kevin Bacon", "M5", "C"),
            ("C", "M4", "D"),
        ]

    def test_path_length_equals_distance(self, web_store):
        bacon = web_store.find_actor("Kevin Bacon")
        for actor in web_store.actors:
            path = shortest_path(web_store, bacon, actor)
            distance = shortest_distance(web_store, bacon, actor)
            if distance == UNREACHABLE:
                assert path is None
            else:
                assert len(path) == distance

    def test_path_steps_chain(self, web_store):
        bacon = web_store.find_actor("Kevin Bacon")
        path = shortest_path(web_store, bacon, web_store.find_actor("B"))
        assert path[0].actor == "Kevin Bacon"
        assert path[-1].co_star == "B"
        for prev, step in zip(path, path[1:]):
            assert prev.co_star == step.actor


class TestLevelsFrom:
    def test_levels(self, web_store):
        bacon = web_store.find_actor("Kevin Bacon")
        levels = levels_from(web_store, bacon)
        named = {web_store.actor(i).name: lvl for i, lvl in levels.items()}
        assert named == {"Kevin Bacon": 0, "A": 1, "C": 1, "B": 2, "D": 2}

    def test_levels_agree_with_distance(self, web_store):
        for source in web_store.actors:
            levels = levels_from(web_store, source)
            for target in web_store.actors:
                expected = shortest_distance(web_store, source, target)
                assert levels.get(target.id, UNREACHABLE) == expected
