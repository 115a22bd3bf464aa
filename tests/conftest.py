"""Shared fixtures for Bacon Score tests."""

import pytest

from bacon_score.graph import parse_dataset


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def footloose_lines():
    """One movie, two actors."""
    return ["Movie: Footloose\n", "Kevin Bacon\n", "John Lithgow\n"]


@pytest.fixture
def chain_lines():
    """A = {X, Kevin Bacon}, B = {X, Y}: Y is two hops from Kevin Bacon."""
    return [
        "Movie: A\n",
        "X\n",
        "Kevin Bacon\n",
        "\n",
        "Movie: B\n",
        "X\n",
        "Y\n",
    ]


@pytest.fixture
def no_bacon_lines():
    """Dataset without the reference actor."""
    return ["Movie: Diner\n", "Mickey Rourke\n", "Daniel Stern\n"]


@pytest.fixture
def disconnected_lines():
    """Two islands: {Kevin Bacon, Tom Hanks} and {Meryl Streep, Cher}."""
    return [
        "Movie: Apollo 13\n",
        "Kevin Bacon\n",
        "Tom Hanks\n",
        "\n",
        "Movie: Silkwood\n",
        "Meryl Streep\n",
        "Cher\n",
    ]


@pytest.fixture
def web_lines():
    """Small web with a shortcut, a long arm and an isolated actor.

    Kevin Bacon - A (M1), A - B (M2), B - C (M3), C - D (M4),
    Kevin Bacon - C (M5, shortcut), E alone in M6.
    """
    return [
        "Movie: M1\n",
        "Kevin Bacon\n",
        "A\n",
        "Movie: M2\n",
        "A\n",
        "B\n",
        "Movie: M3\n",
        "B\n",
        "C\n",
        "Movie: M4\n",
        "C\n",
        "D\n",
        "Movie: M5\n",
        "Kevin Bacon\n",
        "C\n",
        "Movie: M6\n",
        "E\n",
    ]


@pytest.fixture
def footloose_store(footloose_lines):
    return parse_dataset(footloose_lines)


@pytest.fixture
def chain_store(chain_lines):
    return parse_dataset(chain_lines)


@pytest.fixture
def web_store(web_lines):
    return parse_dataset(web_lines)


@pytest.fixture
def write_dataset(tmp_path):
    """Write dataset lines to a temp file and return its path."""

    def _write(lines, name="movies.txt"):
        path = tmp_path / name
        path.write_text("".join(lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files and BACON_* variables out of a test."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    for key in (
        "BACON_REFERENCE_ACTOR",
        "BACON_ENCODING",
        "BACON_SHOW_PATH",
        "BACON_SUGGESTIONS",
        "BACON_VERBOSITY",
    ):
        monkeypatch.delenv(key, raising=False)
