"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for testing the citegraph project.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -v                 # Verbose output
    pytest tests/ -k "density"       # Run only density tests
    pytest tests/ --quick            # Quick subset
"""

import random
import sys
from pathlib import Path
from typing import List, Tuple

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from citegraph.core import Graph


# =============================================================================
# Custom Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


def pytest_addoption(parser):
    """Add custom command line options"""
    parser.addoption(
        "--quick",
        action="store_true",
        default=False,
        help="Skip slow tests",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests if --quick is specified"""
    if config.getoption("--quick"):
        skip_slow = pytest.mark.skip(reason="Skipped with --quick")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


# =============================================================================
# Graph Fixtures
# =============================================================================

def make_graph(adjacency: List[List[int]]) -> Graph:
    """Graph whose id_map is the identity."""
    n = len(adjacency)
    return Graph.construct(n, adjacency, list(range(n)))


@pytest.fixture
def two_vertex_graph() -> Graph:
    """0 -> 1"""
    return make_graph([[1], []])


@pytest.fixture
def four_vertex_graph() -> Graph:
    """4 vertices, 5 edges: 0->1, 0->2, 1->0, 1->2, 2->3"""
    return make_graph([[1, 2], [0, 2], [3], []])


@pytest.fixture
def two_cluster_graph() -> Graph:
    """Cluster {0, 1} (0->1), cluster {2, 3, 4} (2->3, 2->4, 3->2), isolated 5."""
    return make_graph([[1], [], [3, 4], [2], [], []])


@pytest.fixture
def two_cluster_labels() -> List:
    return [1, 1, 2, 2, 2, None]


@pytest.fixture
def empty_graph() -> Graph:
    return Graph.empty()


@pytest.fixture
def random_graph() -> Graph:
    """Seeded random digraph with 60 vertices and some duplicate edges."""
    rng = random.Random(42)
    n = 60
    adjacency = [[] for _ in range(n)]
    for _ in range(150):
        u, v = rng.randrange(n), rng.randrange(n)
        adjacency[u].append(v)
    for neighbors in adjacency:
        neighbors.sort()
    return make_graph(adjacency)


# =============================================================================
# File Fixtures
# =============================================================================

def write_edges(path: Path, edges: List[Tuple[int, int]]) -> Path:
    path.write_text("".join(f"{u} {v}\n" for u, v in edges))
    return path


@pytest.fixture
def citation_edges() -> List[Tuple[int, int]]:
    """
    Small citation file with external paper ids.

    Papers 9901 and 9902 cite each other and 9903; 9904 cites 9905;
    9906 and 9907 only appear as cited papers.
    """
    return [
        (9901, 9902),
        (9901, 9903),
        (9902, 9901),
        (9902, 9903),
        (9903, 9906),
        (9904, 9905),
        (9905, 9904),
        (9904, 9907),
    ]


@pytest.fixture
def citation_file(tmp_path, citation_edges) -> Path:
    return write_edges(tmp_path / "citations.txt", citation_edges)
