"""
Degree Pruner

Reduces a graph to its better-connected vertices by dropping the
fraction with the lowest out-degree (a quarter by default).

Kept vertices are re-indexed in descending out-degree order, and the
pruned graph's ``id_map`` records each vertex's index in the input graph.
Among vertices with equal out-degree the one with the higher index is
kept first.

Usage:
    pruner = DegreePruner()
    denser = pruner.prune(graph)
"""

from __future__ import annotations

import logging
from typing import List

from citegraph.core.graph_model import Graph

DEFAULT_DROP_FRACTION = 0.25


class DegreePruner:
    """Keeps the ``1 - drop_fraction`` share of vertices with highest out-degree."""

    def __init__(self, drop_fraction: float = DEFAULT_DROP_FRACTION) -> None:
        if not 0.0 <= drop_fraction < 1.0:
            raise ValueError(f"drop_fraction must be in [0, 1), got {drop_fraction}")
        self.drop_fraction = drop_fraction
        self._logger = logging.getLogger(__name__)

    def keep_count(self, vertex_count: int) -> int:
        """Number of vertices that survive pruning of *vertex_count* vertices."""
        return vertex_count - int(vertex_count * self.drop_fraction)

    def select(self, graph: Graph) -> List[int]:
        """Vertices to keep, highest out-degree first."""
        by_degree = sorted(graph.degree_sequence(), key=lambda pair: pair[1])
        keep = self.keep_count(graph.vertex_count)
        return [vertex for vertex, _ in reversed(by_degree)][:keep]

    def prune(self, graph: Graph) -> Graph:
        """Return the subgraph induced by the selected vertices."""
        kept = self.select(graph)
        pruned = graph.induced_subgraph(kept)

        self._logger.info(
            "Pruned %d -> %d vertices (%d -> %d edges)",
            graph.vertex_count, pruned.vertex_count,
            graph.edge_count(), pruned.edge_count(),
        )
        return pruned


def prune(graph: Graph, drop_fraction: float = DEFAULT_DROP_FRACTION) -> Graph:
    """Convenience wrapper around ``DegreePruner(drop_fraction).prune(graph)``."""
    return DegreePruner(drop_fraction).prune(graph)
