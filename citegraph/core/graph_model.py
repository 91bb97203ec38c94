"""
Graph Model

Adjacency-list representation of a directed citation graph.

Vertices are dense zero-based indices. Each vertex keeps the list of
vertices it cites (out-edges) and the identifier it had in the parent
space (``id_map``): the external node id for a freshly loaded graph,
the parent vertex index for a pruned graph or an induced subgraph.

Density here is an out-edge measure:

    density = total out-edges / denominator

where the denominator is either the number of vertices with at least
one out-edge (``DensityDenominator.ACTIVE``) or the total number of
vertices (``DensityDenominator.VERTICES``).

Usage:
    from citegraph.core import Graph, DensityDenominator

    graph = Graph.construct(2, [[1], []], [10, 20])
    graph.degree_sequence()                          # [(0, 1), (1, 0)]
    graph.density()                                  # 1.0
    graph.density(DensityDenominator.VERTICES)       # 0.5
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Sequence, Tuple

import networkx as nx

from .exceptions import InvalidGraphError, VertexIndexError


class DensityDenominator(str, Enum):
    """Which vertices count in the denominator of ``Graph.density``."""
    ACTIVE = "active"        # vertices with nonzero out-degree
    VERTICES = "vertices"    # every vertex


@dataclass
class Graph:
    """
    Directed graph stored as adjacency lists.

    Duplicate edges between the same ordered pair are kept as-is.
    """
    vertex_count: int
    adjacency: List[List[int]] = field(default_factory=list)
    id_map: List[int] = field(default_factory=list)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def construct(
        cls,
        vertex_count: int,
        adjacency: Sequence[Sequence[int]],
        id_map: Sequence[int],
    ) -> "Graph":
        """
        Build a graph, checking the size and range invariants.

        Raises:
            InvalidGraphError: if the list lengths disagree with
                ``vertex_count`` or an edge points outside the graph.
        """
        if vertex_count < 0:
            raise InvalidGraphError(f"vertex_count must be >= 0, got {vertex_count}")
        if len(adjacency) != vertex_count or len(id_map) != vertex_count:
            raise InvalidGraphError(
                f"Expected {vertex_count} adjacency lists and ids, "
                f"got {len(adjacency)} and {len(id_map)}"
            )
        for v, neighbors in enumerate(adjacency):
            for w in neighbors:
                if not 0 <= w < vertex_count:
                    raise InvalidGraphError(
                        f"Edge {v}->{w} points outside [0, {vertex_count})"
                    )
        return cls(
            vertex_count=vertex_count,
            adjacency=[list(neighbors) for neighbors in adjacency],
            id_map=list(id_map),
        )

    @classmethod
    def empty(cls) -> "Graph":
        return cls(vertex_count=0, adjacency=[], id_map=[])

    # ------------------------------------------------------------------
    # Structural queries
    # ------------------------------------------------------------------

    def out_degree(self, vertex: int) -> int:
        self._check_vertex(vertex)
        return len(self.adjacency[vertex])

    def degree_sequence(self) -> List[Tuple[int, int]]:
        """(vertex, out_degree) pairs in vertex-index order."""
        return [(v, len(neighbors)) for v, neighbors in enumerate(self.adjacency)]

    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self.adjacency)

    def active_vertex_count(self) -> int:
        """Number of vertices with at least one out-edge."""
        return sum(1 for neighbors in self.adjacency if neighbors)

    def density(self, denominator: DensityDenominator = DensityDenominator.ACTIVE) -> float:
        """
        Total out-edges divided by the chosen vertex count.

        Returns 0.0 when the denominator is zero (empty or edgeless graph
        under ACTIVE, empty graph under VERTICES).
        """
        denominator = DensityDenominator(denominator)
        if denominator is DensityDenominator.ACTIVE:
            total_vertices = self.active_vertex_count()
        else:
            total_vertices = self.vertex_count

        if total_vertices == 0:
            return 0.0
        return self.edge_count() / total_vertices

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def remove_vertex(self, vertex: int) -> None:
        """
        Isolate *vertex*: drop its out-edges and every edge pointing to it.

        The vertex keeps its index; ``vertex_count`` does not change.
        """
        self._check_vertex(vertex)
        self.adjacency[vertex].clear()
        for neighbors in self.adjacency:
            neighbors[:] = [w for w in neighbors if w != vertex]

    # ------------------------------------------------------------------
    # Derived graphs
    # ------------------------------------------------------------------

    def induced_subgraph(self, vertices: Sequence[int]) -> "Graph":
        """
        Graph restricted to *vertices*, re-indexed by position in *vertices*.

        ``id_map`` of the result holds the parent vertex indices. Edges
        leaving the subset are dropped; edge order follows the parent's
        adjacency order.
        """
        local_index: Dict[int, int] = {}
        for position, v in enumerate(vertices):
            self._check_vertex(v)
            if v in local_index:
                raise InvalidGraphError(f"Vertex {v} listed twice in subgraph selection")
            local_index[v] = position

        adjacency: List[List[int]] = [[] for _ in vertices]
        for v, position in local_index.items():
            targets = adjacency[position]
            for w in self.adjacency[v]:
                local = local_index.get(w)
                if local is not None:
                    targets.append(local)

        return Graph(
            vertex_count=len(adjacency),
            adjacency=adjacency,
            id_map=list(vertices),
        )

    def to_networkx(self) -> nx.MultiDiGraph:
        """
        Convert to a NetworkX MultiDiGraph (duplicate edges preserved).

        Nodes are vertex indices with a ``node_id`` attribute from ``id_map``.
        """
        G = nx.MultiDiGraph()
        G.add_nodes_from((v, {"node_id": node_id}) for v, node_id in enumerate(self.id_map))
        G.add_edges_from(
            (v, w) for v, neighbors in enumerate(self.adjacency) for w in neighbors
        )
        return G

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def translate(self, vertices: Iterable[int]) -> List[int]:
        """Map vertex indices to their ``id_map`` values."""
        ids = []
        for v in vertices:
            self._check_vertex(v)
            ids.append(self.id_map[v])
        return ids

    def describe_vertex(self, vertex: int) -> str:
        """One-line description of a vertex and its out-edges, by node id."""
        self._check_vertex(vertex)
        edges = self.translate(self.adjacency[vertex])
        return f"Vertex (NodeID) {self.id_map[vertex]}: Edges -> {edges}"

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise VertexIndexError(vertex, self.vertex_count)
