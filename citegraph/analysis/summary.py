"""
Graph Summary

Graph-level statistics computed with NetworkX.

Weak and strong component counts use NetworkX's usual definitions and
are reported next to the forward-reachability labelling, which matches
neither of them in general.
"""

from __future__ import annotations

import networkx as nx

from citegraph.core.graph_model import Graph

from .results import GraphSummary


def summarize(graph: Graph) -> GraphSummary:
    """Compute a GraphSummary for *graph*."""
    if graph.vertex_count == 0:
        return GraphSummary()

    G = graph.to_networkx()
    weak = list(nx.weakly_connected_components(G))
    active = graph.active_vertex_count()

    return GraphSummary(
        vertices=G.number_of_nodes(),
        edges=G.number_of_edges(),
        active_vertices=active,
        isolated_vertices=sum(1 for _ in nx.isolates(G)),
        density=graph.density(),
        weak_components=len(weak),
        strong_components=nx.number_strongly_connected_components(G),
        largest_weak_component=max(len(c) for c in weak),
    )
