"""
citegraph Core Module

Graph data structure, edge-list loading and error types.

Usage:
    from citegraph.core import Graph, load_edge_list

    graph = load_edge_list("Cit-HepTh.txt")
    print(graph.describe_vertex(0))
"""

# Graph Model - Data structures
from .graph_model import (
    DensityDenominator,
    Graph,
)

# Graph Loader - Edge-list parsing
from .graph_loader import (
    load_edge_list,
    parse_edge_lines,
)

# Errors
from .exceptions import (
    CitegraphError,
    InvalidGraphError,
    LoadError,
    VertexIndexError,
)

__all__ = [
    # Model
    "DensityDenominator",
    "Graph",
    # Loader
    "load_edge_list",
    "parse_edge_lines",
    # Errors
    "CitegraphError",
    "InvalidGraphError",
    "LoadError",
    "VertexIndexError",
]
