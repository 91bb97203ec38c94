"""
Graph Loader

Reads a citation edge list into a Graph.

Input format (one edge per line, citing paper first):

    9907233 9301253
    9907233 9504304

Node ids are mapped to vertex indices in order of first appearance, so
vertex 0 is the first id on the first line. Adjacency lists come out
sorted ascending. Duplicate edges and self-loops are kept.

Usage:
    from citegraph.core import load_edge_list

    graph = load_edge_list("Cit-HepTh.txt")
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .exceptions import LoadError
from .graph_model import Graph

logger = logging.getLogger(__name__)


def _parse_node_id(token: str, line_number: int, path: Optional[str]) -> int:
    if not (token.isascii() and token.isdigit()):
        raise LoadError(
            f"Invalid node id {token!r}: expected a non-negative integer",
            path=path,
            line_number=line_number,
        )
    return int(token)


def _map_node(node_map: Dict[int, int], id_map: List[int], node_id: int) -> int:
    """Return the vertex index for *node_id*, assigning the next one if new."""
    index = node_map.get(node_id)
    if index is None:
        index = len(id_map)
        node_map[node_id] = index
        id_map.append(node_id)
    return index


def parse_edge_lines(lines: Iterable[str], path: Optional[str] = None) -> Graph:
    """
    Build a Graph from edge-list lines.

    Args:
        lines: iterable of text lines, each ``"<citing> <cited>"``
        path: source name used in error messages

    Raises:
        LoadError: a line has fewer than two tokens or a token is not a
            non-negative integer.
    """
    node_map: Dict[int, int] = {}
    id_map: List[int] = []
    edges: List[Tuple[int, int]] = []

    for line_number, line in enumerate(lines, start=1):
        parts = line.split()
        if len(parts) < 2:
            raise LoadError(
                f"Expected two node ids, got {line.rstrip()!r}",
                path=path,
                line_number=line_number,
            )

        citing = _parse_node_id(parts[0], line_number, path)
        cited = _parse_node_id(parts[1], line_number, path)

        citing_index = _map_node(node_map, id_map, citing)
        cited_index = _map_node(node_map, id_map, cited)
        edges.append((citing_index, cited_index))

    adjacency: List[List[int]] = [[] for _ in id_map]
    for u, v in edges:
        adjacency[u].append(v)
    for neighbors in adjacency:
        neighbors.sort()

    return Graph(vertex_count=len(id_map), adjacency=adjacency, id_map=id_map)


def load_edge_list(path: Union[str, Path], encoding: str = "utf-8") -> Graph:
    """
    Load a citation graph from an edge-list file.

    Raises:
        LoadError: the file cannot be opened or decoded, or a line is malformed.
    """
    path = Path(path)
    logger.info("Loading edge list from %s", path)

    try:
        with open(path, "r", encoding=encoding) as f:
            graph = parse_edge_lines(f, path=str(path))
    except UnicodeDecodeError as e:
        raise LoadError(f"Cannot decode file as {encoding}: {e}", path=str(path)) from e
    except OSError as e:
        raise LoadError(f"Cannot read file: {e.strerror or e}", path=str(path)) from e

    logger.info(
        "Loaded %d vertices and %d edges from %s",
        graph.vertex_count, graph.edge_count(), path,
    )
    return graph
