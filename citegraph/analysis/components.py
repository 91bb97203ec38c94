"""
Component Finder

Labels vertices with component ids by depth-first traversal along
out-edges.

Vertices are visited in index order. Each vertex that is still
unlabelled when reached seeds a new component (ids 1, 2, ...), and
everything reachable from it through unlabelled vertices joins that
component. Traversal never enters a vertex labelled by an earlier seed.

This is forward reachability from sequential seeds. It is neither
strongly- nor weakly-connected components: for ``0 -> 1`` and ``2 -> 1``
vertex 2 ends up alone in component 2 although it cites a member of
component 1.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from citegraph.core.graph_model import Graph

logger = logging.getLogger(__name__)

Labels = List[Optional[int]]


def label_components(graph: Graph) -> Labels:
    """
    Assign a component id to every vertex.

    Returns:
        List indexed by vertex; every entry is a positive int.
    """
    labels: Labels = [None] * graph.vertex_count
    component_count = 0

    for seed in range(graph.vertex_count):
        if labels[seed] is not None:
            continue
        component_count += 1
        labels[seed] = component_count
        stack = [seed]
        while stack:
            vertex = stack.pop()
            for w in graph.adjacency[vertex]:
                if labels[w] is None:
                    labels[w] = component_count
                    stack.append(w)

    logger.info(
        "Labelled %d vertices into %d components",
        graph.vertex_count, component_count,
    )
    return labels


def group_components(labels: Sequence[Optional[int]]) -> Dict[int, List[int]]:
    """
    Group vertices by label, ignoring unlabelled ones.

    Members are in ascending vertex order and keys in ascending label order.
    """
    groups: Dict[int, List[int]] = defaultdict(list)
    for vertex, label in enumerate(labels):
        if label is not None:
            groups[label].append(vertex)
    return {label: groups[label] for label in sorted(groups)}
