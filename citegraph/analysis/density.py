"""
Component Density

Ranks labelled components by the density of their induced subgraphs
and averages density over all components.

Two denominators are in use, one per call site:

    ranking  (DensityRanker / top_components)  : vertices with out-edges
    average  (average_density)                 : all member vertices

Usage:
    labels = label_components(graph)
    ranked = top_components(graph, labels, k=10, max_size=50)
    mean = average_density(graph, labels)
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from citegraph.core.graph_model import DensityDenominator, Graph

from .components import group_components
from .results import ComponentDensity

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 10
DEFAULT_MAX_COMPONENT_SIZE = 50


def component_density(
    graph: Graph,
    members: Sequence[int],
    denominator: DensityDenominator = DensityDenominator.ACTIVE,
) -> float:
    """Density of the subgraph induced by *members*."""
    return graph.induced_subgraph(members).density(denominator)


class DensityRanker:
    """
    Selects the densest components below a size bound.

    Components with ``max_size`` or more members are skipped. Results are
    sorted by density, highest first; ties keep ascending component id.
    """

    def __init__(
        self,
        k: int = DEFAULT_TOP_K,
        max_size: int = DEFAULT_MAX_COMPONENT_SIZE,
        denominator: DensityDenominator = DensityDenominator.ACTIVE,
    ) -> None:
        if k < 0:
            raise ValueError(f"k must be >= 0, got {k}")
        if max_size < 0:
            raise ValueError(f"max_size must be >= 0, got {max_size}")
        self.k = k
        self.max_size = max_size
        self.denominator = DensityDenominator(denominator)
        self._logger = logging.getLogger(__name__)

    def rank(self, graph: Graph, labels: Sequence[Optional[int]]) -> List[ComponentDensity]:
        groups = group_components(labels)

        densities: List[ComponentDensity] = []
        skipped = 0
        for component_id, members in groups.items():
            if len(members) >= self.max_size:
                skipped += 1
                continue
            density = component_density(graph, members, self.denominator)
            densities.append(ComponentDensity(component_id, density, members))

        self._logger.debug(
            "Ranked %d components, skipped %d with >= %d members",
            len(densities), skipped, self.max_size,
        )

        densities.sort(key=lambda c: c.density, reverse=True)
        return densities[:self.k]


def top_components(
    graph: Graph,
    labels: Sequence[Optional[int]],
    k: int = DEFAULT_TOP_K,
    max_size: int = DEFAULT_MAX_COMPONENT_SIZE,
    denominator: DensityDenominator = DensityDenominator.ACTIVE,
) -> List[ComponentDensity]:
    """The *k* densest components with fewer than *max_size* members."""
    return DensityRanker(k=k, max_size=max_size, denominator=denominator).rank(graph, labels)


def average_density(
    graph: Graph,
    labels: Sequence[Optional[int]],
    denominator: DensityDenominator = DensityDenominator.VERTICES,
) -> float:
    """
    Mean density over every labelled component, without a size bound.

    Returns 0.0 when there are no components.
    """
    groups = group_components(labels)
    if not groups:
        logger.warning("No components to average; reporting density 0.0")
        return 0.0

    total_density = sum(
        component_density(graph, members, denominator) for members in groups.values()
    )
    return total_density / len(groups)
