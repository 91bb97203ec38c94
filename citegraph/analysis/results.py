"""
Analysis Result Models

Dataclasses passed from the analysis service to the report emitter
and the JSON export.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass
class ComponentDensity:
    """One ranked component."""
    component_id: int
    density: float
    members: List[int]
    external_ids: List[int] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.members)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "component_id": self.component_id,
            "density": self.density,
            "size": self.size,
            "members": list(self.members),
            "external_ids": list(self.external_ids),
        }


@dataclass
class GraphSummary:
    """
    Summary statistics for a graph.

    ``density`` uses the active (nonzero out-degree) denominator.
    """
    vertices: int = 0
    edges: int = 0
    active_vertices: int = 0
    isolated_vertices: int = 0
    density: float = 0.0
    weak_components: int = 0
    strong_components: int = 0
    largest_weak_component: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @property
    def largest_component_ratio(self) -> float:
        return self.largest_weak_component / self.vertices if self.vertices > 0 else 0.0


@dataclass
class CitationAnalysisResult:
    """Complete result of one load -> prune -> label -> rank run."""
    input_path: str
    loaded: GraphSummary
    pruned: GraphSummary
    component_count: int
    top_k: int
    max_component_size: int
    top_components: List[ComponentDensity]
    average_density: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "input_path": self.input_path,
            "loaded": self.loaded.to_dict(),
            "pruned": self.pruned.to_dict(),
            "component_count": self.component_count,
            "top_k": self.top_k,
            "max_component_size": self.max_component_size,
            "top_components": [c.to_dict() for c in self.top_components],
            "average_density": self.average_density,
        }
