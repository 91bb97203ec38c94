"""
Analysis Package

Degree pruning, component labelling, density ranking and reporting.
"""

from .pruning import DegreePruner, prune
from .components import group_components, label_components
from .density import (
    DensityRanker,
    average_density,
    component_density,
    top_components,
)
from .summary import summarize
from .results import CitationAnalysisResult, ComponentDensity, GraphSummary
from .display import display_report, format_report

__all__ = [
    # Pruning
    "DegreePruner",
    "prune",
    # Components
    "label_components",
    "group_components",
    # Density
    "DensityRanker",
    "top_components",
    "average_density",
    "component_density",
    # Summary
    "summarize",
    # Results
    "CitationAnalysisResult",
    "ComponentDensity",
    "GraphSummary",
    # Display
    "format_report",
    "display_report",
]
