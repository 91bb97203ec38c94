"""
Display Module

Text report for citation density analysis, plus terminal colours for
status and error messages.

Report layout:

    Top 10 Densest Components:
    Component 7: Density 2.5000, Vertices: [12, 40, 41]
    ...
    Average Density Across All Components: 0.8123
"""

from __future__ import annotations

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .results import CitationAnalysisResult, ComponentDensity


# =============================================================================
# Terminal Colors
# =============================================================================

class Colors:
    """ANSI color codes for terminal output."""
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: str, bold: bool = False) -> str:
    """Apply color to text."""
    style = Colors.BOLD if bold else ""
    return f"{style}{color}{text}{Colors.RESET}"


# =============================================================================
# Report Formatting
# =============================================================================

def format_component(component: "ComponentDensity", external_ids: bool = False) -> str:
    vertices = component.external_ids if external_ids else component.members
    return (
        f"Component {component.component_id}: "
        f"Density {component.density:.4f}, Vertices: {list(vertices)}"
    )


def format_report(result: "CitationAnalysisResult", external_ids: bool = False) -> List[str]:
    """Report lines: heading, one line per ranked component, average density."""
    lines = [f"Top {result.top_k} Densest Components:"]
    lines.extend(format_component(c, external_ids) for c in result.top_components)
    lines.append(f"Average Density Across All Components: {result.average_density:.4f}")
    return lines


def display_report(result: "CitationAnalysisResult", external_ids: bool = False) -> None:
    """Print the report to stdout."""
    for line in format_report(result, external_ids=external_ids):
        print(line)
