"""
Exceptions

Error hierarchy for graph construction, loading and vertex access.
"""

from typing import Optional


class CitegraphError(Exception):
    """Base class for all citegraph errors."""


class LoadError(CitegraphError):
    """The edge-list file could not be read or a line failed to parse."""

    def __init__(self, message: str, path: Optional[str] = None, line_number: Optional[int] = None):
        self.path = path
        self.line_number = line_number
        location = ""
        if path is not None:
            location = f"{path}"
            if line_number is not None:
                location += f":{line_number}"
            location += ": "
        elif line_number is not None:
            location = f"line {line_number}: "
        super().__init__(f"{location}{message}")


class VertexIndexError(CitegraphError, IndexError):
    """A vertex index outside [0, vertex_count)."""

    def __init__(self, vertex: int, vertex_count: int):
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"Vertex {vertex} out of range for graph with {vertex_count} vertices"
        )


class InvalidGraphError(CitegraphError, ValueError):
    """Graph construction arguments violate the adjacency/id_map invariants."""
