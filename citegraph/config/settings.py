"""
Application Settings

Environment configuration for the application.
"""

import os
from dataclasses import dataclass


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class Settings:
    """Application settings from environment."""

    # Input
    input_path: str = "Cit-HepTh.txt"

    # Analysis
    top_k: int = 10
    max_component_size: int = 50
    drop_fraction: float = 0.25

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            input_path=os.getenv("CITEGRAPH_INPUT", "Cit-HepTh.txt"),
            top_k=_int_env("CITEGRAPH_TOP_K", 10),
            max_component_size=_int_env("CITEGRAPH_MAX_SIZE", 50),
        )
