"""
Services Package

Application services orchestrating the analysis modules.
"""

from .analysis_service import AnalysisService

__all__ = [
    "AnalysisService",
]
