"""
Registry and statistics engines.

This package contains the business logic of the grading system that sits
above the data models: identity/duplicate rules and report figures.
"""

from .registry import RecordRegistry
from .statistics import ClassStatisticsEngine

__all__ = [
    "RecordRegistry",
    "ClassStatisticsEngine",
]
