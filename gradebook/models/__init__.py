"""
Data models for the grading system.

This package contains all dataclasses used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .course import Course, Department
from .transcript import Transcript
from .student import Student
from .outcome import Ok, Invalid, Cancelled, ValidationResult, PromptResult
from .report import ClassStatistics, GpaHistogram, RankedStudent, ClassReport

__all__ = [
    # Entities
    "Course",
    "Department",
    "Transcript",
    "Student",
    # Prompt outcomes
    "Ok",
    "Invalid",
    "Cancelled",
    "ValidationResult",
    "PromptResult",
    # Report models
    "ClassStatistics",
    "GpaHistogram",
    "RankedStudent",
    "ClassReport",
]
