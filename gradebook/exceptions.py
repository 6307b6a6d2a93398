"""
Custom exceptions for the grading system.
"""

from typing import Optional, Any, Dict


class GradebookError(Exception):
    """Base exception for all grading system errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(GradebookError, ValueError):
    """Raised when an entity is constructed with invalid data."""
    pass


class DuplicateIdError(GradebookError):
    """Raised when a student ID is already registered."""

    def __init__(self, student_id: str):
        super().__init__(
            f"Student with ID {student_id} already exists",
            details={"student_id": student_id},
        )
        self.student_id = student_id


class DuplicateCodeError(GradebookError):
    """Raised when a course code is already registered."""

    def __init__(self, code: str):
        super().__init__(
            f"Course with code '{code}' already exists",
            details={"code": code},
        )
        self.code = code


class PersistenceError(GradebookError):
    """Raised when the results file cannot be read or written."""
    pass


class InputClosedError(GradebookError):
    """Raised when the input stream ends while a prompt is waiting."""
    pass
