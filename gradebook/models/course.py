"""
Course and department data models.

Both are immutable value objects whose identity is a single field:
a course is identified by its code, a department by its web page.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..exceptions import ValidationError


@dataclass(frozen=True)
class Course:
    """
    A course that students can be graded in.

    Equality and hashing use ``code`` only, so two courses with the same
    code but different names are the same course.

    Attributes:
        name: Human-readable course title (e.g., "Algorithms")
        code: Course code (e.g., "ALG101")
        credit_weight: ECTS credits used to weight the grade in GPA
    """
    name: str = field(compare=False)
    code: str
    credit_weight: int = field(compare=False, default=0)

    def __post_init__(self):
        if isinstance(self.credit_weight, bool) or not isinstance(self.credit_weight, int):
            raise ValidationError(
                "ECTS must be a whole number.",
                details={"code": self.code, "credit_weight": self.credit_weight},
            )
        if self.credit_weight < 0:
            raise ValidationError(
                "ECTS cannot be negative.",
                details={"code": self.code, "credit_weight": self.credit_weight},
            )

    def __str__(self) -> str:
        return f"{self.name} ({self.code})"


@dataclass(frozen=True)
class Department:
    """
    The department a grading session runs for.

    Created exactly once per run, before any student or course entry.
    Identified by ``web_page``.
    """
    name: str = field(compare=False)
    web_page: str
    established_date: Optional[date] = field(compare=False, default=None)

    def __str__(self) -> str:
        return f"{self.name} ({self.web_page})"
