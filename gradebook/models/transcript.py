"""
Transcript and GPA calculation.

The transcript is the per-student record of (course, grade) pairs and the
only place where a GPA is computed.
"""

from typing import Iterator, Tuple

from .course import Course


class Transcript:
    """
    Maps each course a student was graded in to a numeric grade.

    GPA FORMULA:
    ------------
        GPA = Σ(credit_weight × grade) / Σ(credit_weight)

    An empty transcript, or one where every course carries zero credits,
    has a GPA of exactly 0.0. No rounding happens here; the two-decimal
    format is applied only when a GPA is displayed or written.

    GRADE RANGE:
    ------------
    Grades are not range-checked. The grade prompt restricts input to the
    letter-grade table, but any float passed in is stored as-is.
    """

    def __init__(self):
        # Keyed by Course, so courses with equal codes share one slot
        self._grades = {}

    def add_grade(self, course: Course, grade: float) -> None:
        """Record a grade, replacing any earlier grade for the same course."""
        self._grades[course] = grade

    def has_course(self, course: Course) -> bool:
        return course in self._grades

    def grade_for(self, course: Course) -> float:
        return self._grades[course]

    def total_credits(self) -> int:
        return sum(course.credit_weight for course in self._grades)

    def calculate_gpa(self) -> float:
        """Return the credit-weighted GPA (0.0 when there is nothing to weight)."""
        if not self._grades:
            return 0.0

        total_points = 0.0
        total_credits = 0
        for course, grade in self._grades.items():
            total_points += course.credit_weight * grade
            total_credits += course.credit_weight

        if total_credits == 0:
            return 0.0

        return total_points / total_credits

    def __len__(self) -> int:
        return len(self._grades)

    def __iter__(self) -> Iterator[Tuple[Course, float]]:
        return iter(self._grades.items())
