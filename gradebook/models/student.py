"""
Student data model.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..config import DATE_DISPLAY_FORMAT
from .course import Course, Department
from .transcript import Transcript


@dataclass(eq=False)
class Student:
    """
    A student entered during a session or restored from a previous report.

    ``student_id`` is kept as a string so IDs like "001" keep their
    leading zeros. The GPA is never stored; it is calculated from the
    transcript every time it is asked for.

    Attributes:
        first_name: Given name
        last_name: Family name
        student_id: Opaque identifier, unique across all runs
        birth_date: Date of birth, None when unknown (restored records)
        department: Department the student was entered under (not owned)
        transcript: Course -> grade mapping
        restored: True if rebuilt from an earlier results file
    """
    first_name: str
    last_name: str
    student_id: str
    birth_date: Optional[date] = None
    department: Optional[Department] = None
    transcript: Transcript = field(default_factory=Transcript, repr=False)
    restored: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def age(self) -> int:
        return self.age_on(date.today())

    def age_on(self, today: date) -> int:
        """Whole years between birth date and ``today`` (0 if no birth date)."""
        if self.birth_date is None:
            return 0
        years = today.year - self.birth_date.year
        if (today.month, today.day) < (self.birth_date.month, self.birth_date.day):
            years -= 1
        return years

    @property
    def formatted_birth_date(self) -> str:
        if self.birth_date is None:
            return "N/A"
        return self.birth_date.strftime(DATE_DISPLAY_FORMAT)

    def add_grade(self, course: Course, grade: float) -> None:
        self.transcript.add_grade(course, grade)

    def has_course(self, course: Course) -> bool:
        return self.transcript.has_course(course)

    def calculate_gpa(self) -> float:
        return self.transcript.calculate_gpa()

    @property
    def gpa(self) -> float:
        return self.calculate_gpa()

    def __str__(self) -> str:
        return f"{self.full_name} (ID: {self.student_id}, GPA: {self.gpa:.2f})"
