"""
Record Registry.

This module holds the authoritative set of students and courses for one
run of the program and enforces their identity rules.
"""

import logging
from typing import Optional

from ..exceptions import DuplicateIdError, DuplicateCodeError
from ..models import Course, Student

logger = logging.getLogger(__name__)


class RecordRegistry:
    """
    Known students and courses, with duplicate detection.

    TWO STUDENT COLLECTIONS:
    ------------------------
    - all students: everything known this run, including students restored
      from a previous results file. Duplicate checks look here.
    - session students: only students registered during this run, in
      insertion order. The grade phase and the report use this list.

    Keeping them apart lets a duplicate ID from an earlier run be rejected
    without the earlier run's students showing up in this run's report.

    IDENTITY RULES:
    ---------------
    Student IDs and course codes are compared case-insensitively after
    trimming, so "cs101" clashes with "CS101" and "ab12" with "AB12".
    A rejected registration leaves the registry unchanged.
    """

    def __init__(self):
        self._students = {}          # id key -> Student (restored + session)
        self._session_students = []  # Students registered this run
        self._courses = {}           # code key -> Course

    @staticmethod
    def _key(value: str) -> str:
        return value.strip().casefold()

    # -------------------------------------------------------------------------
    # Students
    # -------------------------------------------------------------------------

    def restore_students(self, students: list) -> int:
        """
        Seed the registry with students from earlier runs.

        Restored students take part in duplicate checks but never appear in
        ``session_students()``. Returns how many were added; IDs already
        known are skipped.
        """
        added = 0
        for student in students:
            key = self._key(student.student_id)
            if key in self._students:
                logger.debug("Skipping repeated restored ID %s", student.student_id)
                continue
            self._students[key] = student
            added += 1
        return added

    def has_student_id(self, student_id: str) -> bool:
        return self._key(student_id) in self._students

    def find_student(self, student_id: str) -> Optional[Student]:
        return self._students.get(self._key(student_id))

    def register_student(self, candidate: Student) -> Student:
        """
        Add a newly entered student.

        Raises:
            DuplicateIdError: if any known student has the same ID
        """
        key = self._key(candidate.student_id)
        if key in self._students:
            raise DuplicateIdError(candidate.student_id)

        self._students[key] = candidate
        self._session_students.append(candidate)
        return candidate

    def session_students(self) -> list:
        """Students registered during this run, in insertion order."""
        return list(self._session_students)

    def all_students(self) -> list:
        return list(self._students.values())

    # -------------------------------------------------------------------------
    # Courses
    # -------------------------------------------------------------------------

    def has_course_code(self, code: str) -> bool:
        return self._key(code) in self._courses

    def register_course(self, candidate: Course) -> Course:
        """
        Add a newly entered course.

        Raises:
            DuplicateCodeError: if a course with the same code (any case) exists
        """
        key = self._key(candidate.code)
        if key in self._courses:
            raise DuplicateCodeError(candidate.code)

        self._courses[key] = candidate
        return candidate

    def courses(self) -> list:
        """Registered courses, in insertion order."""
        return list(self._courses.values())
