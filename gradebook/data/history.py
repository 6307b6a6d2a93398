"""
Restoring students from earlier runs.

This module reads the results file written by previous sessions and turns
its ranking lines back into Student objects, so a new session can reject
IDs that were already used.
"""

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config import (
    RESULTS_FILE,
    FILE_ENCODING,
    DATE_DISPLAY_FORMAT,
    HISTORY_COURSE_NAME,
    HISTORY_COURSE_CODE,
)
from ..models import Course, Student

logger = logging.getLogger(__name__)

# "1. Ada Lovelace - ID: 001 - Birth: 10.12.1815 - GPA: 4.00"
RANKING_LINE = re.compile(
    r"^\s*\d+\.\s+(?P<name>.+?)\s+-\s+ID:\s+(?P<id>\S+)"
    r"\s+-\s+Birth:\s+(?P<birth>.+?)\s+-\s+GPA:\s+(?P<gpa>[0-9.,]+)\s*$"
)


class HistoryLoader:
    """
    Loads students recorded in the results file by earlier runs.

    WHAT IS RESTORED:
    -----------------
    Only what a ranking line carries: name, ID, birth date and GPA. The
    per-course grades are not in the file, so the GPA is kept by giving the
    restored student one placeholder course (weight 1) graded with that GPA.

    FAILURE POLICY:
    ---------------
    A missing file means a first run and yields an empty list. A file that
    cannot be read is logged and also yields an empty list; restoring
    history never stops a session. When the same ID appears in several
    report blocks the first occurrence wins.
    """

    def __init__(self, results_path: Optional[Path] = None):
        self.results_path = Path(results_path) if results_path else RESULTS_FILE
        self._history_course = Course(HISTORY_COURSE_NAME, HISTORY_COURSE_CODE, 1)

    def load(self) -> list:
        if not self.results_path.exists():
            return []

        try:
            with open(self.results_path, "r", encoding=FILE_ENCODING) as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error loading data: %s", e)
            return []

        students = []
        seen_ids = set()
        for line in lines:
            student = self.parse_line(line)
            if student is None:
                continue
            key = student.student_id.casefold()
            if key in seen_ids:
                continue
            seen_ids.add(key)
            students.append(student)

        logger.info("Persistence: Loaded %d records from previous run.", len(students))
        return students

    def parse_line(self, line: str) -> Optional[Student]:
        """Parse one ranking line, or return None if it is not one."""
        match = RANKING_LINE.match(line)
        if not match:
            return None

        try:
            gpa = float(match.group("gpa").replace(",", "."))
        except ValueError:
            return None

        first, _, last = match.group("name").partition(" ")
        student = Student(
            first_name=first,
            last_name=last,
            student_id=match.group("id"),
            birth_date=self._parse_birth(match.group("birth")),
            restored=True,
        )
        student.add_grade(self._history_course, gpa)
        return student

    @staticmethod
    def _parse_birth(text: str):
        try:
            return datetime.strptime(text.strip(), DATE_DISPLAY_FORMAT).date()
        except ValueError:
            # "N/A" or an age written by older report versions
            return None
