"""
Report rendering and persistence.

This module renders a session's report as plain text and appends it to the
results file. Every run adds one block; earlier blocks are never touched.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config import (
    RESULTS_FILE,
    FILE_ENCODING,
    DATE_DISPLAY_FORMAT,
    REPORT_TIMESTAMP_FORMAT,
)
from ..exceptions import PersistenceError
from ..models import ClassReport, Department, RankedStudent

logger = logging.getLogger(__name__)

RULE = "=" * 42


def format_ranking_line(entry: RankedStudent) -> str:
    """
    Format one ranking line.

    The format is also what HistoryLoader parses on the next run:
        "1. Ada Lovelace - ID: 001 - Birth: 10.12.1815 - GPA: 4.00"
    """
    student = entry.student
    return (
        f"{entry.rank}. {student.full_name} - ID: {student.student_id}"
        f" - Birth: {student.formatted_birth_date} - GPA: {entry.gpa:.2f}"
    )


class ReportWriter:
    """
    Renders and appends session reports.

    REPORT LAYOUT:
    --------------
        timestamped header
        DEPARTMENT INFORMATION   name, web page, establishment date
        COURSE LIST              "- name (code) [n ECTS]" per course
        CLASS STATISTICS         count, average, highest, lowest
        GPA DISTRIBUTION         one row of stars per histogram bucket
        STUDENT RANKINGS         GPA-descending ranking lines

    Usage:
        writer = ReportWriter()
        text = writer.render(department, courses, report)
        writer.append(text)
    """

    def __init__(self, results_path: Optional[Path] = None):
        self.results_path = Path(results_path) if results_path else RESULTS_FILE

    def render(self, department: Optional[Department], courses: list,
               report: ClassReport, generated_at: Optional[datetime] = None) -> str:
        generated_at = generated_at or datetime.now()
        lines = []

        lines.append("#" * 50)
        lines.append(f"  GRADING REPORT - {generated_at.strftime(REPORT_TIMESTAMP_FORMAT)}")
        lines.append("#" * 50)
        lines.append("")

        lines.extend(self._section("DEPARTMENT INFORMATION"))
        if department is not None:
            lines.append(f"Name        : {department.name}")
            lines.append(f"Web         : {department.web_page}")
            if department.established_date is not None:
                established = department.established_date.strftime(DATE_DISPLAY_FORMAT)
                lines.append(f"Established : {established}")
        else:
            lines.append("No department information available.")
        lines.append("")

        lines.extend(self._section("COURSE LIST"))
        if courses:
            for course in courses:
                lines.append(f"- {course.name} ({course.code}) [{course.credit_weight} ECTS]")
        else:
            lines.append("No courses registered.")
        lines.append("")

        lines.extend(self._section("CLASS STATISTICS"))
        lines.extend(self.render_statistics(report))
        lines.append("")
        lines.extend(self.render_histogram(report))
        lines.append("")

        lines.extend(self._section("STUDENT RANKINGS"))
        if report.rankings:
            for entry in report.rankings:
                lines.append(format_ranking_line(entry))
        else:
            lines.append("No students entered in this session.")
        lines.append("")

        return "\n".join(lines) + "\n"

    @staticmethod
    def _section(title: str) -> list:
        return [RULE, title.center(len(RULE)).rstrip(), RULE]

    @staticmethod
    def render_statistics(report: ClassReport) -> list:
        stats = report.statistics
        return [
            "CLASS ANALYTICS REPORT:",
            f"- Total Students: {stats.total_students}",
            f"- Class Average : {stats.average_gpa:.2f}",
            f"- Highest GPA   : {stats.highest_gpa:.2f}",
            f"- Lowest GPA    : {stats.lowest_gpa:.2f}",
        ]

    @staticmethod
    def render_histogram(report: ClassReport) -> list:
        lines = ["=== GPA DISTRIBUTION (HISTOGRAM) ==="]
        for label, count in report.histogram.buckets():
            lines.append(f"{label} : {'*' * count}")
        return lines

    def append(self, text: str) -> Path:
        """
        Append a rendered report to the results file.

        Raises:
            PersistenceError: if the file cannot be opened or written
        """
        try:
            with open(self.results_path, "a", encoding=FILE_ENCODING) as f:
                f.write(text)
        except OSError as e:
            raise PersistenceError(
                f"Could not write report to {self.results_path}: {e}",
                details={"path": str(self.results_path)},
            ) from e

        logger.info("Full report saved successfully to %s", self.results_path)
        return self.results_path
