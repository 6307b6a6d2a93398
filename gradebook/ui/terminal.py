"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
Apart from prompt error messages (printed by InputPrompter), it's the ONLY
place where printing happens in the gradebook package.

To create a different UI (web, GUI, etc.), create a new class with
the same method signatures but different output handling.
"""

import sys

from ..models import ClassReport, Course, Department, Student


class TerminalDisplay:
    """
    Pretty terminal output for the grading session.

    ═══════════════════════════════════════════════════════════════════════════
    WHAT IS PRINTED HERE
    ═══════════════════════════════════════════════════════════════════════════

    1. Start banner and phase headers
    2. Review blocks shown before each confirmation
    3. Success / warning / error notices
    4. The end-of-session report: statistics, histogram, ranking

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    @classmethod
    def print_banner(cls):
        print(f"\n{cls.BOLD}{cls.CYAN}")
        print("╔══════════════════════════════════════════════════════════════════╗")
        print("║                                                                  ║")
        print("║               STUDENT GRADING SYSTEM                             ║")
        print("║                                                                  ║")
        print("╚══════════════════════════════════════════════════════════════════╝")
        print(f"{cls.RESET}")

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def print_hint(cls, message: str):
        print(f"  {cls.DIM}{message}{cls.RESET}")

    @classmethod
    def print_success(cls, message: str):
        print(f"{cls.GREEN}✓ {message}{cls.RESET}")

    @classmethod
    def print_warning(cls, message: str):
        print(f"{cls.YELLOW}{message}{cls.RESET}")

    @classmethod
    def print_error(cls, message: str):
        print(f"{cls.RED}{message}{cls.RESET}", file=sys.stderr)

    @classmethod
    def print_review(cls, title: str, fields: list):
        """
        Print the values entered so far, before asking for confirmation.

        Args:
            title: e.g. "REVIEW STUDENT"
            fields: List of (label, value) pairs
        """
        cls.print_subheader(title)
        width = max((len(label) for label, _ in fields), default=0)
        for label, value in fields:
            print(f"  {cls.BOLD}{label:<{width}}{cls.RESET} : {value}")

    @classmethod
    def print_department(cls, department: Department):
        cls.print_subheader("DEPARTMENT")
        print(f"  {cls.BOLD}Name:{cls.RESET} {department.name}")
        print(f"  {cls.BOLD}Web:{cls.RESET}  {department.web_page}")

    @classmethod
    def print_course_list(cls, courses: list):
        cls.print_subheader("COURSES")
        if not courses:
            print(f"  {cls.DIM}(none){cls.RESET}")
            return
        for course in courses:
            print(f"  • {course} {cls.DIM}[{course.credit_weight} ECTS]{cls.RESET}")

    @classmethod
    def print_grade_header(cls, student: Student):
        print(f"\n{cls.BOLD}Entering grades for student: {student.full_name}{cls.RESET}")

    @classmethod
    def print_grade_skipped(cls, course: Course):
        print(f"{cls.YELLOW}>> Grading for '{course.name}' skipped by user.{cls.RESET}")

    @classmethod
    def print_report(cls, report: ClassReport):
        """Print class statistics, the GPA histogram and the ranking."""
        cls.print_header("CLASS ANALYTICS REPORT")

        stats = report.statistics
        print(f"  {cls.BOLD}Total Students:{cls.RESET} {stats.total_students}")
        print(f"  {cls.BOLD}Class Average :{cls.RESET} {stats.average_gpa:.2f}")
        print(f"  {cls.BOLD}Highest GPA   :{cls.RESET} {stats.highest_gpa:.2f}")
        print(f"  {cls.BOLD}Lowest GPA    :{cls.RESET} {stats.lowest_gpa:.2f}")

        cls.print_subheader("GPA DISTRIBUTION")
        for label, count in report.histogram.buckets():
            print(f"  {label} : {cls.CYAN}{'*' * count}{cls.RESET}")

        cls.print_subheader("STUDENT RANKINGS")
        print(f"  {cls.BOLD}{'#':<4} {'NAME':<30} {'ID':<12} {'AGE':<5} {'GPA'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 58}{cls.RESET}")
        for entry in report.rankings:
            student = entry.student
            color = cls._gpa_color(entry.gpa)
            print(
                f"  {entry.rank:<4} {student.full_name:<30} {student.student_id:<12} "
                f"{student.age:<5} {color}{entry.gpa:.2f}{cls.RESET}"
            )

    @classmethod
    def _gpa_color(cls, gpa: float) -> str:
        if gpa >= 3.0:
            return cls.GREEN
        elif gpa >= 2.0:
            return cls.YELLOW
        return cls.RED

    @classmethod
    def print_goodbye(cls):
        print(f"\n{cls.DIM}Program terminated successfully (Exit Code 0).{cls.RESET}")
