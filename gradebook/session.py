"""
Grading Session - Main Orchestrator.

This module contains the GradingSession class that connects the data
layer (models, registry, statistics, persistence) to the console
(prompts and terminal display).

NOTE: Don't run this file directly. Run from the repository root:
    python3 -m gradebook
"""

import logging
from pathlib import Path
from typing import Optional

from .config import (
    CMD_END,
    DATE_DISPLAY_FORMAT,
    MSG_ENTER_DEPT,
    MSG_ENTER_STUDENT,
    MSG_ENTER_COURSE,
    MSG_CANCEL_HINT,
    MSG_CANCELLED,
    MSG_RETRY,
    MSG_DEPT_MANDATORY,
)
from .data import HistoryLoader, ReportWriter
from .engines import RecordRegistry, ClassStatisticsEngine
from .exceptions import DuplicateIdError, DuplicateCodeError, PersistenceError
from .models import Cancelled, ClassReport, Course, Department, Student
from .ui import InputPrompter, TerminalDisplay

logger = logging.getLogger(__name__)


class GradingSession:
    """
    Runs one interactive grading session from start to report.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    The phases always run in this order, each one finished before the next
    starts:

    1. HISTORY     restore students from the results file (duplicate checks)
    2. DEPARTMENT  mandatory; cancel or "n" restarts the form
    3. STUDENTS    loop until the first name is "end"
    4. COURSES     loop until the course name is "end"
    5. GRADES      each new student x each course without a grade yet
    6. REPORT      print statistics and append the report to the results file

    Typing "cancel" at any field abandons the current form. Duplicate IDs
    and codes are rejected as soon as they are typed, before the remaining
    fields are asked for.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        session = GradingSession()
        report = session.run()

        # Scripted input (tests)
        lines = iter(["CS", "cs.edu", "01.01.1990", "y", "end", "end"])
        session = GradingSession(
            prompter=InputPrompter(input_func=lambda _: next(lines)),
            results_path=tmp_path / "results.txt",
        )
    """

    def __init__(self, prompter: Optional[InputPrompter] = None,
                 results_path: Optional[Path] = None,
                 registry: Optional[RecordRegistry] = None):
        self.prompter = prompter or InputPrompter()
        self.registry = registry or RecordRegistry()
        self.history = HistoryLoader(results_path)
        self.writer = ReportWriter(results_path)
        self.statistics_engine = ClassStatisticsEngine()
        self.display = TerminalDisplay()
        self.department: Optional[Department] = None

    def run(self) -> Optional[ClassReport]:
        """
        Run every phase and return the session report.

        Returns:
            The ClassReport, or None when no students were entered
        """
        self.restore_history()
        self.enter_department()
        self.enter_students()
        self.enter_courses()
        self.enter_grades()
        return self.finalize_report()

    # =========================================================================
    #  PHASE 1: HISTORY
    # =========================================================================

    def restore_history(self) -> int:
        restored = self.registry.restore_students(self.history.load())
        if restored:
            self.display.print_hint(f">> SYSTEM INFO: {restored} records restored from previous runs.")
        return restored

    # =========================================================================
    #  PHASE 2: DEPARTMENT
    # =========================================================================

    def enter_department(self) -> Department:
        while True:
            self.display.print_header(MSG_ENTER_DEPT)
            self.display.print_hint(MSG_CANCEL_HINT)

            department = self._department_form()
            if department is None:
                self.display.print_warning(MSG_DEPT_MANDATORY)
                continue

            established = department.established_date.strftime(DATE_DISPLAY_FORMAT)
            self.display.print_review("REVIEW DEPARTMENT", [
                ("Name", department.name),
                ("Web", department.web_page),
                ("Date", established),
            ])

            if self.prompter.confirm():
                self.department = department
                logger.info("Department set: %s", department)
                return department

            self.display.print_warning(MSG_RETRY)

    def _department_form(self) -> Optional[Department]:
        name = self.prompter.text("Department Name:")
        if isinstance(name, Cancelled):
            return None

        web_page = self.prompter.web_page("Web Page:")
        if isinstance(web_page, Cancelled):
            return None

        established = self.prompter.date("Est. Date (dd.MM.yyyy):")
        if isinstance(established, Cancelled):
            return None

        return Department(name.value, web_page.value, established.value)

    # =========================================================================
    #  PHASE 3: STUDENTS
    # =========================================================================

    def enter_students(self) -> list:
        """Collect students until "end"; returns the students added."""
        self.display.print_header(MSG_ENTER_STUDENT)
        added = []

        while True:
            self.display.print_subheader("NEW STUDENT ENTRY")
            self.display.print_hint(MSG_CANCEL_HINT)

            first_name = self.prompter.name("First Name ('end' to finish):")
            if isinstance(first_name, Cancelled):
                self.display.print_warning(MSG_CANCELLED)
                continue
            if first_name.value.lower() == CMD_END:
                break

            candidate = self._student_form(first_name.value)
            if candidate is None:
                continue

            self.display.print_review("REVIEW STUDENT", [
                ("Name", candidate.full_name),
                ("ID", candidate.student_id),
                ("Birth", candidate.formatted_birth_date),
                ("Age", candidate.age),
            ])

            if not self.prompter.confirm():
                self.display.print_warning(MSG_RETRY)
                continue

            try:
                self.registry.register_student(candidate)
            except DuplicateIdError as e:
                self._reject_student(e.student_id)
                continue

            added.append(candidate)
            logger.info("Student added: ID %s", candidate.student_id)
            self.display.print_success("Student saved successfully.")

        return added

    def _student_form(self, first_name: str) -> Optional[Student]:
        last_name = self.prompter.name("Last Name:")
        if isinstance(last_name, Cancelled):
            self.display.print_warning(MSG_CANCELLED)
            return None

        student_id = self.prompter.student_id("Student ID:")
        if isinstance(student_id, Cancelled):
            self.display.print_warning(MSG_CANCELLED)
            return None

        if self.registry.has_student_id(student_id.value):
            self._reject_student(student_id.value)
            return None

        birth_date = self.prompter.date("Birth Date (dd.MM.yyyy):")
        if isinstance(birth_date, Cancelled):
            self.display.print_warning(MSG_CANCELLED)
            return None

        return Student(
            first_name=first_name,
            last_name=last_name.value,
            student_id=student_id.value,
            birth_date=birth_date.value,
            department=self.department,
        )

    def _reject_student(self, student_id: str):
        self.display.print_warning(f">> WARNING: Student with ID {student_id} already exists!")
        self.display.print_warning(">> Skipping new entry.")
        logger.warning("Duplicate student ID rejected: %s", student_id)

    # =========================================================================
    #  PHASE 4: COURSES
    # =========================================================================

    def enter_courses(self) -> list:
        """Collect courses until "end"; returns the courses added."""
        self.display.print_header(MSG_ENTER_COURSE)
        added = []

        while True:
            self.display.print_subheader("NEW COURSE ENTRY")
            self.display.print_hint(MSG_CANCEL_HINT)

            course_name = self.prompter.text("Course Name ('end' to finish):")
            if isinstance(course_name, Cancelled):
                self.display.print_warning(MSG_CANCELLED)
                continue
            if course_name.value.lower() == CMD_END:
                break

            candidate = self._course_form(course_name.value)
            if candidate is None:
                continue

            self.display.print_review("REVIEW COURSE", [
                ("Name", candidate.name),
                ("Code", candidate.code),
                ("ECTS", candidate.credit_weight),
            ])

            if not self.prompter.confirm():
                self.display.print_warning(MSG_RETRY)
                continue

            try:
                self.registry.register_course(candidate)
            except DuplicateCodeError as e:
                self._reject_course(e.code)
                continue

            added.append(candidate)
            logger.info("Course added: %s", candidate.code)
            self.display.print_success("Course saved successfully.")

        return added

    def _course_form(self, course_name: str) -> Optional[Course]:
        code = self.prompter.text("Course Code:")
        if isinstance(code, Cancelled):
            self.display.print_warning(MSG_CANCELLED)
            return None

        if self.registry.has_course_code(code.value):
            self._reject_course(code.value)
            return None

        ects = self.prompter.positive_int("ECTS:")
        if isinstance(ects, Cancelled):
            self.display.print_warning(MSG_CANCELLED)
            return None

        return Course(course_name, code.value, ects.value)

    def _reject_course(self, code: str):
        self.display.print_warning(f">> WARNING: Course with code '{code}' already exists!")
        self.display.print_warning(">> Skipping new entry.")
        logger.warning("Duplicate course code rejected: %s", code)

    # =========================================================================
    #  PHASE 5: GRADES
    # =========================================================================

    def enter_grades(self) -> int:
        """
        Ask for every missing grade of this session's students.

        Courses a student already has a grade for are not asked again.
        Cancelling a grade prompt skips only that course.

        Returns:
            Number of grades recorded
        """
        students = self.registry.session_students()
        courses = self.registry.courses()
        if not students or not courses:
            return 0

        self.display.print_header("GRADE ENTRY PHASE")
        self.display.print_hint("(Checking for missing grades...)")

        recorded = 0
        for student in students:
            header_printed = False

            for course in courses:
                if student.has_course(course):
                    continue

                if not header_printed:
                    self.display.print_grade_header(student)
                    header_printed = True

                grade = self.prompter.grade(course.name)
                if isinstance(grade, Cancelled):
                    self.display.print_grade_skipped(course)
                    logger.info("Grade skipped for student %s, course %s",
                                student.student_id, course.code)
                    continue

                student.add_grade(course, grade.value)
                recorded += 1

        return recorded

    # =========================================================================
    #  PHASE 6: REPORT
    # =========================================================================

    def finalize_report(self) -> Optional[ClassReport]:
        """Print the session report and append it to the results file."""
        students = self.registry.session_students()
        if not students:
            self.display.print_warning(">> No data available to report.")
            return None

        report = self.statistics_engine.build_report(students)
        if self.department is not None:
            self.display.print_department(self.department)
        self.display.print_course_list(self.registry.courses())
        self.display.print_report(report)

        text = self.writer.render(self.department, self.registry.courses(), report)
        try:
            path = self.writer.append(text)
        except PersistenceError as e:
            logger.error("Error writing file: %s", e.message)
            self.display.print_error(f">> File Write Error: {e.message}")
        else:
            self.display.print_success(f"Final results saved to '{path}'.")

        return report
