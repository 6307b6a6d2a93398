"""
Integration Tests for GradingSession

Drives full sessions with scripted input and checks registry state, the
returned report and the results file.
"""

from datetime import date

import pytest

from gradebook.engines import RecordRegistry
from gradebook.models import Student
from gradebook.session import GradingSession
from gradebook.ui import InputPrompter

DEPARTMENT = ["CS", "cs.edu", "01.01.1990", "y"]
ADA = ["Ada", "Lovelace", "001", "10.12.1815", "y"]
ALGORITHMS = ["Algorithms", "ALG101", "5", "y"]


@pytest.fixture
def make_session(scripted_input, results_path):
    """Build a session over scripted lines; returns (session, input)."""
    def _make(*lines, registry=None):
        source = scripted_input(lines)
        prompter = InputPrompter(input_func=source, output_func=lambda _: None)
        return GradingSession(prompter=prompter, results_path=results_path, registry=registry), source
    return _make


class TestEndToEnd:
    """Scenarios covering every phase."""

    def test_run_when_single_student_graded_aa_then_ranked_first_with_4(self, make_session, results_path):
        session, source = make_session(*DEPARTMENT, *ADA, "end", *ALGORITHMS, "end", "AA")

        report = session.run()

        assert source.remaining == 0
        assert session.department.name == "CS"
        assert str(session.department) == "CS (cs.edu)"
        assert session.department.established_date == date(1990, 1, 1)
        top = report.rankings[0]
        assert top.rank == 1
        assert top.student.full_name == "Ada Lovelace"
        assert top.gpa == pytest.approx(4.00)
        text = results_path.read_text(encoding="utf-8")
        assert "1. Ada Lovelace - ID: 001 - Birth: 10.12.1815 - GPA: 4.00" in text

    def test_run_when_two_weighted_courses_then_weighted_gpa(self, make_session):
        session, _ = make_session(
            *DEPARTMENT, *ADA, "end",
            "Databases", "DB201", "3", "y",
            "Networks", "NET301", "7", "y",
            "end",
            "BB", "CC",
        )

        report = session.run()

        assert report.rankings[0].gpa == pytest.approx((3 * 3.25 + 7 * 2.50) / 10)

    def test_run_when_several_students_then_report_sorted_descending(self, make_session, results_path):
        session, _ = make_session(
            *DEPARTMENT,
            "Grace", "Hopper", "002", "09.12.1906", "y",
            *ADA,
            "end",
            *ALGORITHMS, "end",
            "CC", "AA",
        )

        report = session.run()

        assert [r.student.student_id for r in report.rankings] == ["001", "002"]
        text = results_path.read_text(encoding="utf-8")
        assert text.index("1. Ada Lovelace") < text.index("2. Grace Hopper")

    def test_run_when_no_students_then_no_report_written(self, make_session, results_path):
        session, _ = make_session(*DEPARTMENT, "end", *ALGORITHMS, "end")

        assert session.run() is None
        assert not results_path.exists()

    def test_run_when_run_twice_then_results_appended(self, make_session, results_path):
        first, _ = make_session(*DEPARTMENT, *ADA, "end", *ALGORITHMS, "end", "AA")
        first.run()
        second, _ = make_session(*DEPARTMENT, "Grace", "Hopper", "002", "09.12.1906", "y",
                                 "end", *ALGORITHMS, "end", "BB")
        second.run()

        text = results_path.read_text(encoding="utf-8")
        assert text.count("GRADING REPORT") == 2
        assert "Ada Lovelace" in text
        assert "Grace Hopper" in text


class TestDepartmentPhase:
    """Department entry is mandatory and restarts on cancel or "n"."""

    def test_enter_department_when_cancelled_then_form_restarts(self, make_session):
        session, source = make_session("Phys", "cancel", *DEPARTMENT)
        department = session.enter_department()
        assert department.web_page == "cs.edu"
        assert source.remaining == 0

    def test_enter_department_when_not_confirmed_then_form_restarts(self, make_session):
        session, _ = make_session("Physics", "phys.edu", "01.01.1980", "n", *DEPARTMENT)
        assert session.enter_department().name == "CS"

    def test_enter_department_when_invalid_web_then_reprompted(self, make_session):
        session, _ = make_session("CS", "not a url", "cs.edu", "01.01.1990", "y")
        assert session.enter_department().web_page == "cs.edu"


class TestStudentPhase:
    """Student entry, duplicates and cancel."""

    def test_enter_students_when_duplicate_id_then_rejected_before_birth_date(self, make_session):
        session, source = make_session(*ADA, "Grace", "Hopper", "001", "end")

        added = session.enter_students()

        assert [s.full_name for s in added] == ["Ada Lovelace"]
        assert source.remaining == 0

    def test_enter_students_when_id_differs_by_case_then_rejected(self, make_session):
        session, _ = make_session("Ada", "Lovelace", "ab1", "10.12.1815", "y",
                                  "Grace", "Hopper", "AB1", "end")
        assert len(session.enter_students()) == 1

    def test_enter_students_when_cancelled_mid_form_then_entry_restarts(self, make_session):
        session, _ = make_session("Ada", "cancel", *ADA, "end")
        added = session.enter_students()
        assert [s.student_id for s in added] == ["001"]

    def test_enter_students_when_not_confirmed_then_not_registered(self, make_session):
        session, _ = make_session("Ada", "Lovelace", "001", "10.12.1815", "n", "end")
        assert session.enter_students() == []
        assert session.registry.session_students() == []

    def test_enter_students_when_end_any_case_then_loop_closes(self, make_session):
        session, source = make_session("END")
        assert session.enter_students() == []
        assert source.remaining == 0

    def test_enter_students_when_id_has_leading_zeros_then_kept_as_string(self, make_session):
        session, _ = make_session("Ada", "Lovelace", "0007", "10.12.1815", "y", "end")
        assert session.enter_students()[0].student_id == "0007"


class TestCoursePhase:
    """Course entry and duplicate codes."""

    def test_enter_courses_when_code_differs_by_case_then_rejected(self, make_session):
        session, source = make_session(*ALGORITHMS, "Algo Two", "alg101", "end")

        added = session.enter_courses()

        assert [c.code for c in added] == ["ALG101"]
        assert source.remaining == 0

    def test_enter_courses_when_zero_ects_then_reprompted(self, make_session):
        session, _ = make_session("Algorithms", "ALG101", "0", "5", "y", "end")
        assert session.enter_courses()[0].credit_weight == 5


class TestHistory:
    """Students from earlier runs block duplicate IDs but stay out of the report."""

    def test_run_when_id_used_in_earlier_run_then_rejected(self, make_session, results_path):
        results_path.write_text("1. Old Timer - ID: 001 - Birth: N/A - GPA: 3.00\n", encoding="utf-8")
        session, source = make_session(
            *DEPARTMENT,
            "Ada", "Lovelace", "001",
            "Grace", "Hopper", "002", "09.12.1906", "y",
            "end",
            *ALGORITHMS, "end",
            "AA",
        )

        report = session.run()

        assert source.remaining == 0
        assert [s.student_id for s in session.registry.session_students()] == ["002"]
        assert [r.student.student_id for r in report.rankings] == ["002"]

    def test_run_when_history_present_then_restored_students_not_graded(self, make_session, results_path):
        results_path.write_text("1. Old Timer - ID: 900 - Birth: N/A - GPA: 3.00\n", encoding="utf-8")
        session, source = make_session(*DEPARTMENT, *ADA, "end", *ALGORITHMS, "end", "AA")

        session.run()

        assert source.remaining == 0
        old = session.registry.find_student("900")
        assert old.restored
        assert old.calculate_gpa() == pytest.approx(3.0)


class TestGradePhase:
    """Grade entry for session students."""

    def test_enter_grades_when_cancelled_then_course_skipped(self, make_session):
        session, _ = make_session(*ADA, "end", *ALGORITHMS, "end", "cancel")
        session.enter_students()
        session.enter_courses()

        assert session.enter_grades() == 0
        student = session.registry.session_students()[0]
        assert student.calculate_gpa() == 0.0
        assert not student.has_course(session.registry.courses()[0])

    def test_enter_grades_when_invalid_code_then_reprompted(self, make_session):
        session, _ = make_session(*ADA, "end", *ALGORITHMS, "end", "XX", "ba")
        session.enter_students()
        session.enter_courses()

        assert session.enter_grades() == 1
        assert session.registry.session_students()[0].calculate_gpa() == pytest.approx(3.50)

    def test_enter_grades_when_course_already_graded_then_not_asked(self, make_session):
        registry = RecordRegistry()
        session, source = make_session(*ALGORITHMS, "end", registry=registry)
        session.enter_courses()
        student = registry.register_student(Student("Ada", "Lovelace", "001"))
        student.add_grade(registry.courses()[0], 2.0)

        assert session.enter_grades() == 0
        assert source.remaining == 0

    def test_enter_grades_when_no_courses_then_nothing_asked(self, make_session):
        session, _ = make_session(*ADA, "end", "end")
        session.enter_students()
        session.enter_courses()
        assert session.enter_grades() == 0


class TestReportPhase:
    """A failed report write is reported and the run still finishes."""

    def test_run_when_results_path_is_directory_then_report_returned(self, scripted_input, tmp_path,
                                                                     capsys, caplog):
        blocked = tmp_path / "results.txt"
        blocked.mkdir()
        prompter = InputPrompter(
            input_func=scripted_input([*DEPARTMENT, *ADA, "end", *ALGORITHMS, "end", "AA"]),
            output_func=lambda _: None,
        )
        session = GradingSession(prompter=prompter, results_path=blocked)

        with caplog.at_level("INFO", logger="gradebook"):
            report = session.run()

        assert report.rankings[0].gpa == pytest.approx(4.00)
        assert ">> File Write Error" in capsys.readouterr().err
        assert "Error writing file" in caplog.text
        assert blocked.is_dir()
