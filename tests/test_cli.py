"""
Integration Tests for the CLI entry point

Checks the audit log lifecycle and top-level error handling.
"""

from gradebook.cli import main
from gradebook.session import GradingSession

SESSION_LINES = [
    "CS", "cs.edu", "01.01.1990", "y",
    "Ada", "Lovelace", "001", "10.12.1815", "y", "end",
    "Algorithms", "ALG101", "5", "y", "end",
    "AA",
]


class TestMain:
    """Tests for main()."""

    def test_main_when_session_completes_then_events_logged(self, scripted_input, results_path, tmp_path):
        log_path = tmp_path / "app.log"

        exit_code = main(input_func=scripted_input(SESSION_LINES),
                         results_path=results_path, log_path=log_path)

        assert exit_code == 0
        log = log_path.read_text(encoding="utf-8")
        assert "System Started." in log
        assert "Department set: CS (cs.edu)" in log
        assert "Student added: ID 001" in log
        assert "Course added: ALG101" in log
        assert "System Terminated." in log
        assert log.splitlines()[0].startswith("[")
        assert "GPA: 4.00" in results_path.read_text(encoding="utf-8")

    def test_main_when_run_twice_then_log_appended(self, scripted_input, results_path, tmp_path):
        log_path = tmp_path / "app.log"
        main(input_func=scripted_input([]), results_path=results_path, log_path=log_path)
        main(input_func=scripted_input([]), results_path=results_path, log_path=log_path)

        assert log_path.read_text(encoding="utf-8").count("System Started.") == 2

    def test_main_when_input_ends_early_then_cleanup_still_runs(self, scripted_input, results_path,
                                                                tmp_path, capsys):
        log_path = tmp_path / "app.log"

        exit_code = main(input_func=scripted_input(["CS"]),
                         results_path=results_path, log_path=log_path)

        assert exit_code == 0
        log = log_path.read_text(encoding="utf-8")
        assert "Input closed" in log
        assert log.rstrip().endswith("System Terminated.")
        assert "Program terminated successfully" in capsys.readouterr().out

    def test_main_when_unexpected_error_then_logged_and_exit_zero(self, scripted_input, results_path,
                                                                  tmp_path, monkeypatch, capsys):
        def explode(self):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(GradingSession, "run", explode)
        log_path = tmp_path / "app.log"

        exit_code = main(input_func=scripted_input([]), results_path=results_path, log_path=log_path)

        assert exit_code == 0
        log = log_path.read_text(encoding="utf-8")
        assert "CRITICAL ERROR: disk on fire" in log
        assert "System Terminated." in log
        assert "CRITICAL SYSTEM ERROR: disk on fire" in capsys.readouterr().err

    def test_main_when_log_file_unwritable_then_session_continues(self, scripted_input, results_path,
                                                                  tmp_path, capsys):
        log_path = tmp_path / "no_such_dir" / "app.log"

        exit_code = main(input_func=scripted_input(SESSION_LINES),
                         results_path=results_path, log_path=log_path)

        assert exit_code == 0
        assert ">> Logger Error" in capsys.readouterr().err
        assert results_path.exists()

    def test_main_when_results_unwritable_then_error_logged(self, scripted_input, tmp_path, capsys):
        blocked = tmp_path / "results.txt"
        blocked.mkdir()
        log_path = tmp_path / "app.log"

        exit_code = main(input_func=scripted_input(SESSION_LINES),
                         results_path=blocked, log_path=log_path)

        assert exit_code == 0
        log = log_path.read_text(encoding="utf-8")
        assert "Error writing file" in log
        assert log.rstrip().endswith("System Terminated.")
        assert ">> File Write Error" in capsys.readouterr().err

    def test_main_when_grade_cancelled_then_skip_logged(self, scripted_input, results_path, tmp_path):
        log_path = tmp_path / "app.log"
        lines = SESSION_LINES[:-1] + ["cancel"]

        main(input_func=scripted_input(lines), results_path=results_path, log_path=log_path)

        log = log_path.read_text(encoding="utf-8")
        assert "Grade skipped for student 001, course ALG101" in log
        assert "GPA: 0.00" in results_path.read_text(encoding="utf-8")
