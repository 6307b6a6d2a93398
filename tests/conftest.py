import pytest
import sys
from datetime import date
from pathlib import Path

# Add the repository root to sys.path so we can import gradebook
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

from gradebook.models import Course, Department, Student


class ScriptedInput:
    """Stand-in for input(): returns queued lines, then raises EOFError."""

    def __init__(self, lines):
        self._lines = list(lines)
        self.prompts = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._lines)


# Common test fixtures
@pytest.fixture
def scripted_input():
    """Return a factory building ScriptedInput objects."""
    return ScriptedInput


@pytest.fixture
def fixed_today():
    return date(2025, 6, 15)


@pytest.fixture
def algorithms():
    return Course("Algorithms", "ALG101", 5)


@pytest.fixture
def cs_department():
    return Department("CS", "cs.edu", date(1990, 1, 1))


@pytest.fixture
def ada():
    return Student("Ada", "Lovelace", "001", date(1815, 12, 10))


@pytest.fixture
def results_path(tmp_path: Path) -> Path:
    return tmp_path / "results.txt"
