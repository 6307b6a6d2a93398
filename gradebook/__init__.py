"""
Student Grading System Package
==============================

An interactive record keeper for one department's students, courses and
grades. It computes credit-weighted GPAs and appends a ranked report to a
results file.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                           DATA LAYER                                    │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────────┐  ┌──────────────────┐  ┌───────────────────────┐  │
│  │ Course / Dept /  │  │  RecordRegistry  │  │ ClassStatisticsEngine │  │
│  │ Student +        │  │ (duplicate rules │  │ (average, histogram,  │  │
│  │ Transcript (GPA) │  │  session scope)  │  │  ranking)             │  │
│  └──────────────────┘  └──────────────────┘  └───────────────────────┘  │
│                                                                         │
│  ┌─────────────────────────┐  ┌─────────────────────────────────────┐   │
│  │     HistoryLoader       │  │           ReportWriter              │   │
│  │ (restore earlier runs)  │  │   (render + append results file)    │   │
│  └─────────────────────────┘  └─────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                        CONSOLE LAYER                                    │
│                                                                         │
│  InputPrompter     retry-until-valid prompts, returns Ok / Cancelled    │
│  TerminalDisplay   banners, review blocks, report tables                │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                        GradingSession                                   │
│           (Orchestrator - runs the entry phases in order)               │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

gradebook/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── exceptions.py        # Exception hierarchy
├── logging_setup.py     # Audit log (app.log)
├── session.py           # GradingSession orchestrator
├── cli.py               # Program entry point
│
├── models/              # Data classes
│   ├── course.py        # Course, Department
│   ├── transcript.py    # Transcript (GPA calculation)
│   ├── student.py       # Student
│   ├── outcome.py       # Ok, Invalid, Cancelled
│   └── report.py        # ClassStatistics, GpaHistogram, ...
│
├── engines/
│   ├── registry.py      # RecordRegistry
│   └── statistics.py    # ClassStatisticsEngine
│
├── data/                # Results file I/O
│   ├── history.py       # HistoryLoader
│   └── report_writer.py # ReportWriter
│
└── ui/
    ├── terminal.py      # TerminalDisplay
    ├── prompts.py       # InputPrompter
    └── validation.py    # Pure input validators

USAGE
-----

    from gradebook import Course, Student

    algorithms = Course("Algorithms", "ALG101", 5)
    ada = Student("Ada", "Lovelace", "001")
    ada.add_grade(algorithms, 4.0)
    ada.calculate_gpa()   # 4.0

Running from command line:

    python -m gradebook

"""

# Version
__version__ = "1.0.0"

# Main exports
from .session import GradingSession
from .cli import main

# Model exports
from .models import (
    Course,
    Department,
    Transcript,
    Student,
    Ok,
    Invalid,
    Cancelled,
    ClassStatistics,
    GpaHistogram,
    RankedStudent,
    ClassReport,
)

# Engine exports
from .engines import RecordRegistry, ClassStatisticsEngine

# Data exports
from .data import HistoryLoader, ReportWriter

# UI exports
from .ui import TerminalDisplay, InputPrompter

# Exceptions
from .exceptions import (
    GradebookError,
    ValidationError,
    DuplicateIdError,
    DuplicateCodeError,
    PersistenceError,
    InputClosedError,
)

# Configuration exports
from .config import LETTER_GRADES, RESULTS_FILE, LOG_FILE

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "GradingSession",
    "main",
    # Models
    "Course",
    "Department",
    "Transcript",
    "Student",
    "Ok",
    "Invalid",
    "Cancelled",
    "ClassStatistics",
    "GpaHistogram",
    "RankedStudent",
    "ClassReport",
    # Engines
    "RecordRegistry",
    "ClassStatisticsEngine",
    # Data
    "HistoryLoader",
    "ReportWriter",
    # UI
    "TerminalDisplay",
    "InputPrompter",
    # Exceptions
    "GradebookError",
    "ValidationError",
    "DuplicateIdError",
    "DuplicateCodeError",
    "PersistenceError",
    "InputClosedError",
    # Config
    "LETTER_GRADES",
    "RESULTS_FILE",
    "LOG_FILE",
]
