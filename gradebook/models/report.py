"""
Report data models.

Contains the dataclasses produced by the statistics engine and consumed by
the terminal display and the report writer.
"""

from dataclasses import dataclass, field

from .student import Student


@dataclass
class ClassStatistics:
    """
    Summary numbers for the students in a report.

    All values are 0.0 when there are no students.
    """
    total_students: int
    average_gpa: float
    highest_gpa: float
    lowest_gpa: float


@dataclass
class GpaHistogram:
    """
    Student counts per GPA bucket.

    Example for GPAs [4.0, 3.6, 3.1, 2.4, 1.0]:
        counts: {"high": 2, "good": 1, "mid": 1, "fail": 1}
        labels: {"high": "3.50+ [High]", ...}
    """
    counts: dict              # bucket key -> number of students
    labels: dict              # bucket key -> display label

    def buckets(self) -> list:
        """Return (label, count) pairs from the highest bucket down."""
        return [(self.labels[key], self.counts[key]) for key in self.counts]


@dataclass
class RankedStudent:
    """A student's position in the GPA-descending ranking."""
    rank: int
    student: Student
    gpa: float


@dataclass
class ClassReport:
    """Everything needed to print or write one session's report."""
    statistics: ClassStatistics
    histogram: GpaHistogram
    rankings: list = field(default_factory=list)   # List of RankedStudent
