"""
Class Statistics Engine.

This module turns a list of students into the numbers shown at the end
of a session: class average, highest and lowest GPA, a GPA histogram and
the ranking.
"""

from ..config import HISTOGRAM_BUCKETS, HISTOGRAM_FAIL_LABEL
from ..models import ClassStatistics, GpaHistogram, RankedStudent, ClassReport


class ClassStatisticsEngine:
    """
    Computes report figures from students' GPAs.

    HISTOGRAM BUCKETS:
    ------------------
    Each GPA lands in the first bucket whose threshold it reaches:

        3.50+  high
        3.00+  good
        2.00+  mid
        below  fail

    RANKING:
    --------
    Students are ordered by descending GPA. The sort is stable, so students
    with equal GPAs keep the order they were entered in.
    """

    def statistics(self, students: list) -> ClassStatistics:
        if not students:
            return ClassStatistics(0, 0.0, 0.0, 0.0)

        gpas = [s.calculate_gpa() for s in students]
        return ClassStatistics(
            total_students=len(gpas),
            average_gpa=sum(gpas) / len(gpas),
            highest_gpa=max(gpas),
            lowest_gpa=min(gpas),
        )

    def histogram(self, students: list) -> GpaHistogram:
        counts = {key: 0 for key, _, _ in HISTOGRAM_BUCKETS}
        counts["fail"] = 0
        labels = {key: label for key, label, _ in HISTOGRAM_BUCKETS}
        labels["fail"] = HISTOGRAM_FAIL_LABEL

        for student in students:
            counts[self.bucket_for(student.calculate_gpa())] += 1

        return GpaHistogram(counts=counts, labels=labels)

    @staticmethod
    def bucket_for(gpa: float) -> str:
        for key, _, threshold in HISTOGRAM_BUCKETS:
            if gpa >= threshold:
                return key
        return "fail"

    def rank(self, students: list) -> list:
        ordered = sorted(students, key=lambda s: s.calculate_gpa(), reverse=True)
        return [
            RankedStudent(rank=i, student=s, gpa=s.calculate_gpa())
            for i, s in enumerate(ordered, 1)
        ]

    def build_report(self, students: list) -> ClassReport:
        return ClassReport(
            statistics=self.statistics(students),
            histogram=self.histogram(students),
            rankings=self.rank(students),
        )
