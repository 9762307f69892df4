from typing import Sequence
from student_reports.models.student import StudentRecord


def first_name(student: StudentRecord) -> str:
    return student.first_name


def full_name(student: StudentRecord) -> str:
    return f"{student.first_name} {student.last_name}"


def average_grade(students: Sequence[StudentRecord]) -> float:
    """Mean of the students' average grades, 0 for an empty group."""
    if not students:
        return 0.0

    total_grade = sum(student.average_grade for student in students)
    return total_grade / len(students)
