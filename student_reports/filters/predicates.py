"""
Predicate factories over a single student record.

Each factory takes the parameter to compare against and returns a
``StudentRecord -> bool`` function suitable for ``filter``. String
comparisons are exact and case-sensitive.
"""
from typing import Callable
from student_reports.models.student import StudentRecord

StudentPredicate = Callable[[StudentRecord], bool]


def by_min_average_grade(min_grade: float) -> StudentPredicate:
    """Average grade at or above ``min_grade``."""
    def predicate(student: StudentRecord) -> bool:
        return student.average_grade >= min_grade
    return predicate


def by_exact_grade(grade: float) -> StudentPredicate:
    """Average grade exactly equal to ``grade``, no tolerance."""
    def predicate(student: StudentRecord) -> bool:
        return student.average_grade == grade
    return predicate


def by_gender(gender: str) -> StudentPredicate:
    def predicate(student: StudentRecord) -> bool:
        return student.gender == gender
    return predicate


def by_city(city: str) -> StudentPredicate:
    def predicate(student: StudentRecord) -> bool:
        return student.city == city
    return predicate


def by_min_age(min_age: int) -> StudentPredicate:
    def predicate(student: StudentRecord) -> bool:
        return student.age >= min_age
    return predicate


def by_name_starts_with(prefix: str) -> StudentPredicate:
    """First name begins with ``prefix``."""
    def predicate(student: StudentRecord) -> bool:
        return student.first_name.startswith(prefix)
    return predicate
