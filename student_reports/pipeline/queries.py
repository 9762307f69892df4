from typing import List, Sequence
from student_reports.filters import (
    StudentPredicate,
    by_min_average_grade,
    by_exact_grade,
    by_gender,
    by_city,
    by_min_age,
    by_name_starts_with,
    first_name,
    full_name,
    average_grade,
)
from student_reports.models.report import StudentReport
from student_reports.models.student import StudentRecord

HIGH_PERFORMER_GRADE = 3
TOP_GRADE = 5
TARGET_CITY = "Skopje"
ADULT_AGE = 18
SENIOR_AGE = 24
NAME_PREFIX = "B"
PASSING_GRADE = 2


def apply_filters(students: Sequence[StudentRecord], *predicates: StudentPredicate) -> List[StudentRecord]:
    """Narrow ``students`` one predicate at a time, in the order given."""
    narrowed = list(students)
    for predicate in predicates:
        narrowed = [student for student in narrowed if predicate(student)]
    return narrowed


def run_queries(students: Sequence[StudentRecord]) -> StudentReport:
    """Run the five fixed queries over one snapshot of student records."""
    # 1. High performers
    high_performers = apply_filters(students, by_min_average_grade(HIGH_PERFORMER_GRADE))

    # 2. Top female students
    top_female_students = [
        first_name(s)
        for s in apply_filters(students, by_gender("Female"), by_exact_grade(TOP_GRADE))
    ]

    # 3. Adult male students from the target city
    adult_male_students = [
        full_name(s)
        for s in apply_filters(
            students,
            by_gender("Male"),
            by_city(TARGET_CITY),
            by_min_age(ADULT_AGE)
        )
    ]

    # 4. Senior female students' average grade
    senior_female_students = apply_filters(students, by_gender("Female"), by_min_age(SENIOR_AGE))

    # 5. Male students with names starting with the prefix
    male_b_students = [
        first_name(s)
        for s in apply_filters(
            students,
            by_gender("Male"),
            by_name_starts_with(NAME_PREFIX),
            by_min_average_grade(PASSING_GRADE)
        )
    ]

    return StudentReport(
        total_students=len(students),
        high_performers=len(high_performers),
        top_female_students=top_female_students,
        adult_male_students=adult_male_students,
        senior_female_average_grade=average_grade(senior_female_students),
        male_b_students=male_b_students
    )


def format_report(report: StudentReport) -> List[str]:
    """Human-readable console lines for a report."""
    return [
        f"Processing data for {report.total_students} students",
        f"High performers: {report.high_performers}",
        f"Top female students: {report.top_female_students}",
        f"Adult male students from {TARGET_CITY}: {report.adult_male_students}",
        f"Senior female students average grade: {report.senior_female_average_grade}",
        f"Male {NAME_PREFIX}-named students: {report.male_b_students}",
    ]
