from student_reports.filters.predicates import (
    StudentPredicate,
    by_min_average_grade,
    by_exact_grade,
    by_gender,
    by_city,
    by_min_age,
    by_name_starts_with,
)
from student_reports.filters.projections import first_name, full_name, average_grade

__all__ = [
    "StudentPredicate",
    "by_min_average_grade",
    "by_exact_grade",
    "by_gender",
    "by_city",
    "by_min_age",
    "by_name_starts_with",
    "first_name",
    "full_name",
    "average_grade",
]
