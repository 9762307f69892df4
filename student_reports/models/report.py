from pydantic import BaseModel
from typing import List


class StudentReport(BaseModel):
    total_students: int
    high_performers: int
    top_female_students: List[str]
    adult_male_students: List[str]
    senior_female_average_grade: float
    male_b_students: List[str]
