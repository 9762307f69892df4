import httpx
import pytest
from student_reports.api.student_client import StudentDataClient

SAMPLE_STUDENTS = [
    {"firstName": "Ana", "lastName": "X", "age": 20, "gender": "Female", "city": "Skopje", "averageGrade": 5},
    {"firstName": "Bob", "lastName": "Y", "age": 19, "gender": "Male", "city": "Skopje", "averageGrade": 3},
]

STUDENTS_URL = "https://students.test/api/students"


def make_client(handler) -> StudentDataClient:
    return StudentDataClient(base_url=STUDENTS_URL, transport=httpx.MockTransport(handler))


@pytest.fixture
def sample_students():
    return [dict(s) for s in SAMPLE_STUDENTS]


@pytest.fixture
def json_client(sample_students):
    """Client whose endpoint answers 200 with the sample payload."""
    return make_client(lambda request: httpx.Response(200, json=sample_students))
