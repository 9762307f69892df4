import httpx
import pytest
from fastapi.testclient import TestClient
from conftest import STUDENTS_URL, make_client
from main import app
from student_reports.api.student_client import StudentDataClient
from student_reports.api.v1.endpoints.reports import get_student_client, get_report_logger
from student_reports.utils.logger import ReportLogger

client = TestClient(app)


@pytest.fixture(autouse=True)
def clear_overrides():
    yield
    app.dependency_overrides.clear()


def test_root():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["message"] == "Welcome to Student Reports"


def test_health_check():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_fetch_report(json_client):
    app.dependency_overrides[get_student_client] = lambda: json_client
    app.dependency_overrides[get_report_logger] = lambda: None

    response = client.get("/api/v1/reports/")

    assert response.status_code == 200
    assert response.json() == {
        "total_students": 2,
        "high_performers": 2,
        "top_female_students": ["Ana"],
        "adult_male_students": ["Bob Y"],
        "senior_female_average_grade": 0.0,
        "male_b_students": ["Bob"],
    }


def test_fetch_report_upstream_error():
    app.dependency_overrides[get_student_client] = lambda: make_client(lambda request: httpx.Response(500))
    app.dependency_overrides[get_report_logger] = lambda: None

    response = client.get("/api/v1/reports/")

    assert response.status_code == 502
    assert "500" in response.json()["detail"]


def test_fetch_report_parse_error():
    app.dependency_overrides[get_student_client] = lambda: make_client(
        lambda request: httpx.Response(200, text="oops")
    )
    app.dependency_overrides[get_report_logger] = lambda: None

    response = client.get("/api/v1/reports/")

    assert response.status_code == 502
    assert "parsing" in response.json()["detail"]


def test_create_report_from_posted_records(sample_students):
    response = client.post("/api/v1/reports/", json=sample_students)

    assert response.status_code == 200
    data = response.json()
    assert data["total_students"] == 2
    assert data["adult_male_students"] == ["Bob Y"]


def test_create_report_rejects_bad_records():
    response = client.post("/api/v1/reports/", json=[{"firstName": "Ana"}])
    assert response.status_code == 422


def test_report_history(json_client, tmp_path):
    report_logger = ReportLogger(log_dir=str(tmp_path))
    app.dependency_overrides[get_student_client] = lambda: json_client
    app.dependency_overrides[get_report_logger] = lambda: report_logger

    client.get("/api/v1/reports/")
    response = client.get("/api/v1/reports/history", params={"limit": 5})

    assert response.status_code == 200
    history = response.json()
    assert len(history) == 1
    assert history[0]["report"]["male_b_students"] == ["Bob"]


def test_report_history_disabled():
    app.dependency_overrides[get_report_logger] = lambda: None

    response = client.get("/api/v1/reports/history")
    assert response.status_code == 404


def test_fetch_report_malformed_endpoint():
    app.dependency_overrides[get_student_client] = lambda: StudentDataClient(base_url="http://[::1")
    app.dependency_overrides[get_report_logger] = lambda: None

    response = client.get("/api/v1/reports/")

    assert response.status_code == 502
    assert "fetching" in response.json()["detail"]


def test_fetch_report_ignores_url_query(sample_students):
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json=sample_students)

    app.dependency_overrides[get_student_client] = lambda: make_client(handler)
    app.dependency_overrides[get_report_logger] = lambda: None

    response = client.get("/api/v1/reports/", params={"url": "http://internal.test/admin"})

    assert response.status_code == 200
    assert seen == [STUDENTS_URL]


@pytest.mark.parametrize("limit", [0, -1])
def test_report_history_rejects_non_positive_limit(tmp_path, limit):
    app.dependency_overrides[get_report_logger] = lambda: ReportLogger(log_dir=str(tmp_path))

    response = client.get("/api/v1/reports/history", params={"limit": limit})

    assert response.status_code == 422


def test_report_history_limit(json_client, tmp_path):
    report_logger = ReportLogger(log_dir=str(tmp_path))
    app.dependency_overrides[get_student_client] = lambda: json_client
    app.dependency_overrides[get_report_logger] = lambda: report_logger

    for _ in range(3):
        client.get("/api/v1/reports/")

    assert len(client.get("/api/v1/reports/history").json()) == 3
    assert len(client.get("/api/v1/reports/history", params={"limit": 2}).json()) == 2
