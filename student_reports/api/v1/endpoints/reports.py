from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Optional, List, Dict, Any
from student_reports.api.student_client import StudentDataClient
from student_reports.config import settings
from student_reports.exceptions import FetchError, ParseError
from student_reports.models.report import StudentReport
from student_reports.models.student import StudentRecord
from student_reports.pipeline.queries import run_queries
from student_reports.utils.logger import ReportLogger

router = APIRouter()


def get_student_client() -> StudentDataClient:
    return StudentDataClient()


def get_report_logger() -> Optional[ReportLogger]:
    if not settings.report_log_enabled:
        return None
    return ReportLogger()


@router.get("/", response_model=StudentReport)
async def fetch_report(
    client: StudentDataClient = Depends(get_student_client),
    report_logger: Optional[ReportLogger] = Depends(get_report_logger)
):
    """Fetch students from the configured endpoint and run all queries."""
    try:
        students = await client.get_students()
    except FetchError as e:
        raise HTTPException(status_code=502, detail=f"Error fetching student data: {str(e)}")
    except ParseError as e:
        raise HTTPException(status_code=502, detail=f"Error parsing student data: {str(e)}")

    report = run_queries(students)
    if report_logger is not None:
        report_logger.log_report(source_url=client.base_url, report=report)
    return report


@router.post("/", response_model=StudentReport)
async def create_report(students: List[StudentRecord]):
    """Run all queries over the posted student records."""
    return run_queries(students)


@router.get("/history", response_model=List[Dict[str, Any]])
async def get_report_history(
    limit: Optional[int] = Query(None, ge=1),
    report_logger: Optional[ReportLogger] = Depends(get_report_logger)
):
    """List previously produced reports, newest first."""
    if report_logger is None:
        raise HTTPException(status_code=404, detail="Report history is disabled")
    return report_logger.get_reports(limit=limit)
