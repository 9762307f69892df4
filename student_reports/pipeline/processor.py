import logging
from typing import Optional
from student_reports.api.student_client import StudentDataClient
from student_reports.config import settings
from student_reports.exceptions import StudentDataError
from student_reports.models.report import StudentReport
from student_reports.pipeline.queries import run_queries, format_report
from student_reports.utils.logger import ReportLogger

logger = logging.getLogger(__name__)


async def process_student_data(
    url: Optional[str] = None,
    client: Optional[StudentDataClient] = None,
    report_logger: Optional[ReportLogger] = None
) -> StudentReport:
    """
    Fetch the student list once, run every query over it and print the results.

    A fetch or parse failure aborts the whole batch: it is logged and
    re-raised unchanged, and no query output is printed.
    """
    client = client or StudentDataClient()
    source_url = url or client.base_url

    try:
        students = await client.get_students(source_url)
    except StudentDataError as e:
        logger.error("Error processing student data: %s", e)
        raise

    logger.debug("Fetched %d student records from %s", len(students), source_url)
    report = run_queries(students)

    for line in format_report(report):
        print(line)

    if report_logger is None and settings.report_log_enabled:
        report_logger = ReportLogger()
    if report_logger is not None:
        report_logger.log_report(source_url=source_url, report=report)

    return report
