import logging
import httpx
from pydantic import TypeAdapter, ValidationError
from typing import Optional, List
from student_reports.config import settings
from student_reports.exceptions import FetchError, ParseError
from student_reports.models.student import StudentRecord

logger = logging.getLogger(__name__)

_student_list = TypeAdapter(List[StudentRecord])


class StudentDataClient:
    """Client for loading student records from a JSON endpoint."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url or settings.students_api_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport

    async def get_students(self, url: Optional[str] = None) -> List[StudentRecord]:
        """Fetch the student list with a single GET. No retries."""
        url = url or self.base_url

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error("Failed to fetch student data from %s: status %s", url, status_code)
            raise FetchError(
                f"HTTP error! status: {status_code}",
                status_code=status_code,
                url=url
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("Failed to fetch student data from %s: %s", url, e)
            raise FetchError(f"Failed to fetch student data: {e}", url=url) from e

        try:
            return _student_list.validate_python(response.json())
        except ValueError as e:
            # json.JSONDecodeError and pydantic's ValidationError both land here
            kind = "unexpected shape" if isinstance(e, ValidationError) else "invalid JSON"
            logger.error("Failed to parse student data from %s: %s", url, kind)
            raise ParseError(f"Failed to parse student data: {kind}", url=url) from e
