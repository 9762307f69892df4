from typing import Optional


class StudentDataError(Exception):
    """Base error for anything that goes wrong while loading student data."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class FetchError(StudentDataError):
    """The endpoint could not be reached or answered with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message, url=url)
        self.status_code = status_code


class ParseError(StudentDataError):
    """The response body is not a JSON list of student records."""
