import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence
from student_reports.config import settings
from student_reports.exceptions import StudentDataError
from student_reports.pipeline.processor import process_student_data

logger = logging.getLogger("student_reports.cli")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Fetch student records and print summary reports")
    p.add_argument("--url", default=None, help=f"student data endpoint (default: {settings.students_api_url})")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level.upper(),
        help="logging level (default: %(default)s)"
    )
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    try:
        asyncio.run(process_student_data(args.url))
    except StudentDataError as e:
        logger.error("Application error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
