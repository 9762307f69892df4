import json
from datetime import datetime, timezone
from typing import Dict, Any, List
from student_reports.config import settings
from student_reports.models.report import StudentReport
from pathlib import Path


class ReportLogger:
    """Appends produced student reports to a JSONL history file."""

    def __init__(self, log_dir: str = None):
        self.log_dir = Path(log_dir or settings.log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = self.log_dir / "reports.jsonl"

    def log_report(self, source_url: str, report: StudentReport):
        """Log one report as a single JSON line."""
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "source_url": source_url,
            "report": report.model_dump()
        }

        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(log_entry, ensure_ascii=False) + "\n")

    def get_reports(self, source_url: str = None, limit: int = None) -> List[Dict[str, Any]]:
        """Retrieve logged reports, newest first, optionally filtered by source."""
        if not self.log_file.exists():
            return []

        reports = []
        with open(self.log_file, "r", encoding="utf-8") as f:
            for line in f:
                if not line.strip():
                    continue
                try:
                    entry = json.loads(line)
                except json.JSONDecodeError:
                    continue
                if source_url and entry.get("source_url") != source_url:
                    continue
                reports.append(entry)

        reports.sort(key=lambda x: x.get("timestamp", ""), reverse=True)

        if limit is not None:
            reports = reports[:limit]

        return reports
