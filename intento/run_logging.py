"""Per-run logging for Intento API calls."""

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


class RunLogger:
    """
    File-backed logger for a series of client calls.

    Pass an instance to client_with_logger(): it is callable like any other
    logger, and the client also records each request, response and failure
    through it.
    """

    def __init__(self, runs_dir: Path, run_id: Optional[str] = None):
        """
        Initialize run logger.

        Args:
            runs_dir: Base directory for run logs (e.g., work/runs)
            run_id: Optional run ID. If None, generates a new UUID.
        """
        self.runs_dir = Path(runs_dir)
        self.run_id = run_id or str(uuid.uuid4())
        self.run_dir = self.runs_dir / self.run_id
        self.run_dir.mkdir(parents=True, exist_ok=True)

        self.messages_file = self.run_dir / "messages.jsonl"
        self.requests_file = self.run_dir / "requests.jsonl"
        self.responses_file = self.run_dir / "responses.jsonl"
        self.failures_file = self.run_dir / "failures.jsonl"
        self.summary_file = self.run_dir / "summary.json"

        self.summary = {
            "run_id": self.run_id,
            "started_at": _timestamp(),
            "completed_at": None,
            "requests_sent": 0,
            "responses_received": 0,
            "failures": 0,
            "messages": 0,
        }

    def _append(self, path: Path, record: Dict[str, Any]) -> None:
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")

    def __call__(self, message: str, *args: Any) -> None:
        """Record a %-style formatted message."""
        if args:
            message = message % args
        self._append(self.messages_file, {
            "timestamp": _timestamp(),
            "message": message,
        })
        self.summary["messages"] += 1

    def log_request(self, method: str, url: str, payload: Optional[Dict[str, Any]] = None) -> None:
        """
        Log an outgoing request. The API key is never part of the record.

        Args:
            method: HTTP method
            url: Request URL
            payload: JSON body, if any
        """
        self._append(self.requests_file, {
            "timestamp": _timestamp(),
            "method": method,
            "url": url,
            "payload": payload,
        })
        self.summary["requests_sent"] += 1

    def log_response(self, method: str, url: str, status_code: int) -> None:
        """
        Log a received response.

        Args:
            method: HTTP method of the request
            url: Request URL
            status_code: HTTP status code
        """
        self._append(self.responses_file, {
            "timestamp": _timestamp(),
            "method": method,
            "url": url,
            "status_code": status_code,
            "success": 200 <= status_code <= 299,
        })
        self.summary["responses_received"] += 1

    def log_failure(
        self,
        error_type: str,
        error_message: str,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log a failed call.

        Args:
            error_type: Error kind (e.g., "auth_key_missing", "transport")
            error_message: Error message
            context: Optional context dictionary
        """
        self._append(self.failures_file, {
            "timestamp": _timestamp(),
            "error_type": error_type,
            "error_message": error_message,
            "context": context or {},
        })
        self.summary["failures"] += 1

    def finalize(self) -> None:
        """Finalize the run and write summary."""
        self.summary["completed_at"] = _timestamp()

        with open(self.summary_file, "w", encoding="utf-8") as f:
            json.dump(self.summary, f, ensure_ascii=False, indent=2)

    def get_summary(self) -> Dict[str, Any]:
        """Get current summary."""
        return self.summary.copy()
