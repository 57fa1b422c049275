"""Tests for the per-run logger."""

import json
import logging
import pytest
import shutil
from unittest.mock import Mock

from intento.client import Client
from intento.client_options import client_with_http_client, client_with_logger
from intento.errors import AuthKeyIsInvalidError
from intento.run_logging import RunLogger


def read_jsonl(path):
    with open(path, encoding="utf-8") as f:
        return [json.loads(line) for line in f]


def test_run_logger_creates_run_dir(tmp_path):
    """Test the run directory is created under runs_dir."""
    logger = RunLogger(tmp_path, run_id="run-1")
    assert logger.run_dir == tmp_path / "run-1"
    assert logger.run_dir.is_dir()


def test_run_logger_generates_run_id(tmp_path):
    """Test a run ID is generated when none is given."""
    assert RunLogger(tmp_path).run_id != RunLogger(tmp_path).run_id


def test_run_logger_messages(tmp_path):
    """Test the logger formats and stores messages."""
    logger = RunLogger(tmp_path, run_id="run-1")

    logger("close response body: %s", "boom")
    logger("plain message")

    records = read_jsonl(logger.messages_file)
    assert [r["message"] for r in records] == ["close response body: boom", "plain message"]
    assert logger.get_summary()["messages"] == 2


def test_run_logger_finalize(tmp_path):
    """Test finalize writes the summary file."""
    logger = RunLogger(tmp_path, run_id="run-1")
    logger.log_failure("transport", "send request: refused")
    logger.finalize()

    with open(logger.summary_file, encoding="utf-8") as f:
        summary = json.load(f)
    assert summary["run_id"] == "run-1"
    assert summary["failures"] == 1
    assert summary["completed_at"] is not None


def test_run_logger_records_client_calls(tmp_path):
    """Test the client records requests, responses and failures through RunLogger."""
    logger = RunLogger(tmp_path, run_id="run-1")

    ok = Mock(status_code=200, content=b'{"results": ["Hola"]}')
    denied = Mock(status_code=403, content=b"")
    http_client = Mock()
    http_client.request.side_effect = [ok, denied]

    client = Client(
        "secret-key",
        client_with_http_client(http_client),
        client_with_logger(logger),
    )

    client.translate(["Hello"], "en", "es")
    with pytest.raises(AuthKeyIsInvalidError):
        client.translate(["Hello"], "en", "es")

    requests_log = read_jsonl(logger.requests_file)
    assert len(requests_log) == 2
    assert requests_log[0]["method"] == "POST"
    assert requests_log[0]["payload"]["context"]["text"] == ["Hello"]
    assert "secret-key" not in logger.requests_file.read_text(encoding="utf-8")

    responses_log = read_jsonl(logger.responses_file)
    assert [r["status_code"] for r in responses_log] == [200, 403]
    assert [r["success"] for r in responses_log] == [True, False]

    failures = read_jsonl(logger.failures_file)
    assert failures[0]["error_type"] == "auth_key_invalid"
    assert not logger.messages_file.exists()


def test_run_logger_missing_run_dir_keeps_result(tmp_path, caplog):
    """Test a run directory removed mid-run does not break client calls."""
    logger = RunLogger(tmp_path, run_id="run-1")
    shutil.rmtree(logger.run_dir)

    http_client = Mock()
    http_client.request.return_value = Mock(status_code=200, content=b'{"results": ["Hola"]}')
    client = Client("key", client_with_http_client(http_client), client_with_logger(logger))

    with caplog.at_level(logging.WARNING, logger="intento"):
        result = client.translate(["Hello"], "en", "es")

    assert result.results == ("Hola",)
    assert "log_request" in caplog.text
