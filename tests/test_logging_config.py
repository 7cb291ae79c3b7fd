"""Logging setup tests."""

import json
import logging

from akkuea_curation.logging_config import CloudRunJsonFormatter, setup_logging


def test_cloud_run_json_line():
    """Cloud Run formatter emits one JSON object with severity."""
    record = logging.LogRecord("akkuea_curation.curation.service", logging.WARNING, __file__, 10, "AI curation error: %s", ("boom",), None)
    payload = json.loads(CloudRunJsonFormatter().format(record))
    assert payload["severity"] == "WARNING"
    assert payload["message"] == "AI curation error: boom"
    assert payload["logger"] == "akkuea_curation.curation.service"


def test_local_setup_creates_log_files(tmp_path, monkeypatch):
    """Local mode writes curation.log and error.log under log_dir."""
    monkeypatch.delenv("K_SERVICE", raising=False)
    setup_logging(log_level="DEBUG", log_dir=str(tmp_path))
    try:
        logging.getLogger("akkuea_curation.test").error("disk check")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "disk check" in (tmp_path / "curation.log").read_text(encoding="utf-8")
        assert "disk check" in (tmp_path / "error.log").read_text(encoding="utf-8")
    finally:
        for handler in logging.getLogger().handlers:
            handler.close()
        logging.getLogger().handlers.clear()


def test_cloud_run_setup_uses_json(monkeypatch):
    monkeypatch.setenv("K_SERVICE", "akkuea-curation")
    setup_logging(log_level="INFO")
    try:
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, CloudRunJsonFormatter)
    finally:
        logging.getLogger().handlers.clear()
