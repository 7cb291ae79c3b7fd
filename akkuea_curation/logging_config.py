"""Logging configuration for the Akkuea curation service.

Cloud Run → JSON lines on stdout (severity parsed by Cloud Logging)
Local     → Color console + RotatingFileHandler (curation.log + error.log)
"""

import json
import logging
import os
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path

_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class CloudRunJsonFormatter(logging.Formatter):
    """Google Cloud Logging compatible JSON formatter.

    One JSON object per line; ``severity`` is what Cloud Logging filters on.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "severity": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info and record.exc_info[1] is not None:
            payload["exception"] = "".join(traceback.format_exception(*record.exc_info))
        return json.dumps(payload, ensure_ascii=False)


class ColorConsoleFormatter(logging.Formatter):
    """ANSI color console formatter for local development."""

    _COLORS = {
        "DEBUG": "\033[36m",     # cyan
        "INFO": "\033[32m",      # green
        "WARNING": "\033[33m",   # yellow
        "ERROR": "\033[31m",     # red
        "CRITICAL": "\033[1;31m",  # bold red
    }
    _RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self._COLORS.get(record.levelname, self._RESET)
        timestamp = self.formatTime(record, self.datefmt)
        base = f"{timestamp} {color}[{record.levelname}]{self._RESET} {record.name}: {record.getMessage()}"
        if record.exc_info and record.exc_info[1] is not None:
            base += "\n" + "".join(traceback.format_exception(*record.exc_info))
        return base


def _rotating_handler(path: Path, max_bytes: int, backup_count: int) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logging(
    *,
    log_level: str = "INFO",
    log_dir: str = "logs",
    max_bytes: int = 10_485_760,
    backup_count: int = 5,
) -> None:
    """Configure the root logger for the current environment.

    Cloud Run sets ``K_SERVICE`` automatically; its presence selects JSON output
    and skips the file handlers.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    if "K_SERVICE" in os.environ:
        handler = logging.StreamHandler()
        handler.setFormatter(CloudRunJsonFormatter())
        root.addHandler(handler)
    else:
        console = logging.StreamHandler()
        console.setFormatter(ColorConsoleFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(console)

        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        root.addHandler(_rotating_handler(log_path / "curation.log", max_bytes, backup_count))

        error_handler = _rotating_handler(log_path / "error.log", max_bytes, backup_count)
        error_handler.setLevel(logging.ERROR)
        root.addHandler(error_handler)

    # Route uvicorn through root so it shares our formatters
    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True
