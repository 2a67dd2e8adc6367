"""Lightweight structured logging for the CLI and API processes."""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Dict, Optional, TextIO

TEXT_FORMAT = "%(asctime)s %(levelname).1s %(name)s - %(message)s"
TEXT_DATEFMT = "%Y-%m-%d %H:%M:%S"
EXTRA_ATTRS = ("request_path", "method", "status_code", "latency_ms", "client", "url", "airline")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for attr in EXTRA_ATTRS:
            value = getattr(record, attr, None)
            if value is not None:
                payload[attr] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def _build_formatter(json_output: Optional[bool]) -> logging.Formatter:
    if json_output is None:
        json_output = os.environ.get("LOG_FORMAT", "json").strip().lower() != "text"
    if json_output:
        return JsonFormatter()
    return logging.Formatter(fmt=TEXT_FORMAT, datefmt=TEXT_DATEFMT)


def setup_logging(
    default_level: str | int = logging.INFO,
    stream: Optional[TextIO] = None,
    json_output: Optional[bool] = None,
) -> None:
    """
    Configure the root logger; reuse existing stream handlers when present.

    Logs go to stderr by default so console reports on stdout stay readable.
    `LOG_LEVEL` overrides the level and `LOG_FORMAT=text` switches to plain lines.
    """
    level = os.environ.get("LOG_LEVEL", default_level)
    if isinstance(level, str):
        level = level.strip().upper() or logging.INFO
    root = logging.getLogger()
    root.setLevel(level)
    formatter = _build_formatter(json_output)

    # Avoid duplicating handlers if this is called more than once (e.g., in tests)
    if any(isinstance(handler, logging.StreamHandler) for handler in root.handlers):
        for handler in root.handlers:
            handler.setFormatter(formatter)
        return

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    root.addHandler(handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
