"""Structured logging: JSON lines on stderr with credential masking."""

from __future__ import annotations

import json
import os
import sys
import time
import uuid
from typing import Any, Optional

_SECRET_ENV_VARS = ("JIRA_API_TOKEN", "TEMPO_API_TOKEN")
_MASK = "***"


def _scrub(text: str) -> str:
    """Mask configured API tokens wherever they appear in a log line."""
    for name in _SECRET_ENV_VARS:
        secret = (os.getenv(name) or "").strip()
        if len(secret) >= 4:
            text = text.replace(secret, _MASK)
    return text


class StructuredLogger:
    """Emits one JSON object per event, tagged with a trace id."""

    def __init__(self, trace_id: Optional[str] = None, output=None):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output or sys.stderr
        self._timers: dict[str, float] = {}

    def _emit(self, data: dict[str, Any]) -> None:
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            line = json.dumps(data, ensure_ascii=False, default=str)
            self._output.write(_scrub(line) + "\n")
            self._output.flush()
        except (OSError, ValueError) as exc:
            sys.stderr.write(
                json.dumps({"event": "logger_internal_error", "trace_id": self.trace_id, "error": str(exc)}) + "\n"
            )

    def step_start(self, step: str, **extra: Any) -> None:
        self._timers[step] = time.time()
        self._emit({"event": "step_start", "step": step, **extra})

    def step_end(self, step: str, **extra: Any) -> None:
        start = self._timers.pop(step, time.time())
        duration_ms = round((time.time() - start) * 1000, 1)
        self._emit({"event": "step_end", "step": step, "duration_ms": duration_ms, **extra})

    def event(self, name: str, **extra: Any) -> None:
        self._emit({"event": name, **extra})

    def warning(self, step: str, message: str, **extra: Any) -> None:
        self._emit({"event": "warning", "step": step, "message": message, **extra})

    def error(self, step: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "step": step, "error": error, **extra})


_logger: Optional[StructuredLogger] = None


def get_logger(trace_id: Optional[str] = None) -> StructuredLogger:
    global _logger
    if _logger is None or (trace_id and _logger.trace_id != trace_id):
        _logger = StructuredLogger(trace_id=trace_id)
    return _logger


def reset_logger() -> None:
    global _logger
    _logger = None
