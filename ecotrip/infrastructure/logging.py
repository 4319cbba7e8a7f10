"""Structured logging: one JSON object per line."""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional

from ecotrip.config.settings import resolve_engine_settings


class StructuredLogger:
    """Emits JSON lines tagged with a trace id."""

    def __init__(self, trace_id: Optional[str] = None, output=None, enabled: bool = True):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self.enabled = enabled
        self._output = output or sys.stderr
        self._timers: dict[str, float] = {}

    def _emit(self, data: dict[str, Any]) -> None:
        if not self.enabled:
            return
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            line = json.dumps(data, ensure_ascii=False, default=str)
            self._output.write(line + "\n")
            self._output.flush()
        except (OSError, TypeError, ValueError) as exc:
            fallback = {
                "event": "logger_internal_error",
                "trace_id": self.trace_id,
                "timestamp": time.time(),
                "error": str(exc),
            }
            sys.stderr.write(json.dumps(fallback, ensure_ascii=False, default=str) + "\n")
            sys.stderr.flush()

    def calc_start(self, name: str, **extra: Any) -> None:
        self._timers[name] = time.time()
        self._emit({"event": "calc_start", "calc": name, **extra})

    def calc_end(self, name: str, **extra: Any) -> None:
        start = self._timers.pop(name, time.time())
        duration_ms = round((time.time() - start) * 1000, 1)
        self._emit({"event": "calc_end", "calc": name, "duration_ms": duration_ms, **extra})

    def fallback(self, field: str, raw: Any, substitute: str, **extra: Any) -> None:
        self._emit({
            "event": "fallback",
            "field": field,
            "raw": raw,
            "substitute": substitute,
            **extra,
        })

    def error(self, name: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "calc": name, "error": error, **extra})

    def warning(self, name: str, message: str, **extra: Any) -> None:
        self._emit({"event": "warning", "calc": name, "message": message, **extra})

    def summary(self, **extra: Any) -> None:
        self._emit({"event": "summary", **extra})


# Process-wide logger
_logger: Optional[StructuredLogger] = None


def get_logger(trace_id: Optional[str] = None) -> StructuredLogger:
    global _logger
    if _logger is None or (trace_id and _logger.trace_id != trace_id):
        _logger = StructuredLogger(
            trace_id=trace_id,
            enabled=resolve_engine_settings().structured_logs,
        )
    return _logger


def reset_logger() -> None:
    global _logger
    _logger = None


__all__ = ["StructuredLogger", "get_logger", "reset_logger"]
