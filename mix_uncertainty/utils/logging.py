"""Structured logging utilities with JSON output."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

DEFAULT_FIELDS = {"run_id", "component", "stock", "metier", "model", "duration_ms"}


class JSONFormatter(logging.Formatter):
    """JSON formatter adding common contextual fields when present."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for field in DEFAULT_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _context_filter(run_id: Optional[str], component: Optional[str]) -> logging.Filter:
    f = logging.Filter()

    def _filter(record: logging.LogRecord) -> bool:  # type: ignore[override]
        if run_id and not hasattr(record, "run_id"):
            record.run_id = run_id
        if component and not hasattr(record, "component"):
            record.component = component
        return True

    f.filter = _filter  # type: ignore[assignment]
    return f


def configure_logging(run_id: Optional[str] = None, component: Optional[str] = None, level: int = logging.INFO) -> None:
    """Configure root logger with structured JSON output.

    Embeds run_id/component defaults so downstream loggers inherit context without
    requiring every call to pass `extra`.
    """

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(_context_filter(run_id, component))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)


def get_logger(name: str, run_id: Optional[str] = None, component: Optional[str] = None) -> logging.Logger:
    """Convenience helper to fetch a logger with optional context defaults."""

    logger = logging.getLogger(name)
    if run_id or component:
        logger.addFilter(_context_filter(run_id, component))
    return logger


__all__ = ["JSONFormatter", "configure_logging", "get_logger"]
