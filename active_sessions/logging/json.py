"""JSON log output for tracker processes.

Every record becomes a single JSON object stamped with service, host, pid and
environment. Fields whose names match a redaction pattern (``session_id``
among them with the default patterns) are replaced before serialisation.
"""

from __future__ import annotations

import json
import logging
import os
import socket
import traceback
from datetime import datetime, timezone
from typing import Iterable, Optional

REDACTED = "[REDACTED]"


class SensitiveDataFilter:
    def __init__(self, patterns: Iterable[str]):
        self.patterns = [p.lower() for p in patterns]

    def filter(self, data: dict) -> dict:
        out = {}
        for k, v in data.items():
            if any(p in k.lower() for p in self.patterns):
                out[k] = REDACTED
            elif isinstance(v, dict):
                out[k] = self.filter(v)
            else:
                out[k] = v
        return out


class CustomJsonFormatter(logging.Formatter):
    def __init__(
        self,
        service: str,
        environment: str,
        redaction_patterns: Iterable[str],
    ):
        super().__init__()
        self.hostname = socket.gethostname()
        self.pid = os.getpid()
        self.service_name = service
        self.environment = environment
        self.sensitive_filter = SensitiveDataFilter(redaction_patterns)

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        data = record.__dict__.copy()
        data["message"] = record.getMessage()
        data["timestamp"] = datetime.now(timezone.utc).isoformat()
        data["service"] = self.service_name
        data["hostname"] = self.hostname
        data["pid"] = self.pid
        data["environment"] = self.environment
        data.pop("exc_text", None)
        if record.exc_info:
            data["exception"] = self.format_exception(record.exc_info)
        data.pop("exc_info", None)
        data = self.sensitive_filter.filter(data)
        return json.dumps(data, default=str)

    @staticmethod
    def format_exception(exc_info):
        et, ev, tb = exc_info
        return {
            "type": et.__name__,
            "message": str(ev),
            "stack": traceback.format_tb(tb),
        }


def configure_logging(
    service: Optional[str] = None,
    environment: Optional[str] = None,
    level: Optional[str] = None,
    redaction_patterns: Optional[Iterable[str]] = None,
) -> logging.Logger:
    """Install a single JSON handler on the root logger.

    Arguments left as ``None`` fall back to the tracker settings.
    """
    from ..config import settings

    handler = logging.StreamHandler()
    handler.setFormatter(
        CustomJsonFormatter(
            service or settings.otel_service_name,
            environment or settings.app_environment,
            (
                settings.app_log_redaction_patterns
                if redaction_patterns is None
                else redaction_patterns
            ),
        )
    )
    root = logging.getLogger()
    root.handlers = [handler]
    level = level or settings.app_log_level
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    from .logger import mark_configured

    mark_configured()
    return root


__all__ = [
    "CustomJsonFormatter",
    "configure_logging",
    "SensitiveDataFilter",
]
