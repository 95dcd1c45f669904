"""Structured Logging — JSON formatter, per-request context, and setup.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Records emitted while a request is being handled carry its method and path
    - Extra fields (user_id, error_code, operation) surfaced when present
    - JSON format in production, human-readable in development

Design Decisions:
    - Request context held in a ContextVar: each request's async call chain sees
      its own method/path without threading it through every store call
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from contextvars import ContextVar, Token
from datetime import datetime, timezone

_request_context: ContextVar[dict | None] = ContextVar(
    "request_context", default=None,
)

_EXTRA_FIELDS = ("user_id", "error_code", "operation")


def bind_request(method: str, path: str) -> Token:
    """Attach method/path to every record logged until reset_request()."""
    return _request_context.set({"method": method, "path": path})


def reset_request(token: Token) -> None:
    _request_context.reset(token)


class RequestContextFilter(logging.Filter):
    """Copy the bound request's method/path onto the record (explicit extras win)."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = _request_context.get()
        if context:
            for key, value in context.items():
                if record.__dict__.get(key) is None:
                    setattr(record, key, value)
        return True


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        method, path = record.__dict__.get("method"), record.__dict__.get("path")
        if path is not None:
            log["request"] = f"{method} {path}" if method else path
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    handler.addFilter(RequestContextFilter())
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
