"""
Structured JSON logging utilities for CI environments.

Check decisions are logged one line per decision point. Every JSON line
carries the actor and repository the check ran for, so a runner's log
stream can be filtered per invocation.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

# Context keys bound by GuardLoggerAdapter and always present in JSON output
CONTEXT_FIELDS = ("actor", "repository")


class StructuredJsonFormatter(logging.Formatter):
    """
    JSON formatter for access check logs.

    Each record becomes one line with:
    - timestamp: ISO 8601 format in UTC
    - level, logger, message
    - actor, repository: invocation context (null when not bound)
    - decision: strategy outcome, when the record carries one
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_obj: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in CONTEXT_FIELDS:
            log_obj[key] = getattr(record, key, None)

        decision = getattr(record, "decision", None)
        if decision is not None:
            log_obj["decision"] = decision

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str)


def configure_structured_logging(
    level: int = logging.INFO,
    logger_name: str | None = "actor_access_guard",
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Send guard logs to ``stream`` (stdout by default) as JSON lines.

    Replaces any handlers already on the logger, so calling it twice does
    not duplicate output.
    """
    logger = logging.getLogger(logger_name)
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(StructuredJsonFormatter())

    logger.addHandler(handler)
    logger.setLevel(level)

    return logger


def get_guard_logger(name: str) -> logging.Logger:
    """Return the ``actor_access_guard.{name}`` logger."""
    return logging.getLogger(f"actor_access_guard.{name}")


class GuardLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter scoped to a single check invocation.

    Binds actor and repository to every record, so one invocation's lines
    can be correlated without shared state. Per-call ``extra`` (such as a
    strategy decision) is merged on top.
    """

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


GuardLog = logging.Logger | logging.LoggerAdapter


def bind_logger(
    log: GuardLog | None,
    component: str,
    **context: Any,
) -> GuardLog:
    """Return the caller's logger, or a fresh adapter bound to ``context``."""
    if log is not None:
        return log
    return GuardLoggerAdapter(get_guard_logger(component), context)
