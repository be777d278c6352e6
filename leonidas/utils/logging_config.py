"""
Logging configuration using structlog for structured, JSON-based logging.

Logs go to stderr so that stdout stays free for step outputs when no
``$GITHUB_OUTPUT`` file is available.
"""

import sys
from typing import Any

import structlog


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structured logging with JSON output.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level.upper()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def bind_issue_context(repository: str, issue_number: int | None, mode: str | None = None) -> None:
    """Attach the invocation's identifiers to every subsequent log line."""
    structlog.contextvars.clear_contextvars()
    context: dict[str, Any] = {"repository": repository, "issue": issue_number}
    if mode:
        context["mode"] = mode
    structlog.contextvars.bind_contextvars(**context)
