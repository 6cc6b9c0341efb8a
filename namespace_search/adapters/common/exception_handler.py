"""Exception handling utilities for consistent error formatting.

This module formats exceptions as structured JSON, logs them consistently,
and maps them to HTTP status codes for the API.
"""

import json
import logging
import traceback
from typing import Any

from ...core.domain.exceptions import NamespaceSearchError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def format_exception_json(
    exc: Exception,
    include_trace: bool = False,
    extra_context: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Format any exception as structured JSON.

    Works with both NamespaceSearchError and standard Python exceptions.

    Args:
        exc: The exception to format.
        include_trace: If True, include full stack trace.
        extra_context: Additional context to include in output.

    Returns:
        Dictionary with structured error information.
    """
    if isinstance(exc, NamespaceSearchError):
        result = exc.to_dict(include_trace=include_trace)
        if extra_context:
            result.setdefault("context", {}).update(extra_context)
        return result

    # Handle standard Python exceptions
    tb = traceback.extract_tb(exc.__traceback__) if exc.__traceback__ else []
    last_frame = tb[-1] if tb else None

    result: dict[str, Any] = {
        "error": {
            "type": type(exc).__name__,
            "code": "PYTHON_ERR",
            "message": str(exc),
        },
        "location": {
            "class": "<unknown>",
            "method": last_frame.name if last_frame else "<unknown>",
            "file": (
                last_frame.filename.split("\\")[-1].split("/")[-1] if last_frame else "<unknown>"
            ),
            "line": last_frame.lineno if last_frame else 0,
        },
    }

    if extra_context:
        result["context"] = extra_context

    if include_trace:
        result["stack_trace"] = [
            line.strip()
            for line in traceback.format_exception(type(exc), exc, exc.__traceback__)
            if line.strip()
        ]

    return result


def format_error_response(exc: Exception, include_detail: bool = False) -> dict[str, Any]:
    """Build the client-facing error body.

    Domain errors expose their message and code. Anything else is reported
    as a generic internal error so internals do not leak to clients.

    Args:
        exc: The exception to render.
        include_detail: If True, attach the full structured error (debug mode).

    Returns:
        Dictionary with ``error`` (message) and ``code`` keys.
    """
    if isinstance(exc, NamespaceSearchError):
        body = exc.to_response()
    else:
        body = {"error": INTERNAL_ERROR_MESSAGE, "code": get_error_code(exc)}

    if include_detail:
        body["detail"] = format_exception_json(exc, include_trace=True)
    return body


def log_exception(
    exc: Exception,
    log: logging.Logger | None = None,
    level: int = logging.ERROR,
    extra_context: dict[str, Any] | None = None,
) -> None:
    """Log exception in structured JSON format.

    Args:
        exc: The exception to log.
        log: Logger instance to use (defaults to module logger).
        level: Logging level (default: ERROR).
        extra_context: Additional context to include.
    """
    log_instance = log or logger

    exc_data = format_exception_json(exc, include_trace=True, extra_context=extra_context)
    log_instance.log(level, json.dumps(exc_data, indent=2, default=str))


def get_error_code(exc: Exception) -> str:
    """Get the error code from an exception.

    Args:
        exc: The exception to get code from.

    Returns:
        Error code string (e.g., "NS_VEC_003" or "PYTHON_ERR").
    """
    if isinstance(exc, NamespaceSearchError):
        return exc.error_code
    return "PYTHON_ERR"


def get_http_status_code(exc: Exception) -> int:
    """Map exception type to appropriate HTTP status code.

    Args:
        exc: The exception to map.

    Returns:
        HTTP status code (400, 404 or 500).
    """
    from ...core.domain.exceptions import NamespaceNotFoundError, ValidationError

    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, NamespaceNotFoundError):
        return 404
    return 500


def get_log_level(exc: Exception) -> int:
    """Client errors are logged as warnings, everything else as errors."""
    return logging.WARNING if get_http_status_code(exc) < 500 else logging.ERROR
