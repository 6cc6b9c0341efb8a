"""Root of the Namespace Search error hierarchy.

Every error raised by the services and adapters carries a stable code that
clients can branch on, the place it was raised, and the SDK error behind it.
The API turns it into an ``{error, code}`` body and the logs get the full
structured form.
"""

import inspect
import traceback
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass
class ExceptionContext:
    """Where an error was raised, recorded at construction time."""

    class_name: str
    method_name: str
    file_name: str
    line_number: int
    timestamp: str = field(default_factory=lambda: datetime.now(UTC).isoformat())

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for log records."""
        return {
            "class": self.class_name,
            "method": self.method_name,
            "file": self.file_name,
            "line": self.line_number,
            "timestamp": self.timestamp,
        }


class NamespaceSearchError(Exception):
    """An error the API reports with its own message and code.

    Anything not derived from this class is treated as unexpected and hidden
    behind a generic 500.

    Example:
        try:
            index.query(namespace=namespace, vector=vector, top_k=10)
        except NotFoundException as e:
            raise NamespaceNotFoundError(
                f"Namespace '{namespace}' not found or inaccessible",
                cause=e,
                context={"namespace": namespace},
            ) from e
    """

    error_code: str = "NS_ERR_001"

    def __init__(
        self,
        message: str,
        *,
        cause: Exception | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Build the error and record where it was raised.

        Args:
            message: Text returned to the client as ``error``.
            cause: SDK or transport error that triggered this one.
            context: Request details (namespace, model, index) for the logs.
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.extra_context = context or {}
        self.location = self._capture_location()
        self.stack_trace = traceback.format_exc() if cause else None

    def _capture_location(self) -> ExceptionContext:
        """Record the frame that constructed this error."""
        frame = inspect.currentframe()
        # Walk from _capture_location past __init__ to the raise site
        for _ in range(2):
            if frame and frame.f_back:
                frame = frame.f_back

        if frame:
            class_instance = frame.f_locals.get("self", None)
            return ExceptionContext(
                class_name=type(class_instance).__name__ if class_instance else "<module>",
                method_name=frame.f_code.co_name,
                file_name=frame.f_code.co_filename.split("\\")[-1].split("/")[-1],
                line_number=frame.f_lineno,
            )
        return ExceptionContext("<unknown>", "<unknown>", "<unknown>", 0)

    def to_dict(self, include_trace: bool = False) -> dict[str, Any]:
        """Structured form used by the logs, the CLI and debug responses.

        Args:
            include_trace: Attach the traceback of ``cause`` when one was captured.
        """
        result: dict[str, Any] = {
            "error": {
                "type": type(self).__name__,
                "code": self.error_code,
                "message": self.message,
            },
            "location": self.location.to_dict(),
        }

        if self.extra_context:
            result["context"] = self.extra_context

        if include_trace and self.stack_trace:
            result["stack_trace"] = [line for line in self.stack_trace.split("\n") if line.strip()]

        if self.cause:
            result["cause"] = {
                "type": type(self.cause).__name__,
                "message": str(self.cause),
            }

        return result

    def to_response(self) -> dict[str, Any]:
        """Client-facing error body: the message plus its stable error code."""
        return {"error": self.message, "code": self.error_code}
