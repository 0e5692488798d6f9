"""Base exception classes for viewcapture-analysis.

All analyzer errors derive from ViewCaptureAnalysisException so callers
can treat a capture as failed with a single except clause.
"""

from typing import Any


class ViewCaptureAnalysisException(Exception):
    """Base exception for all analyzer errors.

    Attributes:
        message: Human-readable error message
        error_code: Optional error code for programmatic handling
        context: Structured details about where the error was found
    """

    def __init__(
        self, message: str, error_code: str | None = None, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Machine-readable form of the error for reports."""
        return {
            "type": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": dict(self.context),
        }

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message
