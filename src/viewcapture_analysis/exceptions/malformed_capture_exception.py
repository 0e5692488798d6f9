"""Malformed capture exception.

Exception thrown when a capture is structurally impossible to analyze.
"""

from ..base_exceptions import ViewCaptureAnalysisException


class MalformedCaptureError(ViewCaptureAnalysisException):
    """Exception thrown for captures that cannot be loaded or analyzed.

    Raised for unreadable files, invalid JSON, missing fields, and class
    indices that do not resolve to a class name.
    """

    def __init__(
        self,
        message: str = "Malformed capture",
        cause: Exception | None = None,
        location: str | None = None,
    ):
        """Initialize malformed capture exception.

        Args:
            message: Error message
            cause: Underlying exception that caused this error
            location: Where in the capture the problem was found
        """
        super().__init__(
            message,
            error_code="MALFORMED_CAPTURE",
            context={"location": location} if location else None,
        )
        self.cause = cause
        self.location = location
