"""Result formatters for CLI output.

Provides formatting for check results in two formats:
- text: One human readable line
- json: Machine-readable report
"""

import json
from typing import Any

from ..base_exceptions import ViewCaptureAnalysisException
from ..exceptions import AnomalyError


def format_check_result(
    capture_path: str,
    window_count: int | None,
    error: ViewCaptureAnalysisException | None,
    format_type: str,
) -> str:
    """Format the outcome of a check.

    Args:
        capture_path: Path of the analyzed capture
        window_count: Number of windows in the capture, None if it failed to load
        error: Error that ended the analysis, None on success
        format_type: Output format ("text" or "json")

    Returns:
        Formatted string output
    """
    if format_type == "json":
        report: dict[str, Any] = {
            "capture": capture_path,
            "status": _status(error),
            "windows": window_count,
            "error": error.to_dict() if error is not None else None,
        }
        return json.dumps(report, indent=2)

    if error is None:
        return f"OK: no anomalies in {window_count} window(s)"
    if _status(error) == "anomaly":
        return f"Anomaly: {error}"
    return f"Malformed capture: {error}"


def _status(error: ViewCaptureAnalysisException | None) -> str:
    if error is None:
        return "ok"
    if isinstance(error, AnomalyError):
        return "anomaly"
    return "malformed"
