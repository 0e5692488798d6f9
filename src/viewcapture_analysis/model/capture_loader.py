"""Loading of captures exported as JSON.

The on-disk format is produced elsewhere; this module only turns an
already exported JSON document into a validated Capture.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..exceptions import MalformedCaptureError
from .capture import Capture


def capture_from_dict(data: dict[str, Any]) -> Capture:
    """Validate a decoded JSON document as a capture.

    Args:
        data: Decoded JSON object

    Returns:
        Validated capture

    Raises:
        MalformedCaptureError: If the document does not describe a capture
    """
    if not isinstance(data, dict):
        raise MalformedCaptureError(
            f"Capture document must be a JSON object, got {type(data).__name__}"
        )
    try:
        return Capture.model_validate(data)
    except ValidationError as e:
        raise MalformedCaptureError(
            f"Invalid capture: {e.error_count()} validation error(s)\n{e}", cause=e
        ) from e


def load_capture_string(text: str) -> Capture:
    """Load a capture from a JSON string.

    Args:
        text: JSON text

    Returns:
        Validated capture
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedCaptureError(f"Capture is not valid JSON: {e}", cause=e) from e
    return capture_from_dict(data)


def load_capture(path: Path | str) -> Capture:
    """Load a capture from a JSON file.

    Args:
        path: Path to the exported capture

    Returns:
        Validated capture

    Raises:
        MalformedCaptureError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedCaptureError(f"Cannot read capture file {path}: {e}", cause=e) from e
    return load_capture_string(text)
