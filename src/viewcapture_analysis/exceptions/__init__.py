"""Exceptions raised by the view capture analyzer."""

from .anomaly_exception import AnomalyError, TransitionKind
from .malformed_capture_exception import MalformedCaptureError

__all__ = [
    "AnomalyError",
    "MalformedCaptureError",
    "TransitionKind",
]
