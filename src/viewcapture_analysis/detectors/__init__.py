"""Anomaly detectors.

Detectors compare consecutive snapshots of the same view and raise
AnomalyError when they observe a forbidden transition.
"""

from .alpha_jump_detector import (
    DEFAULT_APPEARANCE_TOLERANCE,
    AlphaJumpDetector,
    AlphaJumpNodeState,
)
from .anomaly_detector import AnomalyDetector

__all__ = [
    "AnomalyDetector",
    "AlphaJumpDetector",
    "AlphaJumpNodeState",
    "DEFAULT_APPEARANCE_TOLERANCE",
]
