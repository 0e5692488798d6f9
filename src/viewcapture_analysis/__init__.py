"""viewcapture-analysis - find rendering anomalies in view captures.

A capture is a frame-by-frame record of a window's view hierarchy. The
analyzer walks the frames of every window, tracks each view by its
hashcode, and raises when a view appears or disappears without fading.

Basic usage:
    from viewcapture_analysis import analyze, load_capture

    capture = load_capture("capture.json")
    analyze(capture)  # raises AnomalyError on the first alpha jump
"""

__version__ = "0.1.0"

from .analysis import ViewCaptureAnalyzer, WindowAnalyzer, analyze, assert_no_anomalies
from .base_exceptions import ViewCaptureAnalysisException
from .config import AnalyzerSettings, get_settings
from .detectors import AlphaJumpDetector, AnomalyDetector
from .diagnostics import describe_node, path_from_root
from .exceptions import AnomalyError, MalformedCaptureError, TransitionKind
from .model import (
    NO_ID,
    AnalysisNode,
    Capture,
    FrameData,
    ViewNode,
    Visibility,
    WindowData,
    capture_from_dict,
    load_capture,
)

__all__ = [
    # Entry points
    "analyze",
    "assert_no_anomalies",
    "ViewCaptureAnalyzer",
    "WindowAnalyzer",
    # Models
    "NO_ID",
    "AnalysisNode",
    "Capture",
    "FrameData",
    "ViewNode",
    "Visibility",
    "WindowData",
    "capture_from_dict",
    "load_capture",
    # Detectors
    "AnomalyDetector",
    "AlphaJumpDetector",
    # Diagnostics
    "describe_node",
    "path_from_root",
    # Config
    "AnalyzerSettings",
    "get_settings",
    # Errors
    "ViewCaptureAnalysisException",
    "AnomalyError",
    "MalformedCaptureError",
    "TransitionKind",
]
