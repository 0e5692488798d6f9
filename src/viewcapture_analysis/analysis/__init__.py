"""Analysis package.

Contains the frame walker and the analyzer entry point.
"""

from .analyzer import ViewCaptureAnalyzer, analyze, assert_no_anomalies, default_detectors
from .frame_walker import WindowAnalyzer, visible_alpha

__all__ = [
    "ViewCaptureAnalyzer",
    "WindowAnalyzer",
    "analyze",
    "assert_no_anomalies",
    "default_detectors",
    "visible_alpha",
]
