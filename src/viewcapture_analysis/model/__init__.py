"""Capture and analysis data models."""

from .analysis_node import AnalysisNode
from .capture import NO_ID, Capture, FrameData, ViewNode, Visibility, WindowData
from .capture_loader import capture_from_dict, load_capture, load_capture_string
from .capture_validator import validate_capture

__all__ = [
    # Capture
    "NO_ID",
    "Capture",
    "FrameData",
    "ViewNode",
    "Visibility",
    "WindowData",
    # Analysis
    "AnalysisNode",
    # Loading and validation
    "capture_from_dict",
    "load_capture",
    "load_capture_string",
    "validate_capture",
]
