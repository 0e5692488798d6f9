"""Command line interface.

Usage:
    python -m viewcapture_analysis.cli check capture.json
    viewcapture-analysis validate capture.json --verbose
"""

from .main import main

__all__ = ["main"]
