"""Configuration package.

Usage:
    from viewcapture_analysis.config import get_settings

    settings = get_settings()
    print(settings.appearance_tolerance)
"""

from .settings import (
    SCRIM_VIEW_CLASS,
    AnalyzerSettings,
    configure,
    get_settings,
    reset_settings,
)

__all__ = [
    "SCRIM_VIEW_CLASS",
    "AnalyzerSettings",
    "configure",
    "get_settings",
    "reset_settings",
]
