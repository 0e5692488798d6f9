"""Pytest configuration and fixtures."""

import pytest

from viewcapture_analysis.config import reset_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep environment overrides and the settings singleton out of tests."""
    monkeypatch.delenv("VIEWCAPTURE_APPEARANCE_TOLERANCE", raising=False)
    monkeypatch.delenv("VIEWCAPTURE_MAX_ALPHA_STEP", raising=False)
    monkeypatch.delenv("VIEWCAPTURE_FLAG_REAPPEARANCE", raising=False)
    monkeypatch.delenv("VIEWCAPTURE_IGNORED_CLASS_NAMES", raising=False)
    monkeypatch.delenv("VIEWCAPTURE_IGNORED_RESOURCE_IDS", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def recording_detector():
    """Provide a detector that records every call made to it."""
    from tests.fixtures.capture_fixtures import RecordingDetector

    return RecordingDetector()
