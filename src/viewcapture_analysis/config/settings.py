"""Configuration management for the analyzer using pydantic-settings.

Settings can be supplied as keyword arguments, environment variables with
the ``VIEWCAPTURE_`` prefix, or a ``.env`` file.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SCRIM_VIEW_CLASS = "com.android.launcher3.views.ScrimView"


class AnalyzerSettings(BaseSettings):
    """Main configuration settings for the view capture analyzer."""

    model_config = SettingsConfigDict(
        env_prefix="VIEWCAPTURE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Alpha jump detection
    appearance_tolerance: float = Field(
        0.05,
        ge=0.0,
        le=1.0,
        description="Highest effective alpha a view may have in its first or last visible frame",
    )
    max_alpha_step: float | None = Field(
        None,
        gt=0.0,
        le=1.0,
        description="Largest alpha change allowed between consecutive frames (None disables)",
    )
    flag_reappearance: bool = Field(
        True,
        description="Treat a view that returns after missing frames as a new appearance",
    )
    ignored_class_names: list[str] = Field(
        default_factory=list,
        description="Class names (full or simple) whose alpha jumps are ignored",
    )
    ignored_resource_ids: list[str] = Field(
        default_factory=list,
        description="Resource ids whose alpha jumps are ignored",
    )

    # Traversal
    scrim_class_name: str = Field(
        SCRIM_VIEW_CLASS, description="Class of the occluder that stops child traversal"
    )

    # Logging
    debug_mode: bool = Field(False, description="Enable debug logging with readable output")
    log_level: str = Field("INFO", description="Log level")
    log_file: Path | None = Field(None, description="Optional log file")


# Singleton instance
_settings: AnalyzerSettings | None = None


def get_settings() -> AnalyzerSettings:
    """Get the singleton settings instance.

    Returns:
        AnalyzerSettings instance
    """
    global _settings

    if _settings is None:
        _settings = AnalyzerSettings()

    return _settings


def configure(**kwargs) -> AnalyzerSettings:
    """Replace the singleton with settings built from the given overrides.

    Args:
        **kwargs: Field values to override

    Returns:
        The new settings instance
    """
    global _settings
    _settings = AnalyzerSettings(**kwargs)
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
