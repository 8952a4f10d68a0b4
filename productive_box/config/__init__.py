"""Configuration package."""

from productive_box.config.settings import (
    DEFAULT_END_TAG,
    DEFAULT_START_TAG,
    Settings,
    settings,
)

__all__ = [
    "DEFAULT_END_TAG",
    "DEFAULT_START_TAG",
    "Settings",
    "settings",
]
