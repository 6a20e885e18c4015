"""Config package."""

from feedloader.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
