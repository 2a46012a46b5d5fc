"""Core: settings for building clients from the environment."""

from firebase_rtdb.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
