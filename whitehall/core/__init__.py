"""Core: config, constants, and application bootstrap.

Single place for settings and shared constants.
"""

from whitehall.core.config import SearchConfig, Settings, get_settings

__all__ = ["SearchConfig", "Settings", "get_settings"]
