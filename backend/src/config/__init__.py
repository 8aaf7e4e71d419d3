"""
Configuration Module

Application configuration loaded from environment variables.

Usage:
======
    from src.config.settings import get_settings

    settings = get_settings()
    ttl = settings.ACCESS_TOKEN_EXPIRE_MINUTES
"""

from src.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
