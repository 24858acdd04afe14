"""Configuration module for dashnav.

Usage:
    from dashnav.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.base_url)
"""

from dashnav.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
