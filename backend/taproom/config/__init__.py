"""
Configuration Module

Taproom configuration loaded from environment variables (see settings.py).

Usage:
======
    from taproom.config import settings

    db_url = settings.DATABASE_URL
    max_size = settings.MAX_PAGE_SIZE
"""

from taproom.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
