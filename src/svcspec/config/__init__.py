"""
svcspec configuration.

Pydantic-based settings read from SVCSPEC_* environment variables or a .env file.
"""

from svcspec.config.settings import DEFAULT_BLDR_URL, Settings, get_settings

__all__ = [
    "DEFAULT_BLDR_URL",
    "Settings",
    "get_settings",
]
