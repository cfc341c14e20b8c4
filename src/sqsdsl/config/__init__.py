"""
Configuration for sqsdsl.
"""

from sqsdsl.config.settings import (
    DEFAULT_PROFILE,
    DEFAULT_REGION,
    ClientSettings,
    load_settings,
)

__all__ = [
    "ClientSettings",
    "DEFAULT_PROFILE",
    "DEFAULT_REGION",
    "load_settings",
]
