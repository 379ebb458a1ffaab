"""
Configuration Management

Centralized configuration for the library.
"""

from .settings import Settings
from .loader import ConfigLoader, get_settings

__all__ = [
    "Settings",
    "ConfigLoader",
    "get_settings",
]
