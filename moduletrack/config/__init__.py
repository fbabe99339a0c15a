"""
Configuration - Application settings and error taxonomy.
"""

from .errors import (
    ErrorCode,
    FetchError,
    ModuleTrackError,
    ModuleValidationError,
)
from .settings import DEFAULT_MODULES_API_URL, Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "DEFAULT_MODULES_API_URL",
    # Errors
    "ErrorCode",
    "ModuleTrackError",
    "FetchError",
    "ModuleValidationError",
]
