"""
Core module - configuration and exception hierarchy
"""

from yams_setup.core.config import Settings, get_settings, reset_settings
from yams_setup.core.exceptions import (
    CommandFailedError,
    ComposeUnavailableError,
    DownloadError,
    FilesystemError,
    InputClosedError,
    NotRootError,
    SetupError,
)

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "SetupError",
    "NotRootError",
    "ComposeUnavailableError",
    "CommandFailedError",
    "DownloadError",
    "FilesystemError",
    "InputClosedError",
]
