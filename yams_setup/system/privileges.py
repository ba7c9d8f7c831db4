"""
Process privilege and invoking-user detection
"""

import logging
import os
import pwd

logger = logging.getLogger(__name__)

SUDO_USER_ENV = "SUDO_USER"


def is_root() -> bool:
    """Check whether the effective UID is 0"""
    return os.geteuid() == 0


def get_original_user() -> str | None:
    """
    Get the user that invoked sudo, if any

    Returns:
        Value of SUDO_USER, or None when unset or empty
    """
    return os.environ.get(SUDO_USER_ENV) or None


def get_user_home(user: str) -> str:
    """
    Look up a user's home directory in the passwd database

    Returns:
        Home directory, or an empty string if the user has no passwd entry
    """
    try:
        return pwd.getpwnam(user).pw_dir
    except KeyError:
        logger.info(f"No passwd entry for user '{user}'")
        return ""
