"""
YAMS installer hand-off

Downloads the upstream YAMS install script and runs it with bash. The script
itself is interactive (install directory, media paths, VPN, services) and is
never inspected here.
"""

import logging
import os
import stat
from pathlib import Path

import httpx

from yams_setup.core.config import Settings
from yams_setup.core.exceptions import FilesystemError
from yams_setup.core.http import download_file
from yams_setup.system.privileges import get_user_home
from yams_setup.system.runner import CommandRunner

logger = logging.getLogger(__name__)


def resolve_install_dir(original_user: str | None, settings: Settings) -> Path:
    """
    Pick the YAMS installation directory

    Under sudo the directory lives in the invoking user's home
    (e.g. /home/alice/yams); as plain root it is the system-wide path.
    """
    if original_user:
        home = get_user_home(original_user)
        return Path(f"{home}/{settings.install_subdir}")
    return settings.system_install_dir


def make_executable(path: Path) -> None:
    """chmod +x (execute bits masked by the current umask, as chmod does)"""
    mask = os.umask(0)
    os.umask(mask)
    execute = (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH) & ~mask
    try:
        mode = path.stat().st_mode
        os.chmod(path, mode | execute)
    except OSError as e:
        raise FilesystemError(path, e) from e


def download_installer(client: httpx.Client, url: str, dest: Path) -> Path:
    """
    Download the installer script and mark it executable

    Raises:
        DownloadError: If the script cannot be fetched
    """
    download_file(client, url, dest)
    make_executable(dest)
    return dest


def manual_command(path: Path) -> str:
    """Command line a user can run later to start the installer"""
    return f"bash {path}"


def run_installer(runner: CommandRunner, path: Path) -> None:
    """
    Run the installer in the foreground with the terminal attached

    Raises:
        CommandFailedError: If the installer exits non-zero
    """
    logger.info(f"Starting YAMS installer: {path}")
    runner.run(["bash", str(path)])
