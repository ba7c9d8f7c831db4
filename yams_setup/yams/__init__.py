from .installer import (
    download_installer,
    make_executable,
    manual_command,
    resolve_install_dir,
    run_installer,
)

__all__ = [
    "download_installer",
    "make_executable",
    "manual_command",
    "resolve_install_dir",
    "run_installer",
]
