"""
Configuration management

Centralized settings using Pydantic BaseSettings. Every default reproduces the
stock bootstrap; environment variables prefixed with YAMS_SETUP_ override them
(e.g. YAMS_SETUP_LOG_LEVEL=DEBUG, YAMS_SETUP_INSTALLER_PATH=/var/tmp/install.sh).
"""

import logging
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Bootstrap settings with environment variable support"""

    # Host requirements
    expected_ubuntu_version: str = "22.04"
    base_packages: list[str] = [
        "curl",
        "git",
        "wget",
        "ca-certificates",
        "gnupg",
        "lsb-release",
    ]

    # Docker vendor repository
    docker_gpg_url: str = "https://download.docker.com/linux/ubuntu/gpg"
    docker_repo_url: str = "https://download.docker.com/linux/ubuntu"
    keyring_dir: Path = Path("/etc/apt/keyrings")
    docker_keyring: Path = Path("/etc/apt/keyrings/docker.gpg")
    docker_sources_list: Path = Path("/etc/apt/sources.list.d/docker.list")
    docker_packages: list[str] = [
        "docker-ce",
        "docker-ce-cli",
        "containerd.io",
        "docker-buildx-plugin",
        "docker-compose-plugin",
    ]
    docker_group: str = "docker"
    docker_service: str = "docker"

    # YAMS installer
    installer_url: str = "https://yams.media/install.sh"
    installer_path: Path = Path("/tmp/yams-install.sh")
    system_install_dir: Path = Path("/opt/yams")
    install_subdir: str = "yams"

    # Network
    http_timeout: float = 60.0

    # Diagnostics
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="YAMS_SETUP_",
        case_sensitive=False,
        extra="ignore",
    )


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get bootstrap settings (singleton)

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        logger.debug(f"Loaded settings: {_settings.model_dump()}")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None
