"""
Docker Engine installer

Sets up Docker from Docker's official apt repository:
- Signing key dearmored into /etc/apt/keyrings
- Repository definition in /etc/apt/sources.list.d
- docker-ce, CLI, containerd, buildx and compose plugins
- systemd service started and enabled

No step is rolled back on failure; whatever was written stays in place.
"""

import logging
import os
import stat
from pathlib import Path

import httpx

from yams_setup.core.config import Settings
from yams_setup.core.exceptions import FilesystemError
from yams_setup.core.http import fetch_bytes
from yams_setup.system.apt import AptManager
from yams_setup.system.os_release import get_architecture, get_ubuntu_codename
from yams_setup.system.runner import CommandRunner

logger = logging.getLogger(__name__)

KEYRING_DIR_MODE = 0o755


def build_repository_line(
    arch: str, codename: str, keyring: Path, repo_url: str
) -> str:
    """
    Build the apt sources line for Docker's repository

    Example:
        deb [arch=amd64 signed-by=/etc/apt/keyrings/docker.gpg] https://download.docker.com/linux/ubuntu jammy stable
    """
    return f"deb [arch={arch} signed-by={keyring}] {repo_url} {codename} stable"


class DockerInstaller:
    """Installs Docker Engine on Ubuntu and manages docker group membership"""

    def __init__(
        self,
        runner: CommandRunner,
        apt: AptManager,
        settings: Settings,
        http_client: httpx.Client,
    ):
        self.runner = runner
        self.apt = apt
        self.settings = settings
        self.http_client = http_client

    def install(self) -> None:
        """Run the full installation sequence"""
        logger.info("Installing Docker Engine")
        self.add_signing_key()
        self.add_repository()
        self.install_packages()
        self.enable_service()

    def add_signing_key(self) -> Path:
        """Download Docker's GPG key and dearmor it into the apt keyring directory"""
        keyring_dir = self.settings.keyring_dir
        keyring = self.settings.docker_keyring

        # install -m 0755 -d: mode is applied even when the directory exists
        try:
            keyring_dir.mkdir(parents=True, exist_ok=True)
            os.chmod(keyring_dir, KEYRING_DIR_MODE)
        except OSError as e:
            raise FilesystemError(keyring_dir, e) from e

        armored = fetch_bytes(self.http_client, self.settings.docker_gpg_url)
        self.runner.run(["gpg", "--dearmor", "-o", str(keyring)], input=armored)

        # chmod a+r
        try:
            mode = keyring.stat().st_mode
            os.chmod(keyring, mode | stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH)
        except OSError as e:
            raise FilesystemError(keyring, e) from e
        logger.info(f"Docker signing key installed: {keyring}")
        return keyring

    def add_repository(self) -> Path:
        """Write the Docker apt source for this host's architecture and release"""
        line = build_repository_line(
            arch=get_architecture(self.runner),
            codename=get_ubuntu_codename(self.runner),
            keyring=self.settings.docker_keyring,
            repo_url=self.settings.docker_repo_url,
        )
        sources_list = self.settings.docker_sources_list
        try:
            sources_list.write_text(line + "\n", encoding="utf-8")
        except OSError as e:
            raise FilesystemError(sources_list, e) from e
        logger.info(f"Docker repository configured: {sources_list}")
        return sources_list

    def install_packages(self) -> None:
        self.apt.update()
        self.apt.install(self.settings.docker_packages)

    def enable_service(self) -> None:
        service = self.settings.docker_service
        self.runner.run(["systemctl", "start", service])
        self.runner.run(["systemctl", "enable", service])

    def add_user_to_group(self, user: str) -> None:
        """Append user to the docker group (takes effect on next login)"""
        logger.info(f"Adding {user} to group {self.settings.docker_group}")
        self.runner.run(["usermod", "-aG", self.settings.docker_group, user])
