"""
Host bootstrap pipeline

Runs the provisioning steps strictly in order:
1. Privilege check (effective root)
2. System update
3. Ubuntu version check (warning only)
4. Base package install
5. Docker install (skipped when docker is on PATH)
6. Docker Compose check (fatal if missing)
7. docker group membership for the sudo user
8. YAMS installer download
9. Interactive hand-off to the installer

Any failing command aborts the run; nothing already applied is undone.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import httpx

from yams_setup.console import StatusConsole
from yams_setup.core.config import Settings, get_settings
from yams_setup.core.exceptions import ComposeUnavailableError, NotRootError
from yams_setup.core.http import create_client
from yams_setup.docker.detect import (
    get_compose_version,
    get_docker_version,
    is_docker_installed,
)
from yams_setup.docker.installer import DockerInstaller
from yams_setup.system.apt import AptManager
from yams_setup.system.os_release import get_ubuntu_version
from yams_setup.system.privileges import get_original_user, is_root
from yams_setup.system.runner import CommandRunner
from yams_setup.yams.installer import (
    download_installer,
    manual_command,
    resolve_install_dir,
    run_installer,
)

logger = logging.getLogger(__name__)

INSTALLER_TOPICS = [
    "Choosing installation directory",
    "Configuring media paths",
    "Setting up VPN (optional)",
    "Configuring services",
]


@dataclass
class SetupResult:
    """What a completed run found and did"""

    ubuntu_version: str
    docker_installed: bool
    docker_version: str
    compose_version: str
    original_user: str | None
    install_dir: Path
    installer_path: Path
    installer_ran: bool


class SetupPipeline:
    """Linear host bootstrap; every step blocks until its command completes"""

    def __init__(
        self,
        settings: Settings | None = None,
        runner: CommandRunner | None = None,
        console: StatusConsole | None = None,
        http_client: httpx.Client | None = None,
    ):
        self.settings = settings or get_settings()
        self.runner = runner or CommandRunner()
        self.console = console or StatusConsole()
        self.apt = AptManager(self.runner)
        self._http_client = http_client

    def run(self) -> SetupResult:
        """
        Execute every step

        Raises:
            NotRootError: Before any side effect, if not running as root
            ComposeUnavailableError: If `docker compose version` fails
            CommandFailedError: If any external command fails
            DownloadError: If a remote file cannot be fetched
            FilesystemError: If a host file cannot be written
            InputClosedError: If stdin closes at the final prompt
        """
        self.console.banner("YAMS Installation Script")
        self.console.line()

        self.check_privileges()

        if self._http_client is not None:
            return self._run_steps(self._http_client)
        with create_client(self.settings) as client:
            return self._run_steps(client)

    def _run_steps(self, client: httpx.Client) -> SetupResult:
        docker = DockerInstaller(self.runner, self.apt, self.settings, client)

        self.update_system()
        ubuntu_version = self.check_ubuntu_version()
        self.install_dependencies()
        docker_installed, docker_version = self.ensure_docker(docker)
        compose_version = self.check_compose()

        original_user = get_original_user()
        if original_user:
            self.add_user_to_docker_group(docker, original_user)

        install_dir = self.prepare_installer(client, original_user)
        self.print_next_steps()
        installer_ran = self.hand_off()

        self.console.line()
        self.console.banner("Installation complete!")

        return SetupResult(
            ubuntu_version=ubuntu_version,
            docker_installed=docker_installed,
            docker_version=docker_version,
            compose_version=compose_version,
            original_user=original_user,
            install_dir=install_dir,
            installer_path=self.settings.installer_path,
            installer_ran=installer_ran,
        )

    def check_privileges(self) -> None:
        if not is_root():
            raise NotRootError()
        self.console.status("Running as root/sudo")

    def update_system(self) -> None:
        self.console.step("Step 1: Updating system packages...")
        self.apt.update()
        self.apt.upgrade()
        self.console.status("System updated")

    def check_ubuntu_version(self) -> str:
        self.console.step("Step 2: Checking Ubuntu version...")
        version = get_ubuntu_version(self.runner)
        self.console.line(f"Ubuntu version: {version}")

        expected = self.settings.expected_ubuntu_version
        if version == expected:
            self.console.status(f"Ubuntu {expected} confirmed")
        else:
            logger.info(f"Unsupported Ubuntu release {version!r}, continuing")
            self.console.warning(f"Expected Ubuntu {expected}, found {version}")
        return version

    def install_dependencies(self) -> None:
        self.console.step("Step 3: Installing required packages...")
        self.apt.install(self.settings.base_packages)

    def ensure_docker(self, docker: DockerInstaller) -> tuple[bool, str]:
        """
        Install Docker unless it is already on PATH

        Returns:
            Tuple of (installed_by_this_run, docker_version)
        """
        self.console.step("Step 4: Installing Docker...")
        if is_docker_installed():
            version = get_docker_version(self.runner)
            self.console.status(f"Docker already installed: {version}")
            return False, version

        docker.install()
        version = get_docker_version(self.runner)
        self.console.status(f"Docker installed: {version}")
        return True, version

    def check_compose(self) -> str:
        self.console.step("Step 5: Checking Docker Compose...")
        version = get_compose_version(self.runner)
        if version is None:
            raise ComposeUnavailableError()
        self.console.status(f"Docker Compose available: {version}")
        return version

    def add_user_to_docker_group(self, docker: DockerInstaller, user: str) -> None:
        group = self.settings.docker_group
        self.console.step(f"Step 6: Adding {user} to {group} group...")
        docker.add_user_to_group(user)
        self.console.status(f"User {user} added to {group} group (logout/login required)")

    def prepare_installer(self, client: httpx.Client, original_user: str | None) -> Path:
        """Resolve the install directory and download the installer script"""
        self.console.step("Step 7: Installing YAMS...")
        self.console.line("Creating YAMS installation directory...")

        install_dir = resolve_install_dir(original_user, self.settings)
        self.console.line(f"Installation directory: {install_dir}")

        download_installer(client, self.settings.installer_url, self.settings.installer_path)
        self.console.status("YAMS installer downloaded")
        return install_dir

    def print_next_steps(self) -> None:
        command = manual_command(self.settings.installer_path)
        self.console.line()
        self.console.banner("Prerequisites installed successfully!")
        self.console.line()
        self.console.line("Next steps:")
        self.console.line(
            "1. If you're not root, logout and login again for docker group changes to take effect"
        )
        self.console.line(f"2. Run the YAMS installer: {command}")
        self.console.line()
        self.console.line("The installer will guide you through:")
        for topic in INSTALLER_TOPICS:
            self.console.line(f"  - {topic}")
        self.console.line()

    def hand_off(self) -> bool:
        """
        Ask whether to run the installer now

        Returns:
            True if the installer was run

        Raises:
            InputClosedError: If stdin closes before an answer line
        """
        path = self.settings.installer_path
        if self.console.ask_yes_no("Would you like to run the YAMS installer now? (y/n)"):
            self.console.line()
            self.console.status("Starting YAMS installer...")
            run_installer(self.runner, path)
            return True

        self.console.line()
        self.console.status(f"You can run the installer later with: {manual_command(path)}")
        return False
