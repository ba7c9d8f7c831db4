"""
apt-get wrapper
"""

import logging

from yams_setup.system.runner import CommandRunner

logger = logging.getLogger(__name__)


class AptManager:
    """Non-interactive apt-get operations; output streams to the terminal"""

    def __init__(self, runner: CommandRunner):
        self.runner = runner

    def update(self) -> None:
        logger.info("Refreshing package index")
        self.runner.run(["apt-get", "update"])

    def upgrade(self) -> None:
        logger.info("Upgrading installed packages")
        self.runner.run(["apt-get", "upgrade", "-y"])

    def install(self, packages: list[str]) -> None:
        if not packages:
            raise ValueError("No packages given to install")
        logger.info(f"Installing packages: {', '.join(packages)}")
        self.runner.run(["apt-get", "install", "-y", *packages])
