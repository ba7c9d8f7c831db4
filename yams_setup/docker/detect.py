"""
Docker detection utilities

Handles:
- Docker executable detection on PATH
- Docker engine version lookup
- Docker Compose (v2 plugin) availability
"""

import logging
import shutil

from yams_setup.core.exceptions import CommandFailedError
from yams_setup.system.runner import CommandRunner

logger = logging.getLogger(__name__)


def find_docker_executable() -> str | None:
    """
    Find the Docker executable on PATH

    Returns:
        Path to docker executable, or None if not found
    """
    docker_path = shutil.which("docker")
    if docker_path:
        logger.info(f"Docker found in PATH: {docker_path}")
    else:
        logger.info("Docker not found in PATH")
    return docker_path


def is_docker_installed() -> bool:
    return find_docker_executable() is not None


def get_docker_version(runner: CommandRunner) -> str:
    """
    Get the Docker version string

    Returns:
        Output of `docker --version` (e.g. "Docker version 24.0.7, build afdd53b")
    """
    return runner.output(["docker", "--version"])


def get_compose_version(runner: CommandRunner) -> str | None:
    """
    Check that the Docker Compose plugin works

    Returns:
        Output of `docker compose version`, or None if the command fails
    """
    try:
        version = runner.output(["docker", "compose", "version"])
    except CommandFailedError as e:
        logger.info(f"Docker Compose check failed: {e}")
        return None
    logger.info(f"Docker Compose available: {version}")
    return version
