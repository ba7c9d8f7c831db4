"""
Docker module - detection and installation of Docker Engine and Compose
"""

from yams_setup.docker.detect import (
    find_docker_executable,
    get_compose_version,
    get_docker_version,
    is_docker_installed,
)
from yams_setup.docker.installer import DockerInstaller, build_repository_line

__all__ = [
    "DockerInstaller",
    "build_repository_line",
    "find_docker_executable",
    "get_compose_version",
    "get_docker_version",
    "is_docker_installed",
]
