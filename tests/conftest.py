"""
Shared fixtures: a recording command runner, an in-memory console and a
mocked HTTP transport, so the bootstrap can run without touching the host.
"""

import io
import subprocess
from pathlib import Path

import httpx
import pytest
from rich.console import Console

from yams_setup.console import StatusConsole
from yams_setup.core.config import Settings
from yams_setup.core.exceptions import CommandFailedError
from yams_setup.system.runner import CommandRunner

GPG_URL = "https://download.docker.com/linux/ubuntu/gpg"
INSTALLER_URL = "https://yams.media/install.sh"
ARMORED_KEY = b"-----BEGIN PGP PUBLIC KEY BLOCK-----\nfake\n-----END PGP PUBLIC KEY BLOCK-----\n"
INSTALLER_BODY = b"#!/bin/bash\necho installing yams\n"

DEFAULT_OUTPUTS = {
    ("lsb_release", "-rs"): "22.04",
    ("lsb_release", "-cs"): "jammy",
    ("dpkg", "--print-architecture"): "amd64",
    ("docker", "--version"): "Docker version 24.0.7, build afdd53b",
    ("docker", "compose", "version"): "Docker Compose version v2.21.0",
}


class FakeRunner(CommandRunner):
    """Records every command instead of executing it"""

    def __init__(self, outputs=None, failures=None):
        self.calls: list[list[str]] = []
        self.outputs = dict(DEFAULT_OUTPUTS)
        self.outputs.update(outputs or {})
        self.failures = failures or {}

    def run(self, cmd, capture_output=False, input=None):
        self.calls.append(list(cmd))
        key = tuple(cmd)
        if key in self.failures:
            raise CommandFailedError(cmd, self.failures[key])

        # gpg --dearmor -o <path> writes its output file
        if cmd[:2] == ["gpg", "--dearmor"] and input is not None:
            Path(cmd[3]).write_bytes(input)

        stdout = self.outputs.get(key, "").encode() if capture_output else None
        stderr = b"" if capture_output else None
        return subprocess.CompletedProcess(cmd, 0, stdout=stdout, stderr=stderr)

    def called(self, *cmd: str) -> bool:
        return list(cmd) in self.calls


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def settings(tmp_path):
    """Settings that write only under tmp_path"""
    return Settings(
        keyring_dir=tmp_path / "keyrings",
        docker_keyring=tmp_path / "keyrings" / "docker.gpg",
        docker_sources_list=tmp_path / "docker.list",
        installer_path=tmp_path / "yams-install.sh",
    )


@pytest.fixture
def status_console():
    return StatusConsole(
        Console(file=io.StringIO(), width=200, highlight=False, color_system=None)
    )


@pytest.fixture
def console_output(status_console):
    """Callable returning everything printed to status_console so far"""
    return lambda: status_console.console.file.getvalue()


class RecordingHandler:
    """httpx.MockTransport handler serving the Docker key and YAMS installer"""

    def __init__(self, routes=None):
        self.requests: list[str] = []
        self.routes = routes if routes is not None else {
            GPG_URL: ARMORED_KEY,
            INSTALLER_URL: INSTALLER_BODY,
        }

    def __call__(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        if url in self.routes:
            return httpx.Response(200, content=self.routes[url])
        return httpx.Response(404)


@pytest.fixture
def http_handler():
    return RecordingHandler()


@pytest.fixture
def http_client(http_handler):
    with httpx.Client(transport=httpx.MockTransport(http_handler), follow_redirects=True) as client:
        yield client
