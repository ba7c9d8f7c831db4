"""
Host release and architecture probes
"""

from yams_setup.system.runner import CommandRunner


def get_ubuntu_version(runner: CommandRunner) -> str:
    """Release number as reported by lsb_release (e.g. "22.04")"""
    return runner.output(["lsb_release", "-rs"])


def get_ubuntu_codename(runner: CommandRunner) -> str:
    """Release codename as reported by lsb_release (e.g. "jammy")"""
    return runner.output(["lsb_release", "-cs"])


def get_architecture(runner: CommandRunner) -> str:
    """dpkg architecture name (e.g. "amd64")"""
    return runner.output(["dpkg", "--print-architecture"])
