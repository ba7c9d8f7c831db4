"""
Tests for AptManager and the release probes
"""

import pytest

from yams_setup.system.apt import AptManager
from yams_setup.system.os_release import (
    get_architecture,
    get_ubuntu_codename,
    get_ubuntu_version,
)


class TestAptManager:
    """Tests for apt-get command construction"""

    def test_update(self, runner):
        AptManager(runner).update()
        assert runner.calls == [["apt-get", "update"]]

    def test_upgrade_is_non_interactive(self, runner):
        AptManager(runner).upgrade()
        assert runner.calls == [["apt-get", "upgrade", "-y"]]

    def test_install(self, runner):
        AptManager(runner).install(["curl", "git"])
        assert runner.calls == [["apt-get", "install", "-y", "curl", "git"]]

    def test_install_rejects_empty_list(self, runner):
        with pytest.raises(ValueError):
            AptManager(runner).install([])
        assert runner.calls == []


class TestOsRelease:
    """Tests for lsb_release/dpkg probes"""

    def test_version(self, runner):
        assert get_ubuntu_version(runner) == "22.04"
        assert runner.calls == [["lsb_release", "-rs"]]

    def test_codename(self, runner):
        assert get_ubuntu_codename(runner) == "jammy"

    def test_architecture(self, runner):
        assert get_architecture(runner) == "amd64"
