from .apt import AptManager
from .os_release import get_architecture, get_ubuntu_codename, get_ubuntu_version
from .privileges import get_original_user, get_user_home, is_root
from .runner import CommandRunner

__all__ = [
    "AptManager",
    "CommandRunner",
    "get_architecture",
    "get_ubuntu_codename",
    "get_ubuntu_version",
    "get_original_user",
    "get_user_home",
    "is_root",
]
