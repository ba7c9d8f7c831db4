"""
Base exception hierarchy

Every setup failure carries the exit status the CLI should terminate with,
plus an optional recovery hint shown under the error line.
"""


class SetupError(Exception):
    """
    Base exception for all setup errors

    Attributes:
        message: Error message
        component: Component that raised the error
        recovery_hint: Optional hint for recovery
        exit_code: Process exit status for this failure
    """

    exit_code: int = 1

    def __init__(self, message: str, component: str = "", recovery_hint: str = ""):
        self.message = message
        self.component = component
        self.recovery_hint = recovery_hint
        super().__init__(message)

    def __str__(self) -> str:
        msg = super().__str__()
        if self.component:
            msg = f"[{self.component}] {msg}"
        if self.recovery_hint:
            msg += f"\nRecovery: {self.recovery_hint}"
        return msg


class NotRootError(SetupError):
    """Raised when the process lacks an effective UID of 0"""

    def __init__(self):
        super().__init__(
            "Please run this script as root or with sudo",
            component="Privileges",
        )


class ComposeUnavailableError(SetupError):
    """Raised when `docker compose version` does not succeed"""

    def __init__(self):
        super().__init__("Docker Compose not available", component="Docker")


class CommandFailedError(SetupError):
    """An external command exited non-zero or could not be started"""

    def __init__(self, cmd: list[str], returncode: int, stderr: str = ""):
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr
        detail = f": {stderr.strip()}" if stderr and stderr.strip() else ""
        super().__init__(
            f"Command failed with exit status {returncode}: {' '.join(self.cmd)}{detail}",
            component="Command",
        )

    @property
    def exit_code(self) -> int:
        # killed by signal N: report 128+N like the shell does
        if self.returncode < 0:
            return 128 - self.returncode
        return self.returncode or 1


class DownloadError(SetupError):
    """A remote file could not be fetched"""

    def __init__(self, url: str, reason: str):
        self.url = url
        super().__init__(
            f"Failed to download {url}: {reason}",
            component="Download",
            recovery_hint="Check network connectivity and re-run the script",
        )


class FilesystemError(SetupError):
    """A file or directory on the host could not be created or changed"""

    def __init__(self, path, error: OSError):
        self.path = path
        super().__init__(
            f"Cannot update {path}: {error.strerror or error}",
            component="Filesystem",
            recovery_hint=f"Check that {path} is writable by root and is not a directory or special file",
        )


class InputClosedError(SetupError):
    """Standard input ended before a full answer line was read"""

    def __init__(self):
        super().__init__(
            "No answer received (standard input closed)",
            component="Prompt",
            recovery_hint="Run the script from an interactive terminal",
        )
