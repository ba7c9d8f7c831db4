"""
External command execution

All package-manager, service and user-management calls go through
CommandRunner so failures surface uniformly as CommandFailedError.
"""

import logging
import subprocess

from yams_setup.core.exceptions import CommandFailedError

logger = logging.getLogger(__name__)

# Shell convention for "command not found"
EXIT_NOT_FOUND = 127


class CommandRunner:
    """Runs external commands synchronously, aborting on the first failure"""

    def run(
        self,
        cmd: list[str],
        capture_output: bool = False,
        input: bytes | None = None,
    ) -> subprocess.CompletedProcess:
        """
        Run a command and wait for it to finish

        Args:
            cmd: Command and arguments
            capture_output: Capture stdout/stderr instead of streaming them to the terminal
            input: Bytes fed to the command's stdin

        Returns:
            CompletedProcess (stdout/stderr are bytes when captured)

        Raises:
            CommandFailedError: If the command exits non-zero or cannot be started
        """
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            return subprocess.run(
                cmd,
                capture_output=capture_output,
                input=input,
                check=True,
            )
        except FileNotFoundError as e:
            logger.info(f"Command not found: {cmd[0]}")
            raise CommandFailedError(cmd, EXIT_NOT_FOUND, str(e)) from e
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode(errors="replace") if e.stderr else ""
            logger.info(f"Command failed ({e.returncode}): {' '.join(cmd)}")
            raise CommandFailedError(cmd, e.returncode, stderr) from e

    def output(self, cmd: list[str]) -> str:
        """Run a command and return its stripped stdout"""
        result = self.run(cmd, capture_output=True)
        return result.stdout.decode(errors="replace").strip()

    def succeeds(self, cmd: list[str]) -> bool:
        """Run a command quietly and report whether it exited zero"""
        try:
            self.run(cmd, capture_output=True)
        except CommandFailedError:
            return False
        return True
