"""
Colored status output

The bootstrap reports progress as prefixed status lines:
  [✓] green  - step succeeded
  [✗] red    - fatal error
  [!] yellow - warning or question
"""

import logging
import re
import sys
from typing import TextIO

from rich.console import Console
from rich.markup import escape

from yams_setup.core.exceptions import InputClosedError

logger = logging.getLogger(__name__)

RULE = "=" * 42
YES_PATTERN = re.compile(r"[Yy]")


class StatusConsole:
    """Thin wrapper over a rich Console that prints bootstrap status lines"""

    def __init__(self, console: Console | None = None, stdin: TextIO | None = None):
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.stdin = stdin

    def line(self, text: str = "") -> None:
        self.console.print(escape(text))

    def status(self, message: str) -> None:
        self.console.print(f"[green]\\[✓][/green] {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]\\[✗][/red] {escape(message)}")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]\\[!][/yellow] {escape(message)}")

    def hint(self, message: str) -> None:
        self.console.print(f"[dim]{escape(message)}[/dim]")

    def banner(self, title: str) -> None:
        self.console.print(RULE)
        self.console.print(escape(title))
        self.console.print(RULE)

    def step(self, heading: str) -> None:
        self.console.print()
        self.console.print(escape(heading))

    def ask_yes_no(self, question: str) -> bool:
        """
        Print a warning-styled question and read one line from stdin

        Only a lone "y" or "Y" (surrounding whitespace ignored) counts as yes.

        Raises:
            InputClosedError: If stdin ends before a newline-terminated answer
        """
        self.warning(question)
        response = self.console.input(stream=self.stdin or sys.stdin)
        if not response.endswith("\n"):
            logger.debug(f"stdin closed before end of line (read {response!r})")
            raise InputClosedError()
        return YES_PATTERN.fullmatch(response.strip()) is not None
