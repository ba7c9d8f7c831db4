"""
Command-line interface for YAMS Setup
"""

import logging
import sys

import click

from yams_setup import __version__
from yams_setup.bootstrap import SetupPipeline
from yams_setup.console import StatusConsole
from yams_setup.core.config import get_settings
from yams_setup.core.exceptions import SetupError

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send diagnostics to stderr so stdout carries only status lines"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
def main() -> None:
    """Install Docker on Ubuntu 22.04 and launch the YAMS installer (run as root)"""
    settings = get_settings()
    configure_logging(settings.log_level)

    console = StatusConsole()
    pipeline = SetupPipeline(settings=settings, console=console)

    try:
        pipeline.run()
    except SetupError as e:
        logger.debug(str(e))
        console.error(e.message)
        if e.recovery_hint:
            console.hint(e.recovery_hint)
        sys.exit(e.exit_code)
