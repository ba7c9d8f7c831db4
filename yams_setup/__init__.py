"""
YAMS Setup

Bootstraps an Ubuntu 22.04 server with Docker and hands off to the YAMS installer.
"""

__version__ = "1.0.0"
__license__ = "MIT"

from yams_setup.bootstrap import SetupPipeline, SetupResult

__all__ = [
    "SetupPipeline",
    "SetupResult",
]
