"""
HTTP download helpers

Equivalent of `curl -fsSL`: redirects are followed and any HTTP error status
is fatal.
"""

import logging
from pathlib import Path

import httpx

from yams_setup.core.config import Settings
from yams_setup.core.exceptions import DownloadError

logger = logging.getLogger(__name__)


def create_client(settings: Settings) -> httpx.Client:
    """Build the shared HTTP client used for all downloads"""
    return httpx.Client(
        timeout=settings.http_timeout,
        follow_redirects=True,
    )


def fetch_bytes(client: httpx.Client, url: str) -> bytes:
    """
    Fetch a small resource fully into memory

    Raises:
        DownloadError: On transport failure or HTTP error status
    """
    logger.info(f"Fetching {url}")
    try:
        response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise DownloadError(url, f"HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise DownloadError(url, str(e) or type(e).__name__) from e
    return response.content


def download_file(client: httpx.Client, url: str, dest: Path) -> Path:
    """
    Stream a remote file to disk, replacing any existing file

    Args:
        client: HTTP client
        url: URL to download from
        dest: Destination file path

    Returns:
        Path: dest

    Raises:
        DownloadError: On transport failure, HTTP error status, or when dest
            cannot be written
    """
    logger.info(f"Downloading {url} -> {dest}")
    try:
        with client.stream("GET", url) as response:
            response.raise_for_status()
            with open(dest, "wb") as f:
                for chunk in response.iter_bytes(chunk_size=8192):
                    f.write(chunk)
    except httpx.HTTPStatusError as e:
        raise DownloadError(url, f"HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise DownloadError(url, str(e) or type(e).__name__) from e
    except OSError as e:
        raise DownloadError(url, f"cannot write {dest}: {e.strerror or e}") from e

    logger.info(f"Download complete: {dest}")
    return dest
