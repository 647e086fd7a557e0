"""
Binary installation into the version store.

Downloads a kubectl release for the current platform and stores it as
``<versions_dir>/kubectl-<version>`` with executable permission. Downloads land
in a temporary file first and are renamed into place only once complete, so an
interrupted transfer never looks like an installed version.
"""

from __future__ import annotations

import http.client
import logging
import os
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .common import current_arch, current_os
from .config import Config
from .errors import ArtifactWriteError, DirectoryCreateError, NetworkError
from .inventory import TEMP_PREFIX, version_path
from .remote import open_url

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, Optional[int]], None]


@dataclass(frozen=True)
class InstallResult:
    """
    Result of installing a single version.

    Attributes:
        version: Canonical version that was installed
        url: Download URL used
        binary_path: Path of the stored binary
        bytes_written: Size of the downloaded binary
        duration_seconds: Time taken by the download
    """
    version: str
    url: str
    binary_path: str
    bytes_written: int
    duration_seconds: float

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "version": self.version,
            "url": self.url,
            "binary_path": self.binary_path,
            "bytes_written": self.bytes_written,
            "duration_seconds": self.duration_seconds,
        }


def download_url(
    config: Config,
    version: str,
    os_name: str | None = None,
    arch: str | None = None,
) -> str:
    """
    Build the download URL for a version on a platform.

    Args:
        config: Resolved configuration
        version: Canonical version (e.g. "v1.29.0")
        os_name: Target OS (defaults to the running OS)
        arch: Target architecture (defaults to the running architecture)

    Returns:
        URL of the binary
    """
    os_name = os_name or current_os()
    arch = arch or current_arch()
    binary = config.binary_name + (".exe" if os_name == "windows" else "")
    return f"{config.download_base_url}/{version}/bin/{os_name}/{arch}/{binary}"


def ensure_directory(path: Path, label: str) -> None:
    """Create a directory and its parents if missing."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(f"failed to create {label} directory {path}: {e}") from e


def _content_length(response) -> int | None:
    value = response.headers.get("Content-Length") if response.headers else None
    try:
        return int(value) if value is not None else None
    except ValueError:
        return None


def install_version(
    version: str,
    config: Config,
    progress: ProgressCallback | None = None,
) -> InstallResult:
    """
    Download a version into the version store, overwriting any existing copy.

    Args:
        version: Canonical version identifier
        config: Resolved configuration
        progress: Called with (bytes_downloaded, total_bytes_or_None) per chunk

    Returns:
        InstallResult describing the stored binary

    Raises:
        DirectoryCreateError: If the version store cannot be created
        NetworkError: If the download fails in transit
        RemoteStatusError: If the server answers with a non-200 status
        ArtifactWriteError: If the binary cannot be written
    """
    ensure_directory(config.versions_dir, "versions")

    url = download_url(config, version)
    dest = version_path(config, version)
    logger.info(f"Downloading {config.binary_name} {version}")
    logger.debug(f"Download URL: {url}")

    start_time = time.time()
    with open_url(url, config.timeout_seconds) as response:
        total = _content_length(response)

        try:
            fd, tmp_name = tempfile.mkstemp(prefix=TEMP_PREFIX, dir=config.versions_dir)
        except OSError as e:
            raise ArtifactWriteError(f"failed to create {config.binary_name} file in {config.versions_dir}: {e}") from e

        downloaded = 0
        try:
            with os.fdopen(fd, "wb") as out:
                while True:
                    try:
                        chunk = response.read(config.chunk_size)
                    except (http.client.HTTPException, OSError) as e:
                        raise NetworkError(f"failed to download {config.binary_name} {version}: {e}") from e
                    if not chunk:
                        break
                    try:
                        out.write(chunk)
                    except OSError as e:
                        raise ArtifactWriteError(f"failed to save {config.binary_name} to {dest}: {e}") from e
                    downloaded += len(chunk)
                    if progress:
                        progress(downloaded, total)

            if total is not None and downloaded != total:
                raise NetworkError(
                    f"failed to download {config.binary_name} {version}: "
                    f"received {downloaded} of {total} bytes"
                )

            try:
                os.chmod(tmp_name, 0o755)
                os.replace(tmp_name, dest)
            except OSError as e:
                raise ArtifactWriteError(f"failed to save {config.binary_name} to {dest}: {e}") from e
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise

    duration = time.time() - start_time
    logger.debug(f"Stored {downloaded} bytes at {dest} in {duration:.1f}s")
    return InstallResult(
        version=version,
        url=url,
        binary_path=str(dest),
        bytes_written=downloaded,
        duration_seconds=duration,
    )
