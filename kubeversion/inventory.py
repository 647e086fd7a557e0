"""
Installed-version inventory.

Installed versions are not recorded anywhere; they are derived from the
filenames in the version store.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .config import Config
from .errors import InventoryReadError
from .versions import normalize_version

logger = logging.getLogger(__name__)

# Prefix of in-flight downloads; never reported as installed
TEMP_PREFIX = ".download-"


def version_path(config: Config, version: str) -> Path:
    """Path of the stored binary for a canonical version."""
    return config.versions_dir / f"{config.artifact_prefix}{version}"


def scan_installed(config: Config) -> set[str]:
    """
    List the versions present in the version store.

    Args:
        config: Resolved configuration

    Returns:
        Set of canonical version identifiers (empty if the store does not exist)

    Raises:
        InventoryReadError: If the store exists but cannot be read
    """
    try:
        entries = os.listdir(config.versions_dir)
    except FileNotFoundError:
        logger.debug(f"Version store not found: {config.versions_dir}")
        return set()
    except OSError as e:
        raise InventoryReadError(
            f"failed to read versions directory {config.versions_dir}: {e}"
        ) from e

    installed = set()
    for name in entries:
        if name.startswith(TEMP_PREFIX) or not name.startswith(config.artifact_prefix):
            continue
        raw = name[len(config.artifact_prefix):]
        if raw:
            installed.add(normalize_version(raw))

    logger.debug(f"Installed versions: {sorted(installed)}")
    return installed


def get_active_version(config: Config) -> str | None:
    """
    Get the version the stable binary path currently points at.

    Returns:
        Canonical version, or None if nothing is active or the link points
        outside the version store
    """
    stable = config.stable_path
    if not stable.is_symlink():
        return None

    target = Path(os.readlink(stable))
    if not target.is_absolute():
        target = Path(os.path.normpath(stable.parent / target))

    if target.parent != config.versions_dir:
        return None
    if not target.name.startswith(config.artifact_prefix):
        return None
    return normalize_version(target.name[len(config.artifact_prefix):])
