"""
Version activation.

The active version is nothing more than the target of the stable symlink
``<bin_dir>/kubectl``. Switching versions replaces that symlink; a new link is
created beside it and renamed over the old entry so the stable path never goes
missing once it exists.
"""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass

from .config import Config
from .errors import SymlinkCreateError, VersionNotInstalledError
from .installer import ensure_directory
from .inventory import get_active_version, version_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActivationResult:
    """
    Result of switching the active version.

    Attributes:
        version: Version now active
        previous_version: Version active before the switch, if any
        stable_path: The symlink that was updated
        target_path: The binary the symlink points at
    """
    version: str
    previous_version: str | None
    stable_path: str
    target_path: str

    @property
    def changed(self) -> bool:
        """Whether the active version actually changed."""
        return self.previous_version != self.version


def _clear_stable_path(path) -> None:
    """Remove a real directory at the stable path; rename cannot replace one."""
    if path.is_dir() and not path.is_symlink():
        logger.debug(f"Removing directory at stable path: {path}")
        shutil.rmtree(path)


def switch_version(version: str, config: Config) -> ActivationResult:
    """
    Point the stable binary path at an installed version.

    Args:
        version: Canonical version identifier
        config: Resolved configuration

    Returns:
        ActivationResult describing the switch

    Raises:
        VersionNotInstalledError: If the version is not in the store (the
            stable path is left untouched)
        DirectoryCreateError: If the bin directory cannot be created
        SymlinkCreateError: If the symlink cannot be replaced
    """
    target = version_path(config, version)
    if not target.exists():
        raise VersionNotInstalledError(version)

    ensure_directory(config.bin_dir, "bin")

    stable = config.stable_path
    previous = get_active_version(config)
    temp_link = config.bin_dir / f".{config.binary_name}.tmp-{os.getpid()}"

    try:
        if temp_link.is_symlink() or temp_link.exists():
            temp_link.unlink()
        temp_link.symlink_to(target)
        _clear_stable_path(stable)
        os.replace(temp_link, stable)
    except OSError as e:
        try:
            temp_link.unlink()
        except FileNotFoundError:
            pass
        raise SymlinkCreateError(f"failed to create symlink {stable} -> {target}: {e}") from e

    logger.debug(f"Linked {stable} -> {target}")
    return ActivationResult(
        version=version,
        previous_version=previous,
        stable_path=str(stable),
        target_path=str(target),
    )
