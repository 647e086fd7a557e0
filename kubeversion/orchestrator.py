"""
User-facing operations: install, use and interactive selection.

Each operation normalizes its version argument once and then hands the
canonical identifier to the installer or activator.
"""

from __future__ import annotations

import logging
from typing import Optional

from .activator import ActivationResult, switch_version
from .config import Config
from .environment import advise_path
from .errors import UserCancelled
from .installer import InstallResult, ProgressCallback, install_version
from .inventory import get_active_version, scan_installed
from .remote import fetch_remote_versions
from .selector import Selector, VersionChoice
from .versions import normalize_version

logger = logging.getLogger(__name__)


def install(
    version: str,
    config: Config,
    progress: ProgressCallback | None = None,
) -> InstallResult:
    """Download a version into the version store."""
    version = normalize_version(version)
    result = install_version(version, config, progress=progress)
    logger.info(f"Installed {config.binary_name} {version}")
    return result


def use(version: str, config: Config, path_env: str | None = None) -> ActivationResult:
    """
    Activate an installed version.

    Args:
        version: Version with or without the "v" marker
        config: Resolved configuration
        path_env: PATH value used for the advisory check

    Raises:
        VersionNotInstalledError: If the version has not been installed
    """
    version = normalize_version(version)
    result = switch_version(version, config)
    advise_path(config, path_env)
    logger.info(f"Successfully switched to {config.binary_name} {version}")
    return result


def build_choices(
    available: list[str],
    installed: set[str],
    active: str | None = None,
) -> list[VersionChoice]:
    """Annotate remote versions with install and active state, keeping order."""
    return [
        VersionChoice(version=v, installed=v in installed, active=v == active)
        for v in available
    ]


def interactive_select(
    config: Config,
    selector: Selector,
    progress: ProgressCallback | None = None,
    path_env: str | None = None,
) -> Optional[ActivationResult]:
    """
    Let the user pick a remote version, installing it if needed, then use it.

    Args:
        config: Resolved configuration
        selector: Selection capability
        progress: Download progress callback
        path_env: PATH value used for the advisory check

    Returns:
        ActivationResult, or None if the user cancelled
    """
    available = [normalize_version(v) for v in fetch_remote_versions(config)]
    installed = scan_installed(config)
    active = get_active_version(config)
    advise_path(config, path_env)

    choices = build_choices(available, installed, active)
    try:
        chosen = selector.select(choices)
    except UserCancelled as e:
        logger.debug(f"Selection cancelled: {e}")
        return None
    if chosen is None:
        logger.debug("Selection cancelled")
        return None

    chosen = normalize_version(chosen)
    if chosen not in installed:
        install(chosen, config, progress=progress)
    return use(chosen, config, path_env)
