"""
Search path detection for the managed bin directory.

kubeversion never edits shell configuration; it only explains what to add.
"""

from __future__ import annotations

import logging
import os

from .config import Config

logger = logging.getLogger(__name__)


def is_bin_dir_on_path(config: Config, path_env: str | None = None) -> bool:
    """
    Check whether the bin directory is a literal PATH entry.

    Entries are compared as plain strings, so "~/.kubeversion/bin/" or a
    symlinked parent does not count as a match.

    Args:
        config: Resolved configuration
        path_env: PATH value to inspect (defaults to the process PATH)

    Returns:
        True if the bin directory appears in PATH
    """
    if path_env is None:
        path_env = os.environ.get("PATH", "")
    path_dirs = path_env.split(os.pathsep)
    return str(config.bin_dir) in path_dirs


def path_guidance(config: Config) -> str:
    """Shell instructions for adding the bin directory to PATH."""
    return (
        f"To use {config.binary_name} managed by kubeversion, add this to your shell config "
        f"(~/.bashrc, ~/.zshrc, etc.):\n"
        f"    export PATH=\"{config.bin_dir}:$PATH\"\n"
        f"Then restart your shell or run: source ~/.bashrc (or ~/.zshrc)"
    )


def advise_path(config: Config, path_env: str | None = None) -> bool:
    """
    Warn when the bin directory is missing from PATH.

    Returns:
        True if PATH is already configured, False if guidance was emitted
    """
    if is_bin_dir_on_path(config, path_env):
        logger.debug(f"{config.bin_dir} found in PATH")
        return True

    logger.warning(f"{config.bin_dir} is not in your PATH.\n{path_guidance(config)}")
    return False
