"""
Common utilities shared across kubeversion modules.
"""

from __future__ import annotations

import os
import platform
import sys

# Python's platform names mapped onto the names used in Kubernetes release paths
_OS_NAMES = {
    "linux": "linux",
    "darwin": "darwin",
    "windows": "windows",
}

_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "arm",
    "armv6l": "arm",
    "i386": "386",
    "i686": "386",
    "ppc64le": "ppc64le",
    "s390x": "s390x",
}


def current_os() -> str:
    """
    Get the execution operating system in Kubernetes release naming.

    Returns:
        OS name such as "linux" or "darwin"
    """
    system = platform.system().lower()
    return _OS_NAMES.get(system, system)


def current_arch() -> str:
    """
    Get the execution architecture in Kubernetes release naming.

    Returns:
        Architecture name such as "amd64" or "arm64"
    """
    machine = platform.machine().lower()
    return _ARCH_NAMES.get(machine, machine)


def vlog(msg: str, verbose: bool = False) -> None:
    """
    Log verbose message using structured logging.

    Args:
        msg: Message to log
        verbose: Whether verbose mode is enabled
    """
    if verbose or os.environ.get("KUBEVERSION_DEBUG", "0") == "1":
        try:
            from .logging_config import get_logger
            logger = get_logger()
            logger.info(msg)
        except Exception:
            # Fallback to stderr if logging fails
            try:
                print(f"[kubeversion] {msg}", file=sys.stderr)
            except Exception:
                pass
