"""
Error taxonomy for kubeversion.

Every failure surfaced by the core is a KubeversionError subclass carrying a
message that names the failing stage and the path or version involved.
"""

from __future__ import annotations


class KubeversionError(Exception):
    """
    Base exception for kubeversion errors.

    Attributes:
        message: Human-readable error message
        remediation: Suggested fix for the error
    """
    def __init__(self, message: str, remediation: str | None = None):
        self.message = message
        self.remediation = remediation
        super().__init__(message)


class ConfigError(KubeversionError):
    """Raised when a requested configuration file cannot be loaded."""


class HomeDirectoryUnavailable(KubeversionError):
    """Raised when the user's home directory cannot be resolved."""


class DirectoryCreateError(KubeversionError):
    """Raised when the version store or bin directory cannot be created."""


class InventoryReadError(KubeversionError):
    """Raised when the version store exists but cannot be listed."""


class NetworkError(KubeversionError):
    """Raised when a request fails at the transport level."""


class RemoteStatusError(KubeversionError):
    """Raised when the remote answers with a non-200 status."""

    def __init__(self, message: str, status: int, url: str):
        self.status = status
        self.url = url
        super().__init__(message)


class ResponseDecodeError(KubeversionError):
    """Raised when a response body does not have the expected shape."""


class ArtifactWriteError(KubeversionError):
    """Raised when a downloaded binary cannot be written to the version store."""


class VersionNotInstalledError(KubeversionError):
    """Raised when activating a version that is not in the version store."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(
            f"version {version} is not installed. Use 'kubeversion install {version}' first",
            remediation=f"kubeversion install {version}",
        )


class SymlinkCreateError(KubeversionError):
    """Raised when the stable binary symlink cannot be replaced."""


class UserCancelled(Exception):
    """Raised by a selector when the user backs out. Not an error."""
