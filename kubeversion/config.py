"""
Configuration file parsing and path resolution.

Reads YAML configuration files and merges them (custom → project → user →
defaults). The resulting Config carries every resolved path the core needs, so
components never look up the home directory or environment on their own.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from .common import vlog
from .errors import ConfigError, HomeDirectoryUnavailable


DEFAULT_RELEASE_URL = "https://api.github.com/repos/kubernetes/kubernetes/releases"
DEFAULT_DOWNLOAD_BASE_URL = "https://dl.k8s.io/release"
DEFAULT_BINARY_NAME = "kubectl"
DEFAULT_ROOT_DIRNAME = ".kubeversion"

# Configuration file locations (in priority order), relative ones resolved from cwd
PROJECT_CONFIG = ".kubeversion.yml"
USER_CONFIG = "~/.config/kubeversion/config.yml"


def resolve_home() -> Path:
    """
    Resolve the current user's home directory.

    Raises:
        HomeDirectoryUnavailable: If the home directory cannot be determined
    """
    try:
        home = Path.home()
    except (KeyError, RuntimeError) as e:
        raise HomeDirectoryUnavailable(f"failed to get home directory: {e}") from e
    if not str(home) or str(home) == "~":
        raise HomeDirectoryUnavailable("failed to get home directory: HOME is not set")
    return home


@dataclass(frozen=True)
class Config:
    """
    Resolved configuration for kubeversion.

    Attributes:
        root_dir: Directory holding the version store and the bin directory
            (made absolute against the current directory)
        binary_name: Name of the managed binary
        release_url: Endpoint returning the JSON list of releases
        download_base_url: Base URL for binary downloads
        timeout_seconds: Timeout for network operations
        chunk_size: Bytes read per chunk while downloading
        source: Path to the configuration file that was loaded
    """
    root_dir: Path
    binary_name: str = DEFAULT_BINARY_NAME
    release_url: str = DEFAULT_RELEASE_URL
    download_base_url: str = DEFAULT_DOWNLOAD_BASE_URL
    timeout_seconds: int = 60
    chunk_size: int = 64 * 1024
    source: str = ""

    def __post_init__(self):
        """Validate config after initialization."""
        # Links in bin/ store this path verbatim, so it must not depend on cwd
        object.__setattr__(self, "root_dir", Path(os.path.expanduser(str(self.root_dir))).absolute())

        if not self.binary_name or os.sep in self.binary_name:
            raise ValueError(f"Invalid binary_name: {self.binary_name!r}")

        if self.timeout_seconds < 1 or self.timeout_seconds > 600:
            raise ValueError(
                f"Invalid timeout_seconds: {self.timeout_seconds}. "
                "Must be between 1 and 600"
            )

        if self.chunk_size < 1024:
            raise ValueError(
                f"Invalid chunk_size: {self.chunk_size}. Must be at least 1024"
            )

    @property
    def versions_dir(self) -> Path:
        """Directory holding one binary per installed version."""
        return self.root_dir / "versions"

    @property
    def bin_dir(self) -> Path:
        """Directory users add to their PATH."""
        return self.root_dir / "bin"

    @property
    def stable_path(self) -> Path:
        """Symlink pointing at the active version."""
        return self.bin_dir / self.binary_name

    @property
    def artifact_prefix(self) -> str:
        """Filename prefix of versioned binaries in the store."""
        return f"{self.binary_name}-"

    @staticmethod
    def from_dict(data: dict[str, Any], root_dir: Path, source: str = "") -> Config:
        """Create Config from dictionary, falling back to root_dir when unset."""
        raw_root = data.get("root_dir")
        if raw_root:
            root_dir = Path(os.path.expanduser(str(raw_root)))

        return Config(
            root_dir=root_dir,
            binary_name=data.get("binary_name", DEFAULT_BINARY_NAME),
            release_url=data.get("release_url", DEFAULT_RELEASE_URL),
            download_base_url=data.get("download_base_url", DEFAULT_DOWNLOAD_BASE_URL).rstrip("/"),
            timeout_seconds=int(data.get("timeout_seconds", 60)),
            chunk_size=int(data.get("chunk_size", 64 * 1024)),
            source=source,
        )


def _load_yaml(file_path: str) -> dict[str, Any] | None:
    """
    Load YAML configuration file.

    Args:
        file_path: Path to YAML file

    Returns:
        Parsed configuration dictionary, or None if file is unreadable or invalid
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
            return data if isinstance(data, dict) else {}
    except (OSError, yaml.YAMLError):
        return None


def load_config_data(file_path: str, verbose: bool = False) -> dict[str, Any] | None:
    """
    Load raw configuration values from a single file.

    Args:
        file_path: Path to configuration file
        verbose: Enable verbose logging

    Returns:
        Configuration dictionary, or None if file cannot be loaded
    """
    if not os.path.exists(file_path):
        return None

    vlog(f"Loading config from: {file_path}", verbose)

    data = _load_yaml(file_path)
    if data is None:
        vlog(f"Invalid config file: {file_path}", verbose)
    return data


def load_config(
    custom_path: str | None = None,
    verbose: bool = False,
) -> Config:
    """
    Build the Config for this invocation.

    Configuration precedence (highest to lowest):
    1. KUBEVERSION_HOME environment variable (root_dir only)
    2. Custom path (if provided)
    3. Project .kubeversion.yml
    4. User ~/.config/kubeversion/config.yml
    5. Defaults (root_dir = ~/.kubeversion)

    Args:
        custom_path: Optional path to custom configuration file
        verbose: Enable verbose logging

    Returns:
        Resolved Config object

    Raises:
        ConfigError: If custom_path is given but cannot be loaded, or values are invalid
        HomeDirectoryUnavailable: If the default root directory cannot be resolved
    """
    layers: list[tuple[str, dict[str, Any]]] = []

    if custom_path:
        data = load_config_data(custom_path, verbose)
        if data is None:
            raise ConfigError(f"Could not load config from specified path: {custom_path}")
        layers.append((custom_path, data))

    for location in (PROJECT_CONFIG, os.path.expanduser(USER_CONFIG)):
        data = load_config_data(location, verbose)
        if data is not None:
            layers.append((location, data))

    # Lowest priority first so higher layers overwrite
    merged: dict[str, Any] = {}
    source = ""
    for location, data in reversed(layers):
        merged.update({k: v for k, v in data.items() if v is not None})
        source = location

    env_home = os.environ.get("KUBEVERSION_HOME")
    if env_home:
        merged["root_dir"] = env_home
        vlog(f"Using KUBEVERSION_HOME: {env_home}", verbose)

    if merged.get("root_dir"):
        default_root = Path(os.path.expanduser(str(merged["root_dir"])))
    else:
        default_root = resolve_home() / DEFAULT_ROOT_DIRNAME

    try:
        config = Config.from_dict(merged, root_dir=default_root, source=source)
    except (ValueError, TypeError) as e:
        raise ConfigError(f"Invalid configuration ({source or 'defaults'}): {e}") from e

    vlog(f"Using root directory: {config.root_dir}", verbose)
    return config


def config_for_root(root_dir: str | Path, **overrides: Any) -> Config:
    """
    Build a Config rooted at an explicit directory.

    Args:
        root_dir: Root directory for versions and bin
        overrides: Field overrides applied on top of defaults

    Returns:
        Config object
    """
    return replace(Config(root_dir=Path(root_dir)), **overrides)
