"""
kubeversion - kubectl version manager.

Core Modules:
- Versions: Normalization and ordering of version identifiers
- Inventory: Installed versions derived from the version store
- Remote: Available versions from the Kubernetes release list
- Installer / Activator: Download binaries and switch the active symlink
- Orchestrator: The install, use and interactive list operations
"""

__version__ = "1.0.0"

from .versions import normalize_version, compare_versions, sort_versions_desc, version_key
from .config import Config, load_config, config_for_root
from .errors import (
    KubeversionError,
    ConfigError,
    HomeDirectoryUnavailable,
    DirectoryCreateError,
    InventoryReadError,
    NetworkError,
    RemoteStatusError,
    ResponseDecodeError,
    ArtifactWriteError,
    VersionNotInstalledError,
    SymlinkCreateError,
    UserCancelled,
)
from .inventory import scan_installed, get_active_version, version_path
from .remote import fetch_remote_versions
from .installer import InstallResult, download_url, install_version
from .activator import ActivationResult, switch_version
from .environment import is_bin_dir_on_path, path_guidance, advise_path
from .selector import VersionChoice, Selector, TerminalSelector
from .orchestrator import install, use, interactive_select
from .logging_config import setup_logging, get_logger

__all__ = [
    "__version__",
    # Versions
    "normalize_version",
    "compare_versions",
    "sort_versions_desc",
    "version_key",
    # Configuration
    "Config",
    "load_config",
    "config_for_root",
    # Errors
    "KubeversionError",
    "ConfigError",
    "HomeDirectoryUnavailable",
    "DirectoryCreateError",
    "InventoryReadError",
    "NetworkError",
    "RemoteStatusError",
    "ResponseDecodeError",
    "ArtifactWriteError",
    "VersionNotInstalledError",
    "SymlinkCreateError",
    "UserCancelled",
    # Local and remote state
    "scan_installed",
    "get_active_version",
    "version_path",
    "fetch_remote_versions",
    # Installation and activation
    "InstallResult",
    "download_url",
    "install_version",
    "ActivationResult",
    "switch_version",
    "is_bin_dir_on_path",
    "path_guidance",
    "advise_path",
    # Selection and operations
    "VersionChoice",
    "Selector",
    "TerminalSelector",
    "install",
    "use",
    "interactive_select",
    # Logging
    "setup_logging",
    "get_logger",
]
