"""
Version identifier normalization and ordering.

Canonical identifiers carry a leading "v" (e.g. "v1.29.0"), matching Kubernetes
release tags.
"""

from __future__ import annotations

from typing import Iterable, Union

from packaging import version as pkg_version

VERSION_PREFIX = "v"

VersionKey = tuple[int, Union[pkg_version.Version, str]]


def normalize_version(raw: str) -> str:
    """Return raw with the "v" tag marker prepended if it is missing.

    The remainder is not validated; malformed versions fail later when no
    artifact matches them.

    Args:
        raw: User, remote or filename supplied version (e.g. "1.29.0")

    Returns:
        Canonical identifier (e.g. "v1.29.0")
    """
    if raw.startswith(VERSION_PREFIX):
        return raw
    return VERSION_PREFIX + raw


def version_key(ver: str) -> VersionKey:
    """
    Sort key for a version identifier.

    Parseable versions rank above unparseable ones and compare semantically;
    unparseable ones compare as plain strings among themselves.
    """
    try:
        return (1, pkg_version.parse(ver))
    except pkg_version.InvalidVersion:
        return (0, ver)


def compare_versions(v1: str, v2: str) -> int:
    """
    Compare two version identifiers.

    Args:
        v1: First version
        v2: Second version

    Returns:
        -1 if v1 < v2, 0 if v1 == v2, 1 if v1 > v2
    """
    key1 = version_key(v1)
    key2 = version_key(v2)
    if key1 < key2:
        return -1
    elif key1 > key2:
        return 1
    return 0


def sort_versions_desc(versions: Iterable[str]) -> list[str]:
    """Sort version identifiers newest first.

    Ordering is semantic, so "v1.10.0" sorts above "v1.9.0" and a release
    sorts above its own "-rc" tags.
    """
    return sorted(versions, key=version_key, reverse=True)
