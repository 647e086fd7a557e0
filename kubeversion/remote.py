"""
Remote version listing.

Fetches the Kubernetes release list and reduces it to tagged version
identifiers, newest first. Performs no local mutation.
"""

import http.client
import json
import logging
import urllib.error
import urllib.request
from typing import Any

from .config import Config
from .errors import NetworkError, RemoteStatusError, ResponseDecodeError
from .versions import VERSION_PREFIX, sort_versions_desc

logger = logging.getLogger(__name__)

USER_AGENT = "kubeversion/1.0"


def open_url(url: str, timeout: int, headers: dict[str, str] | None = None) -> Any:
    """Open a URL and return the response, which must have status 200.

    Args:
        url: URL to fetch
        timeout: Timeout in seconds
        headers: Optional HTTP headers

    Returns:
        Open response object (caller closes it)

    Raises:
        NetworkError: If the request fails at the transport level
        RemoteStatusError: If the server answers with a non-200 status
    """
    default_headers = {"User-Agent": USER_AGENT}
    if headers:
        default_headers.update(headers)

    req = urllib.request.Request(url, headers=default_headers)
    try:
        response = urllib.request.urlopen(req, timeout=timeout)
    except urllib.error.HTTPError as e:
        e.close()
        raise RemoteStatusError(f"failed to fetch {url}: HTTP {e.code}", status=e.code, url=url) from e
    except (urllib.error.URLError, http.client.HTTPException, OSError) as e:
        raise NetworkError(f"failed to fetch {url}: {e}") from e

    status = getattr(response, "status", 200)
    if status != 200:
        response.close()
        raise RemoteStatusError(f"failed to fetch {url}: HTTP {status}", status=status, url=url)
    return response


def http_get(url: str, timeout: int = 60, headers: dict[str, str] | None = None) -> bytes:
    """Perform HTTP GET request and return the whole body.

    Raises:
        NetworkError: If the request or body read fails
        RemoteStatusError: If the server answers with a non-200 status
    """
    with open_url(url, timeout, headers) as response:
        try:
            return response.read()
        except (http.client.HTTPException, OSError) as e:
            raise NetworkError(f"failed to read response from {url}: {e}") from e


def parse_release_tags(body: bytes) -> list[str]:
    """Extract tag names from a GitHub releases response body.

    Args:
        body: Raw JSON body, an array of objects with a "tag_name" field

    Returns:
        Tag names in response order

    Raises:
        ResponseDecodeError: If the body is not an array of release objects
    """
    try:
        releases = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ResponseDecodeError(f"failed to decode versions: {e}") from e

    if not isinstance(releases, list):
        raise ResponseDecodeError(
            f"failed to decode versions: expected a JSON array, got {type(releases).__name__}"
        )

    tags = []
    for release in releases:
        if not isinstance(release, dict) or not isinstance(release.get("tag_name", ""), str):
            raise ResponseDecodeError(f"failed to decode versions: unexpected release entry {release!r}")
        tags.append(release.get("tag_name", ""))
    return tags


def fetch_remote_versions(config: Config) -> list[str]:
    """
    Fetch available versions, newest first.

    Only tags starting with the "v" marker are kept.

    Args:
        config: Resolved configuration

    Returns:
        Canonical version identifiers sorted in descending order

    Raises:
        NetworkError, RemoteStatusError, ResponseDecodeError
    """
    logger.debug(f"Fetching releases from {config.release_url}")
    body = http_get(
        config.release_url,
        timeout=config.timeout_seconds,
        headers={"Accept": "application/vnd.github+json"},
    )
    tags = parse_release_tags(body)
    versions = [tag for tag in tags if tag.startswith(VERSION_PREFIX)]
    logger.debug(f"Found {len(versions)} tagged releases")
    return sort_versions_desc(versions)
