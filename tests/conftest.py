"""
Shared fixtures: an isolated Config and fake HTTP responses.
"""

import io

import pytest

from kubeversion.config import config_for_root


class FakeResponse:
    """Minimal stand-in for the object returned by urllib.request.urlopen."""

    def __init__(self, body: bytes = b"", status: int = 200, headers: dict | None = None, url: str = ""):
        self.status = status
        self.headers = headers if headers is not None else {"Content-Length": str(len(body))}
        self.url = url
        self._body = io.BytesIO(body)
        self.closed = False

    def read(self, size: int = -1) -> bytes:
        return self._body.read(size)

    def close(self) -> None:
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


@pytest.fixture
def config(tmp_path):
    """Config rooted in a temporary directory."""
    return config_for_root(tmp_path / ".kubeversion")


@pytest.fixture
def fake_response():
    """Factory for FakeResponse objects."""
    return FakeResponse


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Point HOME and cwd at a temporary directory so no real config is read."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("KUBEVERSION_HOME", raising=False)
    monkeypatch.chdir(tmp_path)
    return home
