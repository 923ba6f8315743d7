"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

import posixpath
from collections.abc import Iterator
from typing import Any

import pytest

import closestdata


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, ports, and services")
    config.addinivalue_line("markers", "cache: Result cache adapter")
    config.addinivalue_line("markers", "filesystem: Filesystem adapter")
    config.addinivalue_line("markers", "readers: Reader adapters")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


@pytest.fixture(autouse=True)
def _reset_default_cache() -> Iterator[None]:
    """Start and finish every test with an empty process-wide cache."""
    closestdata.clear_cache()
    yield
    closestdata.clear_cache()


class FakeFileSystem:
    """In-memory FileSystemPort over POSIX paths that records every call.

    Attributes:
        files: Mapping of absolute file path to fake content.
        calls: (method, argument) tuples in call order.
    """

    def __init__(self, files: dict[str, Any] | None = None) -> None:
        self.files: dict[str, Any] = dict(files or {})
        self.calls: list[tuple[str, str]] = []

    def exists(self, path: str) -> bool:
        self.calls.append(("exists", path))
        return path in self.files

    def join(self, directory: str, basename: str) -> str:
        self.calls.append(("join", directory))
        return posixpath.join(directory, basename)

    def parent(self, directory: str) -> str:
        self.calls.append(("parent", directory))
        return posixpath.dirname(directory)

    def count(self, method: str) -> int:
        """Number of recorded calls to method."""
        return sum(1 for name, _ in self.calls if name == method)

    def read(self, path: str) -> Any:
        """Return the fake content of path (usable as a reader's read)."""
        return self.files[path]


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    """Empty recording filesystem; tests populate fake_fs.files."""
    return FakeFileSystem()
