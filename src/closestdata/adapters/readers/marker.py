"""Marker reader adapter.

A marker file or directory (".git", "pyproject.toml") carries no config of
its own; its presence identifies a directory. The data is that directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class MarkerReader:
    """Reader adapter that reports the directory holding the marker.

    Satisfies the DataReaderPort protocol. The marker is never opened, so it
    may be a directory.
    """

    basename: str

    def __post_init__(self) -> None:
        """Validate reader fields after initialization."""
        if not self.basename:
            raise ValueError("Reader basename cannot be empty")

    def read(self, path: str) -> Path:
        """Return the directory containing the marker at path."""
        return Path(path).parent
