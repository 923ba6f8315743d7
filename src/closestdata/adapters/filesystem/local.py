"""Local filesystem adapter implementing FileSystemPort."""

from __future__ import annotations

import os


_SEPARATORS = os.sep + (os.altsep or "")


class LocalFileSystem:
    """Path primitives backed by os.path.

    Paths are handled as plain strings and are not resolved or normalized,
    so cache entries are keyed by exactly the directories the walk visits.
    """

    def exists(self, path: str) -> bool:
        """Return True if a file or directory exists at path."""
        return os.path.exists(path)

    def join(self, directory: str, basename: str) -> str:
        """Return the path of basename inside directory."""
        return os.path.join(directory, basename)

    def parent(self, directory: str) -> str:
        """Return the parent of directory; the root is its own parent.

        Trailing separators are ignored, so "/p/sub/" has parent "/p".
        """
        drive, rest = os.path.splitdrive(directory)
        trimmed = rest.rstrip(_SEPARATORS)
        if not trimmed:
            # Root ("/", "C:\\") or empty path
            return directory
        return os.path.dirname(drive + trimmed)
