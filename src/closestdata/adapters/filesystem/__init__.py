"""Filesystem adapters implementing FileSystemPort."""

from closestdata.adapters.filesystem.local import LocalFileSystem


__all__ = ["LocalFileSystem"]
