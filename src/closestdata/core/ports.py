"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias, runtime_checkable


if TYPE_CHECKING:
    from closestdata.core.models import ClosestDataResult

# A bucket maps a directory to its resolved outcome; None records Absence.
# A directory missing from the bucket has not been resolved yet.
CacheBucket: TypeAlias = "MutableMapping[str, ClosestDataResult | None]"


@runtime_checkable
class DataReaderPort(Protocol):
    """A config file candidate: a file name and how to read it."""

    @property
    def basename(self) -> str:
        """Bare file name looked up in each directory."""
        ...

    def read(self, path: str) -> Any:
        """Read the file at path.

        Args:
            path: Full path to an existing candidate file.

        Returns:
            The data found in the file, or None if the file carries nothing
            usable for this reader.
        """
        ...


@runtime_checkable
class FileSystemPort(Protocol):
    """Path primitives the directory walk is built on."""

    def exists(self, path: str) -> bool:
        """Return True if something exists at path."""
        ...

    def join(self, directory: str, basename: str) -> str:
        """Return the path of basename inside directory."""
        ...

    def parent(self, directory: str) -> str:
        """Return the parent of directory.

        The parent of the filesystem root is the root itself; the walk
        relies on this to terminate.
        """
        ...


@runtime_checkable
class ResultCachePort(Protocol):
    """Memoized lookup outcomes, partitioned into buckets per reader set."""

    def get_or_create_bucket(self, key: str) -> CacheBucket:
        """Return the bucket for key, creating an empty one if needed.

        Never replaces an existing bucket.
        """
        ...

    def backfill(
        self,
        key: str,
        directories: Iterable[str],
        outcome: ClosestDataResult | None,
    ) -> None:
        """Record outcome for every directory of a finished walk at once.

        Args:
            key: Bucket key of the reader set.
            directories: Directories visited by the walk.
            outcome: The shared result, or None for Absence.
        """
        ...

    def clear(self) -> None:
        """Discard every bucket and every entry."""
        ...
