"""In-memory cache adapter implementing ResultCachePort."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterable

    from closestdata.core.models import ClosestDataResult
    from closestdata.core.ports import CacheBucket


logger = logging.getLogger(__name__)


class InMemoryResultCache:
    """Process-local store of lookup outcomes.

    Buckets are plain dicts keyed by directory path. A directory mapped to
    None has been resolved to "nothing found"; a directory absent from its
    bucket has never been resolved.

    Bucket creation, back-fill and clear are serialized by a lock so several
    resolvers may share one cache across threads. Two threads racing on the
    same directory may both walk the filesystem, but they commit the same
    outcome.
    """

    def __init__(self) -> None:
        self._buckets: dict[str, dict[str, ClosestDataResult | None]] = {}
        self._lock = threading.Lock()

    def get_or_create_bucket(self, key: str) -> CacheBucket:
        """Return the bucket for key, creating an empty one if needed.

        Args:
            key: Bucket key, the "::"-joined basenames of a reader set.

        Returns:
            The live bucket mapping for key.
        """
        with self._lock:
            bucket = self._buckets.get(key)
            if bucket is None:
                bucket = self._buckets[key] = {}
                logger.debug("Created cache bucket %r", key)
            return bucket

    def backfill(
        self,
        key: str,
        directories: Iterable[str],
        outcome: ClosestDataResult | None,
    ) -> None:
        """Record outcome for every directory of a finished walk.

        Args:
            key: Bucket key of the reader set.
            directories: Directories visited by the walk.
            outcome: The shared result, or None when nothing was found.
        """
        with self._lock:
            bucket = self._buckets.setdefault(key, {})
            count = 0
            for directory in directories:
                bucket[directory] = outcome
                count += 1
        logger.debug("Back-filled %d directories in bucket %r", count, key)

    def clear(self) -> None:
        """Discard every bucket and every entry."""
        with self._lock:
            self._buckets = {}
        logger.debug("Cleared result cache")

    def bucket_keys(self) -> list[str]:
        """List the keys of all buckets currently held."""
        with self._lock:
            return list(self._buckets)

    def __len__(self) -> int:
        """Total number of cached directory entries across buckets."""
        with self._lock:
            return sum(len(bucket) for bucket in self._buckets.values())
