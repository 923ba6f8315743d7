"""Core domain services for closestdata."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from closestdata.core.exceptions import NoReadersError
from closestdata.core.models import ClosestDataResult
from closestdata.core.ports import DataReaderPort


if TYPE_CHECKING:
    from closestdata.core.ports import FileSystemPort, ResultCachePort


logger = logging.getLogger(__name__)

BUCKET_KEY_SEPARATOR = "::"


def bucket_key(readers: Sequence[DataReaderPort]) -> str:
    """Build the cache bucket key for an ordered reader set.

    Order is significant: ["a.json", "b.json"] and ["b.json", "a.json"]
    may resolve the same directory to different files.

    Args:
        readers: Readers in priority order.

    Returns:
        The basenames joined with "::".
    """
    return BUCKET_KEY_SEPARATOR.join(reader.basename for reader in readers)


def _as_reader_list(
    readers: DataReaderPort | Iterable[DataReaderPort],
) -> list[DataReaderPort]:
    if isinstance(readers, DataReaderPort):
        reader_list = [readers]
    else:
        reader_list = list(readers)
    if not reader_list:
        raise NoReadersError()
    return reader_list


class ClosestDataResolver:
    """Finds the nearest config file by walking up from a start directory.

    At each directory the readers are tried in the order given. The first
    reader whose file exists and whose read() returns something other than
    None wins, and the walk stops. Otherwise the walk moves to the parent
    directory until the filesystem root has been checked.

    Every directory visited by a completed walk is recorded in the cache with
    the final outcome, so later lookups from any of them, or from below them,
    return without touching the filesystem. Cache hits return the identical
    ClosestDataResult instance.

    If a reader raises, the error propagates unchanged and nothing from that
    walk is cached.

    Example:
        >>> from closestdata.adapters.readers import JsonReader
        >>> resolver = ClosestDataResolver()
        >>> result = resolver.resolve("/project/src", JsonReader(".babelrc"))
        >>> result.path if result else None
        '/project/.babelrc'
    """

    def __init__(
        self,
        cache: ResultCachePort | None = None,
        filesystem: FileSystemPort | None = None,
    ) -> None:
        if cache is None:
            from closestdata.adapters.cache import InMemoryResultCache

            cache = InMemoryResultCache()
        if filesystem is None:
            from closestdata.adapters.filesystem import LocalFileSystem

            filesystem = LocalFileSystem()
        self._cache = cache
        self._filesystem = filesystem

    @property
    def cache(self) -> ResultCachePort:
        """The cache this resolver reads from and back-fills."""
        return self._cache

    def resolve(
        self,
        start: str | os.PathLike[str],
        readers: DataReaderPort | Iterable[DataReaderPort],
    ) -> ClosestDataResult | None:
        """Resolve the closest file one of the readers accepts.

        Args:
            start: Directory (or file path) to start the walk from.
            readers: A single reader or readers in priority order.

        Returns:
            The matching result, or None if nothing matched up to the root.

        Raises:
            NoReadersError: If readers is empty. Raised before any
                filesystem access.
        """
        reader_list = _as_reader_list(readers)
        key = bucket_key(reader_list)
        bucket = self._cache.get_or_create_bucket(key)
        fs = self._filesystem

        directory = os.fspath(start)
        visited: list[str] = []
        result: ClosestDataResult | None = None

        while True:
            if directory in bucket:
                result = bucket[directory]
                logger.debug("Cache hit for %s in bucket %r", directory, key)
                break

            visited.append(directory)
            result = self._scan(directory, reader_list)
            if result is not None:
                break

            parent = fs.parent(directory)
            if parent == directory:
                break
            directory = parent

        if visited:
            self._cache.backfill(key, visited, result)
        return result

    __call__ = resolve

    def _scan(
        self, directory: str, readers: list[DataReaderPort]
    ) -> ClosestDataResult | None:
        """Try every reader in directory, returning the first hit."""
        fs = self._filesystem
        for reader in readers:
            path = fs.join(directory, reader.basename)
            if not fs.exists(path):
                continue
            data = reader.read(path)
            if data is not None:
                logger.debug("Matched %s", path)
                return ClosestDataResult(path=path, data=data)
            logger.debug("Skipped %s: reader returned no data", path)
        return None
