"""closestdata - Find the closest config file, with per-directory caching.

This library walks up from a starting directory, tries a prioritized list of
candidate files in each directory, and returns the first one whose reader
yields data. Outcomes are cached for every directory walked, so lookups from
the same tree are answered without touching the filesystem again.

Example:
    >>> from closestdata import JsonReader, closest_file_data
    >>> readers = [JsonReader(".babelrc"), JsonReader("package.json", key="babel")]
    >>> result = closest_file_data("/project/src/app", readers)
    >>> result.path if result else None
    '/project/.babelrc'
    >>> closest_file_data.cache.clear()
"""

from closestdata.adapters.cache import InMemoryResultCache
from closestdata.adapters.filesystem import LocalFileSystem
from closestdata.adapters.readers import (
    JsonReader,
    MarkerReader,
    PythonModuleReader,
    TomlReader,
)
from closestdata.config import find_project_root, root_resolver
from closestdata.core.exceptions import (
    ClosestDataError,
    NoReadersError,
    ReaderSpecError,
)
from closestdata.core.models import ClosestDataResult, DataReader
from closestdata.core.ports import (
    CacheBucket,
    DataReaderPort,
    FileSystemPort,
    ResultCachePort,
)
from closestdata.core.services import ClosestDataResolver, bucket_key


# Process-wide resolver; its cache lives as long as the interpreter.
closest_file_data = ClosestDataResolver(
    cache=InMemoryResultCache(),
    filesystem=LocalFileSystem(),
)


def clear_cache() -> None:
    """Reset the process-wide caches of closest_file_data and find_project_root."""
    closest_file_data.cache.clear()
    root_resolver.cache.clear()


__version__ = "0.1.0"

__all__ = [
    "CacheBucket",
    "ClosestDataError",
    "ClosestDataResolver",
    "ClosestDataResult",
    "DataReader",
    "DataReaderPort",
    "FileSystemPort",
    "InMemoryResultCache",
    "JsonReader",
    "LocalFileSystem",
    "MarkerReader",
    "NoReadersError",
    "PythonModuleReader",
    "ReaderSpecError",
    "ResultCachePort",
    "TomlReader",
    "__version__",
    "bucket_key",
    "clear_cache",
    "closest_file_data",
    "find_project_root",
]
