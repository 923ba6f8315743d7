"""Custom readers and an isolated resolver.

Any object with a basename and a read(path) method is a reader. Returning
None from read() means "this file exists but has nothing for me", and the
lookup carries on as if the file were missing.
"""

from pathlib import Path

from closestdata import (
    ClosestDataResolver,
    DataReader,
    InMemoryResultCache,
    LocalFileSystem,
)


def read_env_file(path: str) -> dict[str, str] | None:
    """Parse KEY=VALUE lines; files without MYTOOL_ entries carry no data."""
    values = {}
    for line in Path(path).read_text().splitlines():
        key, sep, value = line.partition("=")
        if sep and key.startswith("MYTOOL_"):
            values[key] = value
    return values or None


# A resolver with its own cache, independent of closest_file_data
resolver = ClosestDataResolver(
    cache=InMemoryResultCache(),
    filesystem=LocalFileSystem(),
)

result = resolver.resolve(Path.cwd(), DataReader(".env", read_env_file))
print(result.data if result else "No MYTOOL_ settings found")
