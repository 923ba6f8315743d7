"""Project root discovery for closestdata.

This module finds the root of the project a path belongs to, using the same
cached upward lookup as config files. Marker lookups keep their own cache:
a marker result carries a directory, not config data, and must never be
handed back to a config lookup for the same file names.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from closestdata.adapters.cache import InMemoryResultCache
from closestdata.adapters.readers import MarkerReader
from closestdata.core.services import ClosestDataResolver


if TYPE_CHECKING:
    from collections.abc import Sequence


DEFAULT_MARKERS = (".closestdata", "pyproject.toml", ".git")

# Marker lookups only; reset together with the config cache by clear_cache()
root_resolver = ClosestDataResolver(cache=InMemoryResultCache())


def find_project_root(
    start: Path | None = None,
    markers: Sequence[str] = DEFAULT_MARKERS,
    resolver: ClosestDataResolver | None = None,
) -> Path:
    """Find the project root directory by walking up from start directory.

    Within each directory markers are checked in priority order; the nearest
    directory holding any marker wins. With the defaults:
    1. .closestdata - Explicit project marker
    2. pyproject.toml - Python project root
    3. .git - Version control root

    Args:
        start: Directory to start searching from. If None, uses current directory.
        markers: Marker names in priority order.
        resolver: Resolver to use. Defaults to a module-level resolver whose
            cache holds marker results only.

    Returns:
        Path to project root directory. Returns start directory if no markers found.

    Raises:
        ValueError: If a marker name is empty.

    Example:
        >>> from closestdata.config import find_project_root
        >>> root = find_project_root()
        >>> settings = root / "settings.toml"
    """
    if start is None:
        start = Path.cwd()
    if resolver is None:
        resolver = root_resolver

    readers = [MarkerReader(m) for m in markers]
    current = start.resolve()
    result = resolver.resolve(current, readers)
    if result is None:
        return current
    return result.data
