"""Core domain models for closestdata.

These models are pure Python dataclasses with no I/O dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True, eq=False)
class ClosestDataResult:
    """The file a lookup resolved to, and what its reader returned.

    Results are compared by identity: every directory resolving to the same
    file during a walk, and every later cache hit, hands back this very
    instance. ``result_a is result_b`` is therefore a cheap way to tell that
    two lookups landed on the same cached entry.

    Attributes:
        path: Full path to the matched file.
        data: Value returned by the matching reader (never None).

    Example:
        >>> result = ClosestDataResult(path="/p/.babelrc", data={"presets": []})
        >>> result.path
        '/p/.babelrc'
    """

    path: str
    data: Any


@dataclass(frozen=True, slots=True)
class DataReader:
    """A candidate file name paired with the function that reads it.

    The read function returns the data found in the file, or None when the
    file exists but carries nothing usable (for instance a manifest without
    the expected section). None makes the lookup move on to the next
    candidate as if the file did not exist.

    Attributes:
        basename: Bare file name looked up in each directory (e.g. ".babelrc").
        read: Callable receiving the full path of an existing candidate file.

    Example:
        >>> import json
        >>> reader = DataReader(".babelrc", lambda p: json.loads(open(p).read()))
        >>> reader.basename
        '.babelrc'
    """

    basename: str
    read: Callable[[str], Any]

    def __post_init__(self) -> None:
        """Validate reader fields after initialization."""
        if not self.basename:
            raise ValueError("Reader basename cannot be empty")
