"""TOML reader adapter.

Covers standalone TOML config files and tool sections inside
"pyproject.toml" (e.g. key="tool.black").
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from closestdata.adapters.readers._keys import lookup_key


@dataclass(frozen=True, slots=True)
class TomlReader:
    """Reader adapter for TOML files.

    Satisfies the DataReaderPort protocol.

    Attributes:
        basename: File name to look for (e.g. "pyproject.toml").
        key: Optional dotted key selecting a table of the document.
    """

    basename: str
    key: str | None = None

    def __post_init__(self) -> None:
        """Validate reader fields after initialization."""
        if not self.basename:
            raise ValueError("Reader basename cannot be empty")

    def read(self, path: str) -> Any:
        """Parse the TOML file and return the document or the selected key.

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML.
        """
        with Path(path).open("rb") as f:
            document = tomllib.load(f)
        return lookup_key(document, self.key)
