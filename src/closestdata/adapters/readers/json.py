"""JSON reader adapter.

Covers plain JSON config files (".babelrc", "tsconfig.json") and config
sections embedded in a JSON manifest ("package.json" under "babel").
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from closestdata.adapters.readers._keys import lookup_key


@dataclass(frozen=True, slots=True)
class JsonReader:
    """Reader adapter for JSON files.

    Satisfies the DataReaderPort protocol.

    Attributes:
        basename: File name to look for (e.g. ".babelrc").
        key: Optional dotted key selecting a section of the document. When
            the section is missing the reader reports no data, and the
            lookup moves on.
    """

    basename: str
    key: str | None = None

    def __post_init__(self) -> None:
        """Validate reader fields after initialization."""
        if not self.basename:
            raise ValueError("Reader basename cannot be empty")

    def read(self, path: str) -> Any:
        """Parse the JSON file and return the document or the selected key.

        Args:
            path: Path to an existing JSON file.

        Returns:
            The parsed value, or None if key is set and absent. A document
            that is JSON null also counts as no data.

        Raises:
            json.JSONDecodeError: If the file is not valid JSON.
        """
        with Path(path).open(encoding="utf-8") as f:
            document = json.load(f)
        return lookup_key(document, self.key)
