"""Reader adapters turning candidate files into config data.

This package provides adapters that implement the DataReaderPort protocol
for common config formats:

- JSON: JsonReader (".babelrc", "package.json" sections)
- TOML: TomlReader ("pyproject.toml" tool tables)
- Python: PythonModuleReader (executable config modules)
- Markers: MarkerReader (presence-only files such as ".git")

Each reader returns None when its file exists but holds nothing usable.
"""

from closestdata.adapters.readers.json import JsonReader
from closestdata.adapters.readers.marker import MarkerReader
from closestdata.adapters.readers.python_module import PythonModuleReader
from closestdata.adapters.readers.toml import TomlReader


__all__ = [
    "JsonReader",
    "MarkerReader",
    "PythonModuleReader",
    "TomlReader",
]
