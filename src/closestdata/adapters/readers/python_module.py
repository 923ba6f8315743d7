"""Python module reader adapter.

Executes a Python config file (e.g. "conftest.py", "noxfile.py", a project
settings module) and returns a value it defines.
"""

from __future__ import annotations

import importlib.util
import sys
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class PythonModuleReader:
    """Reader adapter for Python source files.

    Satisfies the DataReaderPort protocol. The file is executed as a
    throwaway module that is not left in sys.modules.

    Attributes:
        basename: File name to look for (e.g. "settings.py").
        attribute: Module attribute to return. When None, a dict of the
            module's public names is returned.
    """

    basename: str
    attribute: str | None = None

    def __post_init__(self) -> None:
        """Validate reader fields after initialization."""
        if not self.basename:
            raise ValueError("Reader basename cannot be empty")

    def read(self, path: str) -> Any:
        """Execute the module and return the selected attribute.

        Args:
            path: Path to an existing Python file.

        Returns:
            The attribute value, the public namespace when no attribute is
            configured, or None when the attribute is not defined.

        Raises:
            ImportError: If no module spec can be built for path.
            Exception: Anything raised while executing the module.
        """
        # Unique name so two files with the same basename never collide
        module_name = f"_closestdata_config_{id(self)}_{abs(hash(path))}"

        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            msg = f"Could not load Python config from {path}"
            raise ImportError(msg)

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module

        try:
            spec.loader.exec_module(module)
        finally:
            sys.modules.pop(module_name, None)

        if self.attribute is None:
            return {
                name: value
                for name, value in vars(module).items()
                if not name.startswith("_")
            }
        return getattr(module, self.attribute, None)
