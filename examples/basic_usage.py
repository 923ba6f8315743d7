"""Basic closest-config lookup example.

This example shows the simplest usage pattern: describe the candidate
files in priority order and ask for the closest one. The library caches
the answer for every directory it walked through.
"""

from pathlib import Path

from closestdata import JsonReader, TomlReader, closest_file_data


# Candidates in priority order: a dedicated rc file first, then a section
# of the project manifest
readers = [
    JsonReader(".toolrc"),
    TomlReader("pyproject.toml", key="tool.mytool"),
]

result = closest_file_data(Path.cwd(), readers)
if result is None:
    print("No configuration found; using defaults")
else:
    print(f"Config loaded from: {result.path}")
    print(f"Settings: {result.data}")

# Asking again from the same place, or from below it, is answered from cache
# and returns the very same result object
assert closest_file_data(Path.cwd(), readers) is result

# Forget everything, e.g. after config files were edited
closest_file_data.cache.clear()
