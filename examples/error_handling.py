"""Error handling patterns with recovery hints.

This example demonstrates how to tell "nothing found" apart from errors,
and how to use the recovery_hint property.
"""

import json
from pathlib import Path

from closestdata import ClosestDataError, JsonReader, closest_file_data


def load_settings(start: Path) -> dict[str, object]:
    """Load the closest settings file, falling back to defaults."""
    try:
        result = closest_file_data(start, [JsonReader("settings.json")])
    except json.JSONDecodeError as e:
        # Reader errors reach the caller unchanged
        print(f"settings file is not valid JSON: {e}")
        raise
    if result is None:
        # Not an error: nothing matched up to the filesystem root
        return {}
    return result.data


# Library errors carry a hint
try:
    closest_file_data(Path.cwd(), [])
except ClosestDataError as e:
    print(f"Error: {e}")
    if e.recovery_hint:
        print(f"Hint: {e.recovery_hint}")

print(load_settings(Path.cwd()))
