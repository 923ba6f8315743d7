"""Project root discovery for portable relative paths.

This example shows how to use find_project_root() to resolve paths
relative to the project root, regardless of where the script is run from.

The function searches upward for marker files in this order:
1. .closestdata - Explicit project marker
2. pyproject.toml - Python project root
3. .git - Version control root
"""

from closestdata import find_project_root


# Discover project root (works from any subdirectory)
project_root = find_project_root()
print(f"Project root: {project_root}")

# Resolve paths relative to the project root
settings = project_root / "settings.toml"
print(f"Settings file: {settings}")

# Custom markers, in priority order
repo_root = find_project_root(markers=[".git"])
print(f"Repository root: {repo_root}")
