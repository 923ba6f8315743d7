"""Shared formatting helpers for CLI commands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.json import JSON
from rich.text import Text


if TYPE_CHECKING:
    from closestdata.core.models import ClosestDataResult


def result_to_json(result: ClosestDataResult) -> str:
    """Serialize a result as {"path": ..., "data": ...}.

    Values JSON cannot represent (Paths, module objects) are written with str().
    """
    return json.dumps({"path": result.path, "data": result.data}, default=str)


def print_result(result: ClosestDataResult, console: Console | None = None) -> None:
    """Print the matched path followed by its data, pretty-printed."""
    if console is None:
        console = Console()
    console.print(Text(result.path, style="bold green"), soft_wrap=True)
    console.print(JSON(json.dumps(result.data, default=str)), soft_wrap=True)
