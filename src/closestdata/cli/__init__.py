"""CLI for closestdata."""

from closestdata.cli.main import app, main


__all__ = ["app", "main"]
