"""CLI commands for closestdata."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import typer
from rich.console import Console
from rich.logging import RichHandler

from closestdata.core.exceptions import ClosestDataError, ReaderSpecError


if TYPE_CHECKING:
    from closestdata.core.ports import DataReaderPort


app = typer.Typer(
    name="closestdata",
    help="Find the closest config file above a directory.",
    no_args_is_help=True,
)

KEY_SEPARATOR = "#"

# Formats that are neither .toml nor .py are read as JSON (".babelrc", ".eslintrc")
TOML_SUFFIXES = {".toml"}
PYTHON_SUFFIXES = {".py"}


def parse_reader_spec(spec: str) -> DataReaderPort:
    """Build a reader from a NAME[#KEY] specification.

    The file format follows the name's suffix: ".toml" files are TOML,
    ".py" files are Python modules, everything else is JSON. KEY selects a
    dotted section (JSON, TOML) or a module attribute (Python).

    Args:
        spec: e.g. ".babelrc", "package.json#babel", "pyproject.toml#tool.black".

    Returns:
        A reader for the named file.

    Raises:
        ReaderSpecError: If the name or key is empty or the name has a path.
    """
    from closestdata.adapters.readers import JsonReader, PythonModuleReader, TomlReader

    basename, sep, key = spec.partition(KEY_SEPARATOR)
    if not basename:
        raise ReaderSpecError(f"Missing file name in reader '{spec}'", spec=spec)
    if "/" in basename or "\\" in basename:
        raise ReaderSpecError(
            f"Reader file name must not contain a path: '{spec}'", spec=spec
        )
    if sep and not key:
        raise ReaderSpecError(f"Empty key in reader '{spec}'", spec=spec)

    suffix = Path(basename).suffix
    if suffix in TOML_SUFFIXES:
        return TomlReader(basename, key=key or None)
    if suffix in PYTHON_SUFFIXES:
        return PythonModuleReader(basename, attribute=key or None)
    return JsonReader(basename, key=key or None)


def _configure_logging(verbose: bool) -> None:
    """Send library debug records to stderr through rich when verbose."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _fail(error: Exception, hint: str | None = None) -> typer.Exit:
    typer.echo(f"Error: {error}", err=True)
    if hint:
        typer.echo(f"Hint: {hint}", err=True)
    return typer.Exit(1)


@app.command()
def find(
    start: str | None = typer.Argument(
        None,
        help="Directory (or file) to start from. Defaults to current directory.",
    ),
    readers: list[str] = typer.Option(
        ...,
        "--reader",
        "-r",
        help="Candidate file as NAME or NAME#KEY, in priority order. Repeatable.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the result as a single JSON document.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log each step of the lookup to stderr.",
    ),
) -> None:
    """Find the closest file one of the readers accepts."""
    from closestdata import closest_file_data
    from closestdata.cli.formatting import print_result, result_to_json

    _configure_logging(verbose)
    origin = str(Path(start).absolute()) if start else str(Path.cwd())

    try:
        reader_list = [parse_reader_spec(spec) for spec in readers]
        result = closest_file_data(origin, reader_list)
    except ClosestDataError as e:
        raise _fail(e, e.recovery_hint) from None
    except (ValueError, ImportError, SyntaxError, OSError) as e:
        # Reader failures: decode errors are ValueErrors, unreadable files OSErrors
        raise _fail(e) from None

    if result is None:
        typer.echo("No matching file found.", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(result_to_json(result))
    else:
        print_result(result)


@app.command()
def root(
    start: str | None = typer.Argument(
        None,
        help="Directory to start from. Defaults to current directory.",
    ),
    marker: list[str] | None = typer.Option(
        None,
        "--marker",
        "-m",
        help="Project marker name, in priority order. Repeatable.",
    ),
) -> None:
    """Print the project root containing a directory."""
    from closestdata.config import DEFAULT_MARKERS, find_project_root

    markers = marker or list(DEFAULT_MARKERS)
    try:
        found = find_project_root(Path(start) if start else None, markers=markers)
    except ValueError as e:
        raise _fail(e) from None
    typer.echo(str(found))


def main() -> None:
    """Entry point for the CLI."""
    app()
