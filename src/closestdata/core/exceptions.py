"""Domain exceptions for closestdata.

All library errors inherit from ClosestDataError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.

Errors raised by a reader's read() are not wrapped: they reach the caller
exactly as the reader raised them.
"""

from __future__ import annotations


class ClosestDataError(Exception):
    """Base class for all closestdata exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class NoReadersError(ClosestDataError, ValueError):
    """Raised when a lookup is attempted with an empty reader list.

    Also a ValueError, so callers treating it as a plain argument error
    keep working.
    """

    def __init__(self) -> None:
        super().__init__("At least one reader must be given.")

    @property
    def recovery_hint(self) -> str:
        """Suggest passing a reader."""
        return "Pass a single reader or a non-empty list of readers"


class ReaderSpecError(ClosestDataError):
    """Raised when a textual reader specification cannot be parsed.

    Attributes:
        spec: The offending specification string (e.g. "package.json#").
    """

    def __init__(self, message: str, spec: str) -> None:
        self.spec = spec
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Show the accepted format."""
        return "Use NAME or NAME#KEY, e.g. '.babelrc' or 'package.json#babel'"
