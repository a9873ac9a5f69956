"""Errors raised while scaffolding a Kiln site.

The CLI is the only layer that turns these into exit codes and
colored output; the core raises them and lets them propagate.

Classes:
    ScaffoldError: Base class for every scaffold failure.
    ArgumentError: No destination path was supplied.
    ConflictError: Destination exists and is not empty.
    FilesystemError: An I/O failure while creating, copying or writing files.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for scaffold failures."""


class ArgumentError(ScaffoldError):
    """Raised when the caller did not supply a destination path."""


class ConflictError(ScaffoldError):
    """Destination exists and is not empty, and force was not given.

    Attributes:
        path: The conflicting destination.
    """

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"{path} exists and is not empty.")

    @property
    def remediation(self) -> str:
        return (
            f"Ensure {self.path} is empty or else try again with `--force` "
            "to proceed and overwrite any files."
        )


class FilesystemError(ScaffoldError):
    """I/O failure during scaffolding, with the path and operation involved.

    Attributes:
        path: Path the failing operation was acting on.
        operation: Short description of what was being done (e.g. "copy").
        original_error: The underlying exception.
    """

    def __init__(
        self,
        path: Path,
        operation: str,
        original_error: Exception | None = None,
    ):
        self.path = path
        self.operation = operation
        self.original_error = original_error
        detail = _describe(original_error)
        message = f"Failed to {operation} {path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    @property
    def errno(self) -> int | None:
        return getattr(self.original_error, "errno", None)

    @property
    def strerror(self) -> str | None:
        return getattr(self.original_error, "strerror", None)


def _describe(error: Exception | None) -> str:
    if error is None:
        return ""
    strerror = getattr(error, "strerror", None)
    if strerror:
        return strerror
    return str(error) or error.__class__.__name__
