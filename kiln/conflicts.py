"""Guard against scaffolding over an existing project.

The check is advisory: nothing stops another process from writing to the
destination between the check and the copy.
"""

from __future__ import annotations

from pathlib import Path

from .errors import ConflictError


def can_provision(path: Path, force: bool = False) -> bool:
    """Decide whether a site may be scaffolded into path.

    Args:
        path: Destination directory.
        force: Skip the check entirely.

    Returns:
        True if force is set, path does not exist, or path is an empty
        directory. False if path holds any entry (hidden ones included) or
        is not a directory.
    """
    if force:
        return True
    if not path.exists():
        return True
    if not path.is_dir():
        return False
    return not any(path.iterdir())


def describe_conflict(path: Path) -> ConflictError:
    """Build the error reported when the guard refuses path."""
    return ConflictError(path)
