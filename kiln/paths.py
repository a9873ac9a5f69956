"""Destination path resolution.

The command line hands over the PATH argument as one or more tokens
(an unquoted ``kiln new my site`` arrives as ``["my", "site"]``). They
are joined with a single space and resolved against the working
directory without touching the filesystem.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from .errors import ArgumentError


def resolve_destination(segments: Sequence[str], cwd: Path | None = None) -> Path:
    """Turn path segments into a normalized absolute path.

    Args:
        segments: Path tokens from the command line.
        cwd: Directory relative paths are resolved against. Defaults to the
            process working directory.

    Returns:
        Absolute, normalized destination path. Symlinks are not resolved.

    Raises:
        ArgumentError: If no segments were given.

    Examples:
        >>> resolve_destination(["my", "site"], cwd=Path("/tmp"))
        PosixPath('/tmp/my site')

        >>> resolve_destination(["../blog"], cwd=Path("/srv/www"))
        PosixPath('/srv/blog')
    """
    if not segments:
        raise ArgumentError("You must specify a path.")
    joined = os.path.expanduser(" ".join(segments))
    base = cwd if cwd is not None else Path.cwd()
    return Path(os.path.normpath(os.path.join(os.fspath(base), joined)))
