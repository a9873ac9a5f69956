"""Copy a template set into a destination directory.

Template assets may be installed read-only (e.g. from a system package),
so the whole destination is made owner-writable afterwards. Files already in
the destination are overwritten when they collide with a template file and
left alone otherwise.
"""

from __future__ import annotations

import os
import shutil
import stat
from pathlib import Path

from .errors import FilesystemError
from .registry import TemplateSet


def ensure_directory(path: Path) -> None:
    """Create path and any missing parents. Existing directories are fine."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(path, "create directory", exc) from exc


def make_owner_writable(path: Path) -> None:
    """Add the owner write bit to path and, for directories, everything below it.

    Symlinks below path are skipped, so link targets are never modified.
    """
    targets = [path]
    if path.is_dir():
        targets.extend(p for p in path.rglob("*") if not p.is_symlink())
    for target in targets:
        _add_owner_write(target)


def provision(template_set: TemplateSet, destination: Path) -> list[Path]:
    """Copy every file and directory of a template set into destination.

    Args:
        template_set: Source tree.
        destination: Target directory, created with its parents if absent.

    Returns:
        Paths of the files written, in template order.

    Raises:
        FilesystemError: On any I/O failure. Files copied before the failure
            stay on disk.
    """
    ensure_directory(destination)
    try:
        shutil.copytree(template_set.root, destination, dirs_exist_ok=True)
    except OSError as exc:
        raise FilesystemError(destination, "copy template into", exc) from exc

    make_owner_writable(destination)
    return [destination / rel_path for rel_path in template_set.files]


def _add_owner_write(path: Path) -> None:
    try:
        mode = path.stat().st_mode
        if not mode & stat.S_IWUSR:
            os.chmod(path, stat.S_IMODE(mode) | stat.S_IWUSR)
    except OSError as exc:
        raise FilesystemError(path, "change permissions of", exc) from exc
