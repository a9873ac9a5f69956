"""Bundled template sets for new Kiln sites.

Two read-only directory trees ship inside the package under
``kiln/templates``:

- ``full``: a complete sample site, including a dated placeholder post
  that is rendered at scaffold time.
- ``blank``: minimal scaffolding with no sample content.

Each tree is loaded once per process and exposed as a TemplateSet keyed
by Mode. Setting ``KILN_TEMPLATES_DIR`` points the registry at another
directory with the same ``full``/``blank`` layout.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import FilesystemError

# Path to the bundled template directory
TEMPLATES_DIR = Path(__file__).parent / "templates"

TEMPLATES_DIR_ENV = "KILN_TEMPLATES_DIR"

# Placeholder post in the full template, rendered and removed at scaffold time
SCAFFOLD_POST = "_posts/0000-00-00-welcome-to-kiln.markdown.jinja"

# Empty directories added to blank sites
BLANK_DIRECTORIES = ("_data", "_drafts", "_includes", "_posts")


class Mode(str, Enum):
    """Scaffold variant."""

    FULL = "full"
    BLANK = "blank"


@dataclass(frozen=True)
class TemplateSet:
    """A read-only template tree.

    Attributes:
        mode: Variant this tree is used for.
        root: Directory holding the tree.
        files: Sorted POSIX paths of every file, relative to root.
    """

    mode: Mode
    root: Path
    files: tuple[str, ...]

    def path_of(self, relative: str) -> Path:
        return self.root / relative


# Loaded sets, keyed by mode and templates root
_loaded: dict[tuple[Mode, Path], TemplateSet] = {}


def templates_root() -> Path:
    """Return the directory holding the template sets.

    Honors the ``KILN_TEMPLATES_DIR`` environment variable, falling back to
    the templates bundled with the package.
    """
    override = os.environ.get(TEMPLATES_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return TEMPLATES_DIR


def get_template_set(mode: Mode | str) -> TemplateSet:
    """Return the template set for a mode.

    Args:
        mode: Mode or its string value ("full" or "blank").

    Returns:
        The cached TemplateSet for that mode.

    Raises:
        ValueError: If mode is not a known Mode.
        FilesystemError: If the template directory is missing.
    """
    return _load_template_set(Mode(mode), templates_root())


def _load_template_set(mode: Mode, root: Path) -> TemplateSet:
    cached = _loaded.get((mode, root))
    if cached is not None:
        return cached
    set_root = root / mode.value
    if not set_root.is_dir():
        raise FilesystemError(
            set_root,
            "load template set",
            FileNotFoundError(f"No {mode.value} template set found"),
        )
    files = sorted(
        path.relative_to(set_root).as_posix()
        for path in set_root.rglob("*")
        if path.is_file()
    )
    template_set = TemplateSet(mode=mode, root=set_root, files=tuple(files))
    _loaded[(mode, root)] = template_set
    return template_set


def clear_cache() -> None:
    """Forget loaded template sets so the next lookup rescans disk."""
    _loaded.clear()
