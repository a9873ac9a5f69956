"""Scaffold orchestration.

Sequences the pieces of ``kiln new``:

1. resolve the destination path (ScaffoldRequest.from_args)
2. run the conflict guard, aborting before any write
3. copy the template set for the requested mode
4. full mode: render the welcome post and drop the raw placeholder;
   blank mode: add the empty structural directories

Nothing is rolled back on failure. An I/O error part way through leaves
whatever was already written on disk and propagates as FilesystemError.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path

from .conflicts import can_provision, describe_conflict
from .errors import FilesystemError
from .paths import resolve_destination
from .provision import ensure_directory, provision
from .registry import (
    BLANK_DIRECTORIES,
    SCAFFOLD_POST,
    Mode,
    TemplateSet,
    get_template_set,
)
from .render import render_post


class ScaffoldState(str, Enum):
    """Where a scaffold run ended up.

    A run refused by the conflict guard never produces a result; it ends in
    ConflictError instead.
    """

    PATH_RESOLVED = "path_resolved"
    PROVISIONED = "provisioned"
    RENDERED_AND_FINALIZED = "rendered_and_finalized"
    FINALIZED = "finalized"


@dataclass(frozen=True)
class ScaffoldRequest:
    """Everything needed for one scaffold run.

    Attributes:
        destination: Absolute path of the new site.
        mode: Which template set to use.
        force: Scaffold even if destination is not empty.
    """

    destination: Path
    mode: Mode = Mode.FULL
    force: bool = False

    @classmethod
    def from_args(
        cls,
        segments: Sequence[str],
        *,
        force: bool = False,
        blank: bool = False,
        cwd: Path | None = None,
    ) -> ScaffoldRequest:
        """Build a request from command-line style arguments.

        Raises:
            ArgumentError: If segments is empty.
        """
        return cls(
            destination=resolve_destination(segments, cwd=cwd),
            mode=Mode.BLANK if blank else Mode.FULL,
            force=force,
        )


@dataclass
class ScaffoldResult:
    """Outcome of a successful scaffold run.

    Attributes:
        destination: Absolute path of the new site.
        mode: Template set that was used.
        state: Terminal state reached.
        files: Files written, including the rendered post.
        post: Path of the rendered welcome post (full mode only).
    """

    destination: Path
    mode: Mode
    state: ScaffoldState = ScaffoldState.PATH_RESOLVED
    files: list[Path] = field(default_factory=list)
    post: Path | None = None


def scaffold(request: ScaffoldRequest, now: datetime | None = None) -> ScaffoldResult:
    """Create a new site as described by request.

    Args:
        request: Destination, mode and force flag.
        now: Timestamp for the welcome post. Defaults to now.

    Returns:
        ScaffoldResult in state FINALIZED (blank) or RENDERED_AND_FINALIZED (full).

    Raises:
        ConflictError: Destination is not empty and force is off. Nothing
            has been written.
        FilesystemError: Any I/O failure while writing the site.
    """
    result = ScaffoldResult(destination=request.destination, mode=request.mode)

    if not can_provision(request.destination, request.force):
        raise describe_conflict(request.destination)

    template_set = get_template_set(request.mode)
    result.files = provision(template_set, request.destination)
    result.state = ScaffoldState.PROVISIONED

    if request.mode is Mode.BLANK:
        _create_blank_directories(request.destination)
        result.state = ScaffoldState.FINALIZED
    else:
        result.post = _write_post(template_set, request.destination, now)
        placeholder = request.destination / SCAFFOLD_POST
        result.files = [p for p in result.files if p != placeholder]
        result.files.append(result.post)
        result.state = ScaffoldState.RENDERED_AND_FINALIZED

    return result


def new_site(
    segments: Sequence[str],
    *,
    force: bool = False,
    blank: bool = False,
    cwd: Path | None = None,
    now: datetime | None = None,
) -> ScaffoldResult:
    """Resolve segments into a request and scaffold it."""
    request = ScaffoldRequest.from_args(segments, force=force, blank=blank, cwd=cwd)
    return scaffold(request, now=now)


def _create_blank_directories(root: Path) -> None:
    for name in BLANK_DIRECTORIES:
        ensure_directory(root / name)


def _write_post(
    template_set: TemplateSet, root: Path, now: datetime | None
) -> Path:
    generated = render_post(template_set, now)
    target = root / generated.relative_path
    ensure_directory(target.parent)
    try:
        target.write_bytes(generated.content)
    except OSError as exc:
        raise FilesystemError(target, "write", exc) from exc

    placeholder = root / SCAFFOLD_POST
    try:
        placeholder.unlink()
    except OSError as exc:
        raise FilesystemError(placeholder, "remove", exc) from exc
    return target
