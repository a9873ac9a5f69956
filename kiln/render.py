"""Rendering of the dated welcome post.

The full template ships one Jinja2 template whose only variable is
``date`` (``YYYY-MM-DD``). It is rendered at scaffold time and written
under a filename carrying the same date, so two renders on the same
calendar day always target the same file.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
)

from .errors import FilesystemError
from .registry import SCAFFOLD_POST, TemplateSet

PRODUCT = "kiln"

DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class GeneratedFile:
    """Rendered file waiting to be written.

    Attributes:
        relative_path: POSIX path relative to the site root.
        content: Encoded file content.
    """

    relative_path: str
    content: bytes


def post_filename(now: datetime | None = None) -> str:
    """Return the site-relative filename of the welcome post.

    Examples:
        >>> post_filename(datetime(2024, 3, 9))
        '_posts/2024-03-09-welcome-to-kiln.markdown'
    """
    now = now or datetime.now()
    return f"_posts/{now.strftime(DATE_FORMAT)}-welcome-to-{PRODUCT}.markdown"


def render(template_path: Path, now: datetime | None = None) -> bytes:
    """Render a single template with the current date.

    Args:
        template_path: Template file to render.
        now: Moment to stamp into the output. Defaults to now.

    Returns:
        Rendered content encoded as UTF-8.

    Raises:
        FilesystemError: If the template cannot be read or rendered.
    """
    now = now or datetime.now()
    env = Environment(
        loader=FileSystemLoader(str(template_path.parent)),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
    try:
        template = env.get_template(template_path.name)
        text = template.render(date=now.strftime(DATE_FORMAT))
    except (TemplateNotFound, OSError, UnicodeDecodeError) as exc:
        raise FilesystemError(template_path, "read template", exc) from exc
    except TemplateError as exc:
        raise FilesystemError(template_path, "render template", exc) from exc
    return text.encode("utf-8")


def render_post(template_set: TemplateSet, now: datetime | None = None) -> GeneratedFile:
    """Render the welcome post of a template set.

    The filename and the content share the same timestamp.
    """
    now = now or datetime.now()
    return GeneratedFile(
        relative_path=post_filename(now),
        content=render(template_set.path_of(SCAFFOLD_POST), now),
    )
