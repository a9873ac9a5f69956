"""Command-line interface for Kiln.

This module defines the CLI commands using Click framework.
It turns command-line arguments into a ScaffoldRequest and reports the
outcome with colored status lines.

Commands:
- new: Scaffold a new Kiln site in PATH.
"""

from __future__ import annotations

import click

from . import __version__
from .errors import ArgumentError, ConflictError, FilesystemError
from .scaffold import new_site


@click.group()
@click.version_option(version=__version__, prog_name="kiln")
def cli():
    """Kiln static site scaffolder."""


@cli.command()
@click.argument("path", nargs=-1)
@click.option("--force", is_flag=True, help="Force creation even if PATH already exists")
@click.option("--blank", is_flag=True, help="Creates scaffolding but with empty files")
def new(path: tuple[str, ...], force: bool, blank: bool):
    """Creates a new Kiln site scaffold in PATH."""
    try:
        result = new_site(path, force=force, blank=blank)
    except ArgumentError as exc:
        raise click.UsageError(str(exc)) from None
    except ConflictError as exc:
        click.echo(
            click.style("Conflict:", fg="red", bold=True) + f" {exc}", err=True
        )
        click.echo(click.style(f"  {exc.remediation}", fg="yellow"), err=True)
        raise SystemExit(1) from None
    except FilesystemError as exc:
        click.echo(click.style("Scaffold failed:", fg="red", bold=True), err=True)
        click.echo(click.style(f"  Path: {exc.path}", fg="yellow"), err=True)
        click.echo(click.style(f"  Error: {exc}", fg="white"), err=True)
        raise SystemExit(1) from None

    if result.post is not None:
        rel_post = result.post.relative_to(result.destination)
        click.echo(f"Created {rel_post.as_posix()}")
    click.echo(
        f"New kiln site installed in {click.style(str(result.destination), fg='cyan')}."
    )


def main():
    """Entry point for the CLI application."""
    cli()
