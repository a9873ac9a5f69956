"""Kiln static site scaffolder.

This package creates new static-site projects from bundled template sets.
A full site comes with sample pages and a welcome post stamped with
today's date; a blank site carries only the structural directories.

The main entry point is the CLI module, whose ``new`` command resolves the
destination, refuses to overwrite a non-empty directory unless forced, and
then copies and renders the selected template set.

Modules:
- registry: Bundled template sets, keyed by mode.
- paths: Destination path resolution.
- conflicts: Guard against scaffolding over existing files.
- provision: Template tree copying.
- render: Dated welcome post rendering.
- scaffold: Orchestration of a full run.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
