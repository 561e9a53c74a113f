"""Rename command implementation."""

from pathlib import Path
from typing import List, Optional

import typer

from pkgrename import rename_project
from pkgrename.core.session import EXCLUDED_DIR_NAMES, Decision
from pkgrename.exceptions import ManifestError, PkgRenameError
from pkgrename.io.manifest import read_old_name


def _fail(message: str):
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


def run_rename(
    root: Path,
    new_name: Optional[str],
    description: Optional[str],
    old_name: Optional[str],
    contents: Decision,
    renames: Decision,
    exclude: List[str],
    quiet: bool,
):
    """Rename the project at ``root``."""
    if old_name is None:
        try:
            old_name = read_old_name(root)
        except ManifestError as e:
            _fail(f"Error: {e}")

    # Ask for name and description
    if new_name is None:
        new_name = typer.prompt(
            f"What would you like to rename {old_name} to?",
            default=root.resolve().name,
        )
    if description is None:
        description = typer.prompt(
            "Enter a description for the project",
            default="",
            show_default=False,
        )

    if not new_name:
        _fail("No new name provided. Exiting.")
    if not description:
        _fail("No description provided. Exiting.")

    if not quiet:
        typer.echo(f"Renaming {old_name} to {new_name} in {root.resolve()}")

    try:
        rename_project(
            root,
            new_name,
            description,
            old_name=old_name,
            contents=contents,
            renames=renames,
            exclude=exclude,
            quiet=quiet,
        )
    except ManifestError as e:
        _fail(f"Error: {e}")
    except (PkgRenameError, OSError) as e:
        _fail(f"Error: An error occurred during the project walk: {e}")

    if not quiet:
        typer.echo("Done.")


def run_show(root: Path):
    """Print the detected old name and the excluded directories."""
    try:
        old_name = read_old_name(root)
    except ManifestError as e:
        _fail(f"Error: {e}")

    typer.echo(f"Project root:  {root.resolve()}")
    typer.echo(f"Package name:  {old_name}")
    typer.echo("Excluded directories:")
    for name in sorted(EXCLUDED_DIR_NAMES):
        typer.echo(f"  {name}")
