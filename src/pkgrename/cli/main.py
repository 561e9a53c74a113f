"""Main CLI application for pkgrename."""

import typer
from pathlib import Path
from typing import List, Optional

from .. import __version__
from ..core.session import Decision

app = typer.Typer(
    name="pkgrename",
    help="Rename a project's package identifier in file contents and file names",
    no_args_is_help=True,
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"pkgrename {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Rename a project's package identifier."""


@app.command()
def run(
    root: Path = typer.Option(
        Path("."),
        "--root", "-r",
        help="Project directory containing package.json",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    new_name: Optional[str] = typer.Option(
        None,
        "--new-name", "-n",
        help="New package name (prompted for when omitted)",
    ),
    description: Optional[str] = typer.Option(
        None,
        "--description", "-d",
        help="New project description (prompted for when omitted)",
    ),
    old_name: Optional[str] = typer.Option(
        None,
        "--old-name",
        help="Name to replace (default: pythonPackageName or name from package.json)",
    ),
    contents: Decision = typer.Option(
        Decision.ASK,
        "--contents",
        help="Rewrite file contents: ask for each file, all, or none",
    ),
    renames: Decision = typer.Option(
        Decision.ASK,
        "--renames",
        help="Rename files: ask for each file, all, or none",
    ),
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude", "-e",
        help="Extra directory name to skip (repeatable)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet", "-q",
        help="Only show prompts and errors",
    ),
):
    """
    Replace the old package name with a new one throughout the project.

    For every file outside the excluded directories, occurrences of the old
    name in the file contents and in the file name are replaced after
    confirmation. Answer [a]ll or [s]kip all to stop being asked for the
    rest of the run.

    Example:
        pkgrename run --root my-app --new-name new_app -d "My new app"
        pkgrename run -n new_app -d "My new app" --contents all --renames all
    """
    from .commands.rename import run_rename

    run_rename(
        root=root,
        new_name=new_name,
        description=description,
        old_name=old_name,
        contents=contents,
        renames=renames,
        exclude=exclude or [],
        quiet=quiet,
    )


@app.command()
def show(
    root: Path = typer.Option(
        Path("."),
        "--root", "-r",
        help="Project directory containing package.json",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
):
    """
    Show the detected package name and the directories that are skipped.

    Example:
        pkgrename show --root my-app
    """
    from .commands.rename import run_show

    run_show(root=root)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
