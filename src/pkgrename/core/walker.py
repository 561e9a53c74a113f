"""
Recursive project walk applying content rewrites and file renames.

Each regular file is processed fully, prompts included, before the next
one is visited. Entries that are neither directories nor regular files
(FIFOs, sockets, device nodes, dangling symlinks) are skipped. Symlinks
are followed, both to files and to directories. File system errors are
not caught here; the first one aborts the walk and leaves already
processed files as they are.
"""

import os
from pathlib import Path

import typer

from .decision import DecisionGate
from .session import Kind, RenameSession

DEFAULT_ENCODING = "utf-8"
# Undecodable bytes round-trip unchanged through str
DEFAULT_ERRORS = "surrogateescape"


def _echo(session: RenameSession, message: str):
    if not session.quiet:
        typer.echo(f"  - {message}")


def walk(session: RenameSession, gate: DecisionGate, directory=None):
    """
    Rewrite contents and rename files below ``directory``.

    Parameters
    ----------
    session : RenameSession
        Names, exclusions and decision flags for this run
    gate : DecisionGate
        Gate consulted before every content rewrite and rename
    directory : Path, optional
        Directory to walk (default: ``session.root``)
    """
    if session.is_noop:
        return
    _walk_directory(session, gate, Path(directory or session.root))


def _walk_directory(session: RenameSession, gate: DecisionGate, directory: Path):
    for entry in sorted(directory.iterdir()):
        if entry.is_dir():
            if entry.name in session.excluded_dir_names:
                continue
            _walk_directory(session, gate, entry)
        elif entry.is_file():
            rewrite_contents(session, gate, entry)
            rename_file(session, gate, entry)


def rewrite_contents(session: RenameSession, gate: DecisionGate, path: Path) -> bool:
    """
    Replace every literal occurrence of the old name inside ``path``.

    Returns
    -------
    bool
        True if the file was rewritten
    """
    with open(path, 'r', encoding=DEFAULT_ENCODING, errors=DEFAULT_ERRORS, newline='') as f:
        text = f.read()

    if session.old_name not in text:
        return False

    old, new = session.old_name, session.new_name
    where = session.relative(path)
    if not gate.resolve(Kind.CONTENTS, f"Replace {old} with {new} in {where}?"):
        _echo(session, f"Skipped replacing {old} with {new} in {where}")
        return False

    with open(path, 'w', encoding=DEFAULT_ENCODING, errors=DEFAULT_ERRORS, newline='') as f:
        f.write(text.replace(old, new))
    _echo(session, f"Replaced {old} with {new} in {where}")
    return True


def renamed_path(session: RenameSession, path: Path) -> Path:
    """
    Destination for ``path`` with the old name replaced in its basename only.

    Only the first occurrence in the basename is replaced; parent
    directories are kept as they are.
    """
    path = Path(path)
    return path.with_name(path.name.replace(session.old_name, session.new_name, 1))


def rename_file(session: RenameSession, gate: DecisionGate, path: Path) -> bool:
    """
    Rename ``path`` if its basename contains the old name.

    Existing destinations are never overwritten.

    Returns
    -------
    bool
        True if the file was renamed
    """
    path = Path(path)
    target = renamed_path(session, path)
    if target == path:
        return False

    source, destination = session.relative(path), session.relative(target)
    if os.path.lexists(target):
        _echo(session, f"{destination} already exists")
        return False

    if not gate.resolve(Kind.RENAMES, f"Rename {source} to {destination}?"):
        _echo(session, f"Skipped renaming {source} to {destination}")
        return False

    path.rename(target)
    _echo(session, f"Renamed {source} to {destination}")
    return True
