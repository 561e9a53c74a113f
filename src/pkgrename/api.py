"""
High-level API for renaming a project.

This module wires the manifest helpers, the decision gate and the tree
walker together behind a single call.
"""

from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from .core.decision import DecisionGate
from .core.session import Decision, RenameSession
from .core.walker import walk
from .exceptions import SessionError
from .io.manifest import read_old_name, update_description


def rename_project(
    root: Union[str, Path],
    new_name: str,
    description: Optional[str] = None,
    *,
    old_name: Optional[str] = None,
    contents: Union[Decision, str] = Decision.ASK,
    renames: Union[Decision, str] = Decision.ASK,
    exclude: Iterable[str] = (),
    prompt: Optional[Callable[[str], str]] = None,
    quiet: bool = False,
) -> RenameSession:
    """
    Replace the project's package name in file contents and file names.

    Parameters
    ----------
    root : str or Path
        Project directory
    new_name : str
        Replacement identifier
    description : str, optional
        New description written to ``package.json`` (and ``manifest.json``
        when present) before the walk. Skipped when None.
    old_name : str, optional
        Identifier to replace. Read from ``package.json`` when omitted.
    contents, renames : Decision or str, default='ask'
        Initial batch decisions for content rewrites and file renames
    exclude : iterable of str
        Extra directory names to skip, on top of the defaults
    prompt : callable, optional
        ``prompt(message) -> str`` used while a decision is 'ask'
    quiet : bool, default=False
        Suppress progress messages

    Returns
    -------
    RenameSession
        The finished session, with its final decision flags

    Raises
    ------
    SessionError
        If ``new_name`` or ``description`` is empty
    ManifestError
        If the old name or description cannot be read from / written to
        the manifests
    OSError
        If reading, writing or renaming a file fails; the walk stops there

    Examples
    --------
    >>> from pkgrename import rename_project
    >>> rename_project("my-app", "new_app", contents="all", renames="all")
    """
    root = Path(root)
    if not new_name:
        raise SessionError("No new name provided")
    if description is not None and not description:
        raise SessionError("No description provided")

    if old_name is None:
        old_name = read_old_name(root)

    session = RenameSession.create(
        old_name=old_name,
        new_name=new_name,
        root=root,
        exclude=exclude,
        contents=contents,
        renames=renames,
        quiet=quiet,
    )

    if description is not None:
        update_description(root, description)

    walk(session, DecisionGate(session, prompt=prompt))
    return session
