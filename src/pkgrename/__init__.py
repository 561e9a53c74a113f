"""
pkgrename: rename a project's package identifier in place.

Walks a project tree and replaces an old package name with a new one in
file contents and file names, asking before each change unless told to
apply (or skip) all remaining changes of that kind.

Quick Start
-----------
Rename interactively from the command line:

    pkgrename run --root my-app --new-name new_app --description "My new app"

Rename from Python without prompting:

>>> from pkgrename import rename_project
>>> session = rename_project("my-app", "new_app", contents="all", renames="all")
>>> print(session.old_name, "->", session.new_name)
"""

__version__ = "0.1.0"

from .api import rename_project

from .core.session import EXCLUDED_DIR_NAMES, Decision, Kind, RenameSession
from .core.decision import DecisionGate
from .core.walker import walk

from .io.manifest import read_old_name, update_description

from .exceptions import PkgRenameError, SessionError, ManifestError

__all__ = [
    "rename_project",

    # Session and decisions
    "RenameSession",
    "Decision",
    "Kind",
    "DecisionGate",
    "EXCLUDED_DIR_NAMES",
    "walk",

    # Manifests
    "read_old_name",
    "update_description",

    # Errors
    "PkgRenameError",
    "SessionError",
    "ManifestError",

    "__version__",
]
