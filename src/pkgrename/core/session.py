"""
Session state for a single rename run.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import FrozenSet, Iterable

from ..exceptions import SessionError


# Directory basenames never descended into (exact match, not globs)
EXCLUDED_DIR_NAMES = frozenset({
    'node_modules',
    '__pycache__',
    'tests/__pycache__/',
    '.git',
    '.ruff_cache',
    '.next',
    'coverage',
    'dist',
})


class Decision(str, Enum):
    """Batch decision for one kind of rewrite."""
    ASK = "ask"
    ALL = "all"
    NONE = "none"


class Kind(str, Enum):
    """Kind of rewrite gated by a decision flag."""
    CONTENTS = "contents"
    RENAMES = "renames"


@dataclass
class RenameSession:
    """
    State for one rename invocation.

    Attributes
    ----------
    old_name : str
        Identifier being replaced
    new_name : str
        Replacement identifier. Equal to ``old_name`` makes the run a no-op.
    root : Path
        Project root; paths in prompts and messages are shown relative to it
    excluded_dir_names : frozenset of str
        Directory basenames whose subtrees are skipped
    contents : Decision
        Batch decision for rewriting file contents
    renames : Decision
        Batch decision for renaming files
    quiet : bool
        Suppress progress messages
    """

    old_name: str
    new_name: str
    root: Path
    excluded_dir_names: FrozenSet[str] = EXCLUDED_DIR_NAMES
    contents: Decision = Decision.ASK
    renames: Decision = Decision.ASK
    quiet: bool = False

    def __post_init__(self):
        if not self.old_name:
            raise SessionError("Old name must not be empty")
        if not self.new_name:
            raise SessionError("New name must not be empty")
        self.root = Path(self.root)
        self.excluded_dir_names = frozenset(self.excluded_dir_names)
        self.contents = Decision(self.contents)
        self.renames = Decision(self.renames)

    @classmethod
    def create(
        cls,
        old_name: str,
        new_name: str,
        root,
        exclude: Iterable[str] = (),
        **kwargs,
    ) -> "RenameSession":
        """Create a session excluding the default directories plus ``exclude``."""
        return cls(
            old_name=old_name,
            new_name=new_name,
            root=Path(root),
            excluded_dir_names=EXCLUDED_DIR_NAMES | frozenset(exclude),
            **kwargs,
        )

    @property
    def is_noop(self) -> bool:
        """True when old and new names are identical."""
        return self.old_name == self.new_name

    def decision(self, kind: Kind) -> Decision:
        """Current batch decision for ``kind``."""
        return self.contents if Kind(kind) is Kind.CONTENTS else self.renames

    def settle(self, kind: Kind, decision: Decision):
        """
        Escalate the flag for ``kind`` from ASK to ALL or NONE.

        ALL and NONE are absorbing: once a flag has left ASK, further calls
        leave it unchanged.
        """
        decision = Decision(decision)
        if decision is Decision.ASK or self.decision(kind) is not Decision.ASK:
            return
        if Kind(kind) is Kind.CONTENTS:
            self.contents = decision
        else:
            self.renames = decision

    def relative(self, path: Path) -> str:
        """Render ``path`` relative to the project root when possible."""
        try:
            return str(Path(path).relative_to(self.root))
        except ValueError:
            return str(path)
