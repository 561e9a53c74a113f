"""
Core rename machinery.

- **Session**: old/new names, excluded directories and the two batch
  decision flags
- **Decision gate**: yes / no / all / none prompting
- **Walker**: recursive content rewrite and file rename
"""

from pkgrename.core.session import (
    EXCLUDED_DIR_NAMES,
    Decision,
    Kind,
    RenameSession,
)
from pkgrename.core.decision import DecisionGate, parse_answer
from pkgrename.core.walker import walk, rewrite_contents, rename_file, renamed_path

__all__ = [
    "EXCLUDED_DIR_NAMES",
    "Decision",
    "Kind",
    "RenameSession",
    "DecisionGate",
    "parse_answer",
    "walk",
    "rewrite_contents",
    "rename_file",
    "renamed_path",
]
