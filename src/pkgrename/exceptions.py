"""
Exceptions raised by pkgrename.

File system errors during a walk are not wrapped; they surface as the
original ``OSError``.
"""


class PkgRenameError(Exception):
    """Base class for pkgrename errors."""


class SessionError(PkgRenameError):
    """Invalid session input (empty old or new name)."""


class ManifestError(PkgRenameError):
    """Missing, unreadable or incomplete package manifest."""
