"""Exception hierarchy for kitty-cli.

Only the CLI entry point turns these into exit codes; library code raises
them and lets them propagate.
"""

from __future__ import annotations

from pathlib import Path


class KittyError(Exception):
    """Base class for every error raised by kitty-cli."""


class UsageError(KittyError):
    """Raised when the command was invoked without a usable feature name."""


class FilesystemError(KittyError):
    """Raised when a directory or file of the scaffold could not be created.

    The message is the text of the underlying ``OSError`` (or the
    ``ValueError`` raised for a malformed path) so it can be shown
    to the user unchanged.  The original exception is kept as ``__cause__``.
    """

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)
