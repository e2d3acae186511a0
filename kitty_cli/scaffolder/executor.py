"""Applies a ``ScaffoldPlan`` to the filesystem.

Every entry is created only when it does not exist yet.  Existing
directories and files are left untouched and recorded as skipped, so
running the same plan twice converges to the same tree.  A failure stops
the run; whatever was created before it stays on disk.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from rich.console import Console

from kitty_cli.errors import FilesystemError
from kitty_cli.utils import console as default_console
from kitty_cli.utils import print_created, print_plain

from .plan import ScaffoldPlan


class ScaffoldResult(BaseModel):
    """What a single ``ScaffoldExecutor.apply`` call did."""

    root: Path
    dry_run: bool = False
    created_directories: list[Path] = Field(default_factory=list)
    created_files: list[Path] = Field(default_factory=list)
    skipped: list[Path] = Field(default_factory=list)

    @property
    def created_count(self) -> int:
        return len(self.created_directories) + len(self.created_files)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


class ScaffoldExecutor:
    """Creates the directories and files of a plan, in plan order.

    Args:
        console: Rich console that receives the ``Created ...`` lines.
            Defaults to the shared stdout console.
        dry_run: Report what would be created without writing anything.
    """

    def __init__(self, console: Console | None = None, dry_run: bool = False) -> None:
        self.console = console or default_console
        self.dry_run = dry_run

    def apply(self, plan: ScaffoldPlan) -> ScaffoldResult:
        """Apply *plan* and return what was created and what was skipped.

        Raises:
            FilesystemError: If a directory or file could not be created,
                including paths the OS rejects outright (embedded NUL bytes).
        """
        result = ScaffoldResult(root=plan.root, dry_run=self.dry_run)

        for directory in plan.directories:
            if self._exists(directory):
                result.skipped.append(directory)
                continue
            self._create_directory(directory)
            result.created_directories.append(directory)

        for planned_file in plan.files:
            if self._exists(planned_file.path):
                result.skipped.append(planned_file.path)
                continue
            self._create_file(planned_file.path, planned_file.content)
            result.created_files.append(planned_file.path)

        return result

    # -- Internal helpers --------------------------------------------------

    def _exists(self, path: Path) -> bool:
        try:
            return path.exists()
        except (OSError, ValueError) as exc:
            raise FilesystemError(path, str(exc)) from exc

    def _create_directory(self, path: Path) -> None:
        if self.dry_run:
            print_plain(f"Would create directory: {path}", target=self.console)
            return
        try:
            path.mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as exc:
            raise FilesystemError(path, str(exc)) from exc
        print_created("directory", path, target=self.console)

    def _create_file(self, path: Path, content: str) -> None:
        if self.dry_run:
            print_plain(f"Would create file: {path}", target=self.console)
            return
        try:
            path.write_text(content, encoding="utf-8")
        except (OSError, ValueError) as exc:
            raise FilesystemError(path, str(exc)) from exc
        print_created("file", path, target=self.console)
