"""Shared pytest fixtures for the kitty-cli test suite.

Provides reusable fixtures for:
- Temporary project roots
- Recording Rich consoles
- The expected feature layout for ``customer``
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Empty project root the feature tree is scaffolded into."""
    root = tmp_path / "my-app"
    root.mkdir()
    yield root


@pytest.fixture
def in_project_root(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with *project_root* as the current working directory."""
    monkeypatch.chdir(project_root)
    yield project_root


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

@pytest.fixture
def recording_console() -> Console:
    """A Rich console that records output instead of writing to a terminal."""
    return Console(record=True, width=400, file=io.StringIO())


# ---------------------------------------------------------------------------
# Expected layout
# ---------------------------------------------------------------------------

CUSTOMER_DIRECTORIES = [
    "actions",
    "components",
    "components/details",
    "components/list",
    "components/mutate",
    "constants",
    "hooks",
    "utils",
    "types",
]

CUSTOMER_FILES = [
    "actions/customer.actions.ts",
    "constants/customer.constants.ts",
    "utils/customer.utils.ts",
    "types/customer.types.ts",
]


@pytest.fixture
def customer_layout() -> dict[str, list[str]]:
    """Relative directories and files expected under ``src/features/customer``."""
    return {
        "directories": list(CUSTOMER_DIRECTORIES),
        "files": list(CUSTOMER_FILES),
    }


def snapshot_tree(root: Path) -> dict[str, str | None]:
    """Map every path under *root* to its content (``None`` for directories)."""
    snapshot: dict[str, str | None] = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        snapshot[rel] = None if path.is_dir() else path.read_text(encoding="utf-8")
    return snapshot


@pytest.fixture
def tree_snapshot():
    """Expose :func:`snapshot_tree` to tests without importing conftest."""
    return snapshot_tree
