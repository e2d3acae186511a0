"""Scaffold planning.

``build_plan`` turns a feature name and a base path into a ``ScaffoldPlan``:
the ordered list of directories and files one feature module consists of.
Planning is pure; applying the plan is the executor's job.
"""

from __future__ import annotations

from pathlib import Path, PurePath

from pydantic import BaseModel, Field, model_validator

from kitty_cli.config import DEFAULT_FEATURES_DIR
from kitty_cli.errors import UsageError

from .templates import TemplateRenderer, capitalize_first


# ---------------------------------------------------------------------------
# Feature layout
# ---------------------------------------------------------------------------

# Created in this order, after the feature root itself.
FEATURE_SUBDIRECTORIES: tuple[str, ...] = (
    "actions",
    "components",
    "components/details",
    "components/list",
    "components/mutate",
    "constants",
    "hooks",
    "utils",
    "types",
)

# (directory, file suffix); only the actions file gets generated content.
FEATURE_FILES: tuple[tuple[str, str], ...] = (
    ("actions", "actions.ts"),
    ("constants", "constants.ts"),
    ("utils", "utils.ts"),
    ("types", "types.ts"),
)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class PlannedFile(BaseModel):
    """A file to create, with the content it is created with."""

    path: Path
    content: str = ""


class ScaffoldPlan(BaseModel):
    """Ordered directories and files that make up one feature module."""

    feature_name: str = Field(..., min_length=1)
    capitalized: str = Field(..., min_length=1)
    root: Path
    directories: list[Path] = Field(default_factory=list)
    files: list[PlannedFile] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_parents_planned(self) -> "ScaffoldPlan":
        # A feature name containing a separator pushes the file below its
        # planned directory; that is left to fail when the file is written.
        planned = set(self.directories)
        for planned_file in self.files:
            parent = planned_file.path.parent
            if parent not in planned and planned.isdisjoint(parent.parents):
                raise ValueError(
                    f"parent directory of {planned_file.path} is not part of the plan"
                )
        return self


# ---------------------------------------------------------------------------
# Planning
# ---------------------------------------------------------------------------


def build_plan(
    feature_name: str,
    base_path: str | Path,
    *,
    features_dir: str = DEFAULT_FEATURES_DIR,
    renderer: TemplateRenderer | None = None,
) -> ScaffoldPlan:
    """Build the scaffold plan for *feature_name* under *base_path*.

    The name is used verbatim: no trimming, case folding or character
    checks.  Only an empty name is rejected.

    Args:
        feature_name: Name of the feature module (``customer``).
        base_path: Project root; the feature lands in
            ``<base_path>/<features_dir>/<feature_name>``.
        features_dir: Directory holding every feature, relative to
            *base_path*.
        renderer: Template renderer for the actions module.  A default
            renderer over the bundled templates is used when omitted.

    Raises:
        UsageError: If *feature_name* is empty.
    """
    if not feature_name:
        raise UsageError("Please provide a feature name.")

    renderer = renderer or TemplateRenderer()
    capitalized = capitalize_first(feature_name)
    root = _join(Path(base_path), features_dir, feature_name)

    directories = [root, *(root / sub for sub in FEATURE_SUBDIRECTORIES)]

    files: list[PlannedFile] = []
    for directory, suffix in FEATURE_FILES:
        path = _join(root, directory, f"{feature_name}.{suffix}")
        content = ""
        if directory == "actions":
            content = renderer.render_actions(feature_name, capitalized)
        files.append(PlannedFile(path=path, content=content))

    return ScaffoldPlan(
        feature_name=feature_name,
        capitalized=capitalized,
        root=root,
        directories=directories,
        files=files,
    )


def _join(base: Path, *segments: str) -> Path:
    """Join *segments* onto *base*, dropping any anchor they carry.

    ``base / "/customer"`` would restart at the filesystem root; here a
    leading separator is ignored, so ``/customer`` lands in
    ``<base>/customer`` and ``/`` in *base* itself.
    """
    path = base
    for segment in segments:
        pure = PurePath(segment)
        parts = pure.parts[1:] if pure.anchor else pure.parts
        path = path.joinpath(*parts)
    return path
