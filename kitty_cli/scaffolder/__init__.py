"""kitty-cli scaffolder -- creates the directory tree of a feature module.

Planning and execution are separate: ``build_plan`` is a pure function from
a feature name and a base path to a ``ScaffoldPlan``; ``ScaffoldExecutor``
applies that plan to the filesystem.

Quick usage::

    from pathlib import Path
    from kitty_cli.scaffolder import ScaffoldExecutor, build_plan

    plan = build_plan("customer", Path.cwd())
    result = ScaffoldExecutor().apply(plan)
"""

from kitty_cli.scaffolder.executor import ScaffoldExecutor, ScaffoldResult
from kitty_cli.scaffolder.plan import (
    FEATURE_FILES,
    FEATURE_SUBDIRECTORIES,
    PlannedFile,
    ScaffoldPlan,
    build_plan,
)
from kitty_cli.scaffolder.templates import (
    TemplateRenderer,
    capitalize_first,
    render_actions,
    render_banner,
)

__all__ = [
    "FEATURE_FILES",
    "FEATURE_SUBDIRECTORIES",
    "PlannedFile",
    "ScaffoldExecutor",
    "ScaffoldPlan",
    "ScaffoldResult",
    "TemplateRenderer",
    "build_plan",
    "capitalize_first",
    "render_actions",
    "render_banner",
]
