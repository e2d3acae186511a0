"""kitty-cli configuration.

Typed settings for a single scaffolding run.  The CLI builds one ``Config``
from its arguments; nothing is read from files or the environment.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_FEATURES_DIR = "src/features"
DEFAULT_DOCS_URL = "https://github.com/Faizanahmedsy/kitty-cli/blob/master/README.md"


class Config(BaseModel):
    """Settings for one invocation of the scaffolder."""

    base_dir: Path = Field(
        default_factory=Path.cwd,
        description="Project root the feature tree is created under",
    )
    features_dir: str = Field(
        default=DEFAULT_FEATURES_DIR,
        min_length=1,
        description="Directory (relative to base_dir) that holds all features",
    )
    docs_url: str = Field(default=DEFAULT_DOCS_URL)
    dry_run: bool = Field(default=False, description="Report the plan without writing")
