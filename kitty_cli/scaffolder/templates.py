"""Jinja2 template rendering for feature scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``kitty_cli/scaffolder/templates/`` directory, plus the two pure rendering
functions the scaffolder needs: the generated actions module and the
success banner.  Nothing in this module touches the filesystem beyond
reading the bundled templates.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

ACTIONS_TEMPLATE = "actions.ts.j2"
BANNER_TEMPLATE = "banner.txt.j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for feature scaffolding.

    Templates are loaded from a configurable directory (the bundled
    ``templates/`` by default) and are rendered with a context dictionary
    holding the feature name and its capitalized form.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"actions.ts.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_actions(self, feature_name: str, capitalized: str | None = None) -> str:
        """Render the ``<feature>.actions.ts`` module.

        The output imports the shared API route registry and the four
        request hooks, then exports ``useCreate<F>``, ``useUpdate<F>``,
        ``useFetch<F>List`` and ``useFetch<F>Details``, each pointing at the
        matching ``API.<feature>.*`` route.
        """
        if capitalized is None:
            capitalized = capitalize_first(feature_name)
        return self.render(
            ACTIONS_TEMPLATE,
            {"feature_name": feature_name, "capitalized": capitalized},
        )

    def render_banner(self, feature_name: str, docs_url: str) -> str:
        """Render the success banner shown after a completed run."""
        return self.render(
            BANNER_TEMPLATE,
            {"feature_name": feature_name, "docs_url": docs_url},
        )


# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------

def capitalize_first(value: str) -> str:
    """Upper-case the first character of *value* and keep the rest as is.

    Examples::

        capitalize_first("customer")    -> "Customer"
        capitalize_first("bankAccount") -> "BankAccount"
        capitalize_first("Order")       -> "Order"
    """
    return value[:1].upper() + value[1:]


# ---------------------------------------------------------------------------
# Module-level shortcuts
# ---------------------------------------------------------------------------

_renderer: TemplateRenderer | None = None


def _default_renderer() -> TemplateRenderer:
    global _renderer
    if _renderer is None:
        _renderer = TemplateRenderer()
    return _renderer


def render_actions(feature_name: str, capitalized: str | None = None) -> str:
    """Render the actions module with the bundled template."""
    return _default_renderer().render_actions(feature_name, capitalized)


def render_banner(feature_name: str, docs_url: str) -> str:
    """Render the success banner with the bundled template."""
    return _default_renderer().render_banner(feature_name, docs_url)
