"""Jinja2 template rendering for the code scaffold.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``brainstorm/scaffolder/templates/`` directory and renders them with
scaffold context data.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

_HYPHEN_RUNS = re.compile(r"[\s-]+")
_UNDERSCORE_RUNS = re.compile(r"[\s_]+")


# ---------------------------------------------------------------------------
# Slug helpers (also registered as Jinja2 filters)
# ---------------------------------------------------------------------------

def _strip_punctuation(value: str, keep: str) -> str:
    return "".join(ch for ch in value if ch.isalnum() or ch.isspace() or ch in keep)


def package_slug(value: str) -> str:
    """Lower-case, drop punctuation, join words with single hyphens.

    Runs of whitespace and hyphens collapse to one hyphen and none are left
    at either end.

    Used for the package name and for API route paths.

    Examples::

        package_slug("My Cool App!") -> "my-cool-app"
        package_slug("Order tracking and history") -> "order-tracking-and-history"
        package_slug("A - B") -> "a-b"
    """
    cleaned = _strip_punctuation(value.lower(), keep="-")
    return _HYPHEN_RUNS.sub("-", cleaned).strip("-")


def sql_identifier(value: str) -> str:
    """Lower-case, drop punctuation, join words with single underscores.

    Used for database and table names.

    Examples::

        sql_identifier("User Profiles") -> "user_profiles"
        sql_identifier("Media sharing (photos, videos)") -> "media_sharing_photos_videos"
    """
    cleaned = _strip_punctuation(value.lower(), keep="_")
    return _UNDERSCORE_RUNS.sub("_", cleaned).strip("_")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for the code scaffold.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Output is plain text, so autoescaping is disabled.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["package_slug"] = package_slug
        self.env.filters["sql_identifier"] = sql_identifier

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"schema.sql.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

