"""Illustrative code scaffold for a ``ProjectAnalysis``.

Renders one text document made of six sections -- package manifest,
frontend stub, backend stub, database schema, API reference and deployment
configuration.  The document is meant to be read or copied, not executed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from brainstorm.analyzer.models import ProjectAnalysis
from brainstorm.utils import save_text

from .templates import TemplateRenderer, package_slug


# heading template, template file
_SECTIONS: tuple[tuple[str, str], ...] = (
    ("Package.json", "manifest.json.j2"),
    ("Frontend Component Structure ({frontend})", "frontend.jsx.j2"),
    ("Backend Structure ({backend})", "backend.js.j2"),
    ("Database Schema", "schema.sql.j2"),
    ("API Endpoints", "api_reference.txt.j2"),
    ("Deployment Configuration", "deployment.txt.j2"),
)

DEFAULT_FRONTEND = "React"
DEFAULT_BACKEND = "Node.js"

# Longest slug used in a file name.
MAX_SLUG_LENGTH = 50


class ScaffoldGenerator:
    """Renders the scaffold document for one analysis.

    The frontend technology is the first technology of the first tech-stack
    entry whose category mentions "frontend"; the backend technology is found
    the same way.  Only React frontends and Node backends get real stubs, any
    other technology gets a one-line placeholder.
    """

    def __init__(
        self,
        analysis: ProjectAnalysis,
        idea_text: str,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.analysis = analysis
        self.idea_text = idea_text
        self.renderer = renderer or TemplateRenderer()

    # -- Context -----------------------------------------------------------

    def _technology(self, category: str, default: str) -> str:
        entry = self.analysis.find_tech(category)
        if entry is not None and entry.technologies:
            return entry.technologies[0]
        return default

    def build_context(self) -> dict[str, Any]:
        """Template variables shared by every section."""
        frontend = self._technology("frontend", DEFAULT_FRONTEND)
        backend = self._technology("backend", DEFAULT_BACKEND)
        return {
            "idea": self.idea_text,
            "package_name": package_slug(self.idea_text),
            "features": list(self.analysis.features),
            "frontend": frontend,
            "backend": backend,
            "frontend_is_react": frontend.lower() == "react",
            "backend_is_node": "node" in backend.lower(),
        }

    # -- Rendering ---------------------------------------------------------

    def render_sections(self) -> list[tuple[str, str]]:
        """Return ``(heading, body)`` pairs in document order."""
        context = self.build_context()
        return [
            (heading.format(**context), self.renderer.render(template, context))
            for heading, template in _SECTIONS
        ]

    def render(self) -> str:
        """Render the complete scaffold document."""
        parts = [f"// {self.idea_text} - Project Structure"]
        for heading, body in self.render_sections():
            parts.append(f"// {heading}\n{body}")
        return "\n\n".join(parts)

    def filename(self) -> str:
        slug = package_slug(self.idea_text)[:MAX_SLUG_LENGTH].rstrip("-")
        return f"{slug or 'project'}-scaffold.txt"

    async def write(self, output_dir: str | Path) -> Path:
        """Write the scaffold to ``<output_dir>/<slug>-scaffold.txt``."""
        target = Path(output_dir) / self.filename()
        return await save_text(self.render() + "\n", target)


def to_scaffold(analysis: ProjectAnalysis, idea_text: str) -> str:
    """Render the scaffold document for *analysis*.

    Pure and deterministic: identical inputs yield an identical string.
    """
    return ScaffoldGenerator(analysis, idea_text).render()
