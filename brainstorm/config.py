"""BrainstormBuddy configuration.

Typed configuration for the session and the CLI. All settings use Pydantic v2
models so they can be validated at construction time and serialised to/from
JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field


class RendererConfig(BaseModel):
    """Settings for the external flowchart renderer."""

    backend: Literal["kroki", "mmdc"] = Field(
        default="kroki", description="Which renderer draws the mermaid flowchart"
    )
    kroki_url: str = Field(default="https://kroki.io")
    output_format: Literal["svg", "png"] = Field(default="svg")
    timeout: int = Field(default=30, ge=1, description="Per-render timeout in seconds")


class ExportConfig(BaseModel):
    """File names used by the export surfaces."""

    summary_filename: str = Field(default="project-flowchart.txt")
    analysis_filename: str = Field(default="analysis.json")
    mermaid_filename: str = Field(default="flowchart.mmd")
    diagram_basename: str = Field(default="flowchart")


class Config(BaseModel):
    """Global BrainstormBuddy configuration.

    Instances are typically created once by the CLI entry point and then
    handed to ``Session``.
    """

    output_dir: Path = Field(default=Path("./brainstorm-output"))
    analysis_delay: float = Field(
        default=2.5, ge=0, description="Artificial delay before an analysis is surfaced"
    )
    renderer: RendererConfig = Field(default_factory=RendererConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def summary_path(self) -> Path:
        """Path to the plain-text summary export."""
        return self.output_dir / self.export.summary_filename

    @property
    def analysis_path(self) -> Path:
        """Path to the JSON dump of the analysis."""
        return self.output_dir / self.export.analysis_filename

    @property
    def mermaid_path(self) -> Path:
        """Path to the mermaid source of the flowchart."""
        return self.output_dir / self.export.mermaid_filename

    @property
    def diagram_path(self) -> Path:
        """Path to the rendered flowchart image."""
        return self.output_dir / f"{self.export.diagram_basename}.{self.renderer.output_format}"

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to ``<output_dir>/config.json``.

        Returns:
            The path where the file was written.
        """
        target = path or (self.output_dir / "config.json")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            BB_OUTPUT_DIR, BB_ANALYSIS_DELAY, BB_RENDERER, BB_KROKI_URL,
            BB_DIAGRAM_FORMAT, BB_RENDER_TIMEOUT.
        """
        renderer_kwargs: dict[str, Any] = {}
        if os.environ.get("BB_RENDERER"):
            renderer_kwargs["backend"] = os.environ["BB_RENDERER"]
        if os.environ.get("BB_KROKI_URL"):
            renderer_kwargs["kroki_url"] = os.environ["BB_KROKI_URL"]
        if os.environ.get("BB_DIAGRAM_FORMAT"):
            renderer_kwargs["output_format"] = os.environ["BB_DIAGRAM_FORMAT"]
        if os.environ.get("BB_RENDER_TIMEOUT"):
            renderer_kwargs["timeout"] = int(os.environ["BB_RENDER_TIMEOUT"])

        kwargs: dict[str, Any] = {
            "output_dir": Path(os.environ.get("BB_OUTPUT_DIR", "./brainstorm-output")),
            "renderer": RendererConfig(**renderer_kwargs),
        }
        if os.environ.get("BB_ANALYSIS_DELAY"):
            kwargs["analysis_delay"] = float(os.environ["BB_ANALYSIS_DELAY"])
        return cls(**kwargs)

    def ensure_directories(self) -> None:
        """Create the output directory if it does not exist yet."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
