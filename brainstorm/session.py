"""BrainstormBuddy session orchestrator.

Owns the three-step flow of one idea:

INPUT     -- waiting for an idea.
ANALYZING -- the idea has been submitted; the artificial analysis delay runs.
RESULTS   -- the analysis and every derived output are available.

The classifier and the three generators are pure; the session only
sequences them and wraps the external collaborators (flowchart renderer,
deck exporter) so that their failures are reported without ending the
session.  Submitting a new idea while one is in flight is last-write-wins:
the older call finishes with ``StaleAnalysisError`` and never replaces the
newer result.
"""

from __future__ import annotations

import asyncio
from datetime import date, datetime, timezone
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from brainstorm.analyzer import ProjectAnalysis, classify
from brainstorm.config import Config
from brainstorm.diagram import DiagramDescription, to_diagram
from brainstorm.diagram.renderer import DiagramRenderError, GraphRenderer, RenderedDiagram
from brainstorm.reporter.summary import SummaryExporter, render_summary
from brainstorm.scaffolder import ScaffoldGenerator, to_scaffold
from brainstorm.slides import Slide, SlideNavigator, to_slides
from brainstorm.slides.exporter import DeckExporter, DeckExportError, DeckMetadata
from brainstorm.utils import print_error, print_success, save_bytes, save_text


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class EmptyIdeaError(ValueError):
    """Raised when a blank idea is submitted for analysis."""


class StaleAnalysisError(RuntimeError):
    """Raised to an ``analyze`` call that was superseded by a newer one."""


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class SessionStep(str, Enum):
    INPUT = "input"
    ANALYZING = "analyzing"
    RESULTS = "results"


class SessionResult(BaseModel):
    """Everything derived from one idea."""

    model_config = ConfigDict(frozen=True)

    idea: str
    analysis: ProjectAnalysis
    diagram: DiagramDescription
    slides: tuple[Slide, ...]
    scaffold: str
    summary: str
    created_at: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
    )


def build_result(idea: str, *, generated_on: date | None = None) -> SessionResult:
    """Classify *idea* and run every generator on the same analysis."""
    analysis = classify(idea)
    return SessionResult(
        idea=idea,
        analysis=analysis,
        diagram=to_diagram(analysis, idea),
        slides=tuple(to_slides(analysis, idea, generated_on=generated_on)),
        scaffold=to_scaffold(analysis, idea),
        summary=render_summary(analysis),
    )


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


class Session:
    """One user's idea-to-plan session.

    Attributes:
        config: Session configuration (delay, output paths, renderer).
        step: Current ``SessionStep``.
        result: The latest ``SessionResult`` or ``None``.
        diagram_artifact: The last successfully rendered flowchart, if any.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self.step = SessionStep.INPUT
        self.result: SessionResult | None = None
        self.diagram_artifact: RenderedDiagram | None = None
        self._generation = 0
        self._navigator: SlideNavigator | None = None

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    async def analyze(self, idea: str) -> SessionResult:
        """Analyse *idea* and make its outputs the current result.

        Raises:
            EmptyIdeaError: If *idea* is blank. Nothing is classified and the
                session state is left untouched.
            StaleAnalysisError: If another ``analyze`` or ``reset`` call
                happened while this one was waiting.
        """
        if not idea.strip():
            raise EmptyIdeaError("Please describe your project idea first.")

        self._generation += 1
        generation = self._generation
        self.step = SessionStep.ANALYZING

        if self.config.analysis_delay > 0:
            await asyncio.sleep(self.config.analysis_delay)

        if generation != self._generation:
            raise StaleAnalysisError("A newer idea was submitted; this analysis was discarded.")

        result = build_result(idea)
        self.result = result
        self.diagram_artifact = None
        self._navigator = SlideNavigator(result.slides)
        self.step = SessionStep.RESULTS
        return result

    def reset(self) -> None:
        """Discard the current result and return to INPUT."""
        self._generation += 1
        self.result = None
        self.diagram_artifact = None
        self._navigator = None
        self.step = SessionStep.INPUT

    def _require_result(self) -> SessionResult:
        if self.result is None:
            raise RuntimeError("No analysis available; call analyze() first.")
        return self.result

    @property
    def navigator(self) -> SlideNavigator:
        """Slide navigator for the current result."""
        self._require_result()
        if self._navigator is None:
            raise RuntimeError("No analysis available; call analyze() first.")
        return self._navigator

    # ------------------------------------------------------------------
    # External collaborators
    # ------------------------------------------------------------------

    async def render_diagram(self, renderer: GraphRenderer) -> RenderedDiagram | None:
        """Render the current flowchart.

        On failure the error is reported and ``None`` is returned; any
        previously rendered artifact is kept.
        """
        result = self._require_result()
        generation = self._generation
        try:
            artifact = await renderer.render(result.diagram)
        except DiagramRenderError as exc:
            print_error(f"Error generating flowchart: {exc}")
            return None
        if generation != self._generation:
            # A new idea replaced the one this render was for.
            return None
        self.diagram_artifact = artifact
        return artifact

    async def export_deck(self, exporter: DeckExporter, output_dir: Path | None = None) -> Path | None:
        """Export the slide deck; report and return ``None`` on failure."""
        result = self._require_result()
        target_dir = Path(output_dir or self.config.output_dir)
        try:
            path = await exporter.export(
                list(result.slides), DeckMetadata.for_idea(result.idea), target_dir
            )
        except DeckExportError as exc:
            print_error(f"Error generating PowerPoint: {exc}")
            return None
        print_success(f"Deck written to {path}")
        return path

    async def export_summary(self, output_dir: Path | None = None) -> Path:
        """Write the plain-text summary (and the JSON analysis next to it)."""
        result = self._require_result()
        target_dir = Path(output_dir or self.config.output_dir)
        exporter = SummaryExporter(
            summary_filename=self.config.export.summary_filename,
            analysis_filename=self.config.export.analysis_filename,
        )
        await exporter.export_json(result.analysis, target_dir)
        return await exporter.export(result.analysis, target_dir)

    async def export_scaffold(self, output_dir: Path | None = None) -> Path | None:
        """Write the code scaffold document; report and return ``None`` on failure."""
        result = self._require_result()
        target_dir = Path(output_dir or self.config.output_dir)
        try:
            return await ScaffoldGenerator(result.analysis, result.idea).write(target_dir)
        except OSError as exc:
            print_error(f"Error writing scaffold: {exc}")
            return None

    async def export_mermaid(self, output_dir: Path | None = None) -> Path:
        """Write the mermaid source of the flowchart."""
        result = self._require_result()
        target_dir = Path(output_dir or self.config.output_dir)
        return await save_text(
            result.diagram.to_mermaid(), target_dir / self.config.export.mermaid_filename
        )

    async def save_diagram(self, output_dir: Path | None = None) -> Path | None:
        """Write the last rendered flowchart image, if there is one."""
        if self.diagram_artifact is None:
            return None
        target_dir = Path(output_dir or self.config.output_dir)
        name = f"{self.config.export.diagram_basename}.{self.diagram_artifact.format}"
        return await save_bytes(self.diagram_artifact.content, target_dir / name)
