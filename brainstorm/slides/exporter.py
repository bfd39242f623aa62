"""PowerPoint export of the slide model.

``PptxDeckExporter`` turns the slide sequence into a ``.pptx`` file with
python-pptx.  Building the presentation is CPU/disk work, so it runs in a
worker thread and the public ``export`` coroutine can be awaited from the
session like any other external call.
"""

from __future__ import annotations

import asyncio
import re
from collections.abc import Sequence
from pathlib import Path
from typing import Callable, Protocol, runtime_checkable

from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.text import PP_ALIGN
from pptx.util import Inches, Pt
from pydantic import BaseModel, Field

from .models import (
    CodeSlide,
    FeaturesSlide,
    GoalsSlide,
    ResourcesSlide,
    RisksSlide,
    Slide,
    StepsSlide,
    SummarySlide,
    TechStackSlide,
    TimelineSlide,
    TitleSlide,
)


# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------

BACKGROUND = RGBColor(0x0F, 0x17, 0x2A)  # slate-900
WHITE = RGBColor(0xFF, 0xFF, 0xFF)
CYAN = RGBColor(0x06, 0xB6, 0xD4)
PURPLE = RGBColor(0x8B, 0x5C, 0xF6)
GREEN = RGBColor(0x10, 0xB9, 0x81)
AMBER = RGBColor(0xF5, 0x9E, 0x0B)
RED = RGBColor(0xEF, 0x44, 0x44)
MUTED = RGBColor(0x64, 0x74, 0x8B)
SLATE = RGBColor(0x94, 0xA3, 0xB8)
TABLE_FILL = RGBColor(0x1E, 0x29, 0x3B)

# Longest idea-derived stem used in a deck file name.
MAX_STEM_LENGTH = 50


class DeckExportError(RuntimeError):
    """Raised when the deck cannot be built or written."""


class DeckMetadata(BaseModel):
    """Document properties stamped onto the exported deck."""

    author: str = Field(default="BrainstormBuddy AI")
    company: str = Field(default="BrainstormBuddy")
    subject: str = Field(default="")
    title: str = Field(default="")

    @classmethod
    def for_idea(cls, idea_text: str) -> "DeckMetadata":
        return cls(
            subject=f"{idea_text} - Project Analysis",
            title=f"{idea_text} - Complete Project Plan",
        )


def deck_filename(idea_text: str) -> str:
    """File name for the exported deck.

    Every non-alphanumeric character becomes a hyphen:
    ``"My Cool App!"`` -> ``"my-cool-app--project-analysis.pptx"``.  The stem
    is cut to ``MAX_STEM_LENGTH`` characters.
    """
    stem = re.sub(r"[^a-zA-Z0-9]", "-", idea_text).lower()[:MAX_STEM_LENGTH]
    return f"{stem}-project-analysis.pptx"


@runtime_checkable
class DeckExporter(Protocol):
    """Anything that can write a slide sequence to a downloadable file."""

    async def export(
        self,
        slides: Sequence[Slide],
        metadata: DeckMetadata,
        output_dir: Path,
    ) -> Path:
        ...


# ---------------------------------------------------------------------------
# python-pptx exporter
# ---------------------------------------------------------------------------


class PptxDeckExporter:
    """Writes the deck as a 10x7.5 inch dark-themed PowerPoint file."""

    _BLANK_LAYOUT = 6

    def __init__(self, filename: str | None = None) -> None:
        self.filename = filename

    async def export(
        self,
        slides: Sequence[Slide],
        metadata: DeckMetadata,
        output_dir: Path,
    ) -> Path:
        """Build the presentation and save it under *output_dir*.

        Raises:
            DeckExportError: If python-pptx fails or the file cannot be written.
        """
        if not slides:
            raise DeckExportError("Cannot export an empty deck")
        filename = self.filename or deck_filename(slides[0].title)
        target = Path(output_dir) / filename
        try:
            await asyncio.to_thread(self._write, slides, metadata, target)
        except Exception as exc:  # noqa: BLE001
            raise DeckExportError(f"Failed to write {target}: {exc}") from exc
        return target

    # -- Building ----------------------------------------------------------

    def _write(self, slides: Sequence[Slide], metadata: DeckMetadata, target: Path) -> None:
        prs = self.build(slides, metadata)
        target.parent.mkdir(parents=True, exist_ok=True)
        prs.save(str(target))

    def build(self, slides: Sequence[Slide], metadata: DeckMetadata):
        """Return an in-memory ``Presentation`` for *slides*."""
        prs = Presentation()
        prs.slide_width = Inches(10)
        prs.slide_height = Inches(7.5)

        props = prs.core_properties
        props.author = metadata.author
        props.subject = metadata.subject
        props.title = metadata.title
        props.comments = f"Generated by {metadata.company}"

        for slide in slides:
            page = prs.slides.add_slide(prs.slide_layouts[self._BLANK_LAYOUT])
            fill = page.background.fill
            fill.solid()
            fill.fore_color.rgb = BACKGROUND
            self._BUILDERS[slide.type](self, page, slide)
        return prs

    # -- Primitives --------------------------------------------------------

    @staticmethod
    def _text(page, text: str, x: float, y: float, w: float, h: float, *,
              size: int = 14, color: RGBColor = WHITE, bold: bool = False,
              italic: bool = False, align=None, font: str | None = None) -> None:
        box = page.shapes.add_textbox(Inches(x), Inches(y), Inches(w), Inches(h))
        frame = box.text_frame
        frame.word_wrap = True
        paragraph = frame.paragraphs[0]
        if align is not None:
            paragraph.alignment = align
        run = paragraph.add_run()
        run.text = text
        run.font.size = Pt(size)
        run.font.bold = bold
        run.font.italic = italic
        run.font.color.rgb = color
        if font:
            run.font.name = font

    def _heading(self, page, title: str, color: RGBColor) -> None:
        self._text(page, title, 0.5, 0.5, 9, 1, size=28, bold=True, color=color)

    @staticmethod
    def _table(page, rows: list[tuple[str, ...]], *, size: int, header: bool = False) -> None:
        shape = page.shapes.add_table(
            len(rows), len(rows[0]), Inches(1), Inches(1.5), Inches(8), Inches(4)
        )
        table = shape.table
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                cell = table.cell(r, c)
                cell.fill.solid()
                cell.fill.fore_color.rgb = TABLE_FILL
                cell.text = value
                for run in cell.text_frame.paragraphs[0].runs:
                    run.font.size = Pt(size)
                    run.font.color.rgb = RED if header and r == 0 else WHITE
                    run.font.bold = header and r == 0

    # -- Per-kind builders -------------------------------------------------

    def _title_slide(self, page, slide: TitleSlide) -> None:
        self._text(page, slide.title, 1, 1.5, 8, 1.5, size=36, bold=True, align=PP_ALIGN.CENTER)
        self._text(page, slide.subtitle, 1, 3, 8, 1, size=20, color=CYAN, align=PP_ALIGN.CENTER)
        self._text(page, slide.content, 1, 6, 8, 0.5, size=14, color=MUTED, align=PP_ALIGN.CENTER)

    def _summary_slide(self, page, slide: SummarySlide) -> None:
        self._heading(page, slide.title, WHITE)
        self._table(page, list(slide.content), size=16)

    def _goals_slide(self, page, slide: GoalsSlide) -> None:
        self._heading(page, slide.title, CYAN)
        for index, goal in enumerate(slide.content):
            self._text(page, f"{index + 1}. {goal}", 1, 1.5 + index * 0.8, 8, 0.7, size=16)

    def _features_slide(self, page, slide: FeaturesSlide) -> None:
        self._heading(page, slide.title, PURPLE)
        half = (len(slide.content) + 1) // 2
        for column, items in ((0.5, slide.content[:half]), (5, slide.content[half:])):
            for index, feature in enumerate(items):
                self._text(page, f"• {feature}", column, 1.5 + index * 0.6, 4.5, 0.5)

    def _techstack_slide(self, page, slide: TechStackSlide) -> None:
        self._heading(page, slide.title, GREEN)
        for index, entry in enumerate(slide.content):
            top = 1.5 + index * 1.2
            self._text(page, entry.category, 1, top, 8, 0.4, size=18, bold=True, color=GREEN)
            self._text(page, ", ".join(entry.technologies), 1.5, top + 0.4, 7.5, 0.3)
            self._text(page, f"Rationale: {entry.reason}", 1.5, top + 0.7, 7.5, 0.3,
                       size=12, color=SLATE, italic=True)

    def _timeline_slide(self, page, slide: TimelineSlide) -> None:
        self._heading(page, slide.title, AMBER)
        for index, milestone in enumerate(slide.content):
            self._text(page, f"Phase {index + 1}: {milestone}", 1, 1.5 + index * 0.6, 8, 0.5)

    def _code_slide(self, page, slide: CodeSlide) -> None:
        self._heading(page, slide.title, RED)
        self._text(page, slide.content.structure, 1, 1.5, 8, 4, size=12, font="Courier New")

    def _steps_slide(self, page, slide: StepsSlide) -> None:
        roadmap = slide.type == "roadmap"
        self._heading(page, slide.title, AMBER if roadmap else CYAN)
        for index, step in enumerate(slide.content):
            self._text(page, f"{index + 1}. {step}", 1, 1.5 + index * 0.6, 8, 0.5,
                       size=14 if roadmap else 16)

    def _risks_slide(self, page, slide: RisksSlide) -> None:
        self._heading(page, slide.title, RED)
        rows = [("Risk", "Level", "Mitigation Strategy")]
        rows.extend((row.risk, row.level, row.mitigation) for row in slide.content)
        self._table(page, rows, size=14, header=True)

    def _resources_slide(self, page, slide: ResourcesSlide) -> None:
        self._heading(page, slide.title, GREEN)
        self._text(page, slide.content.subtitle, 1, 2, 8, 0.5, size=18, bold=True)
        self._text(page, "This presentation includes:", 1, 2.8, 8, 0.5, size=16, color=CYAN)
        for index, item in enumerate(slide.content.includes):
            self._text(page, item, 1.5, 3.3 + index * 0.4, 7, 0.3)

    _BUILDERS: dict[str, Callable[..., None]] = {
        "title": _title_slide,
        "summary": _summary_slide,
        "goals": _goals_slide,
        "features": _features_slide,
        "techstack": _techstack_slide,
        "timeline": _timeline_slide,
        "code": _code_slide,
        "roadmap": _steps_slide,
        "nextsteps": _steps_slide,
        "risks": _risks_slide,
        "resources": _resources_slide,
    }
