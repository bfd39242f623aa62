"""Terminal preview of slides using Rich renderables.

One builder per slide kind; ``render_slide`` dispatches on the slide's tag.
User-supplied text is always wrapped in ``Text`` objects so that brackets in
an idea never get interpreted as Rich markup.
"""

from __future__ import annotations

from typing import Callable

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

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
from .navigator import SlideNavigator


_LEVEL_STYLES: dict[str, str] = {
    "High": "bold red",
    "Medium": "bold yellow",
    "Low": "bold green",
}


def _heading(title: str, style: str) -> Text:
    return Text(title, style=f"bold {style}")


def _numbered(items: tuple[str, ...], style: str) -> Group:
    lines = []
    for number, item in enumerate(items, start=1):
        line = Text()
        line.append(f" {number} ", style=f"bold black on {style}")
        line.append(" ")
        line.append(item)
        lines.append(line)
    return Group(*lines)


def _title(slide: TitleSlide) -> RenderableType:
    return Group(
        Text(slide.title, style="bold white", justify="center"),
        Text(slide.subtitle, style="cyan", justify="center"),
        Text(""),
        Text(slide.content, style="dim", justify="center"),
    )


def _summary(slide: SummarySlide) -> RenderableType:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="cyan")
    table.add_column(style="white")
    for label, value in slide.content:
        table.add_row(Text(label), Text(value))
    return Group(_heading(slide.title, "white"), table)


def _goals(slide: GoalsSlide) -> RenderableType:
    return Group(_heading(slide.title, "cyan"), _numbered(slide.content, "cyan"))


def _features(slide: FeaturesSlide) -> RenderableType:
    grid = Table.grid(padding=(0, 2))
    grid.add_column()
    grid.add_column()
    items = list(slide.content)
    for left, right in zip(items[0::2], items[1::2] + [""] * (len(items) % 2)):
        grid.add_row(Text(left, style="magenta"), Text(right, style="magenta"))
    return Group(_heading(slide.title, "magenta"), grid)


def _techstack(slide: TechStackSlide) -> RenderableType:
    cards = []
    for entry in slide.content:
        body = Text()
        body.append(", ".join(entry.technologies), style="green")
        body.append("\n")
        body.append(entry.reason, style="dim")
        cards.append(Panel(body, title=Text(entry.category, style="bold green"), title_align="left"))
    return Group(_heading(slide.title, "green"), *cards)


def _steps(slide: TimelineSlide | StepsSlide) -> RenderableType:
    return Group(_heading(slide.title, "yellow"), _numbered(slide.content, "yellow"))


def _code(slide: CodeSlide) -> RenderableType:
    return Group(
        _heading(slide.title, "red"),
        Panel(Text(slide.content.structure, style="green"), border_style="dim"),
    )


def _risks(slide: RisksSlide) -> RenderableType:
    table = Table(header_style="bold red")
    table.add_column("Risk")
    table.add_column("Level")
    table.add_column("Mitigation Strategy")
    for row in slide.content:
        table.add_row(
            Text(row.risk),
            Text(row.level, style=_LEVEL_STYLES[row.level]),
            Text(row.mitigation, style="dim"),
        )
    return Group(_heading(slide.title, "red"), table)


def _resources(slide: ResourcesSlide) -> RenderableType:
    return Group(
        _heading(slide.title, "green"),
        Text(slide.content.subtitle, style="bold white", justify="center"),
        Text("This presentation includes:", style="cyan", justify="center"),
        *(Text(item, justify="center") for item in slide.content.includes),
    )


_BUILDERS: dict[str, Callable[..., RenderableType]] = {
    "title": _title,
    "summary": _summary,
    "goals": _goals,
    "features": _features,
    "techstack": _techstack,
    "timeline": _steps,
    "roadmap": _steps,
    "nextsteps": _steps,
    "code": _code,
    "risks": _risks,
    "resources": _resources,
}


def render_slide(slide: Slide) -> RenderableType:
    """Return a Rich renderable previewing *slide*."""
    return _BUILDERS[slide.type](slide)


def render_current(navigator: SlideNavigator) -> Panel:
    """Preview the navigator's current slide inside a titled panel."""
    return Panel(
        render_slide(navigator.current),
        title="PowerPoint Preview",
        subtitle=navigator.position(),
        padding=(1, 2),
    )
