"""Rich terminal view of an analysis: overview, goals, features, tech stack."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from brainstorm.analyzer.models import ProjectAnalysis
from brainstorm.utils import console as default_console

LEGEND: tuple[tuple[str, str], ...] = (
    ("Goals", "cyan"),
    ("Features", "magenta"),
    ("Tech Stack", "green"),
    ("Phases", "red"),
)


def overview_table(analysis: ProjectAnalysis) -> Table:
    table = Table(title="Project Overview", show_header=True, header_style="bold cyan")
    table.add_column("Timeline")
    table.add_column("Complexity")
    table.add_column("Team Size")
    table.add_row(analysis.timeline, analysis.complexity.value, analysis.team_size)
    return table


def tech_stack_table(analysis: ProjectAnalysis) -> Table:
    table = Table(title="Recommended Tech Stack", show_header=True, header_style="bold green")
    table.add_column("Category", style="green", no_wrap=True)
    table.add_column("Technologies")
    table.add_column("Reason", style="dim")
    for entry in analysis.tech_stack:
        table.add_row(entry.category, ", ".join(entry.technologies), entry.reason)
    return table


def legend() -> Text:
    """One-line colour legend matching the flowchart style classes."""
    text = Text("Flowchart Legend: ", style="bold cyan")
    for label, color in LEGEND:
        text.append("■ ", style=color)
        text.append(f"{label}  ")
    return text


def print_analysis(analysis: ProjectAnalysis, console: Console | None = None) -> None:
    """Print the refined project plan."""
    out = console or default_console
    out.print(overview_table(analysis))
    out.print(
        Panel(
            Text("\n".join(f"✔ {goal}" for goal in analysis.goals)),
            title="Project Goals",
            border_style="cyan",
        )
    )
    out.print(
        Panel(
            Text("\n".join(f"• {feature}" for feature in analysis.features)),
            title="Key Features",
            border_style="magenta",
        )
    )
    out.print(tech_stack_table(analysis))
    out.print(legend())
