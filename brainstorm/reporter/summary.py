"""Plain-text and JSON exports of a ``ProjectAnalysis``.

The text summary is the "Export Summary" download: labelled sections
separated by blank lines, bulleted goals and features, and one
``Category: tech1, tech2`` line per tech-stack entry.
"""

from __future__ import annotations

from pathlib import Path

from brainstorm.analyzer.models import ProjectAnalysis
from brainstorm.utils import save_json, save_text

BULLET = "•"
SUMMARY_TITLE = "Project Flowchart"


def render_summary(analysis: ProjectAnalysis) -> str:
    """Flatten *analysis* into the downloadable text summary."""
    lines = [SUMMARY_TITLE, "=" * 18, ""]

    lines.append("Goals:")
    lines.extend(f"{BULLET} {goal}" for goal in analysis.goals)
    lines.append("")

    lines.append("Key Features:")
    lines.extend(f"{BULLET} {feature}" for feature in analysis.features)
    lines.append("")

    lines.append("Tech Stack:")
    lines.extend(
        f"{entry.category}: {', '.join(entry.technologies)}" for entry in analysis.tech_stack
    )
    lines.append("")

    lines.append(f"Timeline: {analysis.timeline}")
    lines.append(f"Complexity: {analysis.complexity.value}")
    lines.append(f"Team Size: {analysis.team_size}")
    return "\n".join(lines) + "\n"


class SummaryExporter:
    """Writes the text summary and a JSON dump of the analysis."""

    def __init__(
        self,
        summary_filename: str = "project-flowchart.txt",
        analysis_filename: str = "analysis.json",
    ) -> None:
        self.summary_filename = summary_filename
        self.analysis_filename = analysis_filename

    async def export(self, analysis: ProjectAnalysis, output_dir: str | Path) -> Path:
        """Write the text summary and return its path."""
        target = Path(output_dir) / self.summary_filename
        return await save_text(render_summary(analysis), target)

    async def export_json(self, analysis: ProjectAnalysis, output_dir: str | Path) -> Path:
        """Write the analysis as JSON with camelCase keys."""
        target = Path(output_dir) / self.analysis_filename
        return await save_json(analysis.model_dump(mode="json", by_alias=True), target)
