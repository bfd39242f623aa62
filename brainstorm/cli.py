"""Command-line entry point: ``brainstorm "<idea>"``.

Runs one session end to end and writes the exports into the output
directory.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from brainstorm.config import Config
from brainstorm.diagram.renderer import create_renderer
from brainstorm.reporter.results import print_analysis
from brainstorm.session import EmptyIdeaError, Session, SessionStep
from brainstorm.slides.exporter import PptxDeckExporter
from brainstorm.slides.preview import render_current
from brainstorm.utils import (
    console,
    print_error,
    print_step_header,
    print_success,
    print_summary_table,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brainstorm",
        description="BrainstormBuddy -- turn a project idea into a plan, flowchart, deck and scaffold",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            '  brainstorm "A marketplace for used books"\n'
            '  brainstorm "A social app for hikers" -o ./plan --deck --no-render\n'
        ),
    )
    parser.add_argument(
        "idea",
        help="Free-text description of the project idea",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory (default: ./brainstorm-output or $BB_OUTPUT_DIR)",
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Skip the artificial analysis delay",
    )
    parser.add_argument(
        "--render",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Render the flowchart image with the configured renderer (default: on)",
    )
    parser.add_argument(
        "--deck",
        action="store_true",
        help="Export the slide deck as .pptx",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Print every slide in the terminal",
    )
    return parser


async def run(args: argparse.Namespace, config: Config) -> int:
    """Drive one session from the parsed arguments; return the exit code."""
    session = Session(config)

    print_step_header(SessionStep.ANALYZING.value, "Analyzing your idea")
    try:
        with console.status("[bold yellow]AI is analyzing your idea...[/bold yellow]"):
            result = await session.analyze(args.idea)
    except EmptyIdeaError as exc:
        print_error(str(exc))
        return 1

    print_step_header(SessionStep.RESULTS.value, "Refined Project Plan")
    print_analysis(result.analysis)

    config.ensure_directories()
    written: dict[str, str] = {
        "Summary": str(await session.export_summary()),
        "Flowchart source": str(await session.export_mermaid()),
    }
    scaffold_path = await session.export_scaffold()
    if scaffold_path is not None:
        written["Scaffold"] = str(scaffold_path)

    if args.render:
        renderer = create_renderer(
            config.renderer.backend,
            kroki_url=config.renderer.kroki_url,
            output_format=config.renderer.output_format,
            timeout=config.renderer.timeout,
        )
        if await session.render_diagram(renderer) is not None:
            written["Flowchart"] = str(await session.save_diagram())
        else:
            print_warning("Flowchart image skipped; the mermaid source is still available.")

    if args.preview:
        navigator = session.navigator
        while True:
            console.print(render_current(navigator))
            if navigator.is_last:
                break
            navigator.next()

    if args.deck:
        deck_path = await session.export_deck(PptxDeckExporter())
        if deck_path is not None:
            written["Deck"] = str(deck_path)

    print_summary_table(
        {
            "Idea": result.idea.strip(),
            "Archetype": result.analysis.archetype.value,
            "Slides": str(len(result.slides)),
            **written,
        },
        title="BrainstormBuddy Output",
    )
    print_success("Your project plan is ready.")
    return 0


def main() -> None:
    """CLI entry point for ``brainstorm`` / ``python -m brainstorm.cli``."""
    args = build_parser().parse_args()

    config = Config.from_env()
    if args.output:
        config.output_dir = Path(args.output)
    if args.no_delay:
        config.analysis_delay = 0.0

    sys.exit(asyncio.run(run(args, config)))


if __name__ == "__main__":
    main()
