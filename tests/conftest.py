"""Shared pytest fixtures for the BrainstormBuddy test suite.

Provides reusable fixtures for:
- Idea texts for every archetype
- Pre-classified analyses and a minimal hand-built analysis
- A zero-delay configuration rooted in a temporary directory
- Mocked flowchart renderer and deck exporter collaborators
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from brainstorm.analyzer import ProjectAnalysis, TechStackEntry, classify
from brainstorm.analyzer.models import Complexity
from brainstorm.config import Config
from brainstorm.diagram.renderer import RenderedDiagram


# ---------------------------------------------------------------------------
# Ideas
# ---------------------------------------------------------------------------

COMMERCE_IDEA = "An online store for used books"
SOCIAL_IDEA = "A social network for rock climbers"
ANALYTICS_IDEA = "A sales dashboard for small bakeries"
GENERIC_IDEA = "A recipe planner for busy parents"


@pytest.fixture
def commerce_idea() -> str:
    return COMMERCE_IDEA


@pytest.fixture
def social_idea() -> str:
    return SOCIAL_IDEA


@pytest.fixture
def analytics_idea() -> str:
    return ANALYTICS_IDEA


@pytest.fixture
def generic_idea() -> str:
    return GENERIC_IDEA


# ---------------------------------------------------------------------------
# Analyses
# ---------------------------------------------------------------------------

@pytest.fixture
def commerce_analysis() -> ProjectAnalysis:
    return classify(COMMERCE_IDEA)


@pytest.fixture
def analytics_analysis() -> ProjectAnalysis:
    return classify(ANALYTICS_IDEA)


@pytest.fixture
def minimal_analysis() -> ProjectAnalysis:
    """An analysis with one item per list and a single tech-stack entry."""
    return ProjectAnalysis(
        goals=("Ship it",),
        features=("User Profiles",),
        tech_stack=(
            TechStackEntry(category="Mobile", technologies=("Flutter",), reason="Cross-platform"),
        ),
        timeline="1 month",
        complexity=Complexity.LOW,
        team_size="1 developer",
    )


@pytest.fixture
def fixed_day() -> date:
    return date(2024, 3, 7)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Configuration with no artificial delay, writing under tmp_path."""
    return Config(output_dir=tmp_path / "out", analysis_delay=0)


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_renderer() -> AsyncMock:
    """A GraphRenderer stand-in that returns a tiny SVG."""
    renderer = AsyncMock()
    renderer.render = AsyncMock(
        return_value=RenderedDiagram(content=b"<svg></svg>", format="svg")
    )
    return renderer


@pytest.fixture
def mock_exporter(tmp_path: Path) -> AsyncMock:
    """A DeckExporter stand-in that pretends to write a deck."""
    exporter = AsyncMock()
    exporter.export = AsyncMock(return_value=tmp_path / "out" / "deck.pptx")
    return exporter
