"""Builds the eleven-slide presentation model from a ``ProjectAnalysis``.

The deck order is fixed.  Slides 3-5 and the summary reflect the analysis;
the timeline, roadmap, risk and next-steps slides are the same for every
project.  The only non-reproducible value is the date on the title slide.
"""

from __future__ import annotations

from datetime import date

from brainstorm.analyzer.models import ProjectAnalysis

from .models import (
    CodeSlide,
    CodeStructure,
    FeaturesSlide,
    GoalsSlide,
    ResourcesContent,
    ResourcesSlide,
    RiskRow,
    RisksSlide,
    Slide,
    SlideKind,
    StepsSlide,
    SummarySlide,
    TechStackSlide,
    TimelineSlide,
    TitleSlide,
)


# ---------------------------------------------------------------------------
# Static deck content
# ---------------------------------------------------------------------------

BRAND = "BrainstormBuddy AI"
TITLE_SUBTITLE = "Complete Project Analysis & Implementation Plan"

SLIDE_ORDER: tuple[SlideKind, ...] = tuple(SlideKind)

MILESTONES: tuple[str, ...] = (
    "Project Setup & Environment Configuration",
    "Core Architecture & Database Design",
    "MVP Development (Core Features)",
    "User Interface & Experience Design",
    "Testing & Quality Assurance",
    "Deployment & Production Setup",
    "Launch & User Feedback Collection",
    "Iteration & Feature Enhancement",
)

ROADMAP: tuple[str, ...] = (
    "Environment Setup: Configure development tools and repositories",
    "Database Design: Create schema and establish data relationships",
    "API Development: Build backend services and endpoints",
    "Frontend Development: Create user interface and components",
    "Integration Testing: Ensure all systems work together",
    "User Acceptance Testing: Validate with target users",
    "Production Deployment: Launch to live environment",
    "Monitoring & Optimization: Track performance and iterate",
)

RISKS: tuple[RiskRow, ...] = (
    RiskRow(risk="Technical Complexity", level="Medium", mitigation="Use proven technologies and frameworks"),
    RiskRow(risk="Timeline Overrun", level="Low", mitigation="Agile development with regular milestones"),
    RiskRow(risk="Budget Constraints", level="Medium", mitigation="Prioritize MVP features first"),
    RiskRow(risk="User Adoption", level="Medium", mitigation="Conduct user research and testing"),
    RiskRow(risk="Scalability Issues", level="Low", mitigation="Design with scalability in mind"),
)

NEXT_STEPS: tuple[str, ...] = (
    "Assemble development team and assign roles",
    "Set up project management tools (Jira, Trello, etc.)",
    "Create detailed technical specifications",
    "Establish development environment and CI/CD pipeline",
    "Begin with database design and API architecture",
    "Create wireframes and UI/UX mockups",
    "Set up monitoring and analytics tools",
    "Plan user testing and feedback collection strategy",
)

RESOURCES: tuple[str, ...] = (
    "• Complete project analysis and recommendations",
    "• Technical architecture and technology stack",
    "• Development timeline and milestone planning",
    "• Risk assessment and mitigation strategies",
    "• Implementation roadmap and next steps",
    "• Code structure and development guidelines",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def format_generated_on(day: date) -> str:
    """Caption shown under the title, e.g. ``Generated by ... • 10/19/2026``."""
    return f"Generated by {BRAND} • {day.month}/{day.day}/{day.year}"


def code_structure(frontend: str, backend: str) -> str:
    """Directory tree shown on the code slide."""
    return (
        f"Frontend ({frontend})\n"
        "├── src/\n"
        "│   ├── components/\n"
        "│   ├── pages/\n"
        "│   ├── hooks/\n"
        "│   └── utils/\n"
        "\n"
        f"Backend ({backend})\n"
        "├── routes/\n"
        "├── models/\n"
        "├── middleware/\n"
        "└── controllers/\n"
        "\n"
        "Database Schema\n"
        "├── Users table\n"
        "├── Core entities\n"
        "└── Relationships"
    )


def summary_rows(analysis: ProjectAnalysis) -> tuple[tuple[str, str], ...]:
    """The six executive-summary rows."""
    return (
        ("Project Timeline", analysis.timeline),
        ("Complexity Level", analysis.complexity.value),
        ("Recommended Team Size", analysis.team_size),
        ("Primary Technology", analysis.primary_technology(0, "React")),
        ("Key Features Count", str(len(analysis.features))),
        ("Main Goals", str(len(analysis.goals))),
    )


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

def to_slides(
    analysis: ProjectAnalysis,
    idea_text: str,
    *,
    generated_on: date | None = None,
) -> list[Slide]:
    """Build the deck for *analysis*.

    Args:
        analysis: The classified project analysis.
        idea_text: Used verbatim as the title of the first slide.
        generated_on: Date printed on the title slide. Defaults to today.

    Returns:
        Exactly eleven slides in ``SLIDE_ORDER``.
    """
    day = generated_on or date.today()
    frontend = analysis.primary_technology(0, "React")
    backend = analysis.primary_technology(1, "Node.js")

    return [
        TitleSlide(
            title=idea_text,
            subtitle=TITLE_SUBTITLE,
            content=format_generated_on(day),
        ),
        SummarySlide(title="Executive Summary", content=summary_rows(analysis)),
        GoalsSlide(title="Project Goals & Objectives", content=analysis.goals),
        FeaturesSlide(title="Key Features & Functionality", content=analysis.features),
        TechStackSlide(title="Recommended Technical Architecture", content=analysis.tech_stack),
        TimelineSlide(title="Development Timeline & Milestones", content=MILESTONES),
        CodeSlide(
            title="Project Code Structure",
            content=CodeStructure(
                frontend=frontend,
                backend=backend,
                structure=code_structure(frontend, backend),
            ),
        ),
        StepsSlide(type="roadmap", title="Implementation Roadmap", content=ROADMAP),
        RisksSlide(title="Risk Assessment & Mitigation", content=RISKS),
        StepsSlide(type="nextsteps", title="Immediate Next Steps", content=NEXT_STEPS),
        ResourcesSlide(
            title="Resources & Documentation",
            content=ResourcesContent(subtitle=f"Generated by {BRAND}", includes=RESOURCES),
        ),
    ]
