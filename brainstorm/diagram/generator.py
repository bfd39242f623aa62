"""Builds the project flowchart from a ``ProjectAnalysis``.

The shape of the graph is fixed: an idea root, an analysis decision node,
four branches (goals, features, tech stack, timeline) with their leaves, and
a development pipeline tail that every leaf feeds into.  Only the leaf labels
depend on the analysis.
"""

from __future__ import annotations

import re

from brainstorm.analyzer.models import ProjectAnalysis

from .models import (
    DiagramDescription,
    DiagramEdge,
    DiagramNode,
    NodeShape,
    StyleClass,
)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

IDEA_MAX_CHARS = 50
GOAL_MAX_CHARS = 30
FEATURE_MAX_CHARS = 25

MAX_GOALS = 3
MAX_FEATURES = 4

# (caption, fallback technologies) for tech-stack entries 0..2
_TECH_SLOTS: tuple[tuple[str, str], ...] = (
    ("Frontend", "React, TypeScript"),
    ("Backend", "Node.js, Express"),
    ("Database", "PostgreSQL, Redis"),
)

_BRANCHES: tuple[tuple[str, str], ...] = (
    ("C", "Goals Definition"),
    ("D", "Feature Planning"),
    ("E", "Tech Stack Selection"),
    ("F", "Timeline Planning"),
)

_PIPELINE_NODES: tuple[tuple[str, str], ...] = (
    ("G", "Development Phase"),
    ("H", "MVP Development"),
    ("I", "Testing & QA"),
    ("J", "Deployment"),
    ("K", "Launch"),
    ("L", "Post-Launch"),
    ("M", "Monitoring"),
    ("N", "Iterations"),
    ("O", "Scaling"),
)

_PIPELINE_EDGES: tuple[tuple[str, str], ...] = (
    ("G", "H"), ("G", "I"), ("G", "J"),
    ("H", "K"), ("I", "K"), ("J", "K"),
    ("K", "L"),
    ("L", "M"), ("L", "N"), ("L", "O"),
)

_WHITESPACE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Label helpers
# ---------------------------------------------------------------------------

def sanitize_label(text: str) -> str:
    """Keep only alphanumerics and whitespace, then normalise the whitespace.

    Examples:
        'Friend/follower system' -> 'Friendfollower system'
        '  Media   sharing (photos, videos) ' -> 'Media sharing photos videos'
    """
    kept = "".join(ch for ch in text if ch.isalnum() or ch.isspace())
    return _WHITESPACE.sub(" ", kept).strip()


def _excerpt(text: str, limit: int) -> tuple[str, bool]:
    cleaned = sanitize_label(text)
    if len(cleaned) <= limit:
        return cleaned, False
    # Cutting may expose a trailing space.
    return cleaned[:limit].rstrip(), True


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

def to_diagram(analysis: ProjectAnalysis, idea_text: str) -> DiagramDescription:
    """Build the flowchart description for *analysis*.

    Args:
        analysis: The classified project analysis.
        idea_text: The original idea; its excerpt labels the root node.

    Returns:
        A frozen ``DiagramDescription``.  Identical inputs always yield an
        identical description.
    """
    nodes: list[DiagramNode] = []
    edges: list[DiagramEdge] = []
    leaves: list[str] = []

    def _edge(source: str, target: str) -> None:
        edges.append(DiagramEdge(source=source, target=target))

    idea_label, idea_truncated = _excerpt(idea_text, IDEA_MAX_CHARS)
    nodes.append(
        DiagramNode(id="A", label=idea_label, caption="Project Idea", truncated=idea_truncated)
    )
    nodes.append(DiagramNode(id="B", label="Analysis Phase", shape=NodeShape.DECISION))
    _edge("A", "B")

    for branch_id, branch_label in _BRANCHES:
        nodes.append(DiagramNode(id=branch_id, label=branch_label))
        _edge("B", branch_id)

    # Goals
    for index, goal in enumerate(analysis.goals[:MAX_GOALS], start=1):
        label, _ = _excerpt(goal, GOAL_MAX_CHARS)
        node_id = f"C{index}"
        nodes.append(DiagramNode(id=node_id, label=label, style_class=StyleClass.GOAL))
        _edge("C", node_id)
        leaves.append(node_id)

    # Features
    for index, feature in enumerate(analysis.features[:MAX_FEATURES], start=1):
        label, _ = _excerpt(feature, FEATURE_MAX_CHARS)
        node_id = f"D{index}"
        nodes.append(DiagramNode(id=node_id, label=label, style_class=StyleClass.FEATURE))
        _edge("D", node_id)
        leaves.append(node_id)

    # Tech stack: always three leaves
    for index, (caption, fallback) in enumerate(_TECH_SLOTS):
        technologies = ""
        if index < len(analysis.tech_stack):
            technologies = ", ".join(analysis.tech_stack[index].technologies[:2])
        node_id = f"E{index + 1}"
        nodes.append(
            DiagramNode(
                id=node_id,
                label=technologies or fallback,
                caption=caption,
                style_class=StyleClass.TECH,
            )
        )
        _edge("E", node_id)
        leaves.append(node_id)

    # Timeline
    for index, (caption, value) in enumerate(
        (
            ("Timeline", analysis.timeline),
            ("Complexity", analysis.complexity.value),
            ("Team", analysis.team_size),
        ),
        start=1,
    ):
        node_id = f"F{index}"
        nodes.append(
            DiagramNode(id=node_id, label=value, caption=caption, style_class=StyleClass.TIMELINE)
        )
        _edge("F", node_id)
        leaves.append(node_id)

    for leaf in leaves:
        _edge(leaf, "G")

    for node_id, label in _PIPELINE_NODES:
        nodes.append(DiagramNode(id=node_id, label=label, style_class=StyleClass.PHASE))
    for source, target in _PIPELINE_EDGES:
        _edge(source, target)

    return DiagramDescription(nodes=tuple(nodes), edges=tuple(edges))
