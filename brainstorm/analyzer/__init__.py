"""BrainstormBuddy idea analyzer.

Classifies a free-text idea into one of four archetypes and returns the
matching structured ``ProjectAnalysis``.

Usage::

    from brainstorm.analyzer import classify

    analysis = classify("An online store for handmade jewellery")
    print(analysis.complexity, analysis.timeline)
"""

from brainstorm.analyzer.models import (
    Archetype,
    Complexity,
    ProjectAnalysis,
    TechStackEntry,
)
from brainstorm.analyzer.classifier import classify, detect_archetype

__all__ = [
    "classify",
    "detect_archetype",
    "Archetype",
    "Complexity",
    "ProjectAnalysis",
    "TechStackEntry",
]
