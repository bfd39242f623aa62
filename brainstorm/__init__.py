"""BrainstormBuddy -- turns a raw project idea into a structured plan.

The idea text is classified into a ``ProjectAnalysis`` which then feeds three
independent generators: a flowchart description, an eleven-slide deck model
and an illustrative code scaffold.

Usage::

    from brainstorm import classify, to_diagram, to_slides, to_scaffold

    analysis = classify("A marketplace for used books")
    print(to_diagram(analysis, "A marketplace for used books").to_mermaid())
"""

from brainstorm.analyzer import ProjectAnalysis, classify
from brainstorm.diagram import to_diagram
from brainstorm.scaffolder import to_scaffold
from brainstorm.slides import to_slides

__all__ = [
    "ProjectAnalysis",
    "classify",
    "to_diagram",
    "to_scaffold",
    "to_slides",
]
