"""BrainstormBuddy flowchart generation.

Turns a ``ProjectAnalysis`` into a renderer-neutral graph description and
hands it to a pluggable ``GraphRenderer``.

Usage::

    from brainstorm.diagram import KrokiRenderer, to_diagram

    description = to_diagram(analysis, idea)
    print(description.to_mermaid())
    image = await KrokiRenderer().render(description)
"""

from brainstorm.diagram.models import (
    DiagramDescription,
    DiagramEdge,
    DiagramNode,
    NodeShape,
    StyleClass,
)
from brainstorm.diagram.generator import sanitize_label, to_diagram
from brainstorm.diagram.renderer import (
    DiagramRenderError,
    GraphRenderer,
    KrokiRenderer,
    MermaidCliRenderer,
    RenderedDiagram,
    create_renderer,
)

__all__ = [
    "to_diagram",
    "sanitize_label",
    "DiagramDescription",
    "DiagramEdge",
    "DiagramNode",
    "NodeShape",
    "StyleClass",
    "DiagramRenderError",
    "GraphRenderer",
    "KrokiRenderer",
    "MermaidCliRenderer",
    "RenderedDiagram",
    "create_renderer",
]
