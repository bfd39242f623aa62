"""Flowchart description models.

A ``DiagramDescription`` is a renderer-neutral directed graph: nodes with
labels and style classes plus edges.  ``to_mermaid`` serialises it to the
``flowchart`` syntax understood by mermaid-compatible renderers.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class StyleClass(str, Enum):
    """Colour-coding groups used by the flowchart legend."""
    GOAL = "goal"
    FEATURE = "feature"
    TECH = "tech"
    TIMELINE = "timeline"
    PHASE = "phase"

    @property
    def class_name(self) -> str:
        return f"{self.value}Class"


# fill, stroke
STYLE_COLORS: dict[StyleClass, tuple[str, str]] = {
    StyleClass.GOAL: ("#06b6d4", "#0891b2"),
    StyleClass.FEATURE: ("#8b5cf6", "#7c3aed"),
    StyleClass.TECH: ("#10b981", "#059669"),
    StyleClass.TIMELINE: ("#f59e0b", "#d97706"),
    StyleClass.PHASE: ("#ef4444", "#dc2626"),
}


class NodeShape(str, Enum):
    BOX = "box"
    DECISION = "decision"


class DiagramNode(BaseModel):
    """A single flowchart node."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Renderer node id, e.g. 'C1'")
    label: str = Field(..., description="Node text")
    caption: str = Field(default="", description="Optional prefix shown before the label")
    shape: NodeShape = Field(default=NodeShape.BOX)
    style_class: StyleClass | None = Field(default=None)
    truncated: bool = Field(default=False, description="Whether the label was cut short")


class DiagramEdge(BaseModel):
    """A directed edge between two node ids."""
    model_config = ConfigDict(frozen=True)

    source: str
    target: str


class DiagramDescription(BaseModel):
    """Complete flowchart: nodes in declaration order plus edges."""
    model_config = ConfigDict(frozen=True)

    direction: str = Field(default="TD")
    nodes: tuple[DiagramNode, ...] = Field(default_factory=tuple)
    edges: tuple[DiagramEdge, ...] = Field(default_factory=tuple)

    # -- Queries -----------------------------------------------------------

    def node(self, node_id: str) -> DiagramNode:
        """Return the node with *node_id*.

        Raises:
            KeyError: If no such node exists.
        """
        for node in self.nodes:
            if node.id == node_id:
                return node
        raise KeyError(node_id)

    def children(self, node_id: str) -> list[str]:
        """Ids of the direct successors of *node_id*, in edge order."""
        return [edge.target for edge in self.edges if edge.source == node_id]

    def classes(self) -> dict[StyleClass, list[str]]:
        """Map each style class to the ids of the nodes that use it."""
        grouped: dict[StyleClass, list[str]] = {}
        for node in self.nodes:
            if node.style_class is not None:
                grouped.setdefault(node.style_class, []).append(node.id)
        return grouped

    # -- Serialisation -----------------------------------------------------

    def to_mermaid(self) -> str:
        """Render the description as mermaid ``flowchart`` source."""
        lines = [f"flowchart {self.direction}"]
        for node in self.nodes:
            lines.append(f"    {_mermaid_node(node)}")
        lines.append("")
        for edge in self.edges:
            lines.append(f"    {edge.source} --> {edge.target}")
        lines.append("")

        grouped = self.classes()
        for style in StyleClass:
            fill, stroke = STYLE_COLORS[style]
            lines.append(
                f"    classDef {style.class_name} fill:{fill},stroke:{stroke},"
                f"stroke-width:2px,color:#fff"
            )
        lines.append("")
        for style in StyleClass:
            ids = grouped.get(style)
            if ids:
                lines.append(f"    class {','.join(ids)} {style.class_name}")
        return "\n".join(lines) + "\n"


def _escape(text: str) -> str:
    return text.replace('"', "#quot;")


def _mermaid_node(node: DiagramNode) -> str:
    text = _escape(node.label)
    if node.truncated:
        text += "..."
    if node.caption:
        text = f"{_escape(node.caption)}:<br/>{text}"
    if node.shape is NodeShape.DECISION:
        return f'{node.id}{{"{text}"}}'
    return f'{node.id}["{text}"]'
