"""Slide deck models.

Every slide is a frozen Pydantic model tagged by its ``type`` field, and
``Slide`` is the discriminated union over all of them.  Each variant carries
its own strongly-typed ``content`` so renderers never have to inspect the
payload at runtime.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from brainstorm.analyzer.models import TechStackEntry


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class SlideKind(str, Enum):
    """Slide type tags, in deck order."""
    TITLE = "title"
    SUMMARY = "summary"
    GOALS = "goals"
    FEATURES = "features"
    TECHSTACK = "techstack"
    TIMELINE = "timeline"
    CODE = "code"
    ROADMAP = "roadmap"
    RISKS = "risks"
    NEXTSTEPS = "nextsteps"
    RESOURCES = "resources"


RiskLevel = Literal["Low", "Medium", "High"]


# ---------------------------------------------------------------------------
# Payload models
# ---------------------------------------------------------------------------

class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class RiskRow(_Frozen):
    """One row of the risk assessment table."""
    risk: str
    level: RiskLevel
    mitigation: str


class CodeStructure(_Frozen):
    """Payload of the code-structure slide."""
    frontend: str = Field(..., description="Primary frontend technology")
    backend: str = Field(..., description="Primary backend technology")
    structure: str = Field(..., description="Directory tree text")


class ResourcesContent(_Frozen):
    """Payload of the closing resources slide."""
    subtitle: str
    includes: tuple[str, ...]


# ---------------------------------------------------------------------------
# Slide variants
# ---------------------------------------------------------------------------

class _SlideBase(_Frozen):
    title: str

    @property
    def kind(self) -> SlideKind:
        return SlideKind(self.type)  # type: ignore[attr-defined]


class TitleSlide(_SlideBase):
    type: Literal["title"] = "title"
    subtitle: str
    content: str = Field(..., description="Generation caption with date")


class SummarySlide(_SlideBase):
    type: Literal["summary"] = "summary"
    content: tuple[tuple[str, str], ...] = Field(..., description="(label, value) rows")


class GoalsSlide(_SlideBase):
    type: Literal["goals"] = "goals"
    content: tuple[str, ...]


class FeaturesSlide(_SlideBase):
    type: Literal["features"] = "features"
    content: tuple[str, ...]


class TechStackSlide(_SlideBase):
    type: Literal["techstack"] = "techstack"
    content: tuple[TechStackEntry, ...]


class TimelineSlide(_SlideBase):
    type: Literal["timeline"] = "timeline"
    content: tuple[str, ...]


class CodeSlide(_SlideBase):
    type: Literal["code"] = "code"
    content: CodeStructure


class StepsSlide(_SlideBase):
    """Ordered step list shared by the roadmap and next-steps slides."""
    type: Literal["roadmap", "nextsteps"]
    content: tuple[str, ...]


class RisksSlide(_SlideBase):
    type: Literal["risks"] = "risks"
    content: tuple[RiskRow, ...]


class ResourcesSlide(_SlideBase):
    type: Literal["resources"] = "resources"
    content: ResourcesContent


Slide = Annotated[
    Union[
        TitleSlide,
        SummarySlide,
        GoalsSlide,
        FeaturesSlide,
        TechStackSlide,
        TimelineSlide,
        CodeSlide,
        StepsSlide,
        RisksSlide,
        ResourcesSlide,
    ],
    Field(discriminator="type"),
]

SlideListAdapter: TypeAdapter[list[Slide]] = TypeAdapter(list[Slide])
