"""Pydantic v2 models for the idea analyzer.

Defines the ``ProjectAnalysis`` record produced by classification and read by
every renderer.  All models are frozen: once an analysis exists it cannot be
mutated, so the diagram, slide and scaffold generators can share it safely.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Complexity(str, Enum):
    """Estimated project complexity."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Archetype(str, Enum):
    """Idea category that fully determines the analysis content."""
    COMMERCE = "commerce"
    SOCIAL = "social"
    ANALYTICS = "analytics"
    GENERIC = "generic"


# ---------------------------------------------------------------------------
# Analysis models
# ---------------------------------------------------------------------------

class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TechStackEntry(_FrozenModel):
    """A group of recommended technologies, e.g. ``Frontend``."""
    category: str = Field(..., description="Free-form label such as 'Frontend'")
    technologies: tuple[str, ...] = Field(..., description="Ordered technology names")
    reason: str = Field(default="", description="Why this group was chosen")


class ProjectAnalysis(_FrozenModel):
    """Structured project plan derived from a free-text idea."""
    goals: tuple[str, ...] = Field(..., min_length=1, description="Problem objectives")
    features: tuple[str, ...] = Field(..., min_length=1, description="Capabilities to build")
    tech_stack: tuple[TechStackEntry, ...] = Field(
        ..., min_length=1, description="Recommended technology groups"
    )
    timeline: str = Field(..., description="Human-readable duration, e.g. '6-12 months'")
    complexity: Complexity = Field(..., description="Overall complexity")
    team_size: str = Field(..., description="Human-readable team size")
    archetype: Archetype = Field(
        default=Archetype.GENERIC, description="Template that produced this analysis"
    )

    def find_tech(self, category_fragment: str) -> TechStackEntry | None:
        """Return the first entry whose category contains *category_fragment*.

        Matching is case-insensitive substring search, so ``"frontend"``
        matches ``"Frontend"`` as well as ``"Frontend & Mobile"``.
        """
        needle = category_fragment.lower()
        for entry in self.tech_stack:
            if needle in entry.category.lower():
                return entry
        return None

    def primary_technology(self, index: int, default: str) -> str:
        """First technology of ``tech_stack[index]``, or *default* if absent."""
        if index < len(self.tech_stack) and self.tech_stack[index].technologies:
            return self.tech_stack[index].technologies[0]
        return default
