"""Unit tests for the idea classifier (brainstorm.analyzer).

Tests cover:
- detect_archetype keyword groups, case-insensitivity and group order
- classify returning the fixed archetype templates
- ProjectAnalysis immutability, validation and camelCase serialisation
- find_tech / primary_technology helpers
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from brainstorm.analyzer import (
    Archetype,
    Complexity,
    ProjectAnalysis,
    TechStackEntry,
    classify,
    detect_archetype,
)
from brainstorm.analyzer.archetypes import ANALYTICS, COMMERCE, GENERIC, SOCIAL, TEMPLATES


# ---------------------------------------------------------------------------
# detect_archetype
# ---------------------------------------------------------------------------


class TestDetectArchetype:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "idea",
        ["An ecommerce site for tea", "A SHOP for vinyl records", "Online store for plants"],
    )
    def test_commerce_keywords(self, idea):
        assert detect_archetype(idea) is Archetype.COMMERCE

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "idea",
        ["Social app for runners", "Group CHAT for families", "A community for gardeners"],
    )
    def test_social_keywords(self, idea):
        assert detect_archetype(idea) is Archetype.SOCIAL

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "idea",
        ["Fleet dashboard", "Web analytics for blogs", "Open data explorer"],
    )
    def test_analytics_keywords(self, idea):
        assert detect_archetype(idea) is Archetype.ANALYTICS

    @pytest.mark.unit
    def test_no_keyword_is_generic(self):
        assert detect_archetype("A recipe planner") is Archetype.GENERIC

    @pytest.mark.unit
    def test_marketplace_alone_is_generic(self):
        # "marketplace" is not one of the commerce keywords.
        assert detect_archetype("A marketplace for used books") is Archetype.GENERIC

    @pytest.mark.unit
    def test_first_group_wins(self):
        assert detect_archetype("community marketplace shop") is Archetype.COMMERCE

    @pytest.mark.unit
    def test_social_beats_analytics(self):
        assert detect_archetype("chat with data insights") is Archetype.SOCIAL

    @pytest.mark.unit
    def test_substring_match(self):
        # "data" inside "database" still counts.
        assert detect_archetype("A database browser") is Archetype.ANALYTICS


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------


class TestClassify:
    @pytest.mark.unit
    def test_commerce_template(self):
        analysis = classify("My little shop")
        assert analysis == COMMERCE
        assert analysis.timeline == "6-12 months"
        assert analysis.complexity is Complexity.HIGH
        assert analysis.team_size == "4-6 developers"
        assert analysis.tech_stack[0].technologies == ("React", "Next.js", "Tailwind CSS")

    @pytest.mark.unit
    def test_social_template(self):
        analysis = classify("social hiking")
        assert analysis == SOCIAL
        assert analysis.timeline == "8-15 months"
        assert analysis.team_size == "5-8 developers"

    @pytest.mark.unit
    def test_analytics_template(self):
        analysis = classify("KPI dashboard")
        assert analysis == ANALYTICS
        assert analysis.complexity is Complexity.MEDIUM
        assert analysis.tech_stack[1].technologies[0] == "Python"

    @pytest.mark.unit
    def test_generic_template(self):
        analysis = classify("A recipe planner")
        assert analysis == GENERIC
        assert analysis.timeline == "3-6 months"
        assert analysis.team_size == "2-3 developers"

    @pytest.mark.unit
    def test_idea_text_does_not_change_content(self):
        assert classify("shop for hats") == classify("shop for shoes")

    @pytest.mark.unit
    def test_every_template_has_four_groups(self):
        for archetype, analysis in TEMPLATES.items():
            assert analysis.archetype is archetype
            assert len(analysis.goals) == 4
            assert len(analysis.features) == 8
            assert len(analysis.tech_stack) == 4


# ---------------------------------------------------------------------------
# ProjectAnalysis model
# ---------------------------------------------------------------------------


class TestProjectAnalysis:
    @pytest.mark.unit
    def test_frozen(self, commerce_analysis):
        with pytest.raises(ValidationError):
            commerce_analysis.timeline = "forever"

    @pytest.mark.unit
    def test_empty_goals_rejected(self):
        with pytest.raises(ValidationError):
            ProjectAnalysis(
                goals=(),
                features=("x",),
                tech_stack=(TechStackEntry(category="Frontend", technologies=("React",)),),
                timeline="1 month",
                complexity=Complexity.LOW,
                team_size="1",
            )

    @pytest.mark.unit
    def test_camel_case_dump(self, commerce_analysis):
        data = commerce_analysis.model_dump(mode="json", by_alias=True)
        assert "techStack" in data
        assert "teamSize" in data
        assert data["complexity"] == "High"

    @pytest.mark.unit
    def test_validate_from_camel_case(self, commerce_analysis):
        data = commerce_analysis.model_dump(mode="json", by_alias=True)
        assert ProjectAnalysis.model_validate(data) == commerce_analysis

    @pytest.mark.unit
    def test_find_tech_case_insensitive(self, commerce_analysis):
        entry = commerce_analysis.find_tech("FRONTEND")
        assert entry is not None
        assert entry.category == "Frontend"

    @pytest.mark.unit
    def test_find_tech_missing(self, minimal_analysis):
        assert minimal_analysis.find_tech("backend") is None

    @pytest.mark.unit
    def test_primary_technology(self, commerce_analysis, minimal_analysis):
        assert commerce_analysis.primary_technology(1, "Node.js") == "Node.js"
        assert minimal_analysis.primary_technology(0, "React") == "Flutter"
        assert minimal_analysis.primary_technology(1, "Node.js") == "Node.js"
