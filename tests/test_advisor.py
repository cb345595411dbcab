"""Tests for the architecture advisor."""

import pytest

from mvp24h_mcp.operations.advisor_ops import (
    ADJUSTMENT_RULES,
    DEFAULT_REASON,
    SelectionInput,
    architecture_advisor,
    get_started,
    render_recommendation,
    select_template,
)


def select(**kwargs):
    return select_template(SelectionInput.from_args(**kwargs))


class TestRequirementPrecedence:
    """Requirement tags are checked in a fixed order."""

    def test_microservices_always_wins(self):
        result = select(requirements=["cqrs", "domain-driven", "microservices"], complexity="low")
        assert result.template == "microservices"
        assert result.reasoning == ["Microservices architecture requested"]

    def test_cqrs_beats_rapid_prototype_regardless_of_list_order(self):
        assert select(requirements=["rapid-prototype", "cqrs"]).template == "cqrs"
        assert select(requirements=["cqrs", "rapid-prototype"]).template == "cqrs"

    @pytest.mark.parametrize("tag", ["domain-driven", "event-sourcing"])
    def test_domain_tags_select_ddd(self, tag):
        assert select(requirements=[tag, "cqrs"]).template == "ddd"

    def test_external_integrations_before_audit_trail(self):
        assert select(requirements=["audit-trail", "external-integrations"]).template == "hexagonal"

    def test_audit_trail_selects_event_driven(self):
        assert select(requirements=["audit-trail"]).template == "event-driven"

    def test_tags_without_rules_fall_through(self):
        result = select(requirements=["high-performance", "multiple-databases"], complexity="high")
        assert result.template == "complex-nlayers"

    def test_requirement_skips_characteristics(self):
        result = select(requirements=["rapid-prototype"], complexity="very-high")
        assert result.template == "minimal-api"
        assert len(result.reasoning) == 1


class TestCharacteristics:

    def test_all_fields_absent_uses_default(self):
        result = select()
        assert result.template == "simple-nlayers"
        assert result.reasoning == [DEFAULT_REASON]

    def test_low_complexity(self):
        assert select(complexity="low").template == "minimal-api"

    def test_few_entities_and_simple_rules(self):
        assert select(entity_count="few", business_rules="simple").template == "minimal-api"

    def test_moderate_rules(self):
        assert select(business_rules="moderate").template == "simple-nlayers"

    def test_complex_rules(self):
        assert select(business_rules="complex").template == "complex-nlayers"

    def test_medium_complexity_checked_before_complex_rules(self):
        assert select(complexity="medium", business_rules="complex").template == "simple-nlayers"

    def test_very_high_complexity(self):
        assert select(complexity="very-high").template == "clean-architecture"

    def test_unknown_values_are_ignored(self):
        result = select(complexity="enormous", team_size="galactic", requirements=["blockchain"])
        assert result.template == "simple-nlayers"
        assert result.reasoning == [DEFAULT_REASON]


class TestAdjustments:

    def test_high_complexity_with_large_team(self):
        result = select(complexity="high", team_size="large")
        assert result.template == "clean-architecture"
        assert len(result.reasoning) == 2

    def test_medium_complexity_with_many_entities(self):
        result = select(complexity="medium", entity_count="many")
        assert result.template == "complex-nlayers"
        assert len(result.reasoning) == 2

    def test_adjustments_do_not_chain(self):
        result = select(complexity="medium", entity_count="many", team_size="large")
        assert result.template == "complex-nlayers"

    def test_adjustments_apply_after_requirements(self):
        result = select(requirements=["cqrs"], team_size="large")
        assert result.template == "cqrs"
        assert len(result.reasoning) == 1

    def test_adjustment_reasons_are_appended(self):
        result = select(complexity="high", team_size="large")
        assert result.reasoning[-1] == ADJUSTMENT_RULES[0][3]

    def test_many_entities_alone_adjusts_the_default(self):
        result = select(entity_count="many")
        assert result.template == "complex-nlayers"
        assert result.reasoning == [DEFAULT_REASON, ADJUSTMENT_RULES[1][3]]
        assert DEFAULT_REASON.startswith("No characteristic rule matched")

        text = render_recommendation(SelectionInput.from_args(entity_count="many"), result)
        assert "No distinguishing" not in text
        assert "- No characteristic rule matched; Simple N-Layers is the default starting point" in text


class TestRecommendation:

    def test_sections_in_order(self):
        selection = SelectionInput.from_args(complexity="high", team_size="large")
        text = render_recommendation(selection, select_template(selection))
        positions = [
            text.index("## Recommended Template: **Clean Architecture**"),
            text.index("## Decision Matrix"),
            text.index("## Alternative Options"),
            text.index("## Next Steps"),
        ]
        assert positions == sorted(positions)
        assert "\n\n---\n\n" in text

    def test_next_steps_mention_cqrs_guide_for_cqrs(self):
        selection = SelectionInput.from_args(requirements=["cqrs"])
        text = render_recommendation(selection, select_template(selection))
        assert 'mvp24h_cqrs_guide({ topic: "commands" })' in text
        assert 'mvp24h_get_template({ template_name: "cqrs" })' in text

    def test_next_steps_skip_cqrs_guide_otherwise(self):
        selection = SelectionInput.from_args(complexity="low")
        text = render_recommendation(selection, select_template(selection))
        assert "mvp24h_cqrs_guide" not in text
        assert "**Configure database**: `mvp24h_database_advisor({ ... })`" in text

    @pytest.mark.asyncio
    async def test_advisor_tool_function(self):
        text = await architecture_advisor(requirements=["microservices"])
        assert "Microservices Architecture" in text
        assert "modular-monolith" in text


@pytest.mark.asyncio
class TestGetStarted:

    async def test_overview_includes_framework_doc(self, store):
        text = await get_started("overview", store=store)
        assert "## Framework Overview" in text
        assert "Getting started with Mvp24Hours." in text

    async def test_overview_without_docs(self, empty_store):
        text = await get_started("overview", store=empty_store)
        assert "Framework Overview" not in text
        assert "Quick Decision Tree" in text
        assert "| Select database/ORM | `mvp24h_database_advisor` |" in text
        assert "| Add AI capabilities | `mvp24h_ai_implementation` |" in text

    async def test_unknown_focus_falls_back_to_overview(self, empty_store):
        assert await get_started("nonsense", store=empty_store) == await get_started("overview", store=empty_store)

    async def test_all_includes_every_section(self, empty_store):
        text = await get_started("all", store=empty_store)
        assert "## Quick Start" in text
        assert "## Core Packages" in text
