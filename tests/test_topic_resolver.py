"""Tests for topic resolution."""

import pytest

from mvp24h_mcp.operations.guide_ops import render_related, resolve_topic
from mvp24h_mcp.operations.guide_types import Topic, TopicGuide
from mvp24h_mcp.operations.framework_guides import CORE_GUIDE
from mvp24h_mcp.operations.practice_guides import TESTING_GUIDE
from mvp24h_mcp.utils.doc_store import missing_placeholder

SAMPLE_GUIDE = TopicGuide(
    tool_name="sample_guide",
    argument="topic",
    title="Sample Guide",
    summary="A guide used in tests.",
    overview_reference="## Quick Reference\n\nOverview reference.",
    overview_doc="core/home.md",
    other_tools=(("other_tool", "Does other things"),),
    topics=(
        Topic(
            key="alpha",
            description="First topic",
            sources=("core/guard-clauses.md", "core/missing.md"),
            quick_reference="## Quick Reference\n\nAlpha reference.",
            related=("beta", "docs/elsewhere.md"),
        ),
        Topic(
            key="beta",
            description="Second topic",
            sources=("missing/beta.md",),
            inline="# Beta\n\nInline beta content.",
            related=("alpha",),
        ),
        Topic(
            key="gamma",
            description="Third topic",
            sources=("missing/gamma.md",),
        ),
        Topic(key="alpha-alias", description="Alias of alpha", sources=("core/guard-clauses.md",),
              alias_of="alpha"),
    ),
)


@pytest.mark.asyncio
class TestOverview:

    @pytest.mark.parametrize("key", [None, "", "overview"])
    async def test_overview_keys(self, store, key):
        text = await resolve_topic(SAMPLE_GUIDE, key, store=store)
        assert text.startswith("# Sample Guide")
        assert "| `alpha` | First topic |" in text

    async def test_topics_in_declaration_order_and_aliases_hidden(self, store):
        text = await resolve_topic(SAMPLE_GUIDE, None, store=store)
        assert text.index("`alpha`") < text.index("`beta`") < text.index("`gamma`")
        assert "alpha-alias" not in text

    async def test_overview_reference_and_additional_context(self, store):
        text = await resolve_topic(SAMPLE_GUIDE, "overview", store=store)
        assert "Overview reference." in text
        assert "## Additional Context\n\nCore module home page." in text

    async def test_additional_context_omitted_without_store(self, empty_store):
        text = await resolve_topic(SAMPLE_GUIDE, "overview", store=empty_store)
        assert "Additional Context" not in text
        assert "Overview reference." in text

    async def test_core_overview_hides_infrastructure_alias(self, empty_store):
        text = await resolve_topic(CORE_GUIDE, None, store=empty_store)
        assert "| `infrastructure-abstractions` |" in text
        assert "| `infrastructure` |" not in text


@pytest.mark.asyncio
class TestUnknownTopic:

    async def test_lists_literal_key_and_all_valid_keys(self, store):
        text = await resolve_topic(SAMPLE_GUIDE, "delta", store=store)
        assert '"delta" not found' in text
        for key in ("overview", "alpha", "beta", "gamma", "alpha-alias"):
            assert key in text

    async def test_uses_argument_name(self, empty_store):
        guide = TopicGuide(
            tool_name="pattern_guide", argument="pattern", title="Patterns", summary="",
            topics=(Topic(key="one", description="One", inline="One"),),
        )
        text = await resolve_topic(guide, "two", store=empty_store)
        assert text.startswith('Pattern "two" not found.')
        assert 'pattern_guide({ pattern: "overview" })' in text

    async def test_unknown_topic_is_logged(self, store, capsys):
        await resolve_topic(SAMPLE_GUIDE, "delta", store=store)
        assert "unknown_topic" in capsys.readouterr().err


@pytest.mark.asyncio
class TestKnownTopic:

    async def test_sources_in_order_with_placeholders(self, store):
        text = await resolve_topic(SAMPLE_GUIDE, "alpha", store=store)
        assert text.startswith("# Guard Clauses")
        assert missing_placeholder("core/missing.md") in text
        assert text.index("Guard clause documentation.") < text.index("core/missing.md")

    async def test_fixed_section_order(self, store):
        text = await resolve_topic(SAMPLE_GUIDE, "alpha", store=store)
        assert text.index("Guard clause documentation.") < text.index("Alpha reference.") < text.index(
            "## Related Topics"
        )

    async def test_related_rendering(self, store):
        text = await resolve_topic(SAMPLE_GUIDE, "alpha", store=store)
        assert '- `sample_guide({ topic: "beta" })` - Second topic' in text
        assert "- `docs/elsewhere.md`" in text
        assert "### Other Tools\n\n- `other_tool` - Does other things" in text

    async def test_inline_fallback(self, store):
        text = await resolve_topic(SAMPLE_GUIDE, "beta", store=store)
        assert text.startswith("# Beta\n\nInline beta content.")
        assert "Documentation not found" not in text

    async def test_not_yet_available_fallback(self, store):
        text = await resolve_topic(SAMPLE_GUIDE, "gamma", store=store)
        assert "Documentation not yet available" in text
        assert missing_placeholder("missing/gamma.md") in text

    async def test_store_unavailable_keeps_reference_and_related(self, empty_store):
        text = await resolve_topic(SAMPLE_GUIDE, "alpha", store=empty_store)
        assert "Alpha reference." in text
        assert "## Related Topics" in text
        assert "Documentation not yet available" in text

    async def test_idempotent(self, store):
        first = await resolve_topic(SAMPLE_GUIDE, "alpha", store=store)
        second = await resolve_topic(SAMPLE_GUIDE, "alpha", store=store)
        assert first == second

    async def test_sections_separated(self, store):
        text = await resolve_topic(SAMPLE_GUIDE, "alpha", store=store)
        assert text.count("\n\n---\n\n") >= 3

    async def test_section_sources(self, store):
        text = await resolve_topic(TESTING_GUIDE, "mocking", store=store)
        assert text.startswith("## Mocking\n\nMocking body.")

    async def test_section_source_missing_uses_inline(self, store):
        text = await resolve_topic(TESTING_GUIDE, "architecture-testing", store=store)
        assert text.startswith("# Architecture Testing")


class TestRenderRelated:

    def test_nothing_to_link(self):
        guide = TopicGuide(tool_name="g", argument="topic", title="G", summary="",
                           topics=(Topic(key="a", description="A", inline="A"),))
        assert render_related(guide, guide.get_topic("a")) is None
