"""Tests for the guide catalogs served through the guide tools."""

import pytest

from mvp24h_mcp.constants import GUIDE_OPERATIONS
from mvp24h_mcp.utils import doc_store
from mvp24h_mcp.operations.guide_catalog import GUIDES, RESOURCE_CATEGORIES, TOPIC_TABLES, get_guide
from mvp24h_mcp.operations.guide_ops import run_guide


@pytest.fixture
def shared_store(empty_store, monkeypatch):
    """Point the tools at a docs directory that does not exist."""
    monkeypatch.setattr(doc_store, "_store", empty_store)
    return empty_store


class TestCatalog:

    def test_every_guide_tool_is_registered(self):
        assert sorted(GUIDES) == sorted(GUIDE_OPERATIONS)

    def test_advisor_topic_tables(self):
        assert set(TOPIC_TABLES) - set(GUIDES) == {"mvp24h_database_advisor", "mvp24h_ai_implementation"}
        assert RESOURCE_CATEGORIES["database"] == "mvp24h_database_advisor"
        assert RESOURCE_CATEGORIES["ai"] == "mvp24h_ai_implementation"

    @pytest.mark.parametrize("tool_name,argument", [
        ("mvp24h_messaging_patterns", "pattern"),
        ("mvp24h_observability_setup", "component"),
        ("mvp24h_modernization_guide", "feature"),
        ("mvp24h_cqrs_guide", "topic"),
    ])
    def test_argument_names(self, tool_name, argument):
        assert get_guide(tool_name).argument == argument

    def test_get_guide_unknown(self):
        assert get_guide("mvp24h_architecture_advisor") is None

    def test_database_topics(self):
        guide = get_guide("mvp24h_database_advisor")
        assert guide.argument == "topic"
        assert guide.topic_keys()[:2] == ["relational", "nosql"]
        assert guide.get_topic("unit-of-work").sources == ("database/use-unitofwork.md",)

    def test_ai_templates(self):
        guide = get_guide("mvp24h_ai_implementation")
        assert guide.argument == "template"
        assert len(guide.topic_keys()) == 18
        assert guide.get_topic("rag-basic").inline.startswith("# Semantic Kernel - RAG Basic Template")

    def test_modernization_features(self):
        keys = get_guide("mvp24h_modernization_guide").topic_keys()
        assert "hybrid-cache" in keys
        assert "options-pattern" in keys
        assert len(keys) == 18

    def test_cqrs_topics(self):
        keys = get_guide("mvp24h_cqrs_guide").topic_keys()
        assert keys[:3] == ["commands", "queries", "notifications"]
        assert "migration-mediatr" in keys


@pytest.mark.asyncio
class TestGuideTools:

    @pytest.mark.parametrize("tool_name", sorted(TOPIC_TABLES))
    async def test_overview_never_empty(self, shared_store, tool_name):
        guide = get_guide(tool_name)
        text = await run_guide(tool_name)
        assert text.startswith(f"# {guide.title}")
        for topic in guide.listed_topics():
            assert f"`{topic.key}`" in text

    @pytest.mark.parametrize("tool_name", sorted(TOPIC_TABLES))
    async def test_every_topic_resolves_without_docs(self, shared_store, tool_name):
        guide = get_guide(tool_name)
        for topic in guide.topics:
            text = await run_guide(tool_name, topic.key)
            assert text.strip()
            assert "not found." not in text.splitlines()[0]
            if topic.quick_reference:
                assert topic.quick_reference in text

    async def test_unknown_guide(self):
        with pytest.raises(ValueError):
            await run_guide("mvp24h_unknown")

    async def test_observability_unknown_component(self, shared_store):
        text = await run_guide("mvp24h_observability_setup", "jaeger")
        assert text.startswith('Component "jaeger" not found.')
        assert "logging, tracing, metrics, exporters, migration" in text

    async def test_modernization_alias_uses_shared_doc(self, store, docs_dir, monkeypatch):
        monkeypatch.setattr(doc_store, "_store", store)
        (docs_dir / "modernization").mkdir()
        (docs_dir / "modernization" / "options-configuration.md").write_text(
            "Options configuration document.", encoding="utf-8"
        )
        alias = await run_guide("mvp24h_modernization_guide", "options-pattern")
        target = await run_guide("mvp24h_modernization_guide", "options-configuration")
        assert alias.startswith("Options configuration document.")
        assert target.startswith("Options configuration document.")

    async def test_infrastructure_other_tools(self, shared_store):
        text = await run_guide("mvp24h_infrastructure_guide", "pipeline")
        assert "### Other Tools" in text
        assert "- `cqrs/behaviors.md`" in text
