"""Tests for the database advisor."""

import pytest

from mvp24h_mcp.utils import doc_store
from mvp24h_mcp.operations.database_ops import (
    DEFAULT_PROVIDER_REASON,
    EXPLICIT_PROVIDER_REASON,
    DatabaseInput,
    database_advisor,
    determine_patterns,
    pattern_documents,
    select_database,
)


def select(**kwargs):
    return select_database(DatabaseInput.from_args(**kwargs))


class TestProviderSelection:

    def test_caching_beats_every_other_rule(self):
        result = select(data_type="document", requirements=["high-write-throughput", "flexible-schema", "caching"])
        assert result.provider == "redis"

    def test_flexible_schema_before_write_throughput(self):
        assert select(requirements=["high-write-throughput", "flexible-schema"]).provider == "mongodb"

    def test_write_throughput_overrides_data_type(self):
        assert select(data_type="key-value", requirements=["high-write-throughput"]).provider == "postgresql"

    @pytest.mark.parametrize("data_type,provider", [
        ("relational", "postgresql"),
        ("document", "mongodb"),
        ("key-value", "redis"),
        ("mixed", "postgresql"),
    ])
    def test_data_types(self, data_type, provider):
        assert select(data_type=data_type).provider == provider

    def test_requirements_without_provider_rule_use_default(self):
        result = select(requirements=["transactions", "relationships"])
        assert result.provider == "postgresql"
        assert result.reasoning == [DEFAULT_PROVIDER_REASON]

    def test_explicit_provider_wins(self):
        result = select(provider="sqlserver", data_type="document", requirements=["caching"])
        assert result.provider == "sqlserver"
        assert result.reasoning == [EXPLICIT_PROVIDER_REASON]

    def test_unknown_values_are_dropped(self):
        selection = DatabaseInput.from_args(data_type="graph", provider="oracle", requirements=["sharding"])
        assert selection.is_empty()


class TestPatternSelection:

    def test_base_patterns(self):
        assert determine_patterns(frozenset()) == ["repository", "unit-of-work"]

    def test_requirements_add_patterns(self):
        patterns = determine_patterns(frozenset({"high-write-throughput", "complex-queries"}))
        assert patterns == ["repository", "unit-of-work", "specification", "dapper"]

    def test_explicit_patterns_are_kept(self):
        result = select(patterns=["hybrid", "hybrid", "event-store"], requirements=["complex-queries"])
        assert result.patterns == ["hybrid"]

    def test_pattern_documents_are_listed_once(self):
        assert pattern_documents(["unit-of-work", "dapper", "hybrid"]) == [
            "database/use-unitofwork.md",
            "database/efcore-advanced.md",
        ]


@pytest.mark.asyncio
class TestDatabaseAdvisor:

    async def test_recommendation_sections_in_order(self, store):
        text = await database_advisor(data_type="document", store=store)
        positions = [
            text.index("## Recommended Database: **MongoDB**"),
            text.index("## Quick Reference - Mvp24Hours Interfaces"),
            text.index("## Database Selection Matrix"),
            text.index("## Provider Documentation"),
            text.index("## Next Steps"),
            text.index("## Related Topics"),
        ]
        assert positions == sorted(positions)
        assert 'mvp24h_database_advisor({ topic: "mongodb-advanced" })' in text

    async def test_provider_documents_are_loaded(self, store):
        text = await database_advisor(provider="postgresql", store=store)
        assert "Relational database document." in text
        assert 'mvp24h_database_advisor({ topic: "efcore-advanced" })' in text

    async def test_empty_store_falls_back_to_tool_pointer(self, empty_store):
        text = await database_advisor(requirements=["complex-queries"], store=empty_store)
        assert "## Recommended Database: **PostgreSQL with Entity Framework Core**" in text
        assert "Provider documentation is not available in the docs directory." in text
        assert 'mvp24h_database_advisor({ topic: "relational" })' in text
        assert "## Pattern Documentation" not in text
        assert "- `specification`" in text

    async def test_dapper_adds_hybrid_step(self, empty_store):
        text = await database_advisor(requirements=["high-write-throughput"], store=empty_store)
        assert "5. Consider hybrid approach with Dapper for read-heavy queries" in text

    async def test_no_hybrid_step_by_default(self, empty_store):
        text = await database_advisor(data_type="relational", store=empty_store)
        assert "5. Consider hybrid approach" not in text

    async def test_topic_takes_precedence(self, store):
        text = await database_advisor(data_type="document", topic="relational", store=store)
        assert text.startswith("Relational database document.")
        assert "## Recommended Database" not in text

    async def test_topic_without_docs(self, empty_store):
        text = await database_advisor(topic="unit-of-work", store=empty_store)
        assert "Documentation not yet available for this topic." in text
        assert "`IUnitOfWorkAsync`" in text

    async def test_unknown_topic(self, empty_store):
        text = await database_advisor(topic="graph", store=empty_store)
        assert text.startswith('Topic "graph" not found.')

    async def test_no_arguments_return_overview(self, store):
        text = await database_advisor(store=store)
        assert text.startswith("# Mvp24Hours Database Guide")
        assert "Database patterns document." in text

    async def test_only_unknown_values_return_overview(self, empty_store):
        text = await database_advisor(data_type="graph", requirements=["sharding"], store=empty_store)
        assert text.startswith("# Mvp24Hours Database Guide")

    async def test_shared_store_is_used(self, empty_store, monkeypatch):
        monkeypatch.setattr(doc_store, "_store", empty_store)
        text = await database_advisor(provider="redis")
        assert "## Recommended Database: **Redis**" in text
        assert 'mvp24h_database_advisor({ topic: "nosql" })' in text
