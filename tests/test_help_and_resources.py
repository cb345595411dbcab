"""Tests for help texts, documentation resources and prompts."""

import pytest

from mvp24h_mcp.constants import ALL_OPERATIONS, RESOURCE_URI_PREFIX
from mvp24h_mcp.operations.help_ops import get_help, get_tools_help
from mvp24h_mcp.operations.help_texts import HELP_TEXTS
from mvp24h_mcp.operations.prompt_ops import (
    CQRS_COMPONENT_TOPICS,
    add_ai_capabilities_prompt,
    containerize_app_prompt,
    create_dotnet_project_prompt,
    implement_cqrs_prompt,
    setup_database_prompt,
    setup_observability_prompt,
)
from mvp24h_mcp.resources.resource_handlers import (
    read_doc_resource,
    resolve_resource_path,
    resource_catalog,
)
from mvp24h_mcp.utils.errors import DocumentNotFoundError


class TestHelp:

    def test_tools_overview(self):
        text = get_help()
        assert text == get_tools_help()
        assert "Mvp24Hours Docs - Available Tools:" in text
        for operation in ALL_OPERATIONS:
            assert operation in text

    def test_every_operation_has_help(self):
        assert sorted(HELP_TEXTS) == sorted(ALL_OPERATIONS)

    def test_guide_help_carries_notes(self):
        text = get_help("mvp24h_cqrs_guide")
        assert text.startswith(HELP_TEXTS["mvp24h_cqrs_guide"])
        assert len(text) > len(HELP_TEXTS["mvp24h_cqrs_guide"])

    def test_advisor_help(self):
        assert get_help("mvp24h_architecture_advisor") == HELP_TEXTS["mvp24h_architecture_advisor"]

    def test_database_and_ai_help(self):
        assert get_help("mvp24h_database_advisor").startswith("\nmvp24h_database_advisor: ")
        assert "mvp24h_ai_implementation" in get_tools_help()

    def test_unknown_topic(self):
        text = get_help("read_file")
        assert text.startswith("Unknown help topic: read_file.")
        assert "mvp24h_build_context" in text


class TestResourceCatalog:

    def test_categories(self):
        catalog = resource_catalog()
        assert list(catalog)[:2] == ["template", "database"]
        assert "cqrs" in catalog and "observability" in catalog
        assert catalog["database"][0] == "overview"
        assert "unit-of-work" in catalog["database"]
        assert "rag-basic" in catalog["ai"]

    def test_template_names(self):
        assert resource_catalog()["template"][0] == "minimal-api"

    def test_overview_only_with_overview_doc(self):
        catalog = resource_catalog()
        assert catalog["core"][0] == "overview"
        assert "overview" not in catalog["reference"]

    def test_resolve(self):
        assert resolve_resource_path("template", "cqrs") == "ai-context/template-cqrs.md"
        assert resolve_resource_path("database", "relational") == "database/relational.md"
        assert resolve_resource_path("database", "overview") == "ai-context/database-patterns.md"
        assert resolve_resource_path("ai", "agent-basic") == "ai-context/template-agent-framework-basic.md"
        assert resolve_resource_path("core", "overview") == "core/home.md"
        assert resolve_resource_path("testing", "mocking") == "ai-context/testing-patterns.md#Mocking"
        assert resolve_resource_path("core", "nope") is None
        assert resolve_resource_path("kubernetes", "pods") is None


@pytest.mark.asyncio
class TestReadResource:

    async def test_template_document(self, store):
        assert await read_doc_resource("template", "cqrs", store=store) == "CQRS template from the docs directory."

    async def test_guide_topic_document(self, store):
        text = await read_doc_resource("core", "guard-clauses", store=store)
        assert text.startswith("# Guard Clauses")

    async def test_section_document(self, store):
        text = await read_doc_resource("testing", "mocking", store=store)
        assert text.startswith("## Mocking")

    async def test_unknown_resource_lists_valid_uris(self, store):
        text = await read_doc_resource("template", "serverless", store=store)
        assert text.startswith(f"Resource not found: {RESOURCE_URI_PREFIX}/template/serverless")
        assert f"`{RESOURCE_URI_PREFIX}/template/clean-architecture`" in text
        assert f"`{RESOURCE_URI_PREFIX}/database/relational`" in text

    async def test_catalogued_but_missing_file(self, store):
        with pytest.raises(DocumentNotFoundError) as excinfo:
            await read_doc_resource("template", "hexagonal", store=store)
        assert excinfo.value.path == "ai-context/template-hexagonal.md"


class TestPrompts:

    def test_create_project(self):
        text = create_dotnet_project_prompt("worker", "cqrs")
        assert "new .NET worker project using the cqrs architecture" in text
        assert 'mvp24h_get_template({ template_name: "cqrs" })' in text

    @pytest.mark.parametrize("component,topic", [
        ("command", "commands"),
        ("domain-event", "domain-events"),
        ("pipeline-behavior", "behaviors"),
    ])
    def test_cqrs_component_topics(self, component, topic):
        assert f'topic "{topic}"' in implement_cqrs_prompt(component)

    def test_unknown_cqrs_component_uses_overview(self):
        text = implement_cqrs_prompt("aggregate")
        assert "CQRS aggregate pattern" in text
        assert 'topic "overview"' in text

    def test_cqrs_component_table_is_read_only(self):
        with pytest.raises(TypeError):
            CQRS_COMPONENT_TOPICS["aggregate"] = "aggregates"

    def test_setup_database(self):
        text = setup_database_prompt("postgresql", "dapper")
        assert text.startswith("I want to setup postgresql database using dapper")
        assert "mvp24h_database_advisor" in text

    def test_add_ai_capabilities(self):
        text = add_ai_capabilities_prompt("sk-graph", "workflow")
        assert "using sk-graph for a workflow use case" in text
        assert "mvp24h_ai_implementation" in text

    def test_observability_all_components(self):
        assert "2. Setup logging, tracing, and metrics" in setup_observability_prompt()
        assert "2. Setup tracing\n" in setup_observability_prompt("tracing", "zipkin")

    def test_containerize(self):
        assert "optimized kubernetes configuration" in containerize_app_prompt("kubernetes")
