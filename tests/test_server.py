"""Tests for tool, resource and prompt registration."""

import pytest
from mcp.server.fastmcp import FastMCP

from mvp24h_mcp.constants import ALL_OPERATIONS
from mvp24h_mcp.server import register_all_components


@pytest.fixture
def server():
    server = FastMCP("test")
    register_all_components(server)
    return server


@pytest.mark.asyncio
class TestRegistration:

    async def test_tools(self, server):
        tools = await server.list_tools()
        assert sorted(t.name for t in tools) == sorted(ALL_OPERATIONS)

    async def test_guide_tool_arguments(self, server):
        tools = {t.name: t for t in await server.list_tools()}
        assert "pattern" in tools["mvp24h_messaging_patterns"].inputSchema["properties"]
        assert "feature" in tools["mvp24h_modernization_guide"].inputSchema["properties"]
        assert "resources" in tools["mvp24h_build_context"].inputSchema["properties"]
        assert "data_type" in tools["mvp24h_database_advisor"].inputSchema["properties"]
        assert "use_case" in tools["mvp24h_ai_implementation"].inputSchema["properties"]

    async def test_prompts(self, server):
        prompts = await server.list_prompts()
        assert sorted(p.name for p in prompts) == [
            "add-ai-capabilities", "containerize-app", "create-dotnet-project", "implement-cqrs",
            "modernize-dotnet", "setup-database", "setup-observability",
        ]

    async def test_resource_templates(self, server):
        templates = await server.list_resource_templates()
        assert [t.uriTemplate for t in templates] == ["mvp24hours://docs/{category}/{name}"]

    async def test_tool_call_goes_through_error_handling(self, server, empty_store, monkeypatch):
        from mvp24h_mcp.utils import doc_store
        monkeypatch.setattr(doc_store, "_store", empty_store)
        result = await server.call_tool("mvp24h_cqrs_guide", {"topic": "unknown-topic"})
        content = result[0] if isinstance(result, tuple) else result
        assert 'Topic "unknown-topic" not found.' in content[0].text
