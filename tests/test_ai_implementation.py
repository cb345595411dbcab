"""Tests for the AI implementation tool."""

import pytest

from mvp24h_mcp.operations.ai_ops import AI_APPROACHES, USE_CASE_RULES, ai_implementation


@pytest.mark.asyncio
class TestRecommendation:

    @pytest.mark.parametrize("use_case,approach,template", [
        ("chatbot", "Semantic Kernel", "Chat Completion"),
        ("qa-documents", "Semantic Kernel", "Rag Basic"),
        ("complex-reasoning", "Semantic Kernel Graph", "Chain Of Thought"),
        ("human-oversight", "Semantic Kernel Graph", "Human In Loop"),
        ("enterprise", "Microsoft Agent Framework", "Agent Basic"),
    ])
    async def test_use_cases(self, use_case, approach, template):
        text = await ai_implementation(use_case=use_case)
        assert f"## Recommended Approach: **{approach}**" in text
        assert f"## Recommended Template: **{template}**" in text
        assert USE_CASE_RULES[use_case][2] in text

    async def test_unknown_use_case_uses_default(self):
        text = await ai_implementation(use_case="poetry")
        assert "## Recommended Approach: **Semantic Kernel**" in text
        assert "- No specific use case → Default to Semantic Kernel" in text

    async def test_sections_and_next_steps(self):
        text = await ai_implementation(use_case="workflow")
        positions = [
            text.index("## AI Decision Matrix"),
            text.index("### Complexity vs Capability"),
            text.index("## Required Packages"),
            text.index("## Configuration"),
            text.index("## Next Steps"),
        ]
        assert positions == sorted(positions)
        assert 'mvp24h_ai_implementation({ template: "graph-executor" })' in text
        assert 'mvp24h_ai_implementation({ approach: "sk-graph" })' in text
        for approach in AI_APPROACHES.values():
            assert f"### {approach.name}" in text


@pytest.mark.asyncio
class TestApproaches:

    async def test_approach_overview(self):
        text = await ai_implementation(approach="agent-framework")
        assert text.startswith("# Microsoft Agent Framework")
        assert "| `agent-middleware` | Request/response processing |" in text
        assert "## Note" in text

    async def test_approach_takes_precedence_over_use_case(self):
        text = await ai_implementation(use_case="enterprise", approach="semantic-kernel")
        assert text.startswith("# Semantic Kernel\n")

    async def test_unknown_approach(self):
        text = await ai_implementation(approach="langchain")
        assert text.startswith('Approach "langchain" not found.')
        assert "`sk-graph` - Semantic Kernel Graph" in text


@pytest.mark.asyncio
class TestTemplates:

    async def test_inline_template_without_docs(self, empty_store):
        text = await ai_implementation(template="rag-basic", store=empty_store)
        assert text.startswith("# Semantic Kernel - RAG Basic Template")
        assert "Microsoft.SemanticKernel.Connectors.OpenAI" in text

    async def test_template_takes_precedence(self, empty_store):
        text = await ai_implementation(use_case="chatbot", approach="sk-graph",
                                       template="agent-basic", store=empty_store)
        assert "Microsoft.Extensions.AI" in text
        assert "## Recommended Approach" not in text

    async def test_template_overview(self, empty_store):
        text = await ai_implementation(template="overview", store=empty_store)
        assert text.startswith("# AI Implementation Templates")
        assert "| Enterprise agents | Agent Framework | Agent Framework Basic |" in text

    async def test_unknown_template(self, empty_store):
        text = await ai_implementation(template="voice-assistant", store=empty_store)
        assert text.startswith('Template "voice-assistant" not found.')
