"""
AI implementation operations for the docs MCP server.

This module recommends an AI approach and template for a use case, and
serves the approach overviews and implementation templates.
"""
from types import MappingProxyType
from dataclasses import dataclass
from typing import Optional, Tuple

from mcp.server.fastmcp import FastMCP

from ..utils.errors import with_error_handling
from ..utils.events import log_event
from ..utils.doc_store import DocStore, get_doc_store
from ..utils.formatters import bullet_list, code_block, format_title, join_sections, markdown_table
from .advisor_guides import (
    AGENT_FRAMEWORK_PACKAGES,
    AI_TEMPLATE_GUIDE,
    AI_USE_CASE_MATRIX,
    SK_PACKAGES,
    SKG_PACKAGES,
)
from .guide_ops import resolve_topic


@dataclass(frozen=True)
class Approach:
    """One way of adding AI to a .NET application."""

    key: str
    name: str
    summary: str
    recommended_for: Tuple[str, ...]
    not_recommended_for: Tuple[str, ...]
    templates: Tuple[str, ...]
    packages: str
    quick_start: str
    note: Optional[str] = None


AI_APPROACHES = MappingProxyType({
    approach.key: approach
    for approach in (
        Approach(
            key="semantic-kernel",
            name="Semantic Kernel",
            summary=(
                "Microsoft Semantic Kernel is the foundation for AI orchestration in .NET. "
                "Use for standard AI integration scenarios."
            ),
            recommended_for=(
                "Simple chat/completion scenarios", "Plugin-based tool augmentation",
                "Basic RAG implementations", "MVP and prototypes", "Standard AI integrations",
            ),
            not_recommended_for=(
                "Complex multi-step workflows", "State persistence requirements",
                "Multi-agent coordination", "Production monitoring needs",
            ),
            templates=("chat-completion", "plugins", "rag-basic", "planners"),
            packages=SK_PACKAGES,
            quick_start="""using Microsoft.SemanticKernel;

var kernel = Kernel.CreateBuilder()
    .AddOpenAIChatCompletion("gpt-4o", Environment.GetEnvironmentVariable("OPENAI_API_KEY")!)
    .Build();

var result = await kernel.InvokePromptAsync("Explain CQRS pattern in .NET");
Console.WriteLine(result);

kernel.ImportPluginFromType<TimePlugin>();
var response = await kernel.InvokePromptAsync("What time is it?");""",
        ),
        Approach(
            key="sk-graph",
            name="Semantic Kernel Graph",
            summary=(
                "Semantic Kernel Graph extends SK with graph-based workflow orchestration. "
                "Use for complex AI workflows."
            ),
            recommended_for=(
                "Complex AI workflows with multiple steps", "Conditional branching and routing",
                "State management across steps", "Production-grade AI systems",
                "Checkpointing and recovery", "Human-in-the-loop workflows",
                "Multi-agent systems", "Real-time monitoring",
            ),
            not_recommended_for=("Simple Q&A scenarios", "When simplicity is paramount"),
            templates=(
                "graph-executor", "react-agent", "chain-of-thought", "chatbot-memory", "multi-agent",
                "document-pipeline", "human-in-loop", "checkpointing", "streaming", "observability",
            ),
            packages=SKG_PACKAGES,
            quick_start="""using SemanticKernel.Graph.Core;
using SemanticKernel.Graph.Nodes;
using SemanticKernel.Graph.Extensions;

var builder = Kernel.CreateBuilder();
builder.AddOpenAIChatCompletion("gpt-4o", apiKey);
builder.AddGraphSupport();
var kernel = builder.Build();

var executor = new GraphExecutor("MyWorkflow", "Processes customer request");

var classifyNode = new PromptGraphNode("classify", "Classify the following request: {{$input}}", "classifier")
    .StoreResultAs("classification");

var routeNode = new ConditionalGraphNode("route")
    .AddCondition("classification == 'support'", "support-handler")
    .AddCondition("classification == 'sales'", "sales-handler")
    .SetDefaultRoute("general-handler");

executor.AddNode(classifyNode);
executor.AddNode(routeNode);
executor.SetStartNode("classify");

var result = await executor.ExecuteAsync(kernel, new KernelArguments { ["input"] = "I need help with my order" });""",
        ),
        Approach(
            key="agent-framework",
            name="Microsoft Agent Framework",
            summary=(
                "The Microsoft Agent Framework provides high-level abstractions for building "
                "enterprise AI agents."
            ),
            recommended_for=(
                "Azure OpenAI integration", "Microsoft ecosystem alignment",
                "Enterprise agent development", "Unified AI abstractions", "Middleware pipelines",
            ),
            not_recommended_for=(
                "Complex graph-based workflows (use SK Graph)", "Advanced checkpointing needs",
                "When still in preview is a concern",
            ),
            templates=("agent-basic", "agent-workflows", "agent-multi", "agent-middleware"),
            packages=AGENT_FRAMEWORK_PACKAGES,
            quick_start="""using Microsoft.Extensions.AI;

IChatClient client = new OpenAIChatClient(
    model: "gpt-4o",
    apiKey: Environment.GetEnvironmentVariable("OPENAI_API_KEY")!);

var response = await client.CompleteAsync("What is CQRS?");
Console.WriteLine(response.Message.Text);

var toolClient = new ChatClientBuilder(client)
    .UseFunctionInvocation()
    .Build();""",
            note=(
                "The Agent Framework is currently in preview. For production systems with complex "
                "workflows, consider Semantic Kernel Graph."
            ),
        ),
    )
})

# Use case -> (approach, template, reason)
USE_CASE_RULES = MappingProxyType({
    "chatbot": ("semantic-kernel", "chat-completion", "Simple chatbot → Semantic Kernel Chat Completion"),
    "qa-documents": ("semantic-kernel", "rag-basic", "Document Q&A → Semantic Kernel RAG"),
    "tool-augmented": ("semantic-kernel", "plugins", "Tool-augmented AI → Semantic Kernel Plugins"),
    "complex-reasoning": ("sk-graph", "chain-of-thought", "Complex reasoning → SK Graph Chain of Thought"),
    "multi-agent": ("sk-graph", "multi-agent", "Multiple agents → SK Graph Multi-Agent"),
    "workflow": ("sk-graph", "graph-executor", "Workflow orchestration → SK Graph Executor"),
    "human-oversight": ("sk-graph", "human-in-loop", "Human oversight needed → SK Graph Human-in-the-Loop"),
    "enterprise": ("agent-framework", "agent-basic", "Enterprise grade → Microsoft Agent Framework"),
})

DEFAULT_USE_CASE_RULE = ("semantic-kernel", "chat-completion", "No specific use case → Default to Semantic Kernel")

CAPABILITY_HEADERS = ("Approach", "Complexity", "Flexibility", "State Management", "Production Ready")
CAPABILITY_MATRIX = (
    ("SK Chat Completion", "Low", "Low", "None", "✅ Yes"),
    ("SK Plugins", "Low-Medium", "Medium", "None", "✅ Yes"),
    ("SK RAG", "Medium", "Medium", "None", "✅ Yes"),
    ("SKG Graph Executor", "Medium", "High", "✅ Full", "✅ Yes"),
    ("SKG ReAct Agent", "High", "Very High", "✅ Full", "✅ Yes"),
    ("SKG Multi-Agent", "Very High", "Very High", "✅ Full", "✅ Yes"),
    ("Agent Framework", "Medium", "High", "Limited", "⚠️ Preview"),
)

AI_CONFIGURATION = """## Configuration

### appsettings.json

```json
{
  "AI": {
    "Provider": "OpenAI",
    "OpenAI": {
      "ApiKey": "${OPENAI_API_KEY}",
      "ModelId": "gpt-4o",
      "EmbeddingModelId": "text-embedding-3-small"
    },
    "AzureOpenAI": {
      "Endpoint": "${AZURE_OPENAI_ENDPOINT}",
      "ApiKey": "${AZURE_OPENAI_API_KEY}",
      "DeploymentName": "gpt-4o"
    }
  }
}
```"""


def _packages_for(approach: Approach) -> str:
    return approach.packages.replace("## Required Packages", f"### {approach.name}", 1)


def render_ai_recommendation(use_case: Optional[str]) -> str:
    """Render the approach and template recommended for a use case."""
    approach_key, template_key, reason = USE_CASE_RULES.get(use_case, DEFAULT_USE_CASE_RULE)
    approach = AI_APPROACHES[approach_key]
    sections = [
        "# AI Implementation Recommendation\n\n"
        f"## Recommended Approach: **{approach.name}**\n"
        f"## Recommended Template: **{format_title(template_key)}**\n\n"
        f"### Why?\n{bullet_list([reason])}",
        AI_USE_CASE_MATRIX + "\n\n### Complexity vs Capability\n\n"
        + markdown_table(CAPABILITY_HEADERS, CAPABILITY_MATRIX),
        "## Required Packages\n\n" + "\n\n".join(_packages_for(a) for a in AI_APPROACHES.values()),
        AI_CONFIGURATION,
        "## Next Steps\n\n"
        f"1. **Get specific template**: `{AI_TEMPLATE_GUIDE.call(template_key)}`\n"
        f'2. **Learn about the approach**: `mvp24h_ai_implementation({{ approach: "{approach_key}" }})`',
    ]
    return join_sections(sections) + "\n"


def render_approach(approach: Approach) -> str:
    rows = []
    for key in approach.templates:
        topic = AI_TEMPLATE_GUIDE.get_topic(key)
        rows.append((f"`{key}`", topic.description if topic else key))
    parts = [
        f"# {approach.name}",
        f"## Overview\n\n{approach.summary}",
        "## When to Use\n\n"
        f"✅ **Recommended For:**\n{bullet_list(approach.recommended_for)}\n\n"
        f"❌ **Not Recommended For:**\n{bullet_list(approach.not_recommended_for)}",
        "## Available Templates\n\n" + markdown_table(["Template", "Description"], rows),
        approach.packages,
        "## Quick Start\n\n" + code_block(approach.quick_start, "csharp"),
    ]
    if approach.note:
        parts.append(f"## Note\n\n{approach.note}")
    parts.append(f'Use `{AI_TEMPLATE_GUIDE.call("...")}` for the full template.')
    return "\n\n".join(parts) + "\n"


def render_approach_not_found(approach_key: str) -> str:
    return (
        f'Approach "{approach_key}" not found.\n\n'
        "## Available Approaches\n\n"
        + bullet_list(f"`{a.key}` - {a.name}" for a in AI_APPROACHES.values())
        + "\n"
    )


async def ai_implementation(
    use_case: Optional[str] = None,
    approach: Optional[str] = None,
    template: Optional[str] = None,
    store: Optional[DocStore] = None,
) -> str:
    """
    Serve an AI template, an approach overview or a use-case recommendation.

    A template takes precedence over an approach, and an approach over a use
    case. Unknown use cases get the default recommendation.
    """
    if template:
        return await resolve_topic(AI_TEMPLATE_GUIDE, template, store or get_doc_store())
    if approach:
        info = AI_APPROACHES.get(approach)
        if info is None:
            log_event("unknown_topic", {"tool": AI_TEMPLATE_GUIDE.tool_name, "approach": approach})
            return render_approach_not_found(approach)
        return render_approach(info)
    return render_ai_recommendation(use_case)


def register_ai_operations(mcp: FastMCP) -> None:
    """
    Register AI implementation operations with the MCP server.

    Args:
        mcp: The MCP server instance
    """

    @mcp.tool(name="mvp24h_ai_implementation")
    @with_error_handling
    async def ai_implementation_tool(
        use_case: Optional[str] = None,
        approach: Optional[str] = None,
        template: Optional[str] = None,
    ) -> str:
        """
        Add AI capabilities to a .NET application with Semantic Kernel, Semantic
        Kernel Graph or the Microsoft Agent Framework.

        Args:
            use_case: chatbot, qa-documents, tool-augmented, complex-reasoning,
                multi-agent, workflow, human-oversight or enterprise
            approach: semantic-kernel, sk-graph or agent-framework
            template: overview or a template key such as chat-completion, rag-basic,
                graph-executor, react-agent, multi-agent or agent-basic

        Returns:
            str: Recommendation, approach overview or implementation template
        """
        return await ai_implementation(use_case, approach, template)
