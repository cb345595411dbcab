"""
Topic tables behind the database and AI advisors.

Both advisors also answer plain topic lookups; these tables are resolved
with the same machinery as the guide tools.
"""
from .guide_types import Topic, TopicGuide


# Database

DATABASE_QUICK_REFERENCE = """## Quick Reference - Mvp24Hours Interfaces

### Repository Interfaces (`Mvp24Hours.Core.Contract.Data`)

| Interface | Description |
|-----------|-------------|
| `IRepository<TEntity>` | Synchronous repository for CRUD operations |
| `IRepositoryAsync<TEntity>` | Asynchronous repository for CRUD operations |
| `IUnitOfWork` | Synchronous Unit of Work for transaction management |
| `IUnitOfWorkAsync` | Asynchronous Unit of Work for transaction management |

### Entity Interfaces (`Mvp24Hours.Core.Entities`)

| Class/Interface | Description |
|-----------------|-------------|
| `IEntityBase` | Base interface for all entities |
| `EntityBase<TKey>` | Base entity class with typed ID |
| `IEntityDateLog` | Date-based audit (Created, Modified, Removed) |
| `IEntityLog<TUserKey>` | Full audit with user tracking |

### Business Result (`Mvp24Hours.Core.Contract.ValueObjects.Logic`)

| Interface | Description |
|-----------|-------------|
| `IBusinessResult<T>` | Wraps operation result with success/error info |
| `IPagingResult<T>` | Wraps paginated result with metadata |

### Extension Methods

```csharp
// EF Core
services.AddMvp24HoursDbContext<TContext>();
services.AddMvp24HoursRepositoryAsync();

// MongoDB
services.AddMvp24HoursDbContext(options => { ... });
services.AddMvp24HoursRepositoryMongoDb();

// Redis
services.AddMvp24HoursCachingRedis(connectionString);
```"""

DATABASE_GUIDE = TopicGuide(
    tool_name="mvp24h_database_advisor",
    argument="topic",
    title="Mvp24Hours Database Guide",
    summary=(
        "Mvp24Hours supports relational databases through Entity Framework Core and NoSQL stores "
        "through MongoDB and Redis,\nbehind the same repository and unit of work abstractions."
    ),
    overview_doc="ai-context/database-patterns.md",
    overview_reference=DATABASE_QUICK_REFERENCE,
    topics=(
        Topic(
            key="relational",
            description="SQL Server, PostgreSQL, MySQL configuration with EF Core",
            sources=("database/relational.md",),
            quick_reference=DATABASE_QUICK_REFERENCE,
            related=("efcore-advanced", "entity", "context", "repository", "unit-of-work"),
        ),
        Topic(
            key="nosql",
            description="MongoDB and Redis configuration",
            sources=("database/nosql.md",),
            quick_reference=DATABASE_QUICK_REFERENCE,
            related=("mongodb-advanced", "entity", "repository"),
        ),
        Topic(
            key="repository",
            description="Repository pattern implementation and usage",
            sources=("database/use-repository.md",),
            quick_reference=DATABASE_QUICK_REFERENCE,
            related=("unit-of-work", "entity", "service"),
        ),
        Topic(
            key="unit-of-work",
            description="Unit of Work pattern for transaction management",
            sources=("database/use-unitofwork.md",),
            quick_reference=DATABASE_QUICK_REFERENCE,
            related=("repository", "efcore-advanced"),
        ),
        Topic(
            key="entity",
            description="Entity implementation with audit support",
            sources=("database/use-entity.md",),
            quick_reference=DATABASE_QUICK_REFERENCE,
            related=("context", "repository", "relational", "nosql"),
        ),
        Topic(
            key="context",
            description="DbContext implementation and configuration",
            sources=("database/use-context.md",),
            quick_reference=DATABASE_QUICK_REFERENCE,
            related=("entity", "efcore-advanced", "relational"),
        ),
        Topic(
            key="service",
            description="Service layer using repository pattern",
            sources=("database/use-service.md",),
            quick_reference=DATABASE_QUICK_REFERENCE,
            related=("repository", "unit-of-work"),
        ),
        Topic(
            key="efcore-advanced",
            description="Advanced EF Core features: interceptors, bulk operations, multi-tenancy",
            sources=("database/efcore-advanced.md",),
            quick_reference=DATABASE_QUICK_REFERENCE,
            related=("relational", "context", "repository"),
        ),
        Topic(
            key="mongodb-advanced",
            description="Advanced MongoDB features: GridFS, Change Streams, geospatial queries",
            sources=("database/mongodb-advanced.md",),
            quick_reference=DATABASE_QUICK_REFERENCE,
            related=("nosql", "repository"),
        ),
    ),
)


# AI implementation templates

SK_PACKAGES = """## Required Packages

```xml
<PackageReference Include="Microsoft.SemanticKernel" Version="1.*" />
<PackageReference Include="Microsoft.SemanticKernel.Connectors.OpenAI" Version="1.*" />
```"""

SKG_PACKAGES = """## Required Packages

```xml
<PackageReference Include="Microsoft.SemanticKernel" Version="1.*" />
<PackageReference Include="SemanticKernel.Graph" Version="1.*" />
```"""

AGENT_FRAMEWORK_PACKAGES = """## Required Packages

```xml
<PackageReference Include="Microsoft.Extensions.AI" Version="9.*-*" />
<PackageReference Include="Microsoft.Extensions.AI.OpenAI" Version="9.*-*" />
```"""

_CHAT_COMPLETION = """# Semantic Kernel - Chat Completion Template

## Basic Chat Completion

```csharp
using Microsoft.SemanticKernel;
using Microsoft.SemanticKernel.ChatCompletion;

public class ChatService
{
    private readonly Kernel _kernel;
    private readonly IChatCompletionService _chatService;

    public ChatService(IConfiguration configuration)
    {
        _kernel = Kernel.CreateBuilder()
            .AddOpenAIChatCompletion(
                modelId: configuration["AI:OpenAI:ModelId"]!,
                apiKey: configuration["AI:OpenAI:ApiKey"]!)
            .Build();

        _chatService = _kernel.GetRequiredService<IChatCompletionService>();
    }

    public async Task<string> GetChatResponseAsync(ChatHistory history, string userMessage)
    {
        history.AddUserMessage(userMessage);
        var response = await _chatService.GetChatMessageContentAsync(history);
        history.AddAssistantMessage(response.Content ?? string.Empty);
        return response.Content ?? string.Empty;
    }
}
```

## Streaming Response

```csharp
await foreach (var chunk in _chatService.GetStreamingChatMessageContentsAsync(history))
{
    if (!string.IsNullOrEmpty(chunk.Content))
        yield return chunk.Content;
}
```"""

_RAG_BASIC = """# Semantic Kernel - RAG Basic Template

## Setup with Embeddings

```csharp
var memoryBuilder = new MemoryBuilder();
memoryBuilder.WithOpenAITextEmbeddingGeneration("text-embedding-3-small", apiKey);
memoryBuilder.WithMemoryStore(new VolatileMemoryStore());
_memory = memoryBuilder.Build();

public async Task<string> QueryAsync(string collection, string question, int topK = 3)
{
    var results = await _memory.SearchAsync(collection, question, topK).ToListAsync();
    if (!results.Any())
        return "No relevant information found.";

    var context = string.Join("\\n\\n", results.Select(r => r.Metadata.Text));
    var response = await _kernel.InvokePromptAsync(
        $"Based on the following context, answer the question.\\n\\nContext:\\n{context}\\n\\nQuestion: {question}");
    return response.GetValue<string>() ?? string.Empty;
}
```

## Vector Database Integration (Qdrant)

```csharp
memoryBuilder.WithQdrantMemoryStore("http://localhost:6333", 1536);
```"""

_GRAPH_EXECUTOR = """# Semantic Kernel Graph - Graph Executor Template

## Basic Workflow

```csharp
var executor = new GraphExecutor("ContentWorkflow", "Processes and enhances content");

var analyzeNode = new PromptGraphNode(
    nodeId: "analyze",
    prompt: "Analyze the following content and identify key topics: {{$input}}",
    functionName: "analyzer"
).StoreResultAs("analysis");

var summaryNode = new PromptGraphNode(
    nodeId: "summarize",
    prompt: "Based on this analysis: {{$analysis}}, create a brief summary.",
    functionName: "summarizer"
).StoreResultAs("summary");

executor.AddNode(analyzeNode);
executor.AddNode(summaryNode);
analyzeNode.AddEdge("summarize");
executor.SetStartNode("analyze");

var result = await executor.ExecuteAsync(_kernel, new KernelArguments { ["input"] = input });
```"""

_REACT_AGENT = """# Semantic Kernel Graph - ReAct Agent Template

## ReAct Pattern Implementation

```csharp
var builder = Kernel.CreateBuilder();
builder.AddOpenAIChatCompletion(modelId, apiKey);
builder.AddGraphSupport();
builder.Plugins.AddFromType<SearchPlugin>();
builder.Plugins.AddFromType<CalculatorPlugin>();
var kernel = builder.Build();

var agent = new ReActAgent(kernel, new ReActAgentOptions
{
    MaxIterations = 10,
    SystemPrompt = "Think step by step, use tools when needed, and provide a final answer."
});

var result = await agent.InvokeAsync(question);
return result.FinalAnswer;
```"""

_MULTI_AGENT = """# Semantic Kernel Graph - Multi-Agent Template

## Multi-Agent System

```csharp
_researcher = CreateAgent("Researcher", "Gather information and identify key facts.");
_analyst = CreateAgent("Analyst", "Analyze the research and identify patterns.");
_writer = CreateAgent("Writer", "Turn the analysis into clear, structured content.");
_supervisor = CreateAgent("Supervisor", "Coordinate the team and route tasks.");

var coordinator = new AgentCoordinator(_kernel, _supervisor);
coordinator.AddAgent(_researcher);
coordinator.AddAgent(_analyst);
coordinator.AddAgent(_writer);

var result = await coordinator.ExecuteAsync(task);
```"""

_HUMAN_IN_LOOP = """# Semantic Kernel Graph - Human-in-the-Loop Template

## Human Approval Workflow

```csharp
var generateNode = new PromptGraphNode(
    "generate", "Improve and expand this content: {{$input}}", "generator"
).StoreResultAs("generated_content");

var reviewNode = new HumanInputNode(
    "human-review",
    prompt: "Please review the generated content and approve or request changes.",
    timeoutMinutes: 60
).StoreResultAs("review_decision");

var routeNode = new ConditionalGraphNode("route-decision")
    .AddCondition("review_decision.approved == true", "finalize")
    .AddCondition("review_decision.changes_requested == true", "revise")
    .SetDefaultRoute("reject");

// Start pauses at human-review; resume with the reviewer's decision
var state = await executor.StartAsync(_kernel, arguments);
state = await executor.ResumeAsync(_kernel, new KernelArguments { ["review_decision"] = decision });
```"""

AI_USE_CASE_MATRIX = """## AI Decision Matrix

| Use Case | Recommended Approach | Template |
|----------|---------------------|----------|
| Simple chatbot | Semantic Kernel | Chat Completion |
| Q&A over documents | Semantic Kernel | RAG Basic |
| Tool-augmented AI | Semantic Kernel | Plugins & Functions |
| Complex reasoning | SK Graph | Chain of Thought |
| Agent with tools | SK Graph | ReAct Agent |
| Multi-step workflows | SK Graph | Graph Executor |
| Persistent conversations | SK Graph | Chatbot with Memory |
| Document processing | SK Graph | Document Pipeline |
| Multiple AI agents | SK Graph | Multi-Agent |
| Human oversight needed | SK Graph | Human-in-the-Loop |
| Enterprise agents | Agent Framework | Agent Framework Basic |"""

AI_TEMPLATE_GUIDE = TopicGuide(
    tool_name="mvp24h_ai_implementation",
    argument="template",
    title="AI Implementation Templates",
    summary=(
        "Templates for adding AI capabilities to .NET applications with Semantic Kernel,\n"
        "Semantic Kernel Graph and the Microsoft Agent Framework."
    ),
    overview_doc="ai-context/ai-decision-matrix.md",
    overview_reference=AI_USE_CASE_MATRIX,
    topics=(
        # Semantic Kernel
        Topic(
            key="chat-completion",
            description="Basic conversational AI",
            sources=("ai-context/template-sk-chat-completion.md",),
            inline=_CHAT_COMPLETION,
            quick_reference=SK_PACKAGES,
            related=("plugins", "chatbot-memory", "streaming"),
        ),
        Topic(
            key="plugins",
            description="Tool integration with function calling",
            sources=("ai-context/template-sk-plugins.md",),
            quick_reference=SK_PACKAGES,
            related=("chat-completion", "react-agent"),
        ),
        Topic(
            key="rag-basic",
            description="Document Q&A with retrieval",
            sources=("ai-context/template-sk-rag-basic.md",),
            inline=_RAG_BASIC,
            quick_reference=SK_PACKAGES,
            related=("document-pipeline", "chat-completion"),
        ),
        Topic(
            key="planners",
            description="Task decomposition (preview)",
            sources=("ai-context/template-sk-planners.md",),
            quick_reference=SK_PACKAGES,
            related=("plugins", "chain-of-thought"),
        ),
        # Semantic Kernel Graph
        Topic(
            key="graph-executor",
            description="Workflow orchestration",
            sources=("ai-context/template-skg-graph-executor.md",),
            inline=_GRAPH_EXECUTOR,
            quick_reference=SKG_PACKAGES,
            related=("checkpointing", "streaming", "observability"),
        ),
        Topic(
            key="react-agent",
            description="Reasoning + Acting loops",
            sources=("ai-context/template-skg-react-agent.md",),
            inline=_REACT_AGENT,
            quick_reference=SKG_PACKAGES,
            related=("plugins", "chain-of-thought", "multi-agent"),
        ),
        Topic(
            key="chain-of-thought",
            description="Step-by-step reasoning",
            sources=("ai-context/template-skg-chain-of-thought.md",),
            quick_reference=SKG_PACKAGES,
            related=("react-agent", "graph-executor"),
        ),
        Topic(
            key="chatbot-memory",
            description="Contextual conversations",
            sources=("ai-context/template-skg-chatbot-memory.md",),
            quick_reference=SKG_PACKAGES,
            related=("chat-completion", "checkpointing"),
        ),
        Topic(
            key="multi-agent",
            description="Coordinated agent systems",
            sources=("ai-context/template-skg-multi-agent.md",),
            inline=_MULTI_AGENT,
            quick_reference=SKG_PACKAGES,
            related=("react-agent", "graph-executor", "agent-multi"),
        ),
        Topic(
            key="document-pipeline",
            description="Document processing workflows",
            sources=("ai-context/template-skg-document-pipeline.md",),
            quick_reference=SKG_PACKAGES,
            related=("rag-basic", "graph-executor"),
        ),
        Topic(
            key="human-in-loop",
            description="Approval workflows",
            sources=("ai-context/template-skg-human-in-loop.md",),
            inline=_HUMAN_IN_LOOP,
            quick_reference=SKG_PACKAGES,
            related=("checkpointing", "graph-executor"),
        ),
        Topic(
            key="checkpointing",
            description="State persistence",
            sources=("ai-context/template-skg-checkpointing.md",),
            quick_reference=SKG_PACKAGES,
            related=("graph-executor", "human-in-loop"),
        ),
        Topic(
            key="streaming",
            description="Real-time events",
            sources=("ai-context/template-skg-streaming.md",),
            quick_reference=SKG_PACKAGES,
            related=("graph-executor", "observability"),
        ),
        Topic(
            key="observability",
            description="Metrics and monitoring",
            sources=("ai-context/template-skg-observability.md",),
            quick_reference=SKG_PACKAGES,
            related=("streaming", "graph-executor"),
        ),
        # Microsoft Agent Framework
        Topic(
            key="agent-basic",
            description="Simple agent creation",
            sources=("ai-context/template-agent-framework-basic.md",),
            quick_reference=AGENT_FRAMEWORK_PACKAGES,
            related=("agent-workflows", "agent-middleware"),
        ),
        Topic(
            key="agent-workflows",
            description="Workflow-based agents",
            sources=("ai-context/template-agent-framework-workflows.md",),
            quick_reference=AGENT_FRAMEWORK_PACKAGES,
            related=("agent-basic", "agent-multi"),
        ),
        Topic(
            key="agent-multi",
            description="Agent orchestration",
            sources=("ai-context/template-agent-framework-multi-agent.md",),
            quick_reference=AGENT_FRAMEWORK_PACKAGES,
            related=("agent-workflows", "multi-agent"),
        ),
        Topic(
            key="agent-middleware",
            description="Request/response processing",
            sources=("ai-context/template-agent-framework-middleware.md",),
            quick_reference=AGENT_FRAMEWORK_PACKAGES,
            related=("agent-basic",),
        ),
    ),
)
