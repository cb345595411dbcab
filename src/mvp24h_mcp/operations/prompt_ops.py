"""
Prompt templates for the Mvp24Hours docs MCP server.

Prompts return a ready-made user message that points the agent at the
tools holding the relevant documentation.
"""
from types import MappingProxyType

from mcp.server.fastmcp import FastMCP

from ..constants import OVERVIEW_TOPIC

# Prompt component name -> mvp24h_cqrs_guide topic
CQRS_COMPONENT_TOPICS = MappingProxyType({
    "command": "commands",
    "query": "queries",
    "notification": "notifications",
    "domain-event": "domain-events",
    "pipeline-behavior": "behaviors",
})


def create_dotnet_project_prompt(project_type: str = "api", architecture: str = "simple-nlayers") -> str:
    return (
        f"I want to create a new .NET {project_type} project using the {architecture} "
        "architecture pattern with Mvp24Hours framework.\n\n"
        "Please help me:\n"
        "1. Set up the project structure\n"
        "2. Configure the necessary NuGet packages\n"
        "3. Implement the base architecture\n"
        "4. Add common patterns (repository, validation, logging)\n\n"
        "Use the mvp24h_get_started and mvp24h_architecture_advisor tools, then "
        f'mvp24h_get_template({{ template_name: "{architecture}" }}) to get the relevant documentation.'
    )


def implement_cqrs_prompt(component: str = "command") -> str:
    topic = CQRS_COMPONENT_TOPICS.get(component, OVERVIEW_TOPIC)
    return (
        f"I want to implement the CQRS {component} pattern in my .NET application.\n\n"
        "Please help me:\n"
        f"1. Understand the {component} pattern\n"
        "2. Create the necessary classes and interfaces\n"
        "3. Configure the Mvp24Hours mediator pipeline\n"
        "4. Add validation and error handling\n\n"
        f'Use the mvp24h_cqrs_guide tool with topic "{topic}" to get the implementation details.'
    )


def setup_database_prompt(database: str = "sqlserver", orm: str = "efcore") -> str:
    return (
        f"I want to setup {database} database using {orm} in my .NET application.\n\n"
        "Please help me:\n"
        "1. Configure the database connection\n"
        "2. Implement the repository pattern\n"
        "3. Setup Unit of Work\n"
        "4. Add migrations (if applicable)\n\n"
        "Use the mvp24h_database_advisor tool to get the configuration and implementation details."
    )


def add_ai_capabilities_prompt(approach: str = "semantic-kernel", use_case: str = "chatbot") -> str:
    return (
        f"I want to add AI capabilities to my .NET application using {approach} for a {use_case} use case.\n\n"
        "Please help me:\n"
        "1. Choose the right AI approach\n"
        "2. Configure the necessary packages\n"
        "3. Implement the AI integration\n"
        "4. Add proper error handling and observability\n\n"
        "Use the mvp24h_ai_implementation tool to get the implementation template and guidance."
    )


def setup_observability_prompt(component: str = "all", exporter: str = "jaeger") -> str:
    signals = "logging, tracing, and metrics" if component == "all" else component
    return (
        f"I want to setup {component} observability in my .NET application using {exporter} as the exporter.\n\n"
        "Please help me:\n"
        "1. Configure OpenTelemetry\n"
        f"2. Setup {signals}\n"
        f"3. Configure the {exporter} exporter\n"
        "4. Add proper instrumentation\n\n"
        "Use the mvp24h_observability_setup tool to get the configuration details."
    )


def modernize_dotnet_prompt(feature: str = "resilience") -> str:
    return (
        f"I want to modernize my .NET application using the {feature} feature from .NET 9.\n\n"
        "Please help me:\n"
        f"1. Understand the {feature} feature\n"
        "2. Configure the necessary packages\n"
        "3. Implement the pattern\n"
        "4. Add best practices\n\n"
        "Use the mvp24h_modernization_guide tool to get the implementation details."
    )


def containerize_app_prompt(target: str = "dockerfile") -> str:
    return (
        f"I want to containerize my .NET application using {target}.\n\n"
        "Please help me:\n"
        f"1. Create an optimized {target} configuration\n"
        "2. Setup multi-stage builds (if applicable)\n"
        "3. Configure health checks\n"
        "4. Add production best practices\n\n"
        "Use the mvp24h_containerization_patterns tool to get the configuration templates."
    )


def register_prompts(mcp: FastMCP) -> None:
    """
    Register prompt templates with the MCP server.

    Args:
        mcp: The MCP server instance
    """

    @mcp.prompt(name="create-dotnet-project")
    def create_dotnet_project(project_type: str, architecture: str = "simple-nlayers") -> str:
        """
        Guide to create a new .NET project with Mvp24Hours framework.

        Args:
            project_type: api, webapp, console or worker
            architecture: minimal-api, simple-nlayers, complex-nlayers, cqrs, hexagonal,
                clean-architecture, ddd or microservices
        """
        return create_dotnet_project_prompt(project_type or "api", architecture or "simple-nlayers")

    @mcp.prompt(name="implement-cqrs")
    def implement_cqrs(component: str) -> str:
        """
        Guide to implement a CQRS component with the Mvp24Hours mediator.

        Args:
            component: command, query, notification, domain-event or pipeline-behavior
        """
        return implement_cqrs_prompt(component or "command")

    @mcp.prompt(name="setup-database")
    def setup_database(database: str, orm: str = "efcore") -> str:
        """
        Guide to setup database with Mvp24Hours repository pattern.

        Args:
            database: sqlserver, postgresql, mysql, mongodb or redis
            orm: efcore, dapper or hybrid
        """
        return setup_database_prompt(database or "sqlserver", orm or "efcore")

    @mcp.prompt(name="add-ai-capabilities")
    def add_ai_capabilities(approach: str, use_case: str = "chatbot") -> str:
        """
        Guide to add AI capabilities to a .NET application.

        Args:
            approach: semantic-kernel, sk-graph or agent-framework
            use_case: chatbot, rag, multi-agent or workflow
        """
        return add_ai_capabilities_prompt(approach or "semantic-kernel", use_case or "chatbot")

    @mcp.prompt(name="setup-observability")
    def setup_observability(component: str, exporter: str = "jaeger") -> str:
        """
        Guide to setup logging, tracing, and metrics.

        Args:
            component: logging, tracing, metrics or all
            exporter: jaeger, zipkin, prometheus or application-insights
        """
        return setup_observability_prompt(component or "all", exporter or "jaeger")

    @mcp.prompt(name="modernize-dotnet")
    def modernize_dotnet(feature: str) -> str:
        """
        Guide to modernize a .NET application with .NET 9 features.

        Args:
            feature: resilience, caching, keyed-services, minimal-apis or aspire
        """
        return modernize_dotnet_prompt(feature or "resilience")

    @mcp.prompt(name="containerize-app")
    def containerize_app(target: str) -> str:
        """
        Guide to containerize a .NET application with Docker and Kubernetes.

        Args:
            target: dockerfile, docker-compose or kubernetes
        """
        return containerize_app_prompt(target or "dockerfile")
