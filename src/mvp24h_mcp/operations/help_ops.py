"""
Help operations for the Mvp24Hours docs MCP server.

This module contains tools for providing help and documentation.
"""
from mcp.server.fastmcp import FastMCP

from ..utils.errors import with_error_handling
from .help_texts import HELP_TEXTS, GUIDE_NOTES
from ..constants import ALL_OPERATIONS, GUIDE_OPERATIONS


def register_help_operations(mcp: FastMCP) -> None:
    """
    Register help operations with the MCP server.

    Args:
        mcp: The MCP server instance
    """
    @mcp.tool()
    @with_error_handling
    async def help(topic: str = "tools") -> str:
        """
        Get help information about available tools.

        Args:
            topic: Topic to get help on (default: "tools")

        Returns:
            str: Formatted help information
        """
        return get_help(topic)


def get_help(topic: str = "tools") -> str:
    """
    Get help on a tool, or the tool overview.

    Args:
        topic: "tools" or a tool name

    Returns:
        str: Formatted help information
    """
    if not topic or topic == "tools":
        return get_tools_help()
    elif topic in ALL_OPERATIONS:
        text = HELP_TEXTS.get(topic, f"No help available for tool: {topic}")
        if topic in GUIDE_OPERATIONS:
            text += GUIDE_NOTES
        return text
    else:
        return f"Unknown help topic: {topic}. Valid topics are: tools, " + ", ".join(ALL_OPERATIONS)


def get_tools_help() -> str:
    """
    Get help information about all available tools.

    Returns:
        str: Formatted help information
    """
    return """
Mvp24Hours Docs - Available Tools:

Getting Started:
- mvp24h_get_started: Framework overview, decision tree and quick start
- mvp24h_architecture_advisor: Recommend an architecture template from project characteristics
- mvp24h_database_advisor: Recommend a database provider and data access patterns
- mvp24h_ai_implementation: AI approach, templates and recommendations by use case
- mvp24h_get_template: Get the document of an architecture template
- mvp24h_build_context: Architecture, resources and database provider context in one call

Framework Guides:
- mvp24h_core_patterns: Guard clauses, value objects, entities, exceptions
- mvp24h_infrastructure_guide: Pipelines, caching, Web API, CronJobs, application services
- mvp24h_reference_guide: Mapping, validation, specifications, error handling
- mvp24h_modernization_guide: .NET 9 features (resilience, HybridCache, TimeProvider, ...)

Practice Guides:
- mvp24h_cqrs_guide: CQRS/Mediator commands, queries, events and behaviors
- mvp24h_testing_patterns: Unit, integration and architecture testing
- mvp24h_security_patterns: Authentication, authorization, JWT, secrets
- mvp24h_containerization_patterns: Docker, Compose, Kubernetes, health checks
- mvp24h_messaging_patterns: RabbitMQ, hosted services, outbox, channels
- mvp24h_observability_setup: Logging, tracing, metrics with OpenTelemetry

Help:
- help: Get help information about available tools

For detailed help on a specific tool, use the tool name as the topic:
help(topic="tool_name")
"""
