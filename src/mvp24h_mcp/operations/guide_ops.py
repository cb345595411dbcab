"""
Topic guide operations for the docs MCP server.

Every guide tool resolves a topic key into a markdown document: the topic's
documentation, its quick reference and links to related topics.
"""
from typing import Optional

from mcp.server.fastmcp import FastMCP

from ..constants import OVERVIEW_TOPIC, SECTION_SEPARATOR
from ..utils.errors import with_error_handling
from ..utils.events import log_event
from ..utils.doc_store import DocStore, get_doc_store, missing_placeholder
from ..utils.formatters import bullet_list, format_title, join_sections, markdown_table
from .guide_types import Topic, TopicGuide, is_document_reference
from .guide_catalog import get_guide


def render_not_found(guide: TopicGuide, topic_key: str) -> str:
    """
    Build the message returned for an unknown topic key.

    Args:
        guide: Guide that was asked
        topic_key: Key as received from the caller

    Returns:
        str: Message naming the key and listing every valid key
    """
    valid_keys = ", ".join([OVERVIEW_TOPIC] + guide.topic_keys())
    return (
        f'{guide.argument.capitalize()} "{topic_key}" not found.\n\n'
        f"## Available {format_title(guide.argument)}s\n\n"
        f"{valid_keys}\n\n"
        f"Use `{guide.call(OVERVIEW_TOPIC)}` for an overview of all {guide.argument}s.\n"
    )


def render_related(guide: TopicGuide, topic: Topic) -> Optional[str]:
    """Build the Related Topics section, or None when there is nothing to link."""
    if not topic.related and not guide.other_tools:
        return None

    items = []
    for reference in topic.related:
        if is_document_reference(reference):
            items.append(f"`{reference}`")
        else:
            related = guide.get_topic(reference)
            description = related.description if related else reference
            items.append(f"`{guide.call(reference)}` - {description}")

    parts = ["## Related Topics"]
    if items:
        parts.append(bullet_list(items))
    if guide.other_tools:
        parts.append("### Other Tools")
        parts.append(bullet_list(f"`{name}` - {description}" for name, description in guide.other_tools))
    return "\n\n".join(parts)


async def render_overview(guide: TopicGuide, store: DocStore) -> str:
    """Build the overview document of a guide."""
    rows = [(f"`{t.key}`", t.description) for t in guide.listed_topics()]
    body = [
        f"# {guide.title}",
        f"## Overview\n\n{guide.summary}",
        f"## Available {format_title(guide.argument)}s\n\n"
        + markdown_table([format_title(guide.argument), "Description"], rows),
    ]
    if guide.overview_reference:
        body.append(guide.overview_reference)
    body.append(f'Use `{guide.call("...")}` for detailed documentation on each {guide.argument}.')

    additional = None
    if guide.overview_doc:
        content = await store.fetch(guide.overview_doc)
        if content:
            additional = "## Additional Context\n\n" + content

    return join_sections(["\n\n".join(body), additional]) + "\n"


async def load_topic_content(topic: Topic, store: DocStore) -> str:
    """
    Load the primary content of a topic.

    Sources are read in order; a source that cannot be loaded is replaced by a
    placeholder comment. When no source could be loaded the inline content is
    used instead.
    """
    results = await store.fetch_many(list(topic.sources))
    if any(r.ok for r in results):
        return SECTION_SEPARATOR.join(
            r.content if r.ok else missing_placeholder(r.path) for r in results
        )
    if topic.inline:
        return topic.inline

    lines = [missing_placeholder(r.path) for r in results]
    lines.append(f"# {format_title(topic.key)}\n\nDocumentation not yet available for this topic.")
    return "\n\n".join(lines)


async def resolve_topic(guide: TopicGuide, topic_key: Optional[str] = None,
                        store: Optional[DocStore] = None) -> str:
    """
    Resolve a topic key of a guide into a markdown document.

    Args:
        guide: Guide to look the topic up in
        topic_key: Topic key; None or "overview" selects the overview
        store: Document store, the shared store when omitted

    Returns:
        str: Markdown document; unknown keys produce a not-found message
    """
    store = store or get_doc_store()

    if not topic_key or topic_key == OVERVIEW_TOPIC:
        return await render_overview(guide, store)

    topic = guide.get_topic(topic_key)
    if topic is None:
        log_event("unknown_topic", {"tool": guide.tool_name, "topic": topic_key})
        return render_not_found(guide, topic_key)

    content = await load_topic_content(topic, store)
    return join_sections([content, topic.quick_reference, render_related(guide, topic)]) + "\n"


async def run_guide(tool_name: str, topic_key: Optional[str] = None) -> str:
    """Resolve a topic for the guide registered under ``tool_name``."""
    guide = get_guide(tool_name)
    if guide is None:
        raise ValueError(f"Unknown guide: {tool_name}")
    return await resolve_topic(guide, topic_key)


def register_guide_operations(mcp: FastMCP) -> None:
    """
    Register topic guide operations with the MCP server.

    Args:
        mcp: The MCP server instance
    """

    @mcp.tool(name="mvp24h_core_patterns")
    @with_error_handling
    async def core_patterns(topic: str = "overview") -> str:
        """
        Get documentation for Mvp24Hours core module patterns.

        Args:
            topic: overview, guard-clauses, value-objects, strongly-typed-ids,
                functional-patterns, smart-enums, entity-interfaces,
                infrastructure-abstractions or exceptions

        Returns:
            str: Topic documentation with quick reference and related topics
        """
        return await run_guide("mvp24h_core_patterns", topic)

    @mcp.tool(name="mvp24h_infrastructure_guide")
    @with_error_handling
    async def infrastructure_guide(topic: str = "overview") -> str:
        """
        Get documentation for infrastructure patterns: pipelines, caching, Web API,
        CronJobs and application services.

        Args:
            topic: overview, pipeline, caching, caching-advanced, webapi, webapi-advanced,
                cronjob, cronjob-advanced, cronjob-observability, cronjob-resilience
                or application-services

        Returns:
            str: Topic documentation with quick reference and related topics
        """
        return await run_guide("mvp24h_infrastructure_guide", topic)

    @mcp.tool(name="mvp24h_reference_guide")
    @with_error_handling
    async def reference_guide(topic: str = "overview") -> str:
        """
        Get documentation for mapping, validation, specifications, API documentation,
        migration, API versioning, error handling and telemetry.

        Args:
            topic: overview, mapping, validation, specification, documentation, migration,
                api-versioning, error-handling or telemetry

        Returns:
            str: Topic documentation with quick reference and related topics
        """
        return await run_guide("mvp24h_reference_guide", topic)

    @mcp.tool(name="mvp24h_cqrs_guide")
    @with_error_handling
    async def cqrs_guide(topic: str = "overview") -> str:
        """
        Get documentation for the Mvp24Hours CQRS/Mediator implementation.

        Args:
            topic: overview, commands, queries, notifications, domain-events,
                integration-events, behaviors, validation, saga, event-sourcing,
                resilience, multi-tenancy, scheduled-commands, extensibility,
                best-practices, api-reference or migration-mediatr

        Returns:
            str: Topic documentation with related topics
        """
        return await run_guide("mvp24h_cqrs_guide", topic)

    @mcp.tool(name="mvp24h_testing_patterns")
    @with_error_handling
    async def testing_patterns(topic: str = "overview") -> str:
        """
        Get testing patterns for .NET applications.

        Args:
            topic: overview, unit-testing, integration-testing, mocking, test-containers,
                api-testing or architecture-testing
        """
        return await run_guide("mvp24h_testing_patterns", topic)

    @mcp.tool(name="mvp24h_security_patterns")
    @with_error_handling
    async def security_patterns(topic: str = "overview") -> str:
        """
        Get security patterns for ASP.NET Core applications.

        Args:
            topic: overview, authentication, authorization, jwt, data-protection,
                input-validation or secrets-management
        """
        return await run_guide("mvp24h_security_patterns", topic)

    @mcp.tool(name="mvp24h_containerization_patterns")
    @with_error_handling
    async def containerization_patterns(topic: str = "overview") -> str:
        """
        Get Docker and Kubernetes patterns for .NET applications.

        Args:
            topic: overview, dockerfile, docker-compose, kubernetes, health-checks
                or configuration
        """
        return await run_guide("mvp24h_containerization_patterns", topic)

    @mcp.tool(name="mvp24h_messaging_patterns")
    @with_error_handling
    async def messaging_patterns(pattern: str = "overview") -> str:
        """
        Get messaging and background processing patterns.

        Args:
            pattern: overview, rabbitmq, hosted-service, outbox or channels
        """
        return await run_guide("mvp24h_messaging_patterns", pattern)

    @mcp.tool(name="mvp24h_observability_setup")
    @with_error_handling
    async def observability_setup(component: str = "overview") -> str:
        """
        Get observability setup with OpenTelemetry.

        Args:
            component: overview, logging, tracing, metrics, exporters or migration
        """
        return await run_guide("mvp24h_observability_setup", component)

    @mcp.tool(name="mvp24h_modernization_guide")
    @with_error_handling
    async def modernization_guide(feature: str = "overview") -> str:
        """
        Get documentation for the .NET 9 features adopted by Mvp24Hours.

        Args:
            feature: overview, http-resilience, generic-resilience, rate-limiting,
                hybrid-cache, output-caching, time-provider, periodic-timer,
                keyed-services, options-configuration, problem-details, minimal-apis,
                native-openapi, source-generators, aspire, channels, dotnet9-features
                or migration-guide
        """
        return await run_guide("mvp24h_modernization_guide", feature)
