"""
Template operations for the docs MCP server.

This module serves architecture template documents and builds the combined
implementation context for an architecture and a set of resources.
"""
from types import MappingProxyType
from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from ..utils.errors import with_error_handling
from ..utils.doc_store import DocStore, get_doc_store
from ..utils.formatters import bullet_list, checklist, code_block, join_sections, markdown_table
from .template_catalog import INTERFACE_GROUPS, TEMPLATES, Template, get_template_info

# Documents appended to the context for each requested resource
RESOURCE_DOCS = MappingProxyType({
    "database": ("ai-context/database-patterns.md", "database/use-entity.md", "database/use-context.md"),
    "caching": ("caching-advanced.md", "modernization/hybrid-cache.md"),
    "observability": (
        "ai-context/observability-patterns.md", "observability/logging.md", "observability/tracing.md",
    ),
    "messaging": ("ai-context/messaging-patterns.md", "broker.md"),
    "security": ("ai-context/security-patterns.md",),
    "testing": ("ai-context/testing-patterns.md",),
    "containerization": ("ai-context/containerization-patterns.md",),
})

RESOURCE_TITLES = MappingProxyType({
    "database": "Database Patterns",
    "caching": "Caching Patterns",
    "observability": "Observability",
    "messaging": "Messaging Patterns",
    "security": "Security Patterns",
    "testing": "Testing Patterns",
    "containerization": "Containerization",
})

RESOURCE_TOOLS = MappingProxyType({
    "database": 'mvp24h_database_advisor({ patterns: ["repository", "unit-of-work"] })',
    "caching": 'mvp24h_infrastructure_guide({ topic: "caching" })',
    "observability": 'mvp24h_observability_setup({ component: "overview" })',
    "messaging": 'mvp24h_messaging_patterns({ pattern: "overview" })',
    "security": 'mvp24h_security_patterns({ topic: "overview" })',
    "testing": 'mvp24h_testing_patterns({ topic: "overview" })',
    "containerization": 'mvp24h_containerization_patterns({ topic: "overview" })',
})

RESOURCE_CHECKLISTS = MappingProxyType({
    "database": (
        "Configure DbContext", "Create Entity Configurations",
        "Register Repositories", "Create Initial Migration",
    ),
    "caching": ("Configure HybridCache or Redis", "Add Cache Keys Strategy", "Implement Cache Invalidation"),
    "observability": (
        "Configure OpenTelemetry", "Setup Logging Provider",
        "Configure Tracing Exporter", "Add Metrics Collection",
    ),
    "messaging": (
        "Configure RabbitMQ Connection", "Create Message Publishers",
        "Create Message Consumers", "Setup Dead Letter Queue",
    ),
    "security": (
        "Configure Authentication", "Setup Authorization Policies",
        "Configure JWT (if needed)", "Add Input Validation",
    ),
    "testing": (
        "Create Unit Test Project", "Create Integration Test Project",
        "Setup Test Fixtures", "Configure Test Containers (if needed)",
    ),
    "containerization": (
        "Create Dockerfile", "Configure docker-compose.yml",
        "Add Health Checks", "Create Kubernetes Manifests (if needed)",
    ),
})

DATABASE_PROVIDER_DOCS = MappingProxyType({
    "postgresql": ("database/relational.md", "database/efcore-advanced.md"),
    "sqlserver": ("database/relational.md", "database/efcore-advanced.md"),
    "mysql": ("database/relational.md", "database/efcore-advanced.md"),
    "mongodb": ("database/nosql.md", "database/mongodb-advanced.md"),
    "redis": ("database/nosql.md", "caching-advanced.md"),
})

TEMPLATE_RELATED_TOOLS = (
    "`mvp24h_architecture_advisor`: Get architecture recommendations",
    "`mvp24h_database_advisor`: Choose the database provider and data access patterns",
    "`mvp24h_build_context`: Combine the template with database, caching and other resources",
    "`mvp24h_observability_setup`: Add telemetry",
)


def _short_description(template: Template) -> str:
    return template.description.split(". ")[0].rstrip(".")


def render_template_not_found(template_name: str) -> str:
    rows = [(f"`{t.key}`", _short_description(t)) for t in TEMPLATES.values()]
    return (
        "# Template Not Found\n\n"
        f'Template "{template_name}" not found.\n\n'
        "## Available Templates\n\n"
        + markdown_table(["Name", "Description"], rows)
        + "\n\n## Usage Example\n\n"
        + code_block('mvp24h_get_template({ template_name: "clean-architecture" })')
        + "\n"
    )


def render_inline_template(template: Template) -> str:
    """
    Build a template document from the catalog metadata.

    Used when the template document is not in the docs directory.
    """
    return "\n\n".join([
        f"# Template: {template.name}",
        template.description,
        "## Project Structure\n\n" + code_block(template.structure),
        "## Characteristics\n\n" + bullet_list(template.characteristics),
        "## NuGet Packages\n\n" + code_block(template.package_references(), "xml"),
        "## Implementation Checklist\n\n" + checklist(template.checklist),
    ])


async def get_template(template_name: str, store: Optional[DocStore] = None) -> str:
    """
    Get the document of an architecture template.

    Args:
        template_name: Template identifier, e.g. "clean-architecture"
        store: Document store, the shared store when omitted

    Returns:
        str: Template document, the catalog version when the docs directory
        does not have it, or a not-found listing
    """
    template = get_template_info(template_name)
    if template is None:
        return render_template_not_found(template_name)

    store = store or get_doc_store()
    content = await store.fetch(template.doc_path)
    if content:
        body = f"# Template: {template.name}\n\n{content}"
    else:
        body = render_inline_template(template)

    related = "## Related Tools\n\n" + bullet_list(TEMPLATE_RELATED_TOOLS)
    return join_sections([body, related]) + "\n"


def render_architecture_not_found(architecture: str) -> str:
    lines = [f'Architecture "{architecture}" not found.', "", "## Available Architectures", ""]
    lines.extend(f"- `{t.key}` - {t.name}" for t in TEMPLATES.values())
    lines.extend([
        "",
        "## Usage Example",
        "",
        code_block('mvp24h_build_context({\n  architecture: "cqrs",\n'
                   '  resources: ["database", "observability"],\n'
                   '  database_provider: "postgresql"\n})'),
    ])
    return "\n".join(lines) + "\n"


def _unique(values: Optional[List[str]]) -> List[str]:
    seen = []
    for value in values or []:
        if value not in seen:
            seen.append(value)
    return seen


def _implementation_checklist(template: Template, resources: List[str], database_provider: Optional[str]) -> str:
    parts = [checklist(template.checklist)]
    if "database" in resources or database_provider:
        parts.append("**Database:**\n" + checklist(RESOURCE_CHECKLISTS["database"]))
    for resource in resources:
        if resource != "database" and resource in RESOURCE_CHECKLISTS:
            parts.append(f"**{RESOURCE_TITLES[resource]}:**\n" + checklist(RESOURCE_CHECKLISTS[resource]))
    return "\n\n".join(parts)


async def build_context(
    architecture: str,
    resources: Optional[List[str]] = None,
    database_provider: Optional[str] = None,
    store: Optional[DocStore] = None,
) -> str:
    """
    Build the complete implementation context for an architecture.

    Unknown resources and database providers are ignored. Documents missing
    from the docs directory are skipped.

    Args:
        architecture: Template identifier
        resources: Any of database, caching, observability, messaging,
            security, testing, containerization
        database_provider: postgresql, sqlserver, mysql, mongodb or redis
        store: Document store, the shared store when omitted

    Returns:
        str: Markdown context document
    """
    template = get_template_info(architecture)
    if template is None:
        return render_architecture_not_found(architecture)

    store = store or get_doc_store()
    resources = [r for r in _unique(resources) if r in RESOURCE_DOCS]

    sections = [
        f"# Complete Context: {template.name} Architecture\n\n"
        "This document provides complete context for implementing a .NET application "
        f"using the **{template.name}** architecture pattern.\n\n"
        "## Quick Reference\n\n### NuGet Packages\n\n"
        + bullet_list(f"`{p.partition(' ')[0]}`" for p in template.packages)
    ]

    foundation = await store.fetch_existing(template.context_docs)
    if foundation:
        sections.append("## Architecture Foundation\n\n" + foundation)

    if database_provider in DATABASE_PROVIDER_DOCS:
        provider_docs = await store.fetch_existing(DATABASE_PROVIDER_DOCS[database_provider])
        if provider_docs:
            sections.append(f"## Database Configuration: {database_provider.upper()}\n\n{provider_docs}")

    for resource in resources:
        resource_docs = await store.fetch_existing(RESOURCE_DOCS[resource])
        if resource_docs:
            sections.append(f"## {RESOURCE_TITLES[resource]}\n\n{resource_docs}")

    sections.append(
        "## Key Interfaces Reference\n\n"
        + "\n\n".join(INTERFACE_GROUPS[group] for group in template.interface_groups)
    )

    tools = list(template.related_tools)
    wanted = list(resources)
    if database_provider and "database" not in wanted:
        wanted.insert(0, "database")
    for resource in wanted:
        if RESOURCE_TOOLS[resource] not in tools:
            tools.append(RESOURCE_TOOLS[resource])

    sections.append(
        "## Next Steps\n\n### Related Tools\n\n"
        "Use these tools to get more detailed documentation:\n\n"
        + bullet_list(f"`{tool}`" for tool in tools)
        + "\n\n### Implementation Checklist\n\n"
        + _implementation_checklist(template, resources, database_provider)
    )
    return join_sections(sections) + "\n"


def register_template_operations(mcp: FastMCP) -> None:
    """
    Register template operations with the MCP server.

    Args:
        mcp: The MCP server instance
    """

    @mcp.tool(name="mvp24h_get_template")
    @with_error_handling
    async def get_template_tool(template_name: str) -> str:
        """
        Get the document of an architecture template: structure, packages and
        implementation checklist.

        Args:
            template_name: minimal-api, simple-nlayers, complex-nlayers, cqrs,
                event-driven, hexagonal, clean-architecture, ddd or microservices

        Returns:
            str: Template document
        """
        return await get_template(template_name)

    @mcp.tool(name="mvp24h_build_context")
    @with_error_handling
    async def build_context_tool(
        architecture: str,
        resources: Optional[List[str]] = None,
        database_provider: Optional[str] = None,
    ) -> str:
        """
        Build the complete context for implementing an architecture in one call.

        Args:
            architecture: Template identifier (see mvp24h_get_template)
            resources: Any of database, caching, observability, messaging,
                security, testing, containerization
            database_provider: postgresql, sqlserver, mysql, mongodb or redis

        Returns:
            str: Architecture foundation, resource documentation, key interfaces
            and implementation checklist
        """
        return await build_context(architecture, resources, database_provider)
