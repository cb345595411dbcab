"""
Database advisor operations for the docs MCP server.

This module picks a database provider and the data access patterns for a
project from the kind of data it stores and its requirements, and serves
the database documentation topics.
"""
from types import MappingProxyType
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Tuple

from mcp.server.fastmcp import FastMCP

from ..constants import DATA_TYPES, DATABASE_PATTERNS, DATABASE_PROVIDERS, DATABASE_REQUIREMENTS
from ..utils.errors import with_error_handling
from ..utils.doc_store import DocStore, get_doc_store
from ..utils.formatters import bullet_list, join_sections, markdown_table
from .advisor_guides import DATABASE_GUIDE, DATABASE_QUICK_REFERENCE
from .guide_ops import render_related, resolve_topic
from .template_ops import DATABASE_PROVIDER_DOCS


@dataclass(frozen=True)
class ProviderInfo:
    name: str
    reasoning: str


PROVIDERS = MappingProxyType({
    "sqlserver": ProviderInfo(
        "SQL Server with Entity Framework Core",
        "Enterprise-grade relational database with excellent .NET integration. Best for Windows "
        "environments and Azure deployments. Supports ACID transactions, complex queries, and relationships.",
    ),
    "postgresql": ProviderInfo(
        "PostgreSQL with Entity Framework Core",
        "Open-source, highly performant relational database. Excellent for complex queries, JSON support, "
        "and full-text search. Cost-effective in cloud environments and supports advanced features like "
        "JSONB columns.",
    ),
    "mysql": ProviderInfo(
        "MySQL with Entity Framework Core",
        "Popular open-source database with wide hosting support. Good for web applications with moderate "
        "requirements and cost-sensitive deployments.",
    ),
    "mongodb": ProviderInfo(
        "MongoDB",
        "Document database ideal for flexible schemas and horizontal scaling. Great for content management, "
        "real-time analytics, and applications with evolving data models.",
    ),
    "redis": ProviderInfo(
        "Redis",
        "In-memory data store ideal for caching, sessions, and real-time data. Use as a secondary store "
        "alongside a primary database for high-performance scenarios.",
    ),
})

# Requirement tags that decide the provider, in precedence order
PROVIDER_REQUIREMENT_RULES: Tuple[Tuple[str, str, str], ...] = (
    ("caching", "redis", "Caching requirement calls for an in-memory store"),
    ("flexible-schema", "mongodb", "Flexible schema calls for a document database"),
    ("high-write-throughput", "postgresql", "High write throughput favours PostgreSQL"),
)

# Data type -> provider, used when no requirement tag decides
DATA_TYPE_RULES = MappingProxyType({
    "relational": ("postgresql", "Relational data fits a relational database"),
    "document": ("mongodb", "Document data fits a document database"),
    "key-value": ("redis", "Key-value data fits an in-memory store"),
    "mixed": ("postgresql", "Mixed data fits the most flexible relational database"),
})

DEFAULT_PROVIDER = "postgresql"
DEFAULT_PROVIDER_REASON = "No data type or requirement decided; PostgreSQL is the default choice"
EXPLICIT_PROVIDER_REASON = "Provider requested explicitly"

# Patterns every recommendation starts with
BASE_PATTERNS = ("repository", "unit-of-work")

# Requirement tag -> additional pattern
PATTERN_RULES: Tuple[Tuple[str, str], ...] = (
    ("complex-queries", "specification"),
    ("high-write-throughput", "dapper"),
)

PATTERN_DOCS = MappingProxyType({
    "repository": ("database/use-repository.md",),
    "unit-of-work": ("database/use-unitofwork.md",),
    "specification": ("database/efcore-advanced.md",),
    "dapper": ("database/use-unitofwork.md",),
    "hybrid": ("database/efcore-advanced.md", "database/use-unitofwork.md"),
})

SELECTION_MATRIX_HEADERS = ("Requirement", "SQL Server", "PostgreSQL", "MySQL", "MongoDB", "Redis")
SELECTION_MATRIX = (
    ("ACID transactions", "✅", "✅", "✅", "⚠️", "❌"),
    ("Complex queries", "✅", "✅", "✅", "⚠️", "❌"),
    ("High write throughput", "⚠️", "✅", "⚠️", "✅", "✅"),
    ("Horizontal scaling", "⚠️", "⚠️", "⚠️", "✅", "✅"),
    ("Flexible schema", "❌", "⚠️", "❌", "✅", "✅"),
    ("Relationships", "✅", "✅", "✅", "⚠️", "❌"),
    ("Cloud cost", "$$$", "$$", "$", "$$", "$$"),
)

NOSQL_PROVIDERS = frozenset({"mongodb", "redis"})


def _known(values: Optional[Iterable[str]], allowed: List[str]) -> Tuple[str, ...]:
    seen = []
    for value in values or ():
        if value in allowed and value not in seen:
            seen.append(value)
    return tuple(seen)


@dataclass(frozen=True)
class DatabaseInput:
    """Data characteristics. Values outside the known enumerations are dropped."""

    data_type: Optional[str] = None
    provider: Optional[str] = None
    requirements: FrozenSet[str] = frozenset()
    patterns: Tuple[str, ...] = ()

    @classmethod
    def from_args(
        cls,
        data_type: Optional[str] = None,
        provider: Optional[str] = None,
        requirements: Optional[Iterable[str]] = None,
        patterns: Optional[Iterable[str]] = None,
    ) -> "DatabaseInput":
        return cls(
            data_type=data_type if data_type in DATA_TYPES else None,
            provider=provider if provider in DATABASE_PROVIDERS else None,
            requirements=frozenset(_known(requirements, DATABASE_REQUIREMENTS)),
            patterns=_known(patterns, DATABASE_PATTERNS),
        )

    def is_empty(self) -> bool:
        return not (self.data_type or self.provider or self.requirements or self.patterns)


@dataclass
class DatabaseSelection:
    provider: str
    patterns: List[str]
    reasoning: List[str] = field(default_factory=list)


def determine_provider(data_type: Optional[str], requirements: FrozenSet[str]) -> Tuple[str, str]:
    """
    Pick a provider from the requirement tags, then the data type.

    Returns:
        Tuple[str, str]: Provider key and the reason it was picked
    """
    for tag, provider, reason in PROVIDER_REQUIREMENT_RULES:
        if tag in requirements:
            return provider, reason
    if data_type in DATA_TYPE_RULES:
        return DATA_TYPE_RULES[data_type]
    return DEFAULT_PROVIDER, DEFAULT_PROVIDER_REASON


def determine_patterns(requirements: FrozenSet[str]) -> List[str]:
    patterns = list(BASE_PATTERNS)
    for tag, pattern in PATTERN_RULES:
        if tag in requirements:
            patterns.append(pattern)
    return patterns


def select_database(selection: DatabaseInput) -> DatabaseSelection:
    """
    Pick a database provider and data access patterns.

    An explicit provider always wins. Otherwise requirement tags are checked
    in a fixed precedence order (caching, flexible-schema,
    high-write-throughput) before the data type. Explicit patterns are kept
    as given; without them the patterns follow from the requirements.

    Args:
        selection: Data characteristics

    Returns:
        DatabaseSelection: Provider, patterns and the reasoning trail
    """
    if selection.provider:
        provider, reason = selection.provider, EXPLICIT_PROVIDER_REASON
    else:
        provider, reason = determine_provider(selection.data_type, selection.requirements)
    patterns = list(selection.patterns) or determine_patterns(selection.requirements)
    return DatabaseSelection(provider, patterns, [reason])


def pattern_documents(patterns: Iterable[str]) -> List[str]:
    """Documents for the patterns, each listed once, in pattern order."""
    paths = []
    for pattern in patterns:
        for path in PATTERN_DOCS.get(pattern, ()):
            if path not in paths:
                paths.append(path)
    return paths


def _next_steps(selection: DatabaseInput, result: DatabaseSelection) -> str:
    steps = [
        "1. Add the NuGet packages to your project",
        "2. Configure the connection string",
        "3. Create your DbContext (for EF Core) or configure MongoDB options",
        "4. Register services in DI container",
    ]
    if "dapper" in result.patterns or "high-write-throughput" in selection.requirements:
        steps.append("5. Consider hybrid approach with Dapper for read-heavy queries")
    return "## Next Steps\n\n" + "\n".join(steps)


async def render_database_recommendation(selection: DatabaseInput, result: DatabaseSelection,
                                         store: DocStore) -> str:
    """Render a database selection as the advisor's markdown document."""
    info = PROVIDERS[result.provider]
    family = "nosql" if result.provider in NOSQL_PROVIDERS else "relational"

    provider_docs = await store.fetch_existing(DATABASE_PROVIDER_DOCS[result.provider])
    if provider_docs is None:
        provider_docs = (
            f"Provider documentation is not available in the docs directory. "
            f"Use `{DATABASE_GUIDE.call(family)}` for the configuration guide."
        )
    pattern_docs = await store.fetch_existing(pattern_documents(result.patterns))

    sections = [
        "# Database Configuration Recommendation\n\n"
        f"## Recommended Database: **{info.name}**\n\n"
        f"### Why This Database?\n{bullet_list(result.reasoning)}\n\n{info.reasoning}\n\n"
        f"### Recommended Patterns\n{bullet_list(f'`{p}`' for p in result.patterns)}",
        DATABASE_QUICK_REFERENCE,
        "## Database Selection Matrix\n\n" + markdown_table(SELECTION_MATRIX_HEADERS, SELECTION_MATRIX),
        "## Provider Documentation\n\n" + provider_docs,
        "## Pattern Documentation\n\n" + pattern_docs if pattern_docs else None,
        _next_steps(selection, result),
        render_related(DATABASE_GUIDE, DATABASE_GUIDE.get_topic(family)),
    ]
    return join_sections(sections) + "\n"


async def database_advisor(
    data_type: Optional[str] = None,
    provider: Optional[str] = None,
    requirements: Optional[List[str]] = None,
    patterns: Optional[List[str]] = None,
    topic: Optional[str] = None,
    store: Optional[DocStore] = None,
) -> str:
    """
    Recommend a database configuration, or serve a database topic.

    A topic takes precedence over every other argument. Without any known
    argument the database overview is returned.
    """
    store = store or get_doc_store()
    if topic:
        return await resolve_topic(DATABASE_GUIDE, topic, store)

    selection = DatabaseInput.from_args(data_type, provider, requirements, patterns)
    if selection.is_empty():
        return await resolve_topic(DATABASE_GUIDE, None, store)
    return await render_database_recommendation(selection, select_database(selection), store)


def register_database_operations(mcp: FastMCP) -> None:
    """
    Register database advisor operations with the MCP server.

    Args:
        mcp: The MCP server instance
    """

    @mcp.tool(name="mvp24h_database_advisor")
    @with_error_handling
    async def database_advisor_tool(
        data_type: Optional[str] = None,
        provider: Optional[str] = None,
        requirements: Optional[List[str]] = None,
        patterns: Optional[List[str]] = None,
        topic: Optional[str] = None,
    ) -> str:
        """
        Recommend a database provider and data access patterns, or get database
        documentation for a topic.

        Args:
            data_type: relational, document, key-value or mixed
            provider: sqlserver, postgresql, mysql, mongodb or redis
            requirements: any of transactions, complex-queries, high-write-throughput,
                horizontal-scaling, flexible-schema, caching, full-text-search, relationships
            patterns: any of repository, unit-of-work, specification, dapper, hybrid
            topic: overview, relational, nosql, repository, unit-of-work, entity,
                context, service, efcore-advanced or mongodb-advanced

        Returns:
            str: Database recommendation with provider and pattern documentation,
            or the topic documentation
        """
        return await database_advisor(data_type, provider, requirements, patterns, topic)
