"""
Constants and configuration settings for the Mvp24Hours docs MCP server.
"""
import os
from dataclasses import dataclass, field

# Package root: <repo>/src/mvp24h_mcp -> <repo>
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def _default_docs_dir() -> str:
    return os.environ.get("MVP24H_DOCS_DIR") or os.path.join(_PROJECT_ROOT, "docs")


@dataclass
class DocsServerConfig:
    """Configuration class for the docs MCP server."""

    # Documentation settings
    docs_dir: str = field(default_factory=_default_docs_dir)
    log_missing_docs: bool = True

    # Server settings
    server_name: str = "Mvp24Hours"

    def __post_init__(self):
        """Validate and adjust configuration values."""
        # Ensure docs directory is absolute
        if self.docs_dir:
            self.docs_dir = os.path.abspath(self.docs_dir)


# Default configuration instance
config = DocsServerConfig()

# Separator placed between major sections of a generated document
SECTION_SEPARATOR = "\n\n---\n\n"

# Sentinel topic that selects a guide's overview document
OVERVIEW_TOPIC = "overview"

# Requirement tags understood by the architecture advisor
REQUIREMENT_TAGS = [
    "cqrs", "event-sourcing", "audit-trail", "external-integrations",
    "microservices", "domain-driven", "rapid-prototype", "high-performance",
    "multiple-databases",
]

# build_context enumerations
CONTEXT_RESOURCES = [
    "database", "caching", "observability", "messaging",
    "security", "testing", "containerization",
]
DATABASE_PROVIDERS = ["postgresql", "sqlserver", "mysql", "mongodb", "redis"]

# Database advisor enumerations
DATA_TYPES = ["relational", "document", "key-value", "mixed"]
DATABASE_REQUIREMENTS = [
    "transactions", "complex-queries", "high-write-throughput", "horizontal-scaling",
    "flexible-schema", "caching", "full-text-search", "relationships",
]
DATABASE_PATTERNS = ["repository", "unit-of-work", "specification", "dapper", "hybrid"]

# AI implementation use cases
AI_USE_CASES = [
    "chatbot", "qa-documents", "tool-augmented", "complex-reasoning",
    "multi-agent", "workflow", "human-oversight", "enterprise",
]

# Advisor tool names
ADVISOR_OPERATIONS = [
    "mvp24h_get_started", "mvp24h_architecture_advisor",
    "mvp24h_database_advisor", "mvp24h_ai_implementation",
    "mvp24h_get_template", "mvp24h_build_context",
]

# Guide tool names (Topic Resolver backed)
GUIDE_OPERATIONS = [
    "mvp24h_core_patterns", "mvp24h_infrastructure_guide", "mvp24h_reference_guide",
    "mvp24h_cqrs_guide", "mvp24h_testing_patterns", "mvp24h_security_patterns",
    "mvp24h_containerization_patterns", "mvp24h_messaging_patterns",
    "mvp24h_observability_setup", "mvp24h_modernization_guide",
]

# All valid operations
ALL_OPERATIONS = ADVISOR_OPERATIONS + GUIDE_OPERATIONS + ["help"]

# Resource URI scheme
RESOURCE_URI_PREFIX = "mvp24hours://docs"

# Default transports
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8000
