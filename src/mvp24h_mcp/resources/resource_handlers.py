"""
Resource handlers for the Mvp24Hours docs MCP server.

Documentation files are exposed as ``mvp24hours://docs/{category}/{name}``
resources, using the same catalogs as the tools.
"""
from typing import Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from ..constants import OVERVIEW_TOPIC, RESOURCE_URI_PREFIX
from ..utils.errors import DocumentNotFoundError, DocumentReadError, with_error_handling
from ..utils.doc_store import DocStore, LoadStatus, get_doc_store
from ..operations.guide_catalog import RESOURCE_CATEGORIES, get_guide
from ..operations.template_catalog import TEMPLATES, get_template_info
from ..operations.help_ops import get_tools_help


def resource_catalog() -> Dict[str, List[str]]:
    """
    List every resource category with its names.

    Returns:
        Dict[str, List[str]]: Category -> names, in declaration order
    """
    catalog = {"template": list(TEMPLATES)}
    for category, tool_name in RESOURCE_CATEGORIES.items():
        guide = get_guide(tool_name)
        names = [OVERVIEW_TOPIC] if guide.overview_doc else []
        names += [t.key for t in guide.topics if t.sources]
        catalog[category] = names
    return catalog


def resolve_resource_path(category: str, name: str) -> Optional[str]:
    """
    Map a resource category and name to a document reference.

    Returns:
        Optional[str]: Document path (possibly with a ``#Section``), or None
    """
    if category == "template":
        template = get_template_info(name)
        return template.doc_path if template else None

    tool_name = RESOURCE_CATEGORIES.get(category)
    if tool_name is None:
        return None
    guide = get_guide(tool_name)
    if name == OVERVIEW_TOPIC:
        return guide.overview_doc
    topic = guide.get_topic(name)
    if topic is None or not topic.sources:
        return None
    return topic.sources[0]


def render_resource_not_found(uri: str) -> str:
    lines = [f"Resource not found: {uri}", "", "## Available Resources", ""]
    for category, names in resource_catalog().items():
        lines.append(f"### {category}")
        lines.extend(f"- `{RESOURCE_URI_PREFIX}/{category}/{name}`" for name in names)
        lines.append("")
    return "\n".join(lines)


async def read_doc_resource(category: str, name: str, store: Optional[DocStore] = None) -> str:
    """
    Read a documentation resource.

    Args:
        category: Resource category, e.g. "template" or "core"
        name: Entry name within the category
        store: Document store, the shared store when omitted

    Returns:
        str: Document content, or a listing of valid resources

    Raises:
        DocumentNotFoundError: If the entry is catalogued but its file is missing
        DocumentReadError: If the file cannot be read
    """
    path = resolve_resource_path(category, name)
    if path is None:
        return render_resource_not_found(f"{RESOURCE_URI_PREFIX}/{category}/{name}")

    store = store or get_doc_store()
    result = await store.fetch_result(path)
    if result.status is LoadStatus.IO_ERROR:
        raise DocumentReadError(path, result.error)
    if not result.ok:
        raise DocumentNotFoundError(path)
    return result.content


def register_resources(mcp: FastMCP) -> None:
    """
    Register all resource handlers with the MCP server.

    Args:
        mcp: The MCP server instance
    """
    @mcp.resource(RESOURCE_URI_PREFIX + "/{category}/{name}")
    @with_error_handling
    async def get_doc_resource(category: str, name: str) -> str:
        """
        Retrieve a documentation file of the Mvp24Hours framework.

        Args:
            category: template, database, core, infrastructure, reference, cqrs,
                testing, security, containerization, messaging, observability
                modernization or ai
            name: Entry name within the category

        Returns:
            str: Document content, or an error message
        """
        return await read_doc_resource(category, name)

    # Help resources
    @mcp.resource("help://tools")
    @with_error_handling
    async def get_help_resource() -> str:
        """
        Get help information about all available tools.

        Returns:
            str: Formatted help information
        """
        return get_tools_help()
