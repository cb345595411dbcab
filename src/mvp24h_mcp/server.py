"""
Main server module for the Mvp24Hours docs MCP server.

This module provides the core server functionality and integrates all components.
"""
import os
import sys
import signal
import time
from typing import Dict, Any, Optional
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from mcp.server.fastmcp import FastMCP

from .constants import config


# Define lifespan manager
@asynccontextmanager
async def server_lifespan(server: FastMCP) -> AsyncIterator[Dict[str, Any]]:
    """
    Manage the server lifecycle.

    Args:
        server: The MCP server instance

    Yields:
        Dict[str, Any]: Server context
    """
    print(f"Starting {config.server_name} docs MCP server with docs directory: {config.docs_dir}", file=sys.stderr)

    context = {
        "start_time": time.time(),
    }

    try:
        yield context
    finally:
        run_time = time.time() - context["start_time"]
        print(f"{config.server_name} docs MCP server shutting down after {run_time:.2f} seconds", file=sys.stderr)


# Create MCP server with lifespan
mcp = FastMCP(config.server_name, lifespan=server_lifespan)


# Set up signal handlers for clean shutdown
def signal_handler(sig, frame):
    """Handle signals for clean shutdown."""
    print("Shutting down gracefully...", file=sys.stderr)
    sys.exit(0)


signal.signal(signal.SIGINT, signal_handler)
signal.signal(signal.SIGTERM, signal_handler)


def initialize_server(docs_dir: Optional[str] = None, log_missing_docs: bool = True) -> None:
    """
    Initialize the docs MCP server with the specified configuration.

    Args:
        docs_dir: Directory holding the framework documentation
        log_missing_docs: Whether to log an event for every missing document

    Raises:
        CatalogError: If a lookup table references a missing entry
    """
    from .operations.catalog_checks import validate_catalogs

    if docs_dir:
        config.docs_dir = os.path.abspath(docs_dir)
    config.log_missing_docs = log_missing_docs

    print(f"{config.server_name} docs MCP server initialized with:", file=sys.stderr)
    print(f"  Docs directory: {config.docs_dir}", file=sys.stderr)
    print(f"  Log missing docs: {config.log_missing_docs}", file=sys.stderr)

    validate_catalogs()

    # Register tools, resources and prompts
    register_all_components()


def register_all_components(server: Optional[FastMCP] = None) -> None:
    """Register all tools, resources and prompts with the MCP server."""
    from .resources.resource_handlers import register_resources
    from .operations.advisor_ops import register_advisor_operations
    from .operations.database_ops import register_database_operations
    from .operations.ai_ops import register_ai_operations
    from .operations.template_ops import register_template_operations
    from .operations.guide_ops import register_guide_operations
    from .operations.help_ops import register_help_operations
    from .operations.prompt_ops import register_prompts

    server = server or mcp

    # Register resources
    register_resources(server)

    # Register tool operations
    register_advisor_operations(server)
    register_database_operations(server)
    register_ai_operations(server)
    register_template_operations(server)
    register_guide_operations(server)
    register_help_operations(server)

    # Register prompts
    register_prompts(server)
