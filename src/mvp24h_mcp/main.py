"""
Main entry point for the Mvp24Hours docs MCP server.
"""
import os
import sys
import json
import argparse
from typing import Any, Dict, List, Optional

from .constants import DEFAULT_HOST, DEFAULT_PORT, config
from .utils.errors import CatalogError


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Mvp24Hours docs MCP server - architecture advice and framework documentation"
    )

    # Documentation
    parser.add_argument(
        "--docs-dir",
        help="Directory holding the Mvp24Hours documentation (default: $MVP24H_DOCS_DIR or ./docs)",
    )
    parser.add_argument(
        "--quiet-missing-docs",
        action="store_true",
        default=None,
        help="Do not log an event for every missing document",
    )

    # Transport
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        help="Transport to use (stdio or sse, default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        help=f"Port for SSE transport (default: {DEFAULT_PORT})",
    )
    parser.add_argument(
        "--host",
        help=f"Host for SSE transport (default: {DEFAULT_HOST})",
    )

    # Configuration file
    parser.add_argument(
        "--config",
        help="Path to JSON configuration file",
    )

    return parser.parse_args(argv)


def load_config_file(config_path: str) -> Dict[str, Any]:
    """Load configuration from a JSON file."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        print(f"Error loading configuration file: {e}", file=sys.stderr)
        sys.exit(1)


def resolve_settings(args: argparse.Namespace, config_from_file: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge command-line arguments with the configuration file.

    Command-line values take priority; the file fills in what was not given.

    Args:
        args: Parsed command-line arguments
        config_from_file: Content of the JSON configuration file

    Returns:
        Dict[str, Any]: docs_dir, log_missing_docs, transport, host and port
    """
    def pick(arg_value, key, default):
        if arg_value is not None:
            return arg_value
        return config_from_file.get(key, default)

    quiet = pick(args.quiet_missing_docs, "quiet_missing_docs", False)
    return {
        "docs_dir": os.path.abspath(pick(args.docs_dir, "docs_dir", config.docs_dir)),
        "log_missing_docs": not quiet,
        "transport": pick(args.transport, "transport", "stdio"),
        "host": pick(args.host, "host", DEFAULT_HOST),
        "port": int(pick(args.port, "port", DEFAULT_PORT)),
    }


def main(argv: Optional[List[str]] = None) -> int:
    """Run the docs MCP server with command-line arguments."""
    args = parse_args(argv)

    # Load configuration from file if specified
    config_from_file = {}
    if args.config:
        config_from_file = load_config_file(args.config)

    settings = resolve_settings(args, config_from_file)

    # Validate docs directory
    docs_dir = settings["docs_dir"]
    if not os.path.exists(docs_dir):
        print(f"Warning: Docs directory does not exist: {docs_dir}. Built-in content will be used.",
              file=sys.stderr)
    elif not os.path.isdir(docs_dir):
        print(f"Error: Docs directory is not a directory: {docs_dir}", file=sys.stderr)
        return 1

    from .server import mcp, initialize_server

    # Initialize the server
    try:
        initialize_server(docs_dir=docs_dir, log_missing_docs=settings["log_missing_docs"])
    except CatalogError as e:
        print(f"Error initializing server: {e}", file=sys.stderr)
        return 1

    # Run the server with the specified transport
    if settings["transport"] == "stdio":
        print("Starting server with stdio transport", file=sys.stderr)
        mcp.run(transport="stdio")
    else:
        print(f"Starting server with SSE transport on {settings['host']}:{settings['port']}", file=sys.stderr)
        mcp.settings.host = settings["host"]
        mcp.settings.port = settings["port"]
        mcp.run(transport="sse")

    return 0


if __name__ == "__main__":
    sys.exit(main())
