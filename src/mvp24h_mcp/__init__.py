"""
Mvp24Hours Docs MCP: A Model Context Protocol server for the Mvp24Hours .NET framework.

This package provides a MCP server that recommends an architecture template
for a project and serves the framework documentation as topic guides.
"""

__version__ = "0.1.0"
