"""
Error types and tool error handling for the docs MCP server.
"""
import functools

from .events import log_event


class DocsError(Exception):
    """Base class for errors raised by the docs server."""


class DocumentNotFoundError(DocsError):
    """A documentation file does not exist in the docs directory."""

    def __init__(self, path: str):
        super().__init__(f"Documentation not found: {path}")
        self.path = path


class DocumentReadError(DocsError):
    """A documentation file exists but could not be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Documentation could not be read: {path} ({reason})")
        self.path = path
        self.reason = reason


class CatalogError(DocsError):
    """A static lookup table references an entry that does not exist."""

    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__("Inconsistent catalogs:\n" + "\n".join(f"- {p}" for p in self.problems))


def format_error(e: Exception) -> str:
    """
    Format an exception into a user-friendly error message.

    Args:
        e: The exception to format

    Returns:
        str: Formatted error message
    """
    if isinstance(e, (DocsError, ValueError, OSError)):
        return f"Error: {str(e)}"
    else:
        # Unexpected errors get logged with limited info
        error_id = log_event("unexpected_error", {
            "type": type(e).__name__,
            "message": str(e)
        })
        return f"An unexpected error occurred. Reference ID: {error_id}"


def with_error_handling(func):
    """
    Decorator to handle errors in a consistent way.

    Args:
        func: The coroutine function to wrap

    Returns:
        function: Wrapped function with error handling
    """
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except Exception as e:
            return format_error(e)
    return wrapper
