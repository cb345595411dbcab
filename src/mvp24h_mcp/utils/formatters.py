"""
Formatting utilities for the docs MCP server.

This module contains small markdown builders shared by the tools:
lists, tables, fenced blocks and section joining.
"""
from typing import Iterable, List, Optional, Sequence

from ..constants import SECTION_SEPARATOR


def format_title(name: str) -> str:
    """
    Turn a dashed identifier into a title.

    Args:
        name: Identifier such as "clean-architecture"

    Returns:
        str: Title such as "Clean Architecture"
    """
    return " ".join(word[:1].upper() + word[1:] for word in name.split("-"))


def bullet_list(items: Iterable[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def checklist(items: Iterable[str]) -> str:
    return "\n".join(f"- [ ] {item}" for item in items)


def code_block(content: str, language: str = "") -> str:
    return f"```{language}\n{content}\n```"


def markdown_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """
    Format rows as a markdown table.

    Args:
        headers: Column headers
        rows: Row values, one sequence per row

    Returns:
        str: Markdown table
    """
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join("-" * (len(h) + 2) for h in headers) + "|",
    ]
    for row in rows:
        lines.append("| " + " | ".join(row) + " |")
    return "\n".join(lines)


def tool_call(tool_name: str, argument: str, value: str) -> str:
    """Render a tool invocation the way the agent is expected to write it."""
    return f'{tool_name}({{ {argument}: "{value}" }})'


def join_sections(sections: Iterable[Optional[str]]) -> str:
    """Join non-empty sections with the section separator."""
    parts: List[str] = [s.strip("\n") for s in sections if s and s.strip()]
    return SECTION_SEPARATOR.join(parts)
