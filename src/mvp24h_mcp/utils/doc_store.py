"""
Document store for the docs MCP server.

This module loads markdown documentation files from the configured docs
directory. Every read is best-effort: callers that must never fail use
``read``/``fetch`` which report a ``LoadResult`` instead of raising.
"""
import os
import re
import asyncio
from enum import Enum
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..constants import config, SECTION_SEPARATOR
from .errors import DocumentNotFoundError, DocumentReadError
from .events import log_event

_HEADER_RE = re.compile(r"^(#{1,6})\s+(.+)$")


class LoadStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not-found"
    IO_ERROR = "io-error"


@dataclass(frozen=True)
class LoadResult:
    """Outcome of reading one document."""

    status: LoadStatus
    path: str
    content: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is LoadStatus.FOUND

    def content_or_none(self) -> Optional[str]:
        return self.content if self.ok else None


def missing_placeholder(path: str) -> str:
    """Placeholder comment used in place of a missing document."""
    return f"<!-- Documentation not found: {path} -->"


class DocStore:
    """
    File-backed documentation store.

    Args:
        docs_dir: Directory holding the markdown files. When omitted the
            store follows ``config.docs_dir`` at call time.
    """

    def __init__(self, docs_dir: Optional[str] = None):
        self._docs_dir = os.path.abspath(docs_dir) if docs_dir else None

    @property
    def docs_dir(self) -> str:
        return self._docs_dir or config.docs_dir

    def resolve(self, relative_path: str) -> Optional[str]:
        """
        Resolve a relative document path inside the docs directory.

        Args:
            relative_path: Path relative to the docs directory

        Returns:
            Optional[str]: Absolute path, or None if the path is empty or
            escapes the docs directory
        """
        if not relative_path:
            return None
        base = os.path.abspath(self.docs_dir)
        full_path = os.path.abspath(os.path.join(base, os.path.normpath(relative_path)))
        if full_path != base and not full_path.startswith(base + os.sep):
            return None
        return full_path

    def exists(self, relative_path: str) -> bool:
        """Check if a documentation file exists."""
        full_path = self.resolve(relative_path)
        return full_path is not None and os.path.isfile(full_path)

    def load(self, relative_path: str) -> str:
        """
        Load a documentation file.

        Args:
            relative_path: Path relative to the docs directory

        Returns:
            str: File content

        Raises:
            DocumentNotFoundError: If the file does not exist
            DocumentReadError: If the file cannot be read or decoded
        """
        full_path = self.resolve(relative_path)
        if full_path is None or not os.path.isfile(full_path):
            raise DocumentNotFoundError(relative_path)
        try:
            with open(full_path, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            raise DocumentNotFoundError(relative_path)
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentReadError(relative_path, str(e))

    def read(self, reference: str) -> LoadResult:
        """
        Load a documentation file without raising.

        Args:
            reference: Path relative to the docs directory, optionally followed
                by ``#Section Title`` to load a single section

        Returns:
            LoadResult: Found content, or the reason it is unavailable
        """
        relative_path, _, section_title = reference.partition("#")
        try:
            if section_title:
                content = self.load_section(relative_path, section_title)
            else:
                content = self.load(relative_path)
        except DocumentNotFoundError:
            if config.log_missing_docs:
                log_event("document_missing", {"path": reference, "docs_dir": self.docs_dir})
            return LoadResult(LoadStatus.NOT_FOUND, reference)
        except DocumentReadError as e:
            log_event("document_read_error", {"path": reference, "reason": e.reason})
            return LoadResult(LoadStatus.IO_ERROR, reference, error=e.reason)
        return LoadResult(LoadStatus.FOUND, reference, content=content)

    def load_many(self, relative_paths: List[str]) -> str:
        """
        Load multiple documentation files and concatenate them.

        Missing files are replaced by a placeholder comment.
        """
        parts = []
        for path in relative_paths:
            result = self.read(path)
            parts.append(result.content if result.ok else missing_placeholder(path))
        return SECTION_SEPARATOR.join(parts)

    def load_section(self, relative_path: str, section_title: str) -> str:
        """
        Load one section of a documentation file.

        The section starts at the first header whose title contains
        ``section_title`` (case-insensitive) and ends before the next header
        of the same or a higher level.

        Raises:
            DocumentNotFoundError: If the file or the section cannot be found
            DocumentReadError: If the file cannot be read
        """
        content = self.load(relative_path)
        wanted = section_title.lower()
        result = []
        in_section = False
        section_level = 0

        for line in content.split("\n"):
            match = _HEADER_RE.match(line)
            if match:
                level = len(match.group(1))
                title = match.group(2).strip()
                if not in_section and wanted in title.lower():
                    in_section = True
                    section_level = level
                    result.append(line)
                    continue
                if in_section and level <= section_level:
                    break
            if in_section:
                result.append(line)

        if not result:
            raise DocumentNotFoundError(f"{relative_path}#{section_title}")
        return "\n".join(result)

    async def fetch_result(self, relative_path: str) -> LoadResult:
        """Read a document off the event loop."""
        return await asyncio.to_thread(self.read, relative_path)

    async def fetch(self, relative_path: str) -> Optional[str]:
        """Read a document, collapsing every failure to None."""
        result = await self.fetch_result(relative_path)
        return result.content_or_none()

    async def fetch_many(self, relative_paths: List[str]) -> List[LoadResult]:
        """Read several documents, preserving order."""
        return list(await asyncio.gather(*(self.fetch_result(p) for p in relative_paths)))

    async def fetch_existing(self, relative_paths: Iterable[str]) -> Optional[str]:
        """
        Read several documents and join the ones that exist.

        Returns:
            Optional[str]: Found documents joined by the section separator,
            or None when none of them could be read
        """
        results = await self.fetch_many(list(relative_paths))
        found = [r.content for r in results if r.ok]
        return SECTION_SEPARATOR.join(found) if found else None


_store = DocStore()


def get_doc_store() -> DocStore:
    """Return the store used by the registered tools."""
    return _store


def set_doc_store(store: DocStore) -> None:
    """Replace the store used by the registered tools."""
    global _store
    _store = store
