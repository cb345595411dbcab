"""Shared fixtures: a temporary docs directory and stores pointed at it."""

import pytest

from mvp24h_mcp.constants import config
from mvp24h_mcp.utils.doc_store import DocStore

TESTING_PATTERNS_DOC = """# Testing Patterns

Intro text.

## Unit Testing

Unit testing body.

### Naming

MethodName_StateUnderTest_ExpectedBehavior

## Mocking

Mocking body.
"""


def _write(root, relative_path, content):
    path = root / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture(autouse=True)
def quiet_missing_docs(monkeypatch):
    """Keep missing-document events out of the test output."""
    monkeypatch.setattr(config, "log_missing_docs", False)


@pytest.fixture
def docs_dir(tmp_path):
    """Create a small docs directory."""
    root = tmp_path / "docs"
    _write(root, "getting-started.md", "Getting started with Mvp24Hours.")
    _write(root, "core/home.md", "Core module home page.")
    _write(root, "core/guard-clauses.md", "# Guard Clauses\n\nGuard clause documentation.")
    _write(root, "core/value-objects.md", "# Value Objects\n\nValue object documentation.")
    _write(root, "ai-context/testing-patterns.md", TESTING_PATTERNS_DOC)
    _write(root, "ai-context/template-cqrs.md", "CQRS template from the docs directory.")
    _write(root, "ai-context/database-patterns.md", "Database patterns document.")
    _write(root, "database/relational.md", "Relational database document.")
    _write(root, "observability/logging.md", "Logging document.")
    return root


@pytest.fixture
def store(docs_dir):
    return DocStore(str(docs_dir))


@pytest.fixture
def empty_store(tmp_path):
    """A store whose docs directory does not exist."""
    return DocStore(str(tmp_path / "no-docs"))
