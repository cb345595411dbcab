"""Tests for the document store."""

import os

import pytest

from mvp24h_mcp.constants import config
from mvp24h_mcp.utils.doc_store import DocStore, LoadStatus, missing_placeholder
from mvp24h_mcp.utils.errors import DocumentNotFoundError, DocumentReadError


class TestLoad:

    def test_load_existing(self, store):
        assert store.load("core/guard-clauses.md").startswith("# Guard Clauses")

    def test_load_missing_raises(self, store):
        with pytest.raises(DocumentNotFoundError) as excinfo:
            store.load("core/nope.md")
        assert excinfo.value.path == "core/nope.md"

    def test_load_undecodable_raises_read_error(self, store, docs_dir):
        (docs_dir / "broken.md").write_bytes(b"\xff\xfe\xfa invalid utf-8")
        with pytest.raises(DocumentReadError):
            store.load("broken.md")

    def test_paths_outside_docs_dir_are_not_found(self, store, docs_dir):
        (docs_dir.parent / "secret.md").write_text("secret", encoding="utf-8")
        assert store.resolve("../secret.md") is None
        assert not store.exists("../secret.md")
        with pytest.raises(DocumentNotFoundError):
            store.load("../secret.md")

    def test_exists(self, store):
        assert store.exists("core/home.md")
        assert not store.exists("core")
        assert not store.exists("")

    def test_store_follows_config_when_no_dir_given(self, docs_dir, monkeypatch):
        monkeypatch.setattr(config, "docs_dir", str(docs_dir))
        assert DocStore().docs_dir == str(docs_dir)
        assert DocStore().exists("core/home.md")


class TestRead:

    def test_found(self, store):
        result = store.read("core/home.md")
        assert result.status is LoadStatus.FOUND
        assert result.ok
        assert result.content_or_none() == "Core module home page."

    def test_not_found(self, store):
        result = store.read("missing.md")
        assert result.status is LoadStatus.NOT_FOUND
        assert result.content_or_none() is None

    def test_io_error(self, store, docs_dir):
        (docs_dir / "broken.md").write_bytes(b"\xff\xfe\xfa")
        result = store.read("broken.md")
        assert result.status is LoadStatus.IO_ERROR
        assert result.error

    def test_missing_document_is_logged(self, store, monkeypatch, capsys):
        monkeypatch.setattr(config, "log_missing_docs", True)
        store.read("missing.md")
        assert "document_missing" in capsys.readouterr().err

    def test_section_reference(self, store):
        result = store.read("ai-context/testing-patterns.md#Unit Testing")
        assert result.ok
        assert result.content.startswith("## Unit Testing")
        assert "### Naming" in result.content
        assert "Mocking body" not in result.content

    def test_missing_section_reference(self, store):
        result = store.read("ai-context/testing-patterns.md#Kubernetes")
        assert result.status is LoadStatus.NOT_FOUND
        assert result.path == "ai-context/testing-patterns.md#Kubernetes"


class TestLoadSection:

    def test_case_insensitive_match(self, store):
        assert "Mocking body." in store.load_section("ai-context/testing-patterns.md", "mocking")

    def test_missing_section_raises(self, store):
        with pytest.raises(DocumentNotFoundError):
            store.load_section("ai-context/testing-patterns.md", "Deployment")


class TestLoadMany:

    def test_placeholders_for_missing(self, store):
        text = store.load_many(["core/home.md", "core/missing.md"])
        assert text == "Core module home page.\n\n---\n\n" + missing_placeholder("core/missing.md")


@pytest.mark.asyncio
class TestAsync:

    async def test_fetch(self, store):
        assert await store.fetch("core/home.md") == "Core module home page."
        assert await store.fetch("core/missing.md") is None

    async def test_fetch_many_preserves_order(self, store):
        results = await store.fetch_many(["missing.md", "core/home.md"])
        assert [r.status for r in results] == [LoadStatus.NOT_FOUND, LoadStatus.FOUND]

    async def test_missing_docs_dir(self, empty_store):
        assert not os.path.exists(empty_store.docs_dir)
        assert await empty_store.fetch("core/home.md") is None

    async def test_fetch_existing_skips_missing(self, store):
        text = await store.fetch_existing(["core/home.md", "missing.md", "getting-started.md"])
        assert text == "Core module home page.\n\n---\n\nGetting started with Mvp24Hours."
        assert await store.fetch_existing(["missing.md"]) is None
        assert await store.fetch_existing(()) is None
