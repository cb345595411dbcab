"""Tests for template documents and context building."""

import pytest

from mvp24h_mcp.operations.template_catalog import TEMPLATES, get_template_info, template_keys
from mvp24h_mcp.operations.template_ops import build_context, get_template


class TestCatalog:

    def test_nine_templates(self):
        assert len(template_keys()) == 9
        assert template_keys()[0] == "minimal-api"

    def test_lookup(self):
        assert get_template_info("cqrs").name.startswith("CQRS")
        assert get_template_info("modular-monolith") is None


@pytest.mark.asyncio
class TestGetTemplate:

    async def test_document_from_docs_dir(self, store):
        text = await get_template("cqrs", store=store)
        assert text.startswith(
            "# Template: CQRS (Command Query Responsibility Segregation)\n\n"
            "CQRS template from the docs directory."
        )
        assert "## Related Tools" in text

    async def test_catalog_fallback(self, empty_store):
        text = await get_template("hexagonal", store=empty_store)
        assert text.startswith("# Template: Hexagonal (Ports & Adapters)")
        for header in ("## Project Structure", "## Characteristics", "## NuGet Packages",
                       "## Implementation Checklist", "## Related Tools"):
            assert header in text
        assert '<PackageReference Include="Mvp24Hours.Core"' in text

    async def test_unknown_template(self, store):
        text = await get_template("serverless", store=store)
        assert text.startswith("# Template Not Found")
        assert 'Template "serverless" not found.' in text
        for key in TEMPLATES:
            assert f"`{key}`" in text


@pytest.mark.asyncio
class TestBuildContext:

    async def test_sections_in_order(self, store):
        text = await build_context("cqrs", ["database", "observability"], "postgresql", store=store)
        headers = [
            "# Complete Context: CQRS (Command Query Responsibility Segregation) Architecture",
            "## Architecture Foundation",
            "## Database Configuration: POSTGRESQL",
            "## Database Patterns",
            "## Observability",
            "## Key Interfaces Reference",
            "## Next Steps",
        ]
        positions = [text.index(h) for h in headers]
        assert positions == sorted(positions)

    async def test_loaded_documents_are_included(self, store):
        text = await build_context("cqrs", ["database"], "postgresql", store=store)
        assert "CQRS template from the docs directory." in text
        assert "Relational database document." in text
        assert "Database patterns document." in text

    async def test_missing_documents_are_skipped(self, empty_store):
        text = await build_context("minimal-api", ["security"], store=empty_store)
        assert "## Architecture Foundation" not in text
        assert "## Security Patterns" not in text
        assert "Documentation not found" not in text
        assert "## Key Interfaces Reference" in text

    async def test_interface_groups_follow_template(self, empty_store):
        minimal = await build_context("minimal-api", store=empty_store)
        ddd = await build_context("ddd", store=empty_store)
        assert "### CQRS Interfaces" not in minimal
        assert "### CQRS Interfaces" in ddd
        assert "### Event Interfaces" in ddd

    async def test_duplicate_and_unknown_resources(self, store):
        text = await build_context("cqrs", ["observability", "observability", "blockchain"], store=store)
        assert text.count("## Observability") == 1
        assert "blockchain" not in text.lower()

    async def test_database_checklist_with_provider_only(self, empty_store):
        text = await build_context("simple-nlayers", database_provider="mongodb", store=empty_store)
        assert "**Database:**" in text
        assert "- [ ] Configure DbContext" in text
        assert '`mvp24h_database_advisor({ patterns: ["repository", "unit-of-work"] })`' in text

    async def test_no_database_checklist_by_default(self, empty_store):
        text = await build_context("simple-nlayers", store=empty_store)
        assert "**Database:**" not in text

    async def test_resource_checklists(self, empty_store):
        text = await build_context("cqrs", ["testing", "containerization"], store=empty_store)
        assert "**Testing Patterns:**" in text
        assert "**Containerization:**" in text
        assert text.index("**Testing Patterns:**") < text.index("**Containerization:**")

    async def test_unknown_provider_ignored(self, store):
        text = await build_context("cqrs", database_provider="oracle", store=store)
        assert "## Database Configuration" not in text

    async def test_unknown_architecture(self, store):
        text = await build_context("serverless", ["database"], store=store)
        assert text.startswith('Architecture "serverless" not found.')
        assert "- `clean-architecture` - Clean Architecture" in text
        assert "mvp24h_build_context" in text
