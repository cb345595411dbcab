"""
Architecture advisor operations for the docs MCP server.

This module contains the template selection rules and the tools that
recommend an architecture template and give an overview of the framework.
"""
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, Iterable, List, Optional, Tuple

from mcp.server.fastmcp import FastMCP

from ..utils.errors import with_error_handling
from ..utils.doc_store import DocStore, get_doc_store
from ..utils.formatters import bullet_list, code_block, markdown_table, join_sections
from .template_catalog import (
    DECISION_MATRIX,
    DECISION_MATRIX_HEADERS,
    DEFAULT_TEMPLATE,
    Template,
    get_template_info,
)


@dataclass(frozen=True)
class SelectionInput:
    """Project characteristics. ``None`` means unknown."""

    complexity: Optional[str] = None
    entity_count: Optional[str] = None
    business_rules: Optional[str] = None
    team_size: Optional[str] = None
    requirements: FrozenSet[str] = frozenset()

    @classmethod
    def from_args(
        cls,
        complexity: Optional[str] = None,
        entity_count: Optional[str] = None,
        business_rules: Optional[str] = None,
        team_size: Optional[str] = None,
        requirements: Optional[Iterable[str]] = None,
    ) -> "SelectionInput":
        return cls(
            complexity=complexity or None,
            entity_count=entity_count or None,
            business_rules=business_rules or None,
            team_size=team_size or None,
            requirements=frozenset(requirements or ()),
        )


@dataclass
class SelectionResult:
    template: str
    reasoning: List[str] = field(default_factory=list)


# Tier 1: explicit requirement tags, in precedence order
REQUIREMENT_RULES: Tuple[Tuple[FrozenSet[str], str, str], ...] = (
    (frozenset({"microservices"}), "microservices",
     "Microservices architecture requested"),
    (frozenset({"domain-driven", "event-sourcing"}), "ddd",
     "Domain-driven design with rich domain model needed"),
    (frozenset({"cqrs"}), "cqrs",
     "CQRS pattern for read/write separation"),
    (frozenset({"external-integrations"}), "hexagonal",
     "Hexagonal/Ports & Adapters for external integrations"),
    (frozenset({"audit-trail"}), "event-driven",
     "Event-driven for audit trail and event sourcing"),
    (frozenset({"rapid-prototype"}), "minimal-api",
     "Minimal API for rapid prototyping"),
)

# Tier 2: characteristic rules, first match wins
CHARACTERISTIC_RULES: Tuple[Tuple[Callable[[SelectionInput], bool], str, str], ...] = (
    (lambda s: s.complexity == "low" or (s.entity_count == "few" and s.business_rules == "simple"),
     "minimal-api", "Low complexity with simple requirements"),
    (lambda s: s.complexity == "medium" or s.business_rules == "moderate",
     "simple-nlayers", "Medium complexity with moderate business rules"),
    (lambda s: s.complexity == "high" or s.business_rules == "complex",
     "complex-nlayers", "High complexity requiring dedicated application layer"),
    (lambda s: s.complexity == "very-high",
     "clean-architecture", "Very high complexity requiring clean architecture principles"),
)

# Tier 3: adjustments applied to the current pick, in order
ADJUSTMENT_RULES: Tuple[Tuple[Callable[[SelectionInput], bool], str, str, str], ...] = (
    (lambda s: s.team_size == "large", "complex-nlayers", "clean-architecture",
     "Large team benefits from stricter architectural boundaries"),
    (lambda s: s.entity_count == "many", "simple-nlayers", "complex-nlayers",
     "Many entities benefit from specification pattern and services layer"),
)

DEFAULT_REASON = "No characteristic rule matched; Simple N-Layers is the default starting point"


def select_template(selection: SelectionInput) -> SelectionResult:
    """
    Pick an architecture template for the given project characteristics.

    Requirement tags are checked first in a fixed precedence order. When no
    tag applies, the ordinal characteristics decide, falling back to the
    default template. Adjustments for team size and entity count run last.

    Args:
        selection: Project characteristics

    Returns:
        SelectionResult: Chosen template and the reasoning trail
    """
    result = None

    for tags, template, reason in REQUIREMENT_RULES:
        if tags & selection.requirements:
            result = SelectionResult(template, [reason])
            break

    if result is None:
        for predicate, template, reason in CHARACTERISTIC_RULES:
            if predicate(selection):
                result = SelectionResult(template, [reason])
                break

    if result is None:
        result = SelectionResult(DEFAULT_TEMPLATE, [DEFAULT_REASON])

    for predicate, from_template, to_template, reason in ADJUSTMENT_RULES:
        if result.template == from_template and predicate(selection):
            result.template = to_template
            result.reasoning.append(reason)

    return result


def _recommendation_section(template: Template, selection: SelectionInput, result: SelectionResult) -> str:
    return f"""# Architecture Recommendation

## Recommended Template: **{template.name}**

### Why This Template?
{bullet_list(result.reasoning)}

### Template Overview
{template.description}

### Project Structure
{code_block(template.structure)}

### Key Characteristics
{bullet_list(template.characteristics)}

### Required Packages
{code_block(template.package_references(), "xml")}"""


def _decision_matrix_section(template: Template, selection: SelectionInput, result: SelectionResult) -> str:
    return "## Decision Matrix\n\n" + markdown_table(DECISION_MATRIX_HEADERS, DECISION_MATRIX)


def _alternatives_section(template: Template, selection: SelectionInput, result: SelectionResult) -> str:
    if not template.alternatives:
        return "## Alternative Options\n\nThis is the recommended approach for your requirements."
    items = bullet_list(f"{key} {note}" for key, note in template.alternatives)
    return f"## Alternative Options\n\nConsider these alternatives:\n{items}"


def _next_steps_section(template: Template, selection: SelectionInput, result: SelectionResult) -> str:
    steps = [
        "2. **Configure database**: `mvp24h_database_advisor({ ... })`",
        f'2. **Configure database**: `mvp24h_database_advisor({{ ... }})`',
        "3. **Add observability**: `mvp24h_observability_setup({ ... })`",
    ]
    if "cqrs" in selection.requirements or result.template == "cqrs":
        steps.append('4. **CQRS patterns**: `mvp24h_cqrs_guide({ topic: "commands" })`')
    return "## Next Steps\n\n" + "\n".join(steps)


RECOMMENDATION_SECTIONS = (
    _recommendation_section,
    _decision_matrix_section,
    _alternatives_section,
    _next_steps_section,
)


def render_recommendation(selection: SelectionInput, result: SelectionResult) -> str:
    """Render a selection result as the advisor's markdown document."""
    template = get_template_info(result.template) or get_template_info(DEFAULT_TEMPLATE)
    sections = [build(template, selection, result) for build in RECOMMENDATION_SECTIONS]
    return join_sections(sections) + "\n"


async def architecture_advisor(
    complexity: Optional[str] = None,
    entity_count: Optional[str] = None,
    business_rules: Optional[str] = None,
    team_size: Optional[str] = None,
    requirements: Optional[List[str]] = None,
) -> str:
    selection = SelectionInput.from_args(complexity, entity_count, business_rules, team_size, requirements)
    return render_recommendation(selection, select_template(selection))


GET_STARTED_HEADER = """# Mvp24Hours .NET Framework

> **AI Agent Note**: This is a modular framework for building .NET applications with best practices.
> Use the specialized tools (mvp24h_*) to get detailed guidance for specific topics.

## Quick Tool Reference

| Need | Tool to Use |
|------|-------------|
| Choose architecture template | `mvp24h_architecture_advisor` |
| Select database/ORM | `mvp24h_database_advisor` |
| Add AI capabilities | `mvp24h_ai_implementation` |
| Get a template's code and structure | `mvp24h_get_template` |
| Build complete implementation context | `mvp24h_build_context` |
| Implement CQRS/Mediator | `mvp24h_cqrs_guide` |
| Core patterns (guards, value objects) | `mvp24h_core_patterns` |
| Pipeline, caching, WebAPI, CronJob | `mvp24h_infrastructure_guide` |
| Mapping, validation, specification | `mvp24h_reference_guide` |
| Use .NET 9 features | `mvp24h_modernization_guide` |
| Setup observability | `mvp24h_observability_setup` |
| Messaging and background work | `mvp24h_messaging_patterns` |
| Testing | `mvp24h_testing_patterns` |
| Security | `mvp24h_security_patterns` |
| Docker and Kubernetes | `mvp24h_containerization_patterns` |"""

GET_STARTED_DECISION_TREE = """## Quick Decision Tree

```
New project?
├── Simple CRUD, few entities ........ minimal-api
├── Moderate business rules .......... simple-nlayers
├── Complex rules, many entities ..... complex-nlayers
├── Read/write separation ............ cqrs
├── Many external integrations ....... hexagonal
├── Audit trail / event history ...... event-driven
├── Rich domain, large team .......... ddd / clean-architecture
└── Independent deployments .......... microservices
```

Not sure? Call `mvp24h_architecture_advisor` with what you know about the project."""

GET_STARTED_QUICK_START = """## Quick Start

```bash
dotnet new webapi -n MyProject
cd MyProject
dotnet add package Mvp24Hours.Core
dotnet add package Mvp24Hours.Infrastructure.Data.EFCore
dotnet add package Mvp24Hours.WebAPI
```

```csharp
var builder = WebApplication.CreateBuilder(args);

builder.Services.AddDbContext<DataContext>(options =>
    options.UseSqlServer(builder.Configuration.GetConnectionString("DefaultConnection")));
builder.Services.AddMvp24HoursDbContext<DataContext>();
builder.Services.AddMvp24HoursRepository();

var app = builder.Build();
app.MapControllers();
app.Run();
```"""

GET_STARTED_PACKAGES = """## Core Packages

| Package | Purpose |
|---------|---------|
| `Mvp24Hours.Core` | Entities, value objects, guard clauses, business results |
| `Mvp24Hours.Application` | Service layer base classes |
| `Mvp24Hours.Infrastructure.Data.EFCore` | EF Core repository and unit of work |
| `Mvp24Hours.Infrastructure.Data.MongoDb` | MongoDB repository |
| `Mvp24Hours.Infrastructure.Cqrs` | Mediator, commands, queries, behaviors |
| `Mvp24Hours.Infrastructure.Pipe` | Pipe and Filters pipelines |
| `Mvp24Hours.Infrastructure.RabbitMQ` | Message broker integration |
| `Mvp24Hours.WebAPI` | Web API extensions, Swagger, ProblemDetails |"""

GET_STARTED_FOCUS = ("overview", "quick-start", "packages", "all")


async def get_started(focus: Optional[str] = None, store: Optional[DocStore] = None) -> str:
    """
    Build the framework overview for the requested focus.

    Unknown focus values fall back to the overview.
    """
    store = store or get_doc_store()
    focus = focus if focus in GET_STARTED_FOCUS else "overview"

    sections = [GET_STARTED_HEADER]
    if focus in ("overview", "all"):
        sections.append(GET_STARTED_DECISION_TREE)
        overview = await store.fetch("getting-started.md")
        if overview:
            sections.append("## Framework Overview\n\n" + overview)
    if focus in ("quick-start", "all"):
        sections.append(GET_STARTED_QUICK_START)
    if focus in ("packages", "all"):
        sections.append(GET_STARTED_PACKAGES)
    return join_sections(sections) + "\n"


def register_advisor_operations(mcp: FastMCP) -> None:
    """
    Register advisor operations with the MCP server.

    Args:
        mcp: The MCP server instance
    """

    @mcp.tool(name="mvp24h_get_started")
    @with_error_handling
    async def get_started_tool(focus: str = "overview") -> str:
        """
        Get an overview of the Mvp24Hours framework and the best starting point.

        Use this tool FIRST when the user wants to create a new .NET project or asks
        about Mvp24Hours.

        Args:
            focus: overview (framework intro), quick-start (minimal setup),
                packages (NuGet reference) or all (complete guide)

        Returns:
            str: Framework overview, decision tree and recommended next steps
        """
        return await get_started(focus)

    @mcp.tool(name="mvp24h_architecture_advisor")
    @with_error_handling
    async def architecture_advisor_tool(
        complexity: Optional[str] = None,
        entity_count: Optional[str] = None,
        business_rules: Optional[str] = None,
        team_size: Optional[str] = None,
        requirements: Optional[List[str]] = None,
    ) -> str:
        """
        Recommend the best architecture template for the project.

        Chooses between Minimal API, Simple N-Layers, Complex N-Layers, CQRS,
        Event-Driven, Hexagonal, Clean Architecture, DDD and Microservices.

        Args:
            complexity: low, medium, high or very-high
            entity_count: few (1-5), medium (5-15) or many (15+)
            business_rules: simple, moderate or complex
            team_size: solo (1), small (2-5) or large (5+)
            requirements: any of cqrs, event-sourcing, audit-trail, external-integrations,
                microservices, domain-driven, rapid-prototype, high-performance,
                multiple-databases

        Returns:
            str: Recommended template with decision rationale and project structure
        """
        return await architecture_advisor(complexity, entity_count, business_rules, team_size, requirements)
