"""
Architecture template catalog.

Static metadata for the nine architecture templates recommended by the
advisor and served by the template and context tools.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class Template:
    """Immutable metadata of one architecture template."""

    key: str
    name: str
    description: str
    structure: str
    characteristics: Tuple[str, ...]
    packages: Tuple[str, ...]
    doc_path: str
    context_docs: Tuple[str, ...]
    checklist: Tuple[str, ...]
    alternatives: Tuple[Tuple[str, str], ...]
    related_tools: Tuple[str, ...]
    interface_groups: Tuple[str, ...] = ("core",)

    def package_references(self) -> str:
        """Render the packages as csproj PackageReference lines."""
        lines = []
        for package in self.packages:
            name, _, version = package.partition(" ")
            lines.append(f'<PackageReference Include="{name}" Version="{version or "9.*"}" />')
        return "\n".join(lines)


_TEMPLATES = (
    Template(
        key="minimal-api",
        name="Minimal API",
        description=(
            "Lightweight single-project structure ideal for microservices and simple CRUDs. "
            "Uses .NET minimal API syntax with endpoint-based routing."
        ),
        structure="""ProjectName/
├── ProjectName.csproj
├── Program.cs
├── appsettings.json
├── Entities/
├── ValueObjects/
├── Validators/
├── Data/
└── Endpoints/""",
        characteristics=(
            "Single project, minimal boilerplate",
            "Endpoint-based routing (MapGet, MapPost)",
            "No separate service layer",
            "Direct repository access",
            "Fast startup time",
        ),
        packages=(
            "Mvp24Hours.Core 9.*",
            "Mvp24Hours.Infrastructure.Data.EFCore 9.*",
            "FluentValidation 11.*",
        ),
        doc_path="ai-context/structure-minimal-api.md",
        context_docs=(
            "ai-context/structure-minimal-api.md",
            "modernization/minimal-apis.md",
            "webapi.md",
        ),
        checklist=(
            "Define API Endpoints",
            "Configure Route Groups",
            "Add OpenAPI Documentation",
        ),
        alternatives=(("simple-nlayers", "if you need more structure"),),
        related_tools=(
            'mvp24h_modernization_guide({ feature: "minimal-apis" })',
            'mvp24h_infrastructure_guide({ topic: "webapi" })',
        ),
    ),
    Template(
        key="simple-nlayers",
        name="Simple N-Layers",
        description=(
            "3-layer architecture with Core, Infrastructure, and WebAPI projects. "
            "Good balance between simplicity and separation of concerns."
        ),
        structure="""Solution/
├── ProjectName.Core/
│   ├── Entities/
│   ├── ValueObjects/
│   └── Validators/
├── ProjectName.Infrastructure/
│   └── Data/
└── ProjectName.WebAPI/
    ├── Controllers/
    └── Extensions/""",
        characteristics=(
            "3 projects: Core, Infrastructure, WebAPI",
            "Clear separation of concerns",
            "Controllers with repository access",
            "Validators in Core layer",
            "Easy to understand and maintain",
        ),
        packages=(
            "Mvp24Hours.Core 9.*",
            "Mvp24Hours.Infrastructure.Data.EFCore 9.*",
            "Mvp24Hours.WebAPI 9.*",
            "FluentValidation 11.*",
            "AutoMapper 12.*",
        ),
        doc_path="ai-context/structure-simple-nlayers.md",
        context_docs=(
            "ai-context/structure-simple-nlayers.md",
            "database/use-repository.md",
            "application-services.md",
        ),
        checklist=(
            "Create Data Access Layer",
            "Create Business Logic Layer",
            "Create Presentation Layer",
            "Configure Dependency Injection",
        ),
        alternatives=(
            ("minimal-api", "for simpler apps"),
            ("complex-nlayers", "for more structure"),
        ),
        related_tools=(
            'mvp24h_reference_guide({ topic: "specification" })',
            'mvp24h_infrastructure_guide({ topic: "application-services" })',
        ),
    ),
    Template(
        key="complex-nlayers",
        name="Complex N-Layers",
        description=(
            "4-layer architecture adding an Application layer with services, specifications, "
            "and mapping. Ideal for enterprise applications."
        ),
        structure="""Solution/
├── ProjectName.Core/
│   ├── Entities/
│   ├── ValueObjects/
│   ├── Validators/
│   ├── Contract/
│   └── Specifications/
├── ProjectName.Infrastructure/
│   └── Data/
├── ProjectName.Application/
│   ├── Services/
│   ├── Mappings/
│   └── Pipelines/
└── ProjectName.WebAPI/
    ├── Controllers/
    └── Middlewares/""",
        characteristics=(
            "4 projects with dedicated Application layer",
            "Service contracts and implementations",
            "Specification pattern for queries",
            "AutoMapper profiles",
            "Pipeline support for complex workflows",
        ),
        packages=(
            "Mvp24Hours.Core 9.*",
            "Mvp24Hours.Application 9.*",
            "Mvp24Hours.Infrastructure.Data.EFCore 9.*",
            "Mvp24Hours.Infrastructure.Pipe 9.*",
            "Mvp24Hours.WebAPI 9.*",
            "FluentValidation 11.*",
            "AutoMapper 12.*",
        ),
        doc_path="ai-context/structure-complex-nlayers.md",
        context_docs=(
            "ai-context/structure-complex-nlayers.md",
            "database/use-repository.md",
            "database/use-unitofwork.md",
            "application-services.md",
        ),
        checklist=(
            "Create Data Access Layer",
            "Create Business Logic Layer",
            "Create Presentation Layer",
            "Configure Dependency Injection",
        ),
        alternatives=(
            ("simple-nlayers", "for simpler apps"),
            ("clean-architecture", "for stricter rules"),
            ("cqrs", "for read/write separation"),
        ),
        related_tools=(
            'mvp24h_reference_guide({ topic: "specification" })',
            'mvp24h_infrastructure_guide({ topic: "application-services" })',
            'mvp24h_infrastructure_guide({ topic: "pipeline" })',
        ),
    ),
    Template(
        key="cqrs",
        name="CQRS (Command Query Responsibility Segregation)",
        description=(
            "Separates read and write operations with dedicated Command and Query handlers. "
            "Includes pipeline behaviors for cross-cutting concerns."
        ),
        structure="""Solution/
├── ProjectName.Domain/
│   ├── Entities/
│   ├── ValueObjects/
│   └── Events/
├── ProjectName.Application/
│   ├── Commands/
│   ├── Queries/
│   ├── Behaviors/
│   └── Handlers/
├── ProjectName.Infrastructure/
│   ├── Data/
│   └── Messaging/
└── ProjectName.WebAPI/
    └── Controllers/""",
        characteristics=(
            "Separate Command and Query models",
            "Mediator pattern (built-in Mvp24Hours.Mediator)",
            "Pipeline behaviors for validation, logging, etc.",
            "Support for domain events",
            "Optimized read models",
        ),
        packages=(
            "Mvp24Hours.Core 9.*",
            "Mvp24Hours.Application 9.*",
            "Mvp24Hours.Infrastructure.Cqrs 9.*",
            "Mvp24Hours.Infrastructure.Data.EFCore 9.*",
            "FluentValidation 11.*",
        ),
        doc_path="ai-context/template-cqrs.md",
        context_docs=(
            "ai-context/template-cqrs.md",
            "cqrs/commands.md",
            "cqrs/queries.md",
            "cqrs/behaviors.md",
            "database/use-repository.md",
            "database/use-unitofwork.md",
        ),
        checklist=(
            "Create Commands and CommandHandlers",
            "Create Queries and QueryHandlers",
            "Configure Mediator in Program.cs",
            "Add Pipeline Behaviors (Validation, Logging)",
        ),
        alternatives=(
            ("complex-nlayers", "without CQRS"),
            ("event-driven", "with event sourcing"),
        ),
        related_tools=(
            'mvp24h_cqrs_guide({ topic: "commands" })',
            'mvp24h_cqrs_guide({ topic: "queries" })',
            'mvp24h_cqrs_guide({ topic: "behaviors" })',
        ),
        interface_groups=("core", "cqrs"),
    ),
    Template(
        key="event-driven",
        name="Event-Driven Architecture",
        description=(
            "Centered around domain events and integration events. "
            "Supports event sourcing for complete audit trails."
        ),
        structure="""Solution/
├── ProjectName.Domain/
│   ├── Entities/
│   ├── Events/
│   │   ├── DomainEvents/
│   │   └── IntegrationEvents/
│   └── Handlers/
├── ProjectName.Application/
├── ProjectName.Infrastructure/
│   ├── EventStore/
│   └── Messaging/
└── ProjectName.WebAPI/""",
        characteristics=(
            "Domain events for internal state changes",
            "Integration events for external communication",
            "Event Store for persistence (optional)",
            "Eventual consistency",
            "Complete audit trail",
        ),
        packages=(
            "Mvp24Hours.Core 9.*",
            "Mvp24Hours.Infrastructure.Cqrs 9.*",
            "Mvp24Hours.Infrastructure.RabbitMQ 9.*",
            "RabbitMQ.Client 6.*",
        ),
        doc_path="ai-context/template-event-driven.md",
        context_docs=(
            "ai-context/template-event-driven.md",
            "cqrs/domain-events.md",
            "cqrs/integration-events.md",
            "ai-context/messaging-patterns.md",
        ),
        checklist=(
            "Define Domain Events",
            "Define Integration Events",
            "Configure Event Publishers",
            "Configure Event Consumers",
        ),
        alternatives=(
            ("cqrs", "without event sourcing"),
            ("ddd", "with events"),
        ),
        related_tools=(
            'mvp24h_cqrs_guide({ topic: "domain-events" })',
            'mvp24h_cqrs_guide({ topic: "integration-events" })',
            'mvp24h_messaging_patterns({ pattern: "rabbitmq" })',
        ),
        interface_groups=("core", "cqrs", "events"),
    ),
    Template(
        key="hexagonal",
        name="Hexagonal (Ports & Adapters)",
        description=(
            "Clean separation between business logic and external dependencies. "
            "Core has no knowledge of infrastructure."
        ),
        structure="""Solution/
├── ProjectName.Core/
│   ├── Domain/
│   └── Ports/
│       ├── Inbound/
│       └── Outbound/
├── ProjectName.Adapters/
│   ├── Inbound/
│   │   └── WebAPI/
│   └── Outbound/
│       ├── Persistence/
│       └── ExternalServices/
└── ProjectName.Bootstrap/""",
        characteristics=(
            "Ports define contracts",
            "Adapters implement ports",
            "Business logic isolated from infrastructure",
            "Easy to swap external dependencies",
            "High testability",
        ),
        packages=(
            "Mvp24Hours.Core 9.*",
            "Mvp24Hours.Infrastructure.Data.EFCore 9.*",
            "Mvp24Hours.WebAPI 9.*",
        ),
        doc_path="ai-context/template-hexagonal.md",
        context_docs=(
            "ai-context/template-hexagonal.md",
            "core/entity-interfaces.md",
            "database/use-repository.md",
        ),
        checklist=(
            "Define Domain/Core (Entities, Ports)",
            "Create Input Adapters (Controllers)",
            "Create Output Adapters (Repositories)",
            "Configure Dependency Injection",
        ),
        alternatives=(
            ("clean-architecture", "for similar separation"),
            ("complex-nlayers", "for simpler approach"),
        ),
        related_tools=(
            'mvp24h_core_patterns({ topic: "entity-interfaces" })',
            'mvp24h_reference_guide({ topic: "specification" })',
        ),
    ),
    Template(
        key="clean-architecture",
        name="Clean Architecture",
        description=(
            "Follows Uncle Bob's Clean Architecture with strict dependency rules. "
            "All dependencies point inward toward the domain."
        ),
        structure="""Solution/
├── ProjectName.Domain/
│   ├── Entities/
│   ├── ValueObjects/
│   └── Interfaces/
├── ProjectName.Application/
│   ├── UseCases/
│   ├── DTOs/
│   └── Interfaces/
├── ProjectName.Infrastructure/
│   ├── Persistence/
│   └── Services/
└── ProjectName.WebAPI/
    └── Controllers/""",
        characteristics=(
            "Domain at the center",
            "Use Cases in Application layer",
            "Infrastructure implements interfaces",
            "Dependency inversion throughout",
            "Framework-agnostic domain",
        ),
        packages=(
            "Mvp24Hours.Core 9.*",
            "Mvp24Hours.Application 9.*",
            "Mvp24Hours.Infrastructure.Data.EFCore 9.*",
            "Mvp24Hours.WebAPI 9.*",
        ),
        doc_path="ai-context/template-clean-architecture.md",
        context_docs=(
            "ai-context/template-clean-architecture.md",
            "core/entity-interfaces.md",
            "database/use-repository.md",
            "database/use-unitofwork.md",
        ),
        checklist=(
            "Create Domain layer (Entities, Interfaces)",
            "Create Application layer (Use Cases)",
            "Create Infrastructure layer (Repositories)",
            "Create Presentation layer (API)",
        ),
        alternatives=(
            ("complex-nlayers", "for simpler approach"),
            ("ddd", "for richer domain"),
        ),
        related_tools=(
            'mvp24h_core_patterns({ topic: "entity-interfaces" })',
            'mvp24h_reference_guide({ topic: "specification" })',
        ),
    ),
    Template(
        key="ddd",
        name="Domain-Driven Design (DDD)",
        description=(
            "Rich domain model with Aggregates, Value Objects, Domain Services, and Domain Events. "
            "Best for complex business domains."
        ),
        structure="""Solution/
├── ProjectName.Domain/
│   ├── Aggregates/
│   │   └── Customer/
│   │       ├── Customer.cs (Aggregate Root)
│   │       ├── Address.cs (Value Object)
│   │       └── Events/
│   ├── Services/
│   └── Repositories/
├── ProjectName.Application/
│   ├── Commands/
│   ├── Queries/
│   └── EventHandlers/
├── ProjectName.Infrastructure/
└── ProjectName.WebAPI/""",
        characteristics=(
            "Aggregates with Aggregate Roots",
            "Value Objects for identity-less concepts",
            "Domain Services for cross-aggregate logic",
            "Domain Events for state changes",
            "Rich domain model (behavior + data)",
        ),
        packages=(
            "Mvp24Hours.Core 9.*",
            "Mvp24Hours.Application 9.*",
            "Mvp24Hours.Infrastructure.Cqrs 9.*",
            "Mvp24Hours.Infrastructure.Data.EFCore 9.*",
        ),
        doc_path="ai-context/template-ddd.md",
        context_docs=(
            "ai-context/template-ddd.md",
            "core/value-objects.md",
            "core/entity-interfaces.md",
            "cqrs/domain-events.md",
            "database/use-repository.md",
        ),
        checklist=(
            "Define Bounded Contexts",
            "Create Aggregate Roots",
            "Implement Value Objects",
            "Define Domain Events",
            "Create Domain Services",
        ),
        alternatives=(
            ("clean-architecture", "without DDD"),
            ("event-driven", "for event sourcing"),
        ),
        related_tools=(
            'mvp24h_core_patterns({ topic: "value-objects" })',
            'mvp24h_core_patterns({ topic: "entity-interfaces" })',
            'mvp24h_cqrs_guide({ topic: "domain-events" })',
        ),
        interface_groups=("core", "cqrs", "events"),
    ),
    Template(
        key="microservices",
        name="Microservices Architecture",
        description=(
            "Decomposed services with independent deployments. "
            "Each service owns its data and communicates via APIs or messaging."
        ),
        structure="""Solution/
├── src/
│   ├── Services/
│   │   ├── Customer.API/
│   │   ├── Order.API/
│   │   └── Notification.API/
│   ├── BuildingBlocks/
│   │   ├── EventBus/
│   │   └── Contracts/
│   └── ApiGateway/
├── docker-compose.yml
└── kubernetes/""",
        characteristics=(
            "Independent deployable services",
            "Each service has its own database",
            "API Gateway for routing",
            "Event-based communication",
            "Container-ready (Docker/Kubernetes)",
        ),
        packages=(
            "Mvp24Hours.Core 9.*",
            "Mvp24Hours.WebAPI 9.*",
            "Mvp24Hours.Infrastructure.Cqrs 9.*",
            "Mvp24Hours.Infrastructure.RabbitMQ 9.*",
            "Aspire.Hosting 9.*",
        ),
        doc_path="ai-context/template-microservices.md",
        context_docs=(
            "ai-context/template-microservices.md",
            "ai-context/messaging-patterns.md",
            "cqrs/integration-events.md",
            "modernization/aspire.md",
        ),
        checklist=(
            "Define Service Boundaries",
            "Create Service Projects",
            "Configure Inter-Service Communication",
            "Setup API Gateway (if needed)",
            "Configure Aspire Orchestration",
        ),
        alternatives=(("modular-monolith", "as first step"),),
        related_tools=(
            'mvp24h_messaging_patterns({ pattern: "rabbitmq" })',
            'mvp24h_modernization_guide({ feature: "aspire" })',
            'mvp24h_containerization_patterns({ topic: "kubernetes" })',
        ),
        interface_groups=("core", "cqrs", "events"),
    ),
)

TEMPLATES: Mapping[str, Template] = MappingProxyType({t.key: t for t in _TEMPLATES})

DEFAULT_TEMPLATE = "simple-nlayers"

# Alternatives that point outside the catalog on purpose
EXTERNAL_ALTERNATIVES = frozenset({"modular-monolith"})

DECISION_MATRIX_HEADERS = ("Template", "Complexity", "Entities", "Business Rules", "Team Size")
DECISION_MATRIX = (
    ("Minimal API", "Low", "1-5", "Simple", "Solo/Small"),
    ("Simple N-Layers", "Medium", "5-15", "Moderate", "Small"),
    ("Complex N-Layers", "High", "15+", "Complex", "Small/Large"),
    ("CQRS", "High", "10+", "Complex + R/W separation", "Any"),
    ("Event-Driven", "High", "Any", "Audit/Event history", "Any"),
    ("Hexagonal", "High", "Any", "Many integrations", "Small/Large"),
    ("Clean Architecture", "Very High", "20+", "Very Complex", "Large"),
    ("DDD", "Very High", "Any", "Rich Domain Model", "Large"),
    ("Microservices", "Very High", "Service-based", "Independent deploy", "Large"),
)

INTERFACE_GROUPS: Mapping[str, str] = MappingProxyType({
    "core": """### Core Interfaces (Mvp24Hours.Core)

| Interface | Namespace | Description |
|-----------|-----------|-------------|
| `IRepository<TEntity>` | `Mvp24Hours.Core.Contract.Data` | Sync repository |
| `IRepositoryAsync<TEntity>` | `Mvp24Hours.Core.Contract.Data` | Async repository |
| `IUnitOfWork` | `Mvp24Hours.Core.Contract.Data` | Sync unit of work |
| `IUnitOfWorkAsync` | `Mvp24Hours.Core.Contract.Data` | Async unit of work |
| `IBusinessResult<T>` | `Mvp24Hours.Core.Contract.ValueObjects.Logic` | Business result |
| `EntityBase<TKey>` | `Mvp24Hours.Core.Entities` | Entity base class |""",
    "cqrs": """### CQRS Interfaces (Mvp24Hours.Infrastructure.Cqrs)

| Interface | Namespace | Description |
|-----------|-----------|-------------|
| `IMediatorCommand<TResponse>` | `Mvp24Hours.Infrastructure.Cqrs.Abstractions` | Command with return |
| `IMediatorCommandHandler<TCommand, TResponse>` | `Mvp24Hours.Infrastructure.Cqrs.Abstractions` | Command handler |
| `IMediatorQuery<TResponse>` | `Mvp24Hours.Infrastructure.Cqrs.Abstractions` | Query with return |
| `IMediatorQueryHandler<TQuery, TResponse>` | `Mvp24Hours.Infrastructure.Cqrs.Abstractions` | Query handler |
| `IMediatorNotification` | `Mvp24Hours.Infrastructure.Cqrs.Abstractions` | In-process notification |
| `IMediator` | `Mvp24Hours.Infrastructure.Cqrs.Abstractions` | Mediator interface |""",
    "events": """### Event Interfaces

| Interface | Namespace | Description |
|-----------|-----------|-------------|
| `IDomainEvent` | `Mvp24Hours.Core.Contract.Domain.Events` | Domain event marker |
| `IIntegrationEvent` | `Mvp24Hours.Core.Contract.Domain.Events` | Integration event marker |
| `IMvpRabbitMQPublisher` | `Mvp24Hours.Infrastructure.RabbitMQ` | RabbitMQ publisher |
| `IMvpRabbitMQConsumer` | `Mvp24Hours.Infrastructure.RabbitMQ` | RabbitMQ consumer |""",
})


def template_keys() -> Tuple[str, ...]:
    return tuple(TEMPLATES)


def get_template_info(key: str) -> Optional[Template]:
    return TEMPLATES.get(key)
