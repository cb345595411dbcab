"""
Framework module guides: core, infrastructure, reference and modernization.

These guides are backed by the framework documentation files; the quick
references below are appended to whatever the docs directory provides.
"""
from .guide_types import Topic, TopicGuide


# Core module

_INFRASTRUCTURE_ABSTRACTIONS_REFERENCE = """## Quick Reference

| Interface | Description |
|-----------|-------------|
| `IClock` | Abstracts system time (UtcNow, Now, Today) |
| `IGuidGenerator` | Abstracts GUID generation |
| `ICurrentUserProvider` | Current user context |
| `ITenantProvider` | Multi-tenant context |

### Registration

```csharp
// Production
services.AddSingleton<IClock, SystemClock>();
services.AddSingleton<IGuidGenerator, DefaultGuidGenerator>();
services.AddScoped<ICurrentUserProvider, HttpContextUserProvider>();

// Testing
services.AddSingleton<IClock>(new TestClock(DateTime.UtcNow));
services.AddSingleton<IGuidGenerator>(new DeterministicGuidGenerator());
```"""

CORE_GUIDE = TopicGuide(
    tool_name="mvp24h_core_patterns",
    argument="topic",
    title="Mvp24Hours Core Module",
    summary=(
        "The Core module provides foundational patterns and abstractions for building robust .NET "
        "applications.\nIt contains essential Value Objects, DDD patterns, Guard Clauses, and "
        "utilities used by all other modules."
    ),
    overview_doc="core/home.md",
    overview_reference="""## Quick Reference

### Entity Base Classes

```csharp
using Mvp24Hours.Core.Entities;

public class Customer : EntityBase<Guid>
{
    public string Name { get; set; }
}
```

### Guard Clauses

```csharp
Guard.Against.NullOrEmpty(customerId, nameof(customerId));
Guard.Against.NegativeOrZero(amount, nameof(amount));
```

### Value Objects

```csharp
var email = Email.Create("user@example.com");
var money = Money.Create(99.99m, "BRL");
```

## NuGet Package

```bash
dotnet add package Mvp24Hours.Core
```""",
    topics=(
        Topic(
            key="guard-clauses",
            description="Defensive programming utilities for argument validation",
            sources=("core/guard-clauses.md",),
            related=("value-objects", "exceptions"),
            quick_reference="""## Quick Reference

| Guard | Description |
|-------|-------------|
| `Null` | Value is null |
| `NullOrEmpty` | String/collection is null or empty |
| `NullOrWhiteSpace` | String is null, empty, or whitespace |
| `NegativeOrZero` | Number is negative or zero |
| `OutOfRange` | Number outside min/max range |
| `InvalidEmail` | String is not valid email format |

```csharp
Guard.Against.NullOrEmpty(name, nameof(name));
Guard.Against.OutOfRange(age, nameof(age), 18, 120);
```""",
        ),
        Topic(
            key="value-objects",
            description="Immutable domain primitives (Email, CPF, CNPJ, Money, etc.)",
            sources=("core/value-objects.md",),
            related=("guard-clauses", "entity-interfaces", "database/use-entity.md"),
            quick_reference="""## Quick Reference

| Value Object | Description |
|--------------|-------------|
| `Email` | Email with domain validation |
| `Cpf` / `Cnpj` | Brazilian documents with validation |
| `Money` | Decimal with currency |
| `Address` | Complete address |
| `DateRange` | Start/end date range |

```csharp
var money = Money.Create(99.99m, "BRL");
var total = money.Add(Money.Create(10m, "BRL"));
```""",
        ),
        Topic(
            key="strongly-typed-ids",
            description="Type-safe entity identifiers to prevent ID mix-ups",
            sources=("core/strongly-typed-ids.md",),
            related=("entity-interfaces", "value-objects", "database/use-entity.md"),
            quick_reference="""## Quick Reference

```csharp
public readonly record struct CustomerId(Guid Value)
{
    public static CustomerId New() => new(Guid.NewGuid());
}

builder.Property(c => c.Id)
    .HasConversion(id => id.Value, value => new CustomerId(value));
```""",
        ),
        Topic(
            key="functional-patterns",
            description="Maybe<T>, Either<TLeft, TRight> monads for null safety",
            sources=("core/functional-patterns.md",),
            related=("exceptions", "cqrs/commands.md", "cqrs/queries.md"),
            quick_reference="""## Quick Reference

| Pattern | Description |
|---------|-------------|
| `Maybe<T>` | Null-safe wrapper (Some/None) |
| `Either<TLeft, TRight>` | Error-or-success (Left/Right) |
| `IBusinessResult<T>` | Operation result with messages |""",
        ),
        Topic(
            key="smart-enums",
            description="Enumeration<T> base class for rich enumerations with behavior",
            sources=("core/smart-enums.md",),
            related=("value-objects", "entity-interfaces"),
        ),
        Topic(
            key="entity-interfaces",
            description="IEntity, IAuditableEntity, ISoftDeletable, ITenantEntity contracts",
            sources=("core/entity-interfaces.md",),
            related=(
                "strongly-typed-ids", "value-objects",
                "database/use-entity.md", "database/use-repository.md",
            ),
            quick_reference="""## Quick Reference

| Interface | Description |
|-----------|-------------|
| `IEntityBase<TKey>` | Base entity with typed ID |
| `IEntityLog` | Full audit (Created, Modified, Removed with user) |
| `IEntityLogDate` | Date audit only (without user) |
| `EntityBase<TKey>` | Base class implementation |""",
        ),
        Topic(
            key="infrastructure",
            description="IClock, IGuidGenerator abstractions for testability (alias for infrastructure-abstractions)",
            sources=("core/infrastructure-abstractions.md",),
            related=(
                "infrastructure-abstractions", "modernization/time-provider.md",
                "ai-context/testing-patterns.md",
            ),
            quick_reference=_INFRASTRUCTURE_ABSTRACTIONS_REFERENCE,
            alias_of="infrastructure-abstractions",
        ),
        Topic(
            key="infrastructure-abstractions",
            description="IClock, IGuidGenerator, ICurrentUserProvider abstractions",
            sources=("core/infrastructure-abstractions.md",),
            related=(
                "modernization/time-provider.md", "ai-context/testing-patterns.md",
                "entity-interfaces",
            ),
            quick_reference=_INFRASTRUCTURE_ABSTRACTIONS_REFERENCE,
        ),
        Topic(
            key="exceptions",
            description="BusinessException, ValidationException, NotFoundException hierarchy",
            sources=("core/exceptions.md",),
            related=(
                "guard-clauses", "functional-patterns",
                "ai-context/error-handling-patterns.md", "modernization/problem-details.md",
            ),
            quick_reference="""## Quick Reference

| Exception | HTTP Status | Description |
|-----------|-------------|-------------|
| `ValidationException` | 400 | Input validation failures |
| `NotFoundException` | 404 | Entity not found |
| `BusinessRuleException` | 422 | Business rule violation |
| `Mvp24HoursException` | 500 | Base exception |""",
        ),
    ),
)


# Infrastructure

INFRASTRUCTURE_GUIDE = TopicGuide(
    tool_name="mvp24h_infrastructure_guide",
    argument="topic",
    title="Infrastructure Guide",
    summary=(
        "Pipelines, caching, Web API, background jobs and application services "
        "built on the Mvp24Hours infrastructure packages."
    ),
    overview_doc="home.md",
    overview_reference="""## Quick Reference

### Pipeline Pattern
For complex workflows with multiple processing steps. Supports typed pipelines, middleware, fork/join, and resilience patterns.

### Caching
Redis integration for distributed caching with support for multi-level cache, cache-aside and smart invalidation.

### CronJob
Scheduled background tasks with CRON expressions, resilience patterns and observability.

## NuGet Packages

| Package | Description |
|---------|-------------|
| `Mvp24Hours.Infrastructure.Pipe` | Pipeline/Pipe and Filters pattern |
| `Mvp24Hours.Infrastructure.Caching.Redis` | Redis caching implementation |
| `Mvp24Hours.Infrastructure.CronJob` | CronJob/Background tasks |
| `Mvp24Hours.WebAPI` | Web API utilities and extensions |
| `Mvp24Hours.Application` | Application services base classes |""",
    other_tools=(
        ("mvp24h_cqrs_guide", "CQRS/Mediator patterns"),
        ("mvp24h_core_patterns", "Core module patterns and abstractions"),
        ("mvp24h_observability_setup", "Logging, tracing, and metrics"),
        ("mvp24h_modernization_guide", ".NET 9 modern patterns"),
    ),
    topics=(
        Topic(
            key="pipeline",
            description="Pipe and Filters pattern for composing complex operations",
            sources=("pipeline.md",),
            related=("cqrs/behaviors.md", "cqrs/saga/home.md"),
            quick_reference="""## Quick Reference - Pipeline Interfaces

| Interface | Description |
|-----------|-------------|
| `IPipeline` | Synchronous pipeline |
| `IPipelineAsync` | Asynchronous pipeline |
| `IOperation<T>` | Operation/filter interface |
| `OperationBaseAsync` | Async operation base class |
| `IPipelineMessage` | Message/context passed through pipeline |""",
        ),
        Topic(
            key="caching",
            description="Redis caching basics with Mvp24Hours",
            sources=("caching-advanced.md",),
            related=("modernization/hybrid-cache.md", "cqrs/integration-caching.md"),
            quick_reference="""## Quick Reference - Caching Interfaces

| Interface | Description |
|-----------|-------------|
| `ICacheProvider` | Cache provider abstraction |
| `ICacheService` | High-level cache service |""",
        ),
        Topic(
            key="caching-advanced",
            description="Advanced caching patterns (multi-level, invalidation, resilience)",
            sources=("caching-advanced.md",),
            related=(
                "modernization/hybrid-cache.md", "cqrs/integration-caching.md",
                "database/use-repository.md",
            ),
        ),
        Topic(
            key="webapi",
            description="ASP.NET Web API configuration and patterns",
            sources=("webapi.md",),
            related=("webapi-advanced", "modernization/minimal-apis.md", "modernization/native-openapi.md"),
            quick_reference="""## Quick Reference - WebAPI Extensions

| Extension | Description |
|-----------|-------------|
| `AddMvp24HoursWebEssential()` | Essential services |
| `AddMvp24HoursMapService()` | AutoMapper setup |
| `AddMvp24HoursSwagger()` | Swagger/OpenAPI |
| `AddMvp24HoursWebExceptions()` | Exception handling |
| `UseMvp24HoursCorrelationId()` | Correlation ID propagation |""",
        ),
        Topic(
            key="webapi-advanced",
            description="Advanced Web API features (security, idempotency, versioning)",
            sources=("webapi-advanced.md",),
            related=("webapi", "modernization/rate-limiting.md", "modernization/problem-details.md"),
        ),
        Topic(
            key="cronjob",
            description="Background job scheduling with CRON expressions",
            sources=("cronjob.md",),
            related=("cronjob-advanced", "cronjob-resilience", "cronjob-observability"),
            quick_reference="""## Quick Reference - CronJob Classes

| Class | Description |
|-------|-------------|
| `CronJobService<T>` | Base CronJob service |
| `ResilientCronJobService<T>` | CronJob with resilience |
| `AdvancedCronJobService<T>` | Full-featured CronJob |""",
        ),
        Topic(
            key="cronjob-advanced",
            description="Advanced CronJob features (context, dependencies, distributed locking)",
            sources=("cronjob-advanced.md",),
            related=("cronjob", "cronjob-resilience", "cronjob-observability"),
        ),
        Topic(
            key="cronjob-observability",
            description="CronJob health checks, metrics, and tracing",
            sources=("cronjob-observability.md",),
            related=("cronjob", "cronjob-advanced", "observability/metrics.md", "observability/tracing.md"),
        ),
        Topic(
            key="cronjob-resilience",
            description="CronJob retry, circuit breaker, and overlapping prevention",
            sources=("cronjob-resilience.md",),
            related=("cronjob", "cronjob-advanced", "modernization/generic-resilience.md"),
        ),
        Topic(
            key="application-services",
            description="Service layer patterns with Mvp24Hours",
            sources=("application-services.md",),
            related=("database/use-repository.md", "database/use-unitofwork.md", "cqrs/commands.md"),
            quick_reference="""## Quick Reference - Application Services

| Class | Description |
|-------|-------------|
| `RepositoryService<T, TUoW>` | Sync service base |
| `RepositoryServiceAsync<T, TUoW>` | Async service base |
| `RepositoryPagingServiceAsync<T, TUoW>` | Async with pagination |""",
        ),
    ),
)


# Reference

REFERENCE_GUIDE = TopicGuide(
    tool_name="mvp24h_reference_guide",
    argument="topic",
    title="Reference Guide",
    summary=(
        "The Reference Guide provides documentation for cross-cutting concerns and supporting "
        "patterns used throughout Mvp24Hours applications: mapping, validation, documentation "
        "and error handling."
    ),
    overview_reference="""## Quick Reference

### Mapping (AutoMapper)

```csharp
public class CustomerDto : IMapFrom
{
    public void Mapping(Profile profile)
        => profile.CreateMap<Customer, CustomerDto>();
}

builder.Services.AddMvp24HoursMapService(Assembly.GetExecutingAssembly());
```

### Validation (FluentValidation)

```csharp
public class CustomerValidator : AbstractValidator<Customer>
{
    public CustomerValidator()
    {
        RuleFor(x => x.Name).NotEmpty().MaximumLength(100);
    }
}
```""",
    topics=(
        Topic(
            key="mapping",
            description="AutoMapper configuration and IMapFrom interface for object-to-object mapping",
            sources=("mapping.md",),
            related=("cqrs/commands.md", "database/use-repository.md", "application-services.md"),
        ),
        Topic(
            key="validation",
            description="FluentValidation patterns and DataAnnotations for data validation",
            sources=("validation.md",),
            related=("cqrs/validation-behavior.md", "error-handling", "application-services.md"),
        ),
        Topic(
            key="specification",
            description="Specification pattern implementation for query composition",
            sources=("specification.md",),
            related=("cqrs/specifications.md", "database/use-repository.md"),
            quick_reference="""## Quick Reference

```csharp
public class ActiveCustomerSpec : ISpecificationQuery<Customer>
{
    public Expression<Func<Customer, bool>> IsSatisfiedByExpression
        => c => c.Active && c.Removed == null;
}

var customers = await _repository.GetBySpecificationAsync(new ActiveCustomerSpec());
```""",
        ),
        Topic(
            key="documentation",
            description="API documentation with Swagger and Native OpenAPI (.NET 9+)",
            sources=("documentation.md",),
            related=("modernization/native-openapi.md", "api-versioning"),
        ),
        Topic(
            key="migration",
            description="Migration guides from legacy to modern APIs and version upgrades",
            sources=("migration.md",),
            related=(
                "observability/migration.md", "modernization/migration-guide.md",
                "cqrs/getting-started.md",
            ),
        ),
        Topic(
            key="api-versioning",
            description="API versioning patterns (URL, Query String, Header, Media Type)",
            sources=("ai-context/api-versioning-patterns.md",),
            related=("documentation", "error-handling", "modernization/minimal-apis.md"),
        ),
        Topic(
            key="error-handling",
            description="Exception handling, ProblemDetails, and Result pattern with IBusinessResult",
            sources=("ai-context/error-handling-patterns.md",),
            related=(
                "validation", "modernization/problem-details.md",
                "core/exceptions.md", "cqrs/validation-behavior.md",
            ),
            quick_reference="""## Quick Reference

```csharp
public async Task<IBusinessResult<CustomerDto>> GetByIdAsync(int id)
{
    var customer = await _repository.GetByIdAsync(id);
    if (customer == null)
        return new CustomerDto().ToBusinessNotFound("Customer not found");
    return customer.ToDto().ToBusinessSuccess();
}
```""",
        ),
        Topic(
            key="telemetry",
            description="Telemetry configuration (deprecated - migrate to ILogger and OpenTelemetry)",
            sources=("telemetry.md",),
            related=("observability/migration.md", "observability/logging.md", "observability/tracing.md"),
        ),
    ),
)


# .NET 9 modernization

MODERNIZATION_GUIDE = TopicGuide(
    tool_name="mvp24h_modernization_guide",
    argument="feature",
    title=".NET 9 Modernization Guide",
    summary=(
        ".NET 9 introduces many features for building modern, resilient, and performant "
        "applications.\nThis guide covers the native .NET 9 features adopted by the Mvp24Hours framework."
    ),
    overview_doc="ai-context/modernization-patterns.md",
    overview_reference="""## Migration Considerations

| From | To | Benefit |
|------|-----|---------|
| Polly v7 | Microsoft.Extensions.Resilience | Built-in, standardized |
| IMemoryCache + IDistributedCache | HybridCache | Unified API, stampede protection |
| DateTime.Now | TimeProvider | Testability |
| Swashbuckle | Native OpenAPI | Smaller footprint |
| ConcurrentQueue + AutoResetEvent | System.Threading.Channels | Modern async-first API |
| TelemetryHelper | ILogger + OpenTelemetry | Industry standard |""",
    other_tools=(
        ('mvp24h_modernization_guide({ feature: "dotnet9-features" })', "Complete .NET 9 features overview"),
        ('mvp24h_modernization_guide({ feature: "migration-guide" })', "Migration from legacy code"),
    ),
    topics=(
        Topic(
            key="http-resilience",
            description="HTTP client resilience",
            sources=("modernization/http-resilience.md",),
            related=("generic-resilience", "rate-limiting"),
            quick_reference="""## Quick Reference

### Key Package
```bash
dotnet add package Microsoft.Extensions.Http.Resilience
```

### Basic Usage
```csharp
builder.Services.AddHttpClient("my-api")
    .AddStandardResilienceHandler();
```""",
        ),
        Topic(
            key="generic-resilience",
            description="Generic resilience patterns",
            sources=("modernization/generic-resilience.md",),
            related=("http-resilience", "rate-limiting"),
        ),
        Topic(
            key="rate-limiting",
            description="API rate limiting",
            sources=("modernization/rate-limiting.md",),
            related=("http-resilience", "generic-resilience"),
        ),
        Topic(
            key="hybrid-cache",
            description="L1/L2 caching with stampede protection",
            sources=("modernization/hybrid-cache.md",),
            related=("output-caching",),
            quick_reference="""## Quick Reference

### Key Package
```bash
dotnet add package Microsoft.Extensions.Caching.Hybrid
```

### Basic Usage
```csharp
var product = await cache.GetOrCreateAsync(
    $"product:{id}",
    async ct => await repository.GetByIdAsync(id, ct));
```""",
        ),
        Topic(
            key="output-caching",
            description="HTTP response caching",
            sources=("modernization/output-caching.md",),
            related=("hybrid-cache",),
        ),
        Topic(
            key="time-provider",
            description="Testable time abstraction",
            sources=("modernization/time-provider.md",),
            related=("periodic-timer",),
        ),
        Topic(
            key="periodic-timer",
            description="Async-friendly periodic timer",
            sources=("modernization/periodic-timer.md",),
            related=("time-provider", "channels"),
        ),
        Topic(
            key="keyed-services",
            description="Key-based DI resolution",
            sources=("modernization/keyed-services.md",),
            related=("options-configuration",),
        ),
        Topic(
            key="options-pattern",
            description="Strongly-typed configuration",
            sources=("modernization/options-configuration.md",),
            related=("keyed-services",),
            alias_of="options-configuration",
        ),
        Topic(
            key="options-configuration",
            description="Strongly-typed configuration with validation",
            sources=("modernization/options-configuration.md",),
            related=("keyed-services",),
        ),
        Topic(
            key="problem-details",
            description="RFC 7807 error responses",
            sources=("modernization/problem-details.md",),
            related=("minimal-apis", "native-openapi"),
        ),
        Topic(
            key="minimal-apis",
            description="Lightweight endpoints with TypedResults",
            sources=("modernization/minimal-apis.md",),
            related=("problem-details", "native-openapi"),
        ),
        Topic(
            key="native-openapi",
            description="Built-in OpenAPI support",
            sources=("modernization/native-openapi.md",),
            related=("minimal-apis", "problem-details"),
        ),
        Topic(
            key="source-generators",
            description="AOT-friendly code generation",
            sources=("modernization/source-generators.md",),
            related=("aspire",),
        ),
        Topic(
            key="aspire",
            description=".NET Aspire cloud-native stack",
            sources=("modernization/aspire.md",),
            related=("source-generators", "channels"),
        ),
        Topic(
            key="channels",
            description="High-performance producer/consumer",
            sources=("modernization/channels.md",),
            related=("periodic-timer", "aspire"),
        ),
        Topic(
            key="dotnet9-features",
            description=".NET 9 features overview",
            sources=("modernization/dotnet9-features.md",),
            related=("migration-guide",),
        ),
        Topic(
            key="migration-guide",
            description="Migration from legacy code",
            sources=("modernization/migration-guide.md",),
            related=("dotnet9-features",),
        ),
    ),
)
