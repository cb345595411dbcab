"""
Practice guides: CQRS, testing, security, containerization, messaging and
observability.

Each topic names the document (or document section) it is taken from and
carries a condensed inline version that is served when the docs directory
does not have it.
"""
from .guide_types import Topic, TopicGuide


# CQRS / Mediator

CQRS_GUIDE = TopicGuide(
    tool_name="mvp24h_cqrs_guide",
    argument="topic",
    title="CQRS/Mediator Guide",
    summary=(
        "Command Query Responsibility Segregation (CQRS) separates read and write operations into "
        "different models.\nMvp24Hours provides a built-in mediator implementation that doesn't "
        "require MediatR."
    ),
    overview_doc="cqrs/home.md",
    overview_reference="""## Key Components

| Component | Purpose |
|-----------|---------|
| `ICommand<TResponse>` | Commands that return a response |
| `IQuery<TResponse>` | Queries that return data |
| `INotification` | Fire-and-forget notifications |
| `ICommandHandler<TCommand, TResponse>` | Handles commands |
| `IQueryHandler<TQuery, TResponse>` | Handles queries |
| `IPipelineBehavior<TRequest, TResponse>` | Cross-cutting concerns |

## Quick Setup

```csharp
builder.Services.AddMvp24HoursMediator(typeof(Program).Assembly);
```

## When to Use CQRS

**Use when:** read and write models differ, write operations carry complex business
logic, or the system is event-driven or audited.

**Avoid when:** the application is simple CRUD or the team is unfamiliar with the pattern.""",
    other_tools=(
        ("mvp24h_messaging_patterns", "Outbox, RabbitMQ and background processing"),
        ("mvp24h_testing_patterns", "Testing handlers and behaviors"),
    ),
    topics=(
        Topic(
            key="commands",
            description="Commands and command handlers that change state",
            sources=("cqrs/commands.md",),
            related=("queries", "validation", "behaviors"),
            inline="""# CQRS Commands

Commands represent intentions to change state. They are named with verbs.

```csharp
public record CreateCustomerCommand(string Name, string Email)
    : ICommand<IBusinessResult<CustomerDto>>;

public class CreateCustomerCommandHandler
    : ICommandHandler<CreateCustomerCommand, IBusinessResult<CustomerDto>>
{
    private readonly IUnitOfWorkAsync _uow;

    public CreateCustomerCommandHandler(IUnitOfWorkAsync uow) => _uow = uow;

    public async Task<IBusinessResult<CustomerDto>> Handle(
        CreateCustomerCommand request, CancellationToken cancellationToken)
    {
        var customer = new Customer(request.Name, request.Email);
        await _uow.GetRepository<Customer>().AddAsync(customer, cancellationToken);
        await _uow.SaveChangesAsync(cancellationToken);
        return customer.ToDto().ToBusinessSuccess();
    }
}
```""",
        ),
        Topic(
            key="queries",
            description="Read-only queries and query handlers",
            sources=("cqrs/queries.md",),
            related=("commands", "cqrs/specifications.md"),
            inline="""# CQRS Queries

Queries read state and never cause side effects.

```csharp
public record GetCustomerByIdQuery(int Id) : IQuery<IBusinessResult<CustomerDto>>;

public class GetCustomerByIdQueryHandler
    : IQueryHandler<GetCustomerByIdQuery, IBusinessResult<CustomerDto>>
{
    public async Task<IBusinessResult<CustomerDto>> Handle(
        GetCustomerByIdQuery request, CancellationToken cancellationToken)
    {
        var customer = await _repository.GetByIdAsync(request.Id, cancellationToken);
        return customer is null
            ? new CustomerDto().ToBusinessNotFound("Customer not found")
            : customer.ToDto().ToBusinessSuccess();
    }
}
```""",
        ),
        Topic(
            key="notifications",
            description="In-process notifications with multiple handlers",
            sources=("cqrs/notifications.md",),
            related=("domain-events", "integration-events"),
            inline="""# CQRS Notifications

Notifications are published to every registered handler.

```csharp
public record CustomerCreatedNotification(int CustomerId) : INotification;

public class SendWelcomeEmailHandler : INotificationHandler<CustomerCreatedNotification>
{
    public Task Handle(CustomerCreatedNotification notification, CancellationToken cancellationToken)
        => _emailService.SendWelcomeAsync(notification.CustomerId, cancellationToken);
}

await _mediator.PublishAsync(new CustomerCreatedNotification(customer.Id));
```""",
        ),
        Topic(
            key="domain-events",
            description="Domain events raised by aggregates and dispatched on save",
            sources=("cqrs/domain-events.md",),
            related=("notifications", "integration-events", "event-sourcing"),
            inline="""# Domain Events

Aggregates record domain events; they are dispatched after the unit of work commits.

```csharp
public record OrderPlacedEvent(Guid OrderId, decimal Total) : IDomainEvent;

public class Order : AggregateRoot<Guid>
{
    public void Place()
    {
        Status = OrderStatus.Placed;
        AddDomainEvent(new OrderPlacedEvent(Id, Total));
    }
}
```""",
        ),
        Topic(
            key="integration-events",
            description="Events published to other services through the outbox",
            sources=("cqrs/integration-events.md",),
            related=("domain-events", "saga", "ai-context/messaging-patterns.md"),
            inline="""# Integration Events

Integration events cross service boundaries. Write them to the outbox in the same
transaction as the state change and publish them from a background processor.

```csharp
public record OrderPlacedIntegrationEvent(Guid OrderId) : IIntegrationEvent;

await _outbox.AddAsync(new OrderPlacedIntegrationEvent(order.Id), cancellationToken);
```""",
        ),
        Topic(
            key="behaviors",
            description="Pipeline behaviors for logging, validation, caching and transactions",
            sources=("cqrs/behaviors.md",),
            related=("validation", "resilience", "extensibility"),
            inline="""# Pipeline Behaviors

Behaviors wrap every request handled by the mediator.

| Behavior | Purpose |
|----------|---------|
| `LoggingBehavior` | Request/response logging |
| `PerformanceBehavior` | Slow request detection |
| `ValidationBehavior` | FluentValidation before the handler |
| `CachingBehavior` | Query result caching |
| `TransactionBehavior` | Unit of work per command |

```csharp
builder.Services.AddMvp24HoursMediator(options =>
{
    options.RegisterHandlersFromAssembly(typeof(Program).Assembly);
    options.AddLoggingBehavior();
    options.AddValidationBehavior();
    options.AddTransactionBehavior();
});
```""",
        ),
        Topic(
            key="validation",
            description="Request validation with FluentValidation behaviors",
            sources=("cqrs/validation-behavior.md",),
            related=("behaviors", "commands"),
            inline="""# Validation in CQRS

```csharp
public class CreateCustomerCommandValidator : AbstractValidator<CreateCustomerCommand>
{
    public CreateCustomerCommandValidator()
    {
        RuleFor(x => x.Name).NotEmpty().MaximumLength(100);
        RuleFor(x => x.Email).NotEmpty().EmailAddress();
    }
}
```

The validation behavior runs every validator for the request and returns the
failures without calling the handler.""",
        ),
        Topic(
            key="saga",
            description="Long-running workflows with compensation",
            sources=("cqrs/saga/home.md",),
            related=("integration-events", "resilience"),
            inline="""# Saga Pattern

A saga coordinates a multi-step business transaction. Every step declares a
compensation that undoes it when a later step fails.

```csharp
public class PlaceOrderSaga : SagaBase<PlaceOrderSagaData>
{
    protected override void ConfigureSteps()
    {
        AddStep<ReserveStockStep>().CompensateWith<ReleaseStockStep>();
        AddStep<ChargePaymentStep>().CompensateWith<RefundPaymentStep>();
        AddStep<ConfirmOrderStep>();
    }
}
```""",
        ),
        Topic(
            key="event-sourcing",
            description="Aggregates persisted as event streams",
            sources=("cqrs/event-sourcing/home.md",),
            related=("domain-events", "saga"),
        ),
        Topic(
            key="resilience",
            description="Retry, circuit breaker and idempotency for commands",
            sources=("cqrs/resilience/home.md",),
            related=("behaviors", "saga"),
        ),
        Topic(
            key="multi-tenancy",
            description="Tenant resolution and isolation in handlers",
            sources=("cqrs/multi-tenancy.md",),
            related=("behaviors",),
        ),
        Topic(
            key="scheduled-commands",
            description="Commands scheduled for later execution",
            sources=("cqrs/scheduled-commands.md",),
            related=("commands", "resilience"),
        ),
        Topic(
            key="extensibility",
            description="Custom behaviors, hooks and mediator extensions",
            sources=("cqrs/extensibility.md",),
            related=("behaviors",),
        ),
        Topic(
            key="best-practices",
            description="Naming, handler size and transaction boundaries",
            sources=("cqrs/best-practices.md",),
            related=("commands", "queries"),
        ),
        Topic(
            key="api-reference",
            description="Interfaces and extension methods of the mediator",
            sources=("cqrs/api-reference.md",),
        ),
        Topic(
            key="migration-mediatr",
            description="Moving an existing MediatR codebase to the Mvp24Hours mediator",
            sources=("cqrs/migration-mediatr.md",),
            related=("api-reference",),
            inline="""# Migration from MediatR

| MediatR | Mvp24Hours |
|---------|------------|
| `IRequest<T>` | `ICommand<T>` / `IQuery<T>` |
| `IRequestHandler<TRequest, T>` | `ICommandHandler<TCommand, T>` / `IQueryHandler<TQuery, T>` |
| `INotification` | `INotification` |
| `mediator.Send(...)` | `mediator.SendAsync(...)` |
| `services.AddMediatR(...)` | `services.AddMvp24HoursMediator(...)` |""",
        ),
    ),
)


# Testing

TESTING_GUIDE = TopicGuide(
    tool_name="mvp24h_testing_patterns",
    argument="topic",
    title="Testing Patterns",
    summary=(
        "Comprehensive testing strategies for .NET applications: many unit tests, "
        "some integration tests and few end-to-end tests."
    ),
    overview_reference="""## Quick Start

```bash
dotnet add package xunit
dotnet add package xunit.runner.visualstudio
dotnet add package Moq
dotnet add package FluentAssertions
dotnet add package Microsoft.AspNetCore.Mvc.Testing
```""",
    topics=(
        Topic(
            key="unit-testing",
            description="xUnit, test organization, assertions",
            sources=("ai-context/testing-patterns.md#Unit Testing",),
            related=("mocking", "architecture-testing"),
            inline="""# Unit Testing

Name tests `MethodName_StateUnderTest_ExpectedBehavior` and follow Arrange-Act-Assert.

```csharp
public class CustomerServiceTests
{
    [Fact]
    public async Task CreateAsync_WithValidData_ReturnsSuccess()
    {
        // Arrange
        var repository = new Mock<IRepositoryAsync<Customer>>();
        var service = new CustomerService(repository.Object);

        // Act
        var result = await service.CreateAsync(new CreateCustomerDto("Ana", "ana@example.com"));

        // Assert
        result.HasErrors.Should().BeFalse();
    }
}
```""",
        ),
        Topic(
            key="integration-testing",
            description="WebApplicationFactory, database testing",
            sources=("ai-context/testing-patterns.md#Integration Testing",),
            related=("test-containers", "api-testing"),
            inline="""# Integration Testing

```csharp
public class CustomersApiTests : IClassFixture<WebApplicationFactory<Program>>
{
    private readonly HttpClient _client;

    public CustomersApiTests(WebApplicationFactory<Program> factory)
        => _client = factory.CreateClient();

    [Fact]
    public async Task GetAll_ReturnsOk()
    {
        var response = await _client.GetAsync("/api/customers");
        response.StatusCode.Should().Be(HttpStatusCode.OK);
    }
}
```""",
        ),
        Topic(
            key="mocking",
            description="Moq, NSubstitute patterns",
            sources=("ai-context/testing-patterns.md#Mocking",),
            related=("unit-testing",),
            inline="""# Mocking with Moq

```csharp
var repository = new Mock<IRepositoryAsync<Customer>>();
repository.Setup(r => r.GetByIdAsync(1, It.IsAny<CancellationToken>()))
    .ReturnsAsync(new Customer { Id = 1, Name = "Ana" });

repository.Verify(r => r.AddAsync(It.IsAny<Customer>(), It.IsAny<CancellationToken>()), Times.Once);
```""",
        ),
        Topic(
            key="test-containers",
            description="Docker-based integration tests",
            sources=("ai-context/testing-patterns.md#TestContainers",),
            related=("integration-testing",),
            inline="""# TestContainers

```bash
dotnet add package Testcontainers.PostgreSql
```

```csharp
public class DatabaseFixture : IAsyncLifetime
{
    private readonly PostgreSqlContainer _container = new PostgreSqlBuilder().Build();

    public string ConnectionString => _container.GetConnectionString();

    public Task InitializeAsync() => _container.StartAsync();
    public Task DisposeAsync() => _container.DisposeAsync().AsTask();
}
```""",
        ),
        Topic(
            key="api-testing",
            description="HTTP client testing, response validation",
            sources=("ai-context/testing-patterns.md#API Testing",),
            related=("integration-testing",),
        ),
        Topic(
            key="architecture-testing",
            description="ArchUnitNET, dependency validation",
            sources=("ai-context/testing-patterns.md#Architecture Testing",),
            related=("unit-testing",),
            inline="""# Architecture Testing

```csharp
[Fact]
public void Domain_ShouldNotDependOn_Infrastructure()
{
    IArchRule rule = Types().That().ResideInNamespace("MyApp.Domain")
        .Should().NotDependOnAny(Types().That().ResideInNamespace("MyApp.Infrastructure"));
    rule.Check(Architecture);
}
```""",
        ),
    ),
)


# Security

SECURITY_GUIDE = TopicGuide(
    tool_name="mvp24h_security_patterns",
    argument="topic",
    title="Security Patterns",
    summary="Authentication, authorization and data protection for ASP.NET Core applications.",
    overview_reference="""## OWASP Top 10 Coverage

| Risk | Covered by |
|------|------------|
| Broken Access Control | `authorization` |
| Cryptographic Failures | `data-protection` |
| Injection | `input-validation` |
| Identification and Authentication Failures | `authentication`, `jwt` |
| Security Misconfiguration | `secrets-management` |""",
    topics=(
        Topic(
            key="authentication",
            description="ASP.NET Core Identity, cookies and external providers",
            sources=("ai-context/security-patterns.md#Authentication",),
            related=("jwt", "authorization"),
            inline="""# Authentication

```csharp
builder.Services.AddIdentity<ApplicationUser, IdentityRole>()
    .AddEntityFrameworkStores<ApplicationDbContext>()
    .AddDefaultTokenProviders();

app.UseAuthentication();
app.UseAuthorization();
```""",
        ),
        Topic(
            key="authorization",
            description="Role, policy and resource-based authorization",
            sources=("ai-context/security-patterns.md#Authorization",),
            related=("authentication", "jwt"),
            inline="""# Authorization

```csharp
builder.Services.AddAuthorization(options =>
{
    options.AddPolicy("CanManageOrders", policy =>
        policy.RequireRole("Admin").RequireClaim("department", "sales"));
});

[Authorize(Policy = "CanManageOrders")]
public class OrdersController : ControllerBase { }
```""",
        ),
        Topic(
            key="jwt",
            description="JWT bearer tokens and refresh tokens",
            sources=("ai-context/security-patterns.md#JWT",),
            related=("authentication", "secrets-management"),
            inline="""# JWT Authentication

```csharp
builder.Services.AddAuthentication(JwtBearerDefaults.AuthenticationScheme)
    .AddJwtBearer(options =>
    {
        options.TokenValidationParameters = new TokenValidationParameters
        {
            ValidateIssuer = true,
            ValidateAudience = true,
            ValidateLifetime = true,
            ValidateIssuerSigningKey = true,
            ValidIssuer = jwt.Issuer,
            ValidAudience = jwt.Audience,
            IssuerSigningKey = new SymmetricSecurityKey(Encoding.UTF8.GetBytes(jwt.Secret)),
        };
    });
```""",
        ),
        Topic(
            key="data-protection",
            description="Data Protection API, password hashing and field encryption",
            sources=("ai-context/security-patterns.md#Data Protection",),
            related=("secrets-management",),
        ),
        Topic(
            key="input-validation",
            description="FluentValidation, sanitization and request limits",
            sources=("ai-context/security-patterns.md#Input Validation",),
            related=("validation.md", "ai-context/error-handling-patterns.md"),
        ),
        Topic(
            key="secrets-management",
            description="User secrets, Key Vault and environment variables",
            sources=("ai-context/security-patterns.md#Secrets Management",),
            related=("jwt", "data-protection"),
            inline="""# Secrets Management

```bash
dotnet user-secrets init
dotnet user-secrets set "Jwt:Secret" "development-only-secret"
```

In production, load secrets from environment variables or Azure Key Vault and bind
them with the options pattern. Never commit secrets to `appsettings.json`.""",
        ),
    ),
)


# Containerization

CONTAINERIZATION_GUIDE = TopicGuide(
    tool_name="mvp24h_containerization_patterns",
    argument="topic",
    title="Containerization Patterns",
    summary="Docker and Kubernetes patterns for deploying .NET applications.",
    overview_reference="""## Quick Start

```bash
# Build image
docker build -t myapp:latest .

# Run locally
docker run -p 8080:8080 myapp:latest

# Docker Compose
docker compose up -d
```""",
    topics=(
        Topic(
            key="dockerfile",
            description="Multi-stage builds, layer caching and non-root images",
            sources=("ai-context/containerization-patterns.md#Dockerfile",),
            related=("docker-compose", "health-checks"),
            inline="""# Dockerfile Best Practices

```dockerfile
FROM mcr.microsoft.com/dotnet/sdk:9.0 AS build
WORKDIR /src
COPY *.csproj ./
RUN dotnet restore
COPY . .
RUN dotnet publish -c Release -o /app/publish

FROM mcr.microsoft.com/dotnet/aspnet:9.0 AS runtime
WORKDIR /app
RUN adduser --disabled-password --gecos "" appuser
USER appuser
COPY --from=build /app/publish .
ENV ASPNETCORE_URLS=http://+:8080
ENTRYPOINT ["dotnet", "MyApp.dll"]
```""",
        ),
        Topic(
            key="docker-compose",
            description="Local environments with databases, caches and brokers",
            sources=("ai-context/containerization-patterns.md#Docker Compose",),
            related=("dockerfile", "configuration"),
        ),
        Topic(
            key="kubernetes",
            description="Deployments, services, ingress and autoscaling",
            sources=("ai-context/containerization-patterns.md#Kubernetes",),
            related=("health-checks", "configuration"),
        ),
        Topic(
            key="health-checks",
            description="ASP.NET Core health checks for Kubernetes liveness and readiness",
            sources=("ai-context/containerization-patterns.md#Health Checks",),
            related=("kubernetes",),
            inline="""# Health Checks

```csharp
builder.Services.AddHealthChecks()
    .AddDbContextCheck<ApplicationDbContext>()
    .AddRedis(builder.Configuration.GetConnectionString("Redis")!);

app.MapHealthChecks("/health/live", new HealthCheckOptions { Predicate = _ => false });
app.MapHealthChecks("/health/ready");
```""",
        ),
        Topic(
            key="configuration",
            description="Environment-specific configuration for containers",
            sources=("ai-context/containerization-patterns.md#Configuration",),
            related=("docker-compose", "kubernetes"),
        ),
    ),
)


# Messaging

MESSAGING_GUIDE = TopicGuide(
    tool_name="mvp24h_messaging_patterns",
    argument="pattern",
    title="Messaging Patterns",
    summary="Patterns for asynchronous communication and background processing.",
    overview_reference="""## Quick Decision Guide

| Need | Pattern | Complexity |
|------|---------|------------|
| Inter-service messaging | `rabbitmq` | Medium |
| Background processing | `hosted-service` | Low |
| Guaranteed event delivery | `outbox` | High |
| In-process producer/consumer | `channels` | Low |""",
    topics=(
        Topic(
            key="rabbitmq",
            description="Inter-service communication with RabbitMQ",
            sources=("broker.md",),
            related=("outbox", "cqrs/integration-events.md"),
            inline="""# RabbitMQ Integration

```bash
dotnet add package Mvp24Hours.Infrastructure.RabbitMQ
```

```csharp
builder.Services.AddMvp24HoursRabbitMQ(
    typeof(Program).Assembly,
    connectionOptions =>
    {
        connectionOptions.ConnectionString = builder.Configuration.GetConnectionString("RabbitMQ");
    });
```""",
        ),
        Topic(
            key="hosted-service",
            description="Background services and queue processing",
            sources=("ai-context/messaging-patterns.md#Hosted Service",),
            related=("channels", "modernization/periodic-timer.md"),
            inline="""# Hosted Service Pattern

```csharp
public class CleanupService : BackgroundService
{
    protected override async Task ExecuteAsync(CancellationToken stoppingToken)
    {
        using var timer = new PeriodicTimer(TimeSpan.FromMinutes(5));
        while (await timer.WaitForNextTickAsync(stoppingToken))
        {
            await CleanupAsync(stoppingToken);
        }
    }
}

builder.Services.AddHostedService<CleanupService>();
```""",
        ),
        Topic(
            key="outbox",
            description="Reliable event publishing with a transactional outbox",
            sources=("ai-context/messaging-patterns.md#Outbox",),
            related=("rabbitmq", "hosted-service"),
            inline="""# Outbox Pattern

1. Save the state change and the outgoing message in the same transaction.
2. A background service reads pending outbox messages.
3. Each message is published to the broker and marked as processed.

```csharp
public class OutboxMessage
{
    public Guid Id { get; set; }
    public string Type { get; set; }
    public string Payload { get; set; }
    public DateTime CreatedAt { get; set; }
    public DateTime? ProcessedAt { get; set; }
}
```""",
        ),
        Topic(
            key="channels",
            description="In-process async queues with System.Threading.Channels",
            sources=("modernization/channels.md",),
            related=("hosted-service",),
        ),
    ),
)


# Observability

OBSERVABILITY_GUIDE = TopicGuide(
    tool_name="mvp24h_observability_setup",
    argument="component",
    title="Observability Setup",
    summary="Complete observability for .NET applications using OpenTelemetry.",
    overview_doc="observability/home.md",
    overview_reference="""## Three Pillars of Observability

| Pillar | Purpose | Tools |
|--------|---------|-------|
| **Logging** | Record events and errors | NLog, Serilog, OpenTelemetry |
| **Tracing** | Follow requests across services | OpenTelemetry, Jaeger, Zipkin |
| **Metrics** | Measure performance | Prometheus, Application Insights |

## Quick Setup

```bash
dotnet add package OpenTelemetry.Extensions.Hosting
dotnet add package OpenTelemetry.Instrumentation.AspNetCore
dotnet add package OpenTelemetry.Exporter.Console
```""",
    topics=(
        Topic(
            key="logging",
            description="Structured logging with ILogger and OpenTelemetry",
            sources=("observability/logging.md",),
            related=("tracing", "migration"),
            inline="""# Logging Configuration

```csharp
builder.Logging.AddOpenTelemetry(logging =>
{
    logging.IncludeFormattedMessage = true;
    logging.IncludeScopes = true;
    logging.AddConsoleExporter();
});

_logger.LogInformation("Order {OrderId} created for {CustomerId}", order.Id, order.CustomerId);
```""",
        ),
        Topic(
            key="tracing",
            description="Distributed tracing with ActivitySource",
            sources=("observability/tracing.md",),
            related=("logging", "exporters"),
            inline="""# Distributed Tracing

```csharp
builder.Services.AddOpenTelemetry()
    .WithTracing(tracing => tracing
        .AddSource("MyService")
        .AddAspNetCoreInstrumentation()
        .AddHttpClientInstrumentation());

private static readonly ActivitySource Source = new("MyService");

using var activity = Source.StartActivity("ProcessOrder");
activity?.SetTag("order.id", orderId);
```""",
        ),
        Topic(
            key="metrics",
            description="Counters, histograms and runtime metrics",
            sources=("observability/metrics.md",),
            related=("tracing", "exporters"),
            inline="""# Metrics Configuration

```csharp
var meter = new Meter("MyService");
var ordersCreated = meter.CreateCounter<long>("orders.created",
    description: "Number of orders created");

ordersCreated.Add(1, new KeyValuePair<string, object?>("status", "success"));
```""",
        ),
        Topic(
            key="exporters",
            description="Console, OTLP, Jaeger, Zipkin, Prometheus and Application Insights",
            sources=("observability/exporters.md",),
            related=("tracing", "metrics"),
            inline="""# Telemetry Exporters

| Exporter | Package |
|----------|---------|
| Console | `OpenTelemetry.Exporter.Console` |
| OTLP | `OpenTelemetry.Exporter.OpenTelemetryProtocol` |
| Zipkin | `OpenTelemetry.Exporter.Zipkin` |
| Prometheus | `OpenTelemetry.Exporter.Prometheus.AspNetCore` |
| Application Insights | `Azure.Monitor.OpenTelemetry.AspNetCore` |""",
        ),
        Topic(
            key="migration",
            description="Migration from TelemetryHelper to OpenTelemetry",
            sources=("observability/migration.md",),
            related=("logging", "telemetry.md"),
        ),
    ),
)
