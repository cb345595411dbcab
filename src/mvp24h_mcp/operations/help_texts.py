"""
Help text definitions for the Mvp24Hours docs MCP tools.
"""

HELP_TEXTS = {
    "mvp24h_get_started": """
mvp24h_get_started: Overview of the Mvp24Hours framework and where to start

Arguments:
- focus: overview, quick-start, packages or all (optional, default: overview)

Example:
mvp24h_get_started(focus="quick-start")

Notes:
- Call this first when the user wants to create a new .NET project
- Unknown focus values return the overview
""",
    "mvp24h_architecture_advisor": """
mvp24h_architecture_advisor: Recommend an architecture template for a project

Arguments:
- complexity: low, medium, high or very-high (optional)
- entity_count: few, medium or many (optional)
- business_rules: simple, moderate or complex (optional)
- team_size: solo, small or large (optional)
- requirements: list of cqrs, event-sourcing, audit-trail, external-integrations,
  microservices, domain-driven, rapid-prototype, high-performance, multiple-databases (optional)

Example:
mvp24h_architecture_advisor(complexity="high", team_size="large")
mvp24h_architecture_advisor(requirements=["rapid-prototype", "cqrs"])

Notes:
- Requirement tags are checked first, in a fixed precedence order
  (microservices, domain-driven/event-sourcing, cqrs, external-integrations,
  audit-trail, rapid-prototype); the order of the list does not matter
- Without tags the characteristics decide; Simple N-Layers is the default
- A large team moves Complex N-Layers to Clean Architecture; many entities
  move Simple N-Layers to Complex N-Layers
- Unknown values are ignored
""",
    "mvp24h_database_advisor": """
mvp24h_database_advisor: Recommend a database provider and data access patterns

Arguments:
- data_type: relational, document, key-value or mixed (optional)
- provider: sqlserver, postgresql, mysql, mongodb or redis (optional)
- requirements: list of transactions, complex-queries, high-write-throughput,
  horizontal-scaling, flexible-schema, caching, full-text-search, relationships (optional)
- patterns: list of repository, unit-of-work, specification, dapper, hybrid (optional)
- topic: overview, relational, nosql, repository, unit-of-work, entity, context,
  service, efcore-advanced or mongodb-advanced (optional)

Example:
mvp24h_database_advisor(data_type="document")
mvp24h_database_advisor(requirements=["complex-queries", "high-write-throughput"])
mvp24h_database_advisor(topic="unit-of-work")

Notes:
- A topic returns that topic's documentation and ignores the other arguments
- Without arguments the database overview is returned
- An explicit provider wins; otherwise caching, flexible-schema and
  high-write-throughput are checked in that order before the data type;
  PostgreSQL is the default
- Patterns default to repository and unit-of-work, plus specification for
  complex-queries and dapper for high-write-throughput
""",
    "mvp24h_ai_implementation": """
mvp24h_ai_implementation: Add AI capabilities with Semantic Kernel, SK Graph or the Agent Framework

Arguments:
- use_case: chatbot, qa-documents, tool-augmented, complex-reasoning, multi-agent,
  workflow, human-oversight or enterprise (optional)
- approach: semantic-kernel, sk-graph or agent-framework (optional)
- template: overview or a template key, e.g. chat-completion, rag-basic,
  graph-executor, react-agent, multi-agent, agent-basic (optional)

Example:
mvp24h_ai_implementation(use_case="qa-documents")
mvp24h_ai_implementation(approach="sk-graph")
mvp24h_ai_implementation(template="rag-basic")

Notes:
- A template takes precedence over an approach, an approach over a use case
- Unknown use cases get the default recommendation (Semantic Kernel chat completion)
""",
    "mvp24h_get_template": """
mvp24h_get_template: Get the document of an architecture template

Arguments:
- template_name: minimal-api, simple-nlayers, complex-nlayers, cqrs, event-driven,
  hexagonal, clean-architecture, ddd or microservices (required)

Example:
mvp24h_get_template(template_name="clean-architecture")

Notes:
- When the docs directory lacks the template document, a version built from
  the template catalog is returned
""",
    "mvp24h_build_context": """
mvp24h_build_context: Build the complete implementation context for an architecture

Arguments:
- architecture: template identifier (required)
- resources: list of database, caching, observability, messaging, security,
  testing, containerization (optional)
- database_provider: postgresql, sqlserver, mysql, mongodb or redis (optional)

Example:
mvp24h_build_context(architecture="cqrs", resources=["database", "observability"], database_provider="postgresql")

Notes:
- Documents missing from the docs directory are skipped
- Ends with related tools and an implementation checklist
""",
    "mvp24h_core_patterns": """
mvp24h_core_patterns: Core module patterns (guard clauses, value objects, entities, exceptions)

Arguments:
- topic: topic key (optional, default: overview)

Example:
mvp24h_core_patterns(topic="value-objects")
""",
    "mvp24h_infrastructure_guide": """
mvp24h_infrastructure_guide: Pipelines, caching, Web API, CronJobs and application services

Arguments:
- topic: topic key (optional, default: overview)

Example:
mvp24h_infrastructure_guide(topic="cronjob-resilience")
""",
    "mvp24h_reference_guide": """
mvp24h_reference_guide: Mapping, validation, specifications, versioning and error handling

Arguments:
- topic: topic key (optional, default: overview)

Example:
mvp24h_reference_guide(topic="specification")
""",
    "mvp24h_cqrs_guide": """
mvp24h_cqrs_guide: CQRS/Mediator commands, queries, events, behaviors and sagas

Arguments:
- topic: topic key (optional, default: overview)

Example:
mvp24h_cqrs_guide(topic="behaviors")
""",
    "mvp24h_testing_patterns": """
mvp24h_testing_patterns: Unit, integration, container and architecture testing

Arguments:
- topic: topic key (optional, default: overview)

Example:
mvp24h_testing_patterns(topic="test-containers")
""",
    "mvp24h_security_patterns": """
mvp24h_security_patterns: Authentication, authorization, JWT and secrets

Arguments:
- topic: topic key (optional, default: overview)

Example:
mvp24h_security_patterns(topic="jwt")
""",
    "mvp24h_containerization_patterns": """
mvp24h_containerization_patterns: Dockerfiles, Compose, Kubernetes and health checks

Arguments:
- topic: topic key (optional, default: overview)

Example:
mvp24h_containerization_patterns(topic="dockerfile")
""",
    "mvp24h_messaging_patterns": """
mvp24h_messaging_patterns: RabbitMQ, hosted services, outbox and channels

Arguments:
- pattern: pattern key (optional, default: overview)

Example:
mvp24h_messaging_patterns(pattern="outbox")
""",
    "mvp24h_observability_setup": """
mvp24h_observability_setup: Logging, tracing, metrics and exporters with OpenTelemetry

Arguments:
- component: component key (optional, default: overview)

Example:
mvp24h_observability_setup(component="tracing")
""",
    "mvp24h_modernization_guide": """
mvp24h_modernization_guide: .NET 9 features adopted by Mvp24Hours

Arguments:
- feature: feature key (optional, default: overview)

Example:
mvp24h_modernization_guide(feature="hybrid-cache")
""",
    "help": """
help: Get help information about the available tools

Arguments:
- topic: "tools" or a tool name (optional, default: tools)

Example:
help(topic="mvp24h_architecture_advisor")
""",
}

GUIDE_NOTES = """
Notes:
- Omit the key (or pass "overview") to list every key with its description
- An unknown key returns the list of valid keys
- Missing documentation falls back to built-in content; the quick reference
  and related topics are always included
"""
