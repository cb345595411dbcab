"""
Consistency checks for the static lookup tables.

Every template and topic referenced by one table must exist in the table
that is consulted when the reference is followed.
"""
from typing import List

from ..constants import (
    AI_USE_CASES,
    CONTEXT_RESOURCES,
    DATA_TYPES,
    DATABASE_PATTERNS,
    DATABASE_PROVIDERS,
    DATABASE_REQUIREMENTS,
    GUIDE_OPERATIONS,
    REQUIREMENT_TAGS,
)
from ..utils.errors import CatalogError
from .advisor_ops import ADJUSTMENT_RULES, CHARACTERISTIC_RULES, REQUIREMENT_RULES
from .ai_ops import AI_APPROACHES, AI_TEMPLATE_GUIDE, DEFAULT_USE_CASE_RULE, USE_CASE_RULES
from .database_ops import (
    DATA_TYPE_RULES,
    DEFAULT_PROVIDER,
    PATTERN_DOCS,
    PATTERN_RULES,
    PROVIDER_REQUIREMENT_RULES,
    PROVIDERS,
)
from .guide_catalog import GUIDES, RESOURCE_CATEGORIES, TOPIC_TABLES
from .guide_types import is_document_reference
from .template_catalog import DEFAULT_TEMPLATE, EXTERNAL_ALTERNATIVES, INTERFACE_GROUPS, TEMPLATES
from .template_ops import (
    DATABASE_PROVIDER_DOCS,
    RESOURCE_CHECKLISTS,
    RESOURCE_DOCS,
    RESOURCE_TITLES,
    RESOURCE_TOOLS,
)


def template_problems() -> List[str]:
    problems = []
    for tags, template, _ in REQUIREMENT_RULES:
        for tag in sorted(tags - set(REQUIREMENT_TAGS)):
            problems.append(f"advisor rule for '{template}' uses unknown requirement tag '{tag}'")

    targets = [DEFAULT_TEMPLATE]
    targets += [template for _, template, _ in REQUIREMENT_RULES]
    targets += [template for _, template, _ in CHARACTERISTIC_RULES]
    for _, from_template, to_template, _ in ADJUSTMENT_RULES:
        targets += [from_template, to_template]
    for target in targets:
        if target not in TEMPLATES:
            problems.append(f"advisor rule targets unknown template '{target}'")

    for template in TEMPLATES.values():
        for alternative, _ in template.alternatives:
            if alternative not in TEMPLATES and alternative not in EXTERNAL_ALTERNATIVES:
                problems.append(f"template '{template.key}' lists unknown alternative '{alternative}'")
        for group in template.interface_groups:
            if group not in INTERFACE_GROUPS:
                problems.append(f"template '{template.key}' uses unknown interface group '{group}'")
    return problems


def guide_problems() -> List[str]:
    problems = []
    if sorted(GUIDES) != sorted(GUIDE_OPERATIONS):
        problems.append("guide registry does not match the guide tool names")

    for guide in TOPIC_TABLES.values():
        keys = guide.topic_keys()
        if len(keys) != len(set(keys)):
            problems.append(f"{guide.tool_name} declares duplicate topic keys")
        for topic in guide.topics:
            if topic.alias_of is not None and guide.get_topic(topic.alias_of) is None:
                problems.append(f"{guide.tool_name} alias '{topic.key}' points to unknown topic '{topic.alias_of}'")
            if not topic.sources and not topic.inline:
                problems.append(f"{guide.tool_name} topic '{topic.key}' has no content source")
            for reference in topic.related:
                if not is_document_reference(reference) and guide.get_topic(reference) is None:
                    problems.append(
                        f"{guide.tool_name} topic '{topic.key}' relates to unknown topic '{reference}'"
                    )

    for category, tool_name in RESOURCE_CATEGORIES.items():
        if tool_name not in TOPIC_TABLES:
            problems.append(f"resource category '{category}' points to unknown guide '{tool_name}'")
    return problems


def context_problems() -> List[str]:
    problems = []
    for name, table in (
        ("documents", RESOURCE_DOCS),
        ("titles", RESOURCE_TITLES),
        ("tools", RESOURCE_TOOLS),
        ("checklists", RESOURCE_CHECKLISTS),
    ):
        if sorted(table) != sorted(CONTEXT_RESOURCES):
            problems.append(f"context resource {name} do not cover every resource")
    if sorted(DATABASE_PROVIDER_DOCS) != sorted(DATABASE_PROVIDERS):
        problems.append("database provider documents do not cover every provider")
    return problems


def advisor_problems() -> List[str]:
    problems = []
    if sorted(PROVIDERS) != sorted(DATABASE_PROVIDERS):
        problems.append("database provider summaries do not cover every provider")
    providers = [DEFAULT_PROVIDER] + [p for _, p, _ in PROVIDER_REQUIREMENT_RULES]
    providers += [p for p, _ in DATA_TYPE_RULES.values()]
    for provider in providers:
        if provider not in PROVIDERS:
            problems.append(f"database rule targets unknown provider '{provider}'")
    tags = [tag for tag, _, _ in PROVIDER_REQUIREMENT_RULES] + [tag for tag, _ in PATTERN_RULES]
    for tag in tags:
        if tag not in DATABASE_REQUIREMENTS:
            problems.append(f"database rule uses unknown requirement '{tag}'")
    for data_type in DATA_TYPE_RULES:
        if data_type not in DATA_TYPES:
            problems.append(f"database rule uses unknown data type '{data_type}'")
    if sorted(PATTERN_DOCS) != sorted(DATABASE_PATTERNS):
        problems.append("database pattern documents do not cover every pattern")

    for use_case in USE_CASE_RULES:
        if use_case not in AI_USE_CASES:
            problems.append(f"AI rule uses unknown use case '{use_case}'")
    for approach, template, _ in list(USE_CASE_RULES.values()) + [DEFAULT_USE_CASE_RULE]:
        if approach not in AI_APPROACHES:
            problems.append(f"AI rule targets unknown approach '{approach}'")
        if AI_TEMPLATE_GUIDE.get_topic(template) is None:
            problems.append(f"AI rule targets unknown template '{template}'")
    for approach in AI_APPROACHES.values():
        for template in approach.templates:
            if AI_TEMPLATE_GUIDE.get_topic(template) is None:
                problems.append(f"approach '{approach.key}' lists unknown template '{template}'")
    return problems


def validate_catalogs() -> None:
    """
    Check every lookup table for dangling references.

    Raises:
        CatalogError: Listing every problem found
    """
    problems = template_problems() + guide_problems() + context_problems() + advisor_problems()
    if problems:
        raise CatalogError(problems)
