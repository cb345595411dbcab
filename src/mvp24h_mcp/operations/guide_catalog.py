"""
Registry of the topic guides, keyed by tool name.
"""
from types import MappingProxyType
from typing import Optional

from .guide_types import TopicGuide
from .advisor_guides import AI_TEMPLATE_GUIDE, DATABASE_GUIDE
from .framework_guides import CORE_GUIDE, INFRASTRUCTURE_GUIDE, REFERENCE_GUIDE, MODERNIZATION_GUIDE
from .practice_guides import (
    CQRS_GUIDE,
    TESTING_GUIDE,
    SECURITY_GUIDE,
    CONTAINERIZATION_GUIDE,
    MESSAGING_GUIDE,
    OBSERVABILITY_GUIDE,
)

GUIDES = MappingProxyType({
    guide.tool_name: guide
    for guide in (
        CORE_GUIDE,
        INFRASTRUCTURE_GUIDE,
        REFERENCE_GUIDE,
        CQRS_GUIDE,
        TESTING_GUIDE,
        SECURITY_GUIDE,
        CONTAINERIZATION_GUIDE,
        MESSAGING_GUIDE,
        OBSERVABILITY_GUIDE,
        MODERNIZATION_GUIDE,
    )
})

# Every topic table, including the ones behind the database and AI advisors
TOPIC_TABLES = MappingProxyType({
    **GUIDES,
    DATABASE_GUIDE.tool_name: DATABASE_GUIDE,
    AI_TEMPLATE_GUIDE.tool_name: AI_TEMPLATE_GUIDE,
})

# Resource categories served under mvp24hours://docs/{category}/{name}
RESOURCE_CATEGORIES = MappingProxyType({
    "database": DATABASE_GUIDE.tool_name,
    "core": CORE_GUIDE.tool_name,
    "infrastructure": INFRASTRUCTURE_GUIDE.tool_name,
    "reference": REFERENCE_GUIDE.tool_name,
    "cqrs": CQRS_GUIDE.tool_name,
    "testing": TESTING_GUIDE.tool_name,
    "security": SECURITY_GUIDE.tool_name,
    "containerization": CONTAINERIZATION_GUIDE.tool_name,
    "messaging": MESSAGING_GUIDE.tool_name,
    "observability": OBSERVABILITY_GUIDE.tool_name,
    "modernization": MODERNIZATION_GUIDE.tool_name,
    "ai": AI_TEMPLATE_GUIDE.tool_name,
})


def get_guide(tool_name: str) -> Optional[TopicGuide]:
    return TOPIC_TABLES.get(tool_name)
