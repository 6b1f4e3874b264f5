"""Adhikar service layer -- category resolution, timeline scaling and advisory assembly."""

from __future__ import annotations

from src.services.category import parse_category, resolve
from src.services.rights_advisor import (
    CategoryMatch,
    DomainSummary,
    LocationResources,
    RightsAdvice,
    RightsAdvisorService,
    RightsDirectory,
)
from src.services.timeline import (
    StageRange,
    TimelineParseError,
    parse_stage_range,
    parse_timeline,
    scale_stages,
    scale_timeline,
    urgency_multiplier,
)

__all__ = [
    "CategoryMatch",
    "DomainSummary",
    "LocationResources",
    "RightsAdvice",
    "RightsAdvisorService",
    "RightsDirectory",
    "StageRange",
    "TimelineParseError",
    "parse_category",
    "parse_stage_range",
    "parse_timeline",
    "resolve",
    "scale_stages",
    "scale_timeline",
    "urgency_multiplier",
]
