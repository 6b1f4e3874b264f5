"""Rights advisory service for Adhikar.

Builds the advisory bundle returned for a rights category:

1. **Category resolution** -- the caller's ``rights_type`` selects a
   content record from the domain's table.  Unknown or missing keys get
   the table's default record; this is never an error.
2. **Timeline scaling** -- the record's baseline timeline is rescaled by
   the caller's urgency level.
3. **Assembly** -- strategy, resources, legal options, action plan,
   checklists, templates and contacts are passed through unchanged
   alongside the scaled timeline.

All content is static and loaded at startup (see
:mod:`src.data.loader`); the service holds no mutable state and is safe
to share across concurrent requests.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Final

import structlog

from src.models.enums import DOMAIN_CATEGORIES, RightsDomain, UrgencyLevel
from src.models.rights import (
    ActionPlan,
    CategoryTable,
    Checklists,
    ComplaintTemplate,
    ConstitutionalProvision,
    Contact,
    ContentRecord,
    DigitalPlatform,
    Institution,
    IssueType,
    LawReference,
    LegalOption,
    RecentCase,
    RightsReference,
    RightsStrategy,
)
from src.services.category import parse_category, resolve
from src.services.timeline import parse_timeline, urgency_multiplier

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

_DISCLAIMER: Final[str] = (
    "This information is provided for awareness purposes only and does "
    "NOT constitute legal advice. For legal guidance, contact your "
    "nearest District Legal Services Authority (DLSA), call the NALSA "
    "helpline 15100, or consult a qualified advocate."
)

# Contact group returned with every advisory.
_ADVISORY_CONTACT_GROUP: Final[str] = "national"
_LOCATION_CONTACT_GROUP: Final[str] = "state"


# =====================================================================
# Data classes
# =====================================================================


@dataclass(slots=True)
class CategoryMatch:
    """A resolved content record and how it was reached."""

    domain: RightsDomain
    requested: str | None
    category: str
    record: ContentRecord
    fallback_used: bool


@dataclass(slots=True)
class RightsAdvice:
    """Full advisory bundle returned by :meth:`RightsAdvisorService.advise`."""

    domain: RightsDomain
    requested_category: str | None
    category: str
    fallback_used: bool
    urgency: str
    multiplier: float
    language: str
    location: str | None
    strategy: RightsStrategy
    resources: Mapping[str, tuple[Contact, ...]]
    legal_options: Mapping[str, LegalOption]
    digital_options: tuple[DigitalPlatform, ...]
    rights_references: tuple[RightsReference, ...]
    action_plan: ActionPlan
    timeline: dict[str, str]
    checklists: Checklists
    templates: tuple[ComplaintTemplate, ...]
    contacts: tuple[Contact, ...]
    statistics: dict[str, Any]
    constitutional_basis: Mapping[str, ConstitutionalProvision]
    disclaimer: str = _DISCLAIMER


@dataclass(slots=True)
class LocationResources:
    location: str
    contacts: tuple[Contact, ...]


@dataclass(slots=True)
class RightsDirectory:
    """Browsable reference data for a domain."""

    domain: RightsDomain
    issue_types: tuple[IssueType, ...]
    statistics: dict[str, Any]
    recent_cases: tuple[RecentCase, ...]
    constitutional_basis: Mapping[str, ConstitutionalProvision]
    laws: tuple[LawReference, ...]
    institutions: tuple[Institution, ...]
    location_resources: LocationResources | None = None


@dataclass(slots=True)
class DomainSummary:
    domain: RightsDomain
    default_category: str
    categories: list[str] = field(default_factory=list)


# =====================================================================
# Service
# =====================================================================


class RightsAdvisorService:
    """Resolve rights categories and assemble advisory bundles.

    Parameters
    ----------
    tables:
        One validated :class:`CategoryTable` per domain, typically from
        :func:`src.data.loader.load_all_tables`.
    """

    def __init__(self, tables: Mapping[RightsDomain, CategoryTable]) -> None:
        self._tables: dict[RightsDomain, CategoryTable] = dict(tables)
        self._loaded_at = datetime.now(UTC)
        logger.info("rights_advisor.initialised", domains=[d.value for d in self._tables])

    @property
    def available_domains(self) -> list[RightsDomain]:
        return list(self._tables)

    def table(self, domain: RightsDomain) -> CategoryTable:
        """Return the table for *domain*.

        Raises ``KeyError`` for a domain that was not loaded.
        """
        return self._tables[domain]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve_category(self, domain: RightsDomain, rights_type: str | None) -> CategoryMatch:
        """Resolve *rights_type* against the domain table, falling back to its default."""
        table = self.table(domain)
        parsed = parse_category(DOMAIN_CATEGORIES[domain], rights_type)
        category = parsed.value if parsed is not None else table.default_category
        record = resolve(table.categories, category, table.default_category)

        if parsed is None:
            logger.info(
                "rights.category_fallback",
                domain=domain.value,
                requested=rights_type,
                default=table.default_category,
            )

        return CategoryMatch(
            domain=domain,
            requested=rights_type,
            category=category,
            record=record,
            fallback_used=parsed is None,
        )

    def advise(
        self,
        domain: RightsDomain,
        rights_type: str | None,
        urgency: str | None = UrgencyLevel.NORMAL,
        language: str = "en",
        location: str | None = None,
    ) -> RightsAdvice:
        """Build the advisory bundle for a rights category.

        Never raises for an unknown *rights_type* or *urgency*; both fall
        back to documented defaults.
        """
        table = self.table(domain)
        match = self.resolve_category(domain, rights_type)
        record = match.record

        multiplier = urgency_multiplier(urgency)
        timeline = {
            stage: stage_range.scaled(multiplier).render()
            for stage, stage_range in parse_timeline(record.timeline).items()
        }

        advice = RightsAdvice(
            domain=domain,
            requested_category=rights_type,
            category=match.category,
            fallback_used=match.fallback_used,
            urgency=str(urgency) if urgency is not None else UrgencyLevel.NORMAL.value,
            multiplier=multiplier,
            language=language,
            location=location,
            strategy=record.strategy,
            resources=record.resources,
            legal_options=record.legal_options,
            digital_options=record.digital_options,
            rights_references=record.rights_references,
            action_plan=record.action_plan,
            timeline=timeline,
            checklists=record.checklists,
            templates=table.templates,
            contacts=table.contacts.get(_ADVISORY_CONTACT_GROUP, ()),
            statistics=self._statistics(table),
            constitutional_basis=table.constitutional_basis,
        )

        logger.info(
            "rights.advice_built",
            domain=domain.value,
            category=match.category,
            fallback=match.fallback_used,
            urgency=advice.urgency,
        )
        return advice

    def directory(
        self,
        domain: RightsDomain,
        issue_type: str | None = None,
        location: str | None = None,
    ) -> RightsDirectory:
        """Return the reference directory for *domain*.

        When *issue_type* is given only the matching issue type is listed
        (none if nothing matches).  A *location* adds the state level
        contacts for that location; domains without a state contact group
        return no contacts.
        """
        table = self.table(domain)

        issue_types = table.issue_types
        if issue_type:
            issue_types = tuple(t for t in issue_types if t.id == issue_type)

        location_resources = None
        if location:
            location_resources = LocationResources(
                location=location,
                contacts=table.contacts.get(_LOCATION_CONTACT_GROUP, ()),
            )

        return RightsDirectory(
            domain=domain,
            issue_types=issue_types,
            statistics=self._statistics(table),
            recent_cases=table.recent_cases,
            constitutional_basis=table.constitutional_basis,
            laws=table.laws,
            institutions=table.institutions,
            location_resources=location_resources,
        )

    def domains(self) -> list[DomainSummary]:
        """Summarise every loaded domain."""
        return [
            DomainSummary(
                domain=domain,
                default_category=table.default_category,
                categories=list(table.categories),
            )
            for domain, table in self._tables.items()
        ]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _statistics(self, table: CategoryTable) -> dict[str, Any]:
        stats: dict[str, Any] = {
            key: dict(value) if isinstance(value, Mapping) else value
            for key, value in table.statistics.items()
        }
        stats["last_updated"] = self._loaded_at.isoformat()
        return stats
