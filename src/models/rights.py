from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, WrapSerializer, model_validator

from src.models.enums import RightsDomain

_FROZEN = ConfigDict(frozen=True)

V = TypeVar("V")

# Read-only mapping: validated as a dict, stored as a mappingproxy, dumped as a dict.
FrozenMap = Annotated[
    Mapping[str, V],
    AfterValidator(lambda value: MappingProxyType(dict(value))),
    WrapSerializer(lambda value, handler: handler(dict(value))),
]


def _empty_map() -> Mapping:
    return MappingProxyType({})


class Contact(BaseModel):
    """A helpline, office or portal.  Portals carry a ``url`` instead of a phone."""

    model_config = _FROZEN

    name: str
    type: str
    phone: str | None = None
    url: str | None = None
    description: str | None = None
    available_24x7: bool | None = None


class RightsStrategy(BaseModel):
    model_config = _FROZEN

    immediate: tuple[str, ...]
    constitutional: tuple[str, ...]
    timeline: FrozenMap[str]
    legal: tuple[str, ...] = ()
    digital: tuple[str, ...] = ()  # online steps, for government services


class LegalOption(BaseModel):
    model_config = _FROZEN

    description: str
    timeline: str
    success: int = Field(ge=0, le=100)  # estimated likelihood, percent
    cost: str
    effort: str


class DigitalPlatform(BaseModel):
    model_config = _FROZEN

    name: str
    description: str
    status: str
    benefits: tuple[str, ...] = ()


class RightsReference(BaseModel):
    """A constitutional article or statute and how it applies to a complaint type."""

    model_config = _FROZEN

    title: str
    description: str
    application: str
    article: str | None = None
    legislation: str | None = None

    @model_validator(mode="after")
    def _cites_something(self) -> RightsReference:
        if self.article is None and self.legislation is None:
            raise ValueError("a rights reference needs an article or a legislation")
        return self


class ActionPlan(BaseModel):
    model_config = _FROZEN

    immediate: tuple[str, ...]
    short_term: tuple[str, ...]
    long_term: tuple[str, ...]


class Checklists(BaseModel):
    model_config = _FROZEN

    pre: tuple[str, ...]
    during: tuple[str, ...]
    post: tuple[str, ...]


class ContentRecord(BaseModel):
    """Static advisory content for one rights category.

    Every category has a strategy, resources, an action plan, a baseline
    timeline and checklists.  Legal options, digital service options and
    rights references are present only where the domain provides them.
    """

    model_config = _FROZEN

    strategy: RightsStrategy
    resources: FrozenMap[tuple[Contact, ...]]
    action_plan: ActionPlan
    timeline: FrozenMap[str]  # baseline, scaled per request
    checklists: Checklists
    legal_options: FrozenMap[LegalOption] = Field(default_factory=_empty_map)
    digital_options: tuple[DigitalPlatform, ...] = ()
    rights_references: tuple[RightsReference, ...] = ()


# ---------------------------------------------------------------------------
# Domain-wide directory data
# ---------------------------------------------------------------------------


class ComplaintTemplate(BaseModel):
    model_config = _FROZEN

    id: int
    title: str
    type: str
    template: str
    fields: tuple[str, ...]


class IssueType(BaseModel):
    model_config = _FROZEN

    id: str
    name: str
    description: str
    urgency: str
    timeline: str
    category: str | None = None
    constitutional: tuple[str, ...] = ()
    legal: tuple[str, ...] = ()
    platforms: tuple[str, ...] = ()
    digital: bool | None = None
    common: bool | None = None


class RecentCase(BaseModel):
    model_config = _FROZEN

    id: int
    type: str
    title: str
    description: str
    outcome: str
    timeline: str
    date: str
    location: str | None = None
    constitutional: str | None = None
    department: str | None = None
    company: str | None = None
    compensation: int | None = None


class ConstitutionalProvision(BaseModel):
    model_config = _FROZEN

    title: str
    description: str
    applications: tuple[str, ...]
    article: str | None = None
    case: str | None = None
    act: str | None = None


class LawReference(BaseModel):
    model_config = _FROZEN

    name: str
    description: str
    year: int
    provisions: tuple[str, ...] = ()
    applications: tuple[str, ...] = ()
    authority: str | None = None


class Institution(BaseModel):
    """A scheme, embassy, agency, portal or support body relevant to a domain."""

    model_config = _FROZEN

    name: str
    url: str
    description: str
    services: tuple[str, ...]
    contact: str | None = None
    coverage: str | None = None
    status: str | None = None
    users: str | None = None


class CategoryTable(BaseModel):
    """Everything bundled for one :class:`RightsDomain`.

    ``default_category`` is the record served for any key the table does
    not contain, so it must name one of ``categories``.
    """

    model_config = _FROZEN

    domain: RightsDomain
    default_category: str
    categories: FrozenMap[ContentRecord]
    templates: tuple[ComplaintTemplate, ...] = ()
    contacts: FrozenMap[tuple[Contact, ...]] = Field(default_factory=_empty_map)
    statistics: FrozenMap[int | float | str | FrozenMap[int | float]] = Field(default_factory=_empty_map)
    issue_types: tuple[IssueType, ...] = ()
    recent_cases: tuple[RecentCase, ...] = ()
    constitutional_basis: FrozenMap[ConstitutionalProvision] = Field(default_factory=_empty_map)
    laws: tuple[LawReference, ...] = ()
    institutions: tuple[Institution, ...] = ()

    @model_validator(mode="after")
    def _default_is_present(self) -> CategoryTable:
        if self.default_category not in self.categories:
            msg = f"default_category '{self.default_category}' is not one of the {self.domain} categories"
            raise ValueError(msg)
        return self

    @property
    def default_record(self) -> ContentRecord:
        return self.categories[self.default_category]
