"""Rights advisory API endpoints for Adhikar.

Serves static advisory bundles per rights domain (agriculture, business,
healthcare, journalism, NRI, library, housing, education, digital,
environment, government services, women and consumer).  Unknown
category keys and urgency levels are never errors: they resolve to the
domain's default category and the ``normal`` timeline respectively.
Every advisory carries a disclaimer that it is NOT legal advice.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog
from fastapi import APIRouter, HTTPException, Request
from pydantic import AliasChoices, BaseModel, Field

from src.models.enums import RightsDomain, UrgencyLevel
from src.services.rights_advisor import RightsAdvice, RightsAdvisorService, RightsDirectory
from src.services.timeline import TimelineParseError, scale_timeline, urgency_multiplier

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/rights", tags=["rights"])


class RightsAdviceRequest(BaseModel):
    """Body of ``POST /rights/{domain}``.

    ``issue``, ``description`` and ``legal_action`` are accepted so existing
    clients can keep sending them; they are validated but do not change the
    advisory.
    """

    rights_type: str | None = Field(
        default=None,
        validation_alias=AliasChoices("rights_type", "rightsType"),
        description="Category key, e.g. 'farmer_rights'. Unknown keys use the domain default.",
    )
    urgency: str | None = Field(
        default=UrgencyLevel.NORMAL.value,
        description="urgent, priority or normal; anything else, including null, means normal",
    )
    language: str = Field(default="en", description="Preferred language")
    location: str | None = Field(default=None, max_length=200)
    issue: str | None = Field(default=None, max_length=500, description="Short description of the issue")
    description: str | None = Field(default=None, max_length=5000)
    legal_action: bool = Field(
        default=False,
        validation_alias=AliasChoices("legal_action", "legalAction"),
    )


class TimelineScaleRequest(BaseModel):
    baseline: dict[str, str] = Field(..., min_length=1, description="Stage name to range, e.g. '7-14 days'")
    urgency: str | None = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _get_service(request: Request) -> RightsAdvisorService:
    service = getattr(request.app.state, "rights_advisor", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Rights advisory service not available")
    return service


def _parse_domain(domain: str, service: RightsAdvisorService) -> RightsDomain:
    try:
        parsed = RightsDomain(domain)
    except ValueError:
        parsed = None
    if parsed is None or parsed not in service.available_domains:
        raise HTTPException(
            status_code=404,
            detail=f"Rights domain '{domain}' not found. Available: {', '.join(d.value for d in service.available_domains)}",
        )
    return parsed


def _dump_all(models: Iterable[BaseModel]) -> list[dict]:
    return [m.model_dump(exclude_none=True) for m in models]


def _advice_payload(advice: RightsAdvice) -> dict:
    payload = {
        "domain": advice.domain.value,
        "requested_category": advice.requested_category,
        "category": advice.category,
        "fallback_used": advice.fallback_used,
        "urgency": advice.urgency,
        "multiplier": advice.multiplier,
        "language": advice.language,
        "location": advice.location,
        "rights_strategy": advice.strategy.model_dump(),
        "resources": {group: _dump_all(contacts) for group, contacts in advice.resources.items()},
        "legal_options": {name: opt.model_dump() for name, opt in advice.legal_options.items()},
        "action_plan": advice.action_plan.model_dump(),
        "timeline": advice.timeline,
        "checklists": advice.checklists.model_dump(),
        "templates": _dump_all(advice.templates),
        "contacts": _dump_all(advice.contacts),
        "statistics": advice.statistics,
        "constitutional_basis": {
            key: p.model_dump(exclude_none=True) for key, p in advice.constitutional_basis.items()
        },
        "disclaimer": advice.disclaimer,
    }
    # Sections only some domains carry.
    if advice.digital_options:
        payload["digital_options"] = _dump_all(advice.digital_options)
    if advice.rights_references:
        payload["rights_references"] = _dump_all(advice.rights_references)
    return payload


def _directory_payload(directory: RightsDirectory) -> dict:
    location_resources = None
    if directory.location_resources is not None:
        location_resources = {
            "location": directory.location_resources.location,
            "contacts": _dump_all(directory.location_resources.contacts),
        }
    return {
        "domain": directory.domain.value,
        "issue_types": _dump_all(directory.issue_types),
        "statistics": directory.statistics,
        "recent_cases": _dump_all(directory.recent_cases),
        "location_resources": location_resources,
        "constitutional_basis": {
            key: p.model_dump(exclude_none=True) for key, p in directory.constitutional_basis.items()
        },
        "laws": _dump_all(directory.laws),
        "institutions": _dump_all(directory.institutions),
    }


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get("")
async def list_domains(request: Request) -> dict:
    """List every rights domain with its default and available categories."""
    service = _get_service(request)
    summaries = service.domains()
    return {
        "domains": [
            {
                "domain": s.domain.value,
                "default_category": s.default_category,
                "categories": s.categories,
            }
            for s in summaries
        ],
        "urgency_levels": [level.value for level in UrgencyLevel],
        "total": len(summaries),
    }


@router.post("/timeline")
async def scale_baseline_timeline(body: TimelineScaleRequest) -> dict:
    """Scale an arbitrary baseline timeline by an urgency level.

    Each stage is a range such as ``"7-14 days"`` or ``"0-2 hours"``.
    Malformed ranges are rejected with 422.
    """
    try:
        timeline = scale_timeline(body.baseline, body.urgency)
    except TimelineParseError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from None

    return {
        "urgency": body.urgency or UrgencyLevel.NORMAL.value,
        "multiplier": urgency_multiplier(body.urgency),
        "timeline": timeline,
    }


@router.post("/{domain}")
async def get_rights_advice(domain: str, body: RightsAdviceRequest, request: Request) -> dict:
    """Build the advisory bundle for a rights category in *domain*.

    DISCLAIMER: This is for awareness purposes only. This is NOT legal
    advice. Consult DLSA or a lawyer for legal counsel.
    """
    service = _get_service(request)
    parsed_domain = _parse_domain(domain, service)

    try:
        advice = service.advise(
            parsed_domain,
            body.rights_type,
            urgency=body.urgency,
            language=body.language,
            location=body.location,
        )
    except Exception:
        logger.error("api.rights.advice_failed", domain=domain, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to process rights request") from None

    return _advice_payload(advice)


@router.get("/{domain}")
async def get_rights_directory(
    domain: str,
    request: Request,
    type: str | None = None,  # noqa: A002
    location: str | None = None,
    lang: str = "en",
) -> dict:
    """Reference directory for *domain*: issue types, laws, cases and institutions.

    ``type`` narrows the issue types to one category key.
    """
    service = _get_service(request)
    parsed_domain = _parse_domain(domain, service)

    directory = service.directory(parsed_domain, issue_type=type, location=location)
    payload = _directory_payload(directory)
    payload["language"] = lang
    return payload


@router.get("/{domain}/categories/{key}")
async def get_category(domain: str, key: str, request: Request) -> dict:
    """Return the content record a category key resolves to.

    Unknown keys return the domain default with ``fallback_used`` set.
    """
    service = _get_service(request)
    parsed_domain = _parse_domain(domain, service)

    match = service.resolve_category(parsed_domain, key)
    return {
        "domain": parsed_domain.value,
        "requested": key,
        "category": match.category,
        "fallback_used": match.fallback_used,
        "record": match.record.model_dump(exclude_none=True),
    }
