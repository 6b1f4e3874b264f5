"""Urgency-scaled timeline estimates for rights advisories.

Every category record carries a *baseline* timeline: a mapping of stage
name to a day or hour range written as ``"<low>-<high> <unit>"``, e.g.::

    {"documentation": "1-3 days", "emergency": "0-2 hours"}

The scaler multiplies both bounds of every stage by a factor derived from
the caller's urgency level:

========  ==========
urgency   multiplier
========  ==========
urgent    0.5
priority  0.75
normal    1.0
========  ==========

Anything else (including a missing value) uses 1.0.  Scaled bounds keep
their fractional part, so ``"7-14 days"`` at ``urgent`` becomes
``"3.5-7 days"``.

The unit is read once, at parse time, from the text after the upper
bound (minutes, hours, days, weeks, months or years; a bare number means
days).  From then on it travels as an explicit field on
:class:`StageRange`.  A stage written as ``"ongoing"`` has no bounds and
is passed through unscaled.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

import structlog

from src.models.enums import TimelineUnit, UrgencyLevel

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

URGENCY_MULTIPLIERS: Final[dict[UrgencyLevel, float]] = {
    UrgencyLevel.URGENT: 0.5,
    UrgencyLevel.PRIORITY: 0.75,
    UrgencyLevel.NORMAL: 1.0,
}

DEFAULT_MULTIPLIER: Final[float] = 1.0

ONGOING: Final[str] = "ongoing"

_BOUND_RE: Final[re.Pattern[str]] = re.compile(r"^\s*(?P<value>\d+)\s*(?P<suffix>[A-Za-z]*)\s*$")

_UNIT_PREFIXES: Final[tuple[tuple[str, TimelineUnit], ...]] = (
    ("minute", TimelineUnit.MINUTES),
    ("hour", TimelineUnit.HOURS),
    ("day", TimelineUnit.DAYS),
    ("week", TimelineUnit.WEEKS),
    ("month", TimelineUnit.MONTHS),
    ("year", TimelineUnit.YEARS),
)


class TimelineParseError(ValueError):
    """A baseline range string could not be parsed."""

    def __init__(self, raw: str, reason: str, *, stage: str | None = None) -> None:
        self.raw = raw
        self.reason = reason
        self.stage = stage
        where = f" for stage '{stage}'" if stage else ""
        super().__init__(f"Malformed timeline range {raw!r}{where}: {reason}")


@dataclass(frozen=True, slots=True)
class StageRange:
    """A duration estimate for one stage, in a single unit."""

    low: float
    high: float
    unit: TimelineUnit = TimelineUnit.DAYS
    open_ended: bool = False

    @classmethod
    def ongoing(cls) -> StageRange:
        return cls(low=0, high=0, open_ended=True)

    def scaled(self, multiplier: float) -> StageRange:
        if self.open_ended:
            return self
        return StageRange(low=self.low * multiplier, high=self.high * multiplier, unit=self.unit)

    def render(self) -> str:
        if self.open_ended:
            return ONGOING
        if self.low == self.high:
            return f"{_format_bound(self.low)} {self.unit}"
        return f"{_format_bound(self.low)}-{_format_bound(self.high)} {self.unit}"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _format_bound(value: float) -> str:
    # 45.0 -> "45", 2.25 -> "2.25"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.4f}".rstrip("0").rstrip(".")


def _unit_from_suffix(suffix: str, raw: str) -> TimelineUnit:
    lowered = suffix.lower()
    if not lowered:
        return TimelineUnit.DAYS
    for prefix, unit in _UNIT_PREFIXES:
        if lowered.startswith(prefix):
            return unit
    raise TimelineParseError(raw, f"unknown unit '{suffix}'")


def parse_stage_range(raw: str) -> StageRange:
    """Parse ``"<low>-<high> <unit>"``, a single ``"<n> <unit>"`` or ``"ongoing"``.

    Raises
    ------
    TimelineParseError
        If either bound is not a non-negative integer, the unit suffix is
        not a recognised unit, or the low bound exceeds the high bound.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise TimelineParseError(str(raw), "empty range")

    if raw.strip().lower() == ONGOING:
        return StageRange.ongoing()

    parts = raw.split("-")
    if len(parts) > 2:
        raise TimelineParseError(raw, "expected at most one '-' separator")

    matches = [_BOUND_RE.match(part) for part in parts]
    if any(m is None for m in matches):
        raise TimelineParseError(raw, "bounds must be whole numbers")

    high_match = matches[-1]
    unit = _unit_from_suffix(high_match.group("suffix"), raw)  # type: ignore[union-attr]
    low = float(matches[0].group("value"))  # type: ignore[union-attr]
    high = float(high_match.group("value"))  # type: ignore[union-attr]

    if low > high:
        raise TimelineParseError(raw, "low bound is greater than high bound")

    return StageRange(low=low, high=high, unit=unit)


def parse_timeline(baseline: Mapping[str, str]) -> dict[str, StageRange]:
    """Parse every stage of a baseline timeline, preserving stage order."""
    stages: dict[str, StageRange] = {}
    for stage, raw in baseline.items():
        try:
            stages[stage] = parse_stage_range(raw)
        except TimelineParseError as exc:
            raise TimelineParseError(exc.raw, exc.reason, stage=stage) from None
    return stages


# ---------------------------------------------------------------------------
# Scaling
# ---------------------------------------------------------------------------


def urgency_multiplier(urgency: str | None) -> float:
    """Return the timeline multiplier for *urgency*.

    ``None`` means the caller did not ask for anything in particular and
    is treated as ``normal``.  Unrecognised strings also map to 1.0 but
    are logged separately so they can be told apart from ``normal``.
    """
    if urgency is None:
        return DEFAULT_MULTIPLIER
    try:
        level = UrgencyLevel(urgency)
    except ValueError:
        logger.info("timeline.urgency_unrecognised", urgency=urgency, multiplier=DEFAULT_MULTIPLIER)
        return DEFAULT_MULTIPLIER
    return URGENCY_MULTIPLIERS[level]


def scale_stages(stages: Mapping[str, StageRange], urgency: str | None) -> dict[str, StageRange]:
    multiplier = urgency_multiplier(urgency)
    return {stage: stage_range.scaled(multiplier) for stage, stage_range in stages.items()}


def scale_timeline(baseline: Mapping[str, str], urgency: str | None) -> dict[str, str]:
    """Scale a baseline timeline by the multiplier for *urgency*.

    Parameters
    ----------
    baseline:
        Stage name to range string, e.g. ``{"complaint": "7-14 days"}``.
    urgency:
        ``"urgent"``, ``"priority"``, ``"normal"`` or any other value
        (treated as ``"normal"``).

    Returns
    -------
    dict[str, str]
        One rendered range per baseline stage, in the same order.

    Raises
    ------
    TimelineParseError
        If any baseline range is malformed.
    """
    scaled = scale_stages(parse_timeline(baseline), urgency)
    return {stage: stage_range.render() for stage, stage_range in scaled.items()}
