"""Tests for urgency-scaled timelines."""

from __future__ import annotations

import pytest
import structlog
from structlog.testing import capture_logs

from src.models.enums import TimelineUnit, UrgencyLevel
from src.services import timeline
from src.services.timeline import (
    URGENCY_MULTIPLIERS,
    StageRange,
    TimelineParseError,
    parse_stage_range,
    parse_timeline,
    scale_stages,
    scale_timeline,
    urgency_multiplier,
)


# -----------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------


@pytest.fixture
def timeline_logs(monkeypatch: pytest.MonkeyPatch):
    """Events logged by the timeline module during the test."""
    # A fresh proxy binds to the capturing config, not to one cached by an earlier app.
    monkeypatch.setattr(timeline, "logger", structlog.get_logger(timeline.__name__))
    with capture_logs() as logs:
        yield logs


# -----------------------------------------------------------------------
# Urgency multipliers
# -----------------------------------------------------------------------


class TestUrgencyMultiplier:
    @pytest.mark.parametrize(
        ("urgency", "expected"),
        [("urgent", 0.5), ("priority", 0.75), ("normal", 1.0)],
    )
    def test_known_levels(self, urgency: str, expected: float) -> None:
        assert urgency_multiplier(urgency) == expected

    def test_every_level_has_a_multiplier(self) -> None:
        assert set(URGENCY_MULTIPLIERS) == set(UrgencyLevel)

    @pytest.mark.parametrize("urgency", ["whenever", "", "URGENT", " urgent", None])
    def test_unrecognised_defaults_to_one(self, urgency: str | None) -> None:
        assert urgency_multiplier(urgency) == 1.0

    def test_unrecognised_is_logged(self, timeline_logs: list[dict]) -> None:
        urgency_multiplier("whenever")
        events = [log for log in timeline_logs if log["event"] == "timeline.urgency_unrecognised"]
        assert len(events) == 1
        assert events[0]["urgency"] == "whenever"
        assert events[0]["multiplier"] == 1.0

    @pytest.mark.parametrize("urgency", ["normal", "urgent", None])
    def test_recognised_or_missing_is_not_logged(self, urgency: str | None, timeline_logs: list[dict]) -> None:
        urgency_multiplier(urgency)
        assert not [log for log in timeline_logs if log["event"] == "timeline.urgency_unrecognised"]


# -----------------------------------------------------------------------
# Parsing
# -----------------------------------------------------------------------


class TestParseStageRange:
    def test_day_range(self) -> None:
        assert parse_stage_range("7-14 days") == StageRange(7, 14, TimelineUnit.DAYS)

    def test_hour_range(self) -> None:
        assert parse_stage_range("0-2 hours") == StageRange(0, 2, TimelineUnit.HOURS)

    def test_singular_day_suffix(self) -> None:
        assert parse_stage_range("0-1 day").unit == TimelineUnit.DAYS

    def test_bare_numbers_are_days(self) -> None:
        assert parse_stage_range("1-3") == StageRange(1, 3, TimelineUnit.DAYS)

    def test_single_value_is_point_range(self) -> None:
        parsed = parse_stage_range("2 hours")
        assert parsed.low == parsed.high == 2
        assert parsed.unit == TimelineUnit.HOURS

    def test_whitespace_around_separator(self) -> None:
        assert parse_stage_range(" 1 - 3 days ") == StageRange(1, 3, TimelineUnit.DAYS)

    @pytest.mark.parametrize(
        "raw",
        ["", "   ", "abc-3 days", "1-x days", "1-3-5 days", "-1-3 days", "1.5-3 days", "1-3 fortnights", "10-5 days", "ongoing-ish"],
    )
    def test_malformed_raises(self, raw: str) -> None:
        with pytest.raises(TimelineParseError):
            parse_stage_range(raw)

    @pytest.mark.parametrize(
        ("raw", "unit"),
        [
            ("2-5 minutes", TimelineUnit.MINUTES),
            ("1-3 weeks", TimelineUnit.WEEKS),
            ("6-12 months", TimelineUnit.MONTHS),
            ("5-10 years", TimelineUnit.YEARS),
            ("1 year", TimelineUnit.YEARS),
        ],
    )
    def test_other_units(self, raw: str, unit: TimelineUnit) -> None:
        assert parse_stage_range(raw).unit == unit

    @pytest.mark.parametrize("raw", ["ongoing", "Ongoing", " ongoing "])
    def test_ongoing_is_open_ended(self, raw: str) -> None:
        parsed = parse_stage_range(raw)
        assert parsed.open_ended
        assert parsed.render() == "ongoing"

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Malformed timeline range"):
            parse_stage_range("soon")

    def test_parse_timeline_names_stage(self) -> None:
        with pytest.raises(TimelineParseError) as exc_info:
            parse_timeline({"documentation": "1-3 days", "resolution": "later"})
        assert exc_info.value.stage == "resolution"
        assert "resolution" in str(exc_info.value)


class TestStageRangeRender:
    def test_integral_bounds_have_no_decimal_point(self) -> None:
        assert StageRange(22.5, 45.0).render() == "22.5-45 days"

    def test_zero_low_bound(self) -> None:
        assert StageRange(0, 1, TimelineUnit.HOURS).render() == "0-1 hours"

    def test_equal_bounds_render_once(self) -> None:
        assert StageRange(1, 1, TimelineUnit.HOURS).render() == "1 hours"

    def test_scaled_keeps_unit(self) -> None:
        scaled = StageRange(0, 2, TimelineUnit.HOURS).scaled(0.5)
        assert scaled == StageRange(0, 1, TimelineUnit.HOURS)

    def test_open_ended_scales_to_itself(self) -> None:
        ongoing = StageRange.ongoing()
        assert ongoing.scaled(0.5) is ongoing


# -----------------------------------------------------------------------
# Scaling
# -----------------------------------------------------------------------


class TestScaleTimeline:
    BASELINE = {
        "documentation": "1-3 days",
        "complaint": "7-14 days",
        "investigation": "14-30 days",
        "resolution": "30-60 days",
    }

    def test_normal_returns_baseline_bounds(self) -> None:
        assert scale_timeline(self.BASELINE, "normal") == self.BASELINE

    def test_urgent_halves_bounds(self) -> None:
        result = scale_timeline(self.BASELINE, "urgent")
        assert result == {
            "documentation": "0.5-1.5 days",
            "complaint": "3.5-7 days",
            "investigation": "7-15 days",
            "resolution": "15-30 days",
        }

    def test_priority_scenario(self) -> None:
        result = scale_timeline({"documentation": "1-3", "resolution": "30-60"}, "priority")
        assert result == {"documentation": "0.75-2.25 days", "resolution": "22.5-45 days"}

    def test_unrecognised_urgency_matches_normal(self) -> None:
        assert scale_timeline(self.BASELINE, "whenever") == scale_timeline(self.BASELINE, "normal")

    def test_missing_urgency_matches_normal(self) -> None:
        assert scale_timeline(self.BASELINE, None) == self.BASELINE

    @pytest.mark.parametrize("urgency", ["urgent", "priority", "normal", "whenever"])
    def test_hour_stages_stay_in_hours(self, urgency: str) -> None:
        result = scale_timeline({"emergency": "0-2 hours", "callback": "2 hours"}, urgency)
        assert result["emergency"].endswith(" hours")
        assert result["callback"].endswith(" hours")

    def test_minutes_and_years_keep_their_units(self) -> None:
        result = scale_timeline({"digital": "2-5 minutes", "renewal": "5-10 years"}, "urgent")
        assert result == {"digital": "1-2.5 minutes", "renewal": "2.5-5 years"}

    @pytest.mark.parametrize("urgency", ["urgent", "priority", "normal", None])
    def test_ongoing_stage_is_not_scaled(self, urgency: str | None) -> None:
        result = scale_timeline({"immediate": "0-24 hours", "counseling": "ongoing"}, urgency)
        assert result["counseling"] == "ongoing"

    def test_ongoing_alongside_scaled_stage(self) -> None:
        result = scale_timeline({"immediate": "0-24 hours", "counseling": "ongoing"}, "urgent")
        assert result == {"immediate": "0-12 hours", "counseling": "ongoing"}

    def test_point_range_halved(self) -> None:
        assert scale_timeline({"callback": "2 hours"}, "urgent") == {"callback": "1 hours"}

    def test_same_stage_names_and_order(self) -> None:
        result = scale_timeline(self.BASELINE, "priority")
        assert list(result) == list(self.BASELINE)

    def test_idempotent(self) -> None:
        assert scale_timeline(self.BASELINE, "urgent") == scale_timeline(self.BASELINE, "urgent")

    def test_does_not_mutate_baseline(self) -> None:
        baseline = dict(self.BASELINE)
        scale_timeline(baseline, "urgent")
        assert baseline == self.BASELINE

    def test_malformed_baseline_raises(self) -> None:
        with pytest.raises(TimelineParseError):
            scale_timeline({"documentation": "one-three days"}, "normal")

    def test_empty_baseline(self) -> None:
        assert scale_timeline({}, "urgent") == {}


class TestScaleStages:
    def test_scales_parsed_stages(self) -> None:
        stages = parse_timeline({"complaint": "7-14 days"})
        scaled = scale_stages(stages, "urgent")
        assert scaled["complaint"] == StageRange(3.5, 7, TimelineUnit.DAYS)
