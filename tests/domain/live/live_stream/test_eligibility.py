"""Tests for patron geo eligibility."""

import pytest

from app.domain.live.live_stream._eligibility import check_patron_eligibility
from app.domain.live.live_stream.live_stream_models import (
    Eligibility,
    PatronRestriction,
    RestrictionReason,
)
from app.schemas import PatronData


def _patron(region: str) -> PatronData:
    return PatronData(patron_id="patron_1", region=region)


class TestCheckPatronEligibility:
    def test_blocked_region_is_restricted(self):
        result = check_patron_eligibility(_patron("US-NY"), [], ["US-NY"], "ev_1")

        assert isinstance(result, PatronRestriction)
        assert result.reason == RestrictionReason.OUT_OF_REGION
        assert result.geo_block == ["US-NY"]
        assert result.event_id == "ev_1"

    def test_block_wins_over_allow(self):
        result = check_patron_eligibility(_patron("US-NY"), ["US-NY"], ["US-NY"], "ev_1")

        assert isinstance(result, PatronRestriction)
        assert result.geo_allow == ["US-NY"]
        assert result.geo_block == ["US-NY"]

    def test_region_outside_allow_list_is_restricted(self):
        result = check_patron_eligibility(_patron("US-NY"), ["US-CA"], [], "ev_1")

        assert isinstance(result, PatronRestriction)
        assert result.reason == RestrictionReason.OUT_OF_REGION
        assert result.geo_allow == ["US-CA"]
        assert result.geo_block == []

    def test_region_in_allow_list_is_eligible(self):
        result = check_patron_eligibility(_patron("US-CA"), ["US-CA"], ["US-NY"], "ev_1")

        assert result == Eligibility.ELIGIBLE

    @pytest.mark.parametrize("region", ["US-NY", "CA-ON", "GB"])
    def test_empty_lists_allow_everyone(self, region: str):
        assert check_patron_eligibility(_patron(region), [], [], "ev_1") == Eligibility.ELIGIBLE

    def test_empty_allow_list_only_applies_block(self):
        assert check_patron_eligibility(_patron("US-NJ"), [], ["US-NY"], "ev_1") == Eligibility.ELIGIBLE

    def test_restriction_is_logged_at_info(self, log_records):
        check_patron_eligibility(_patron("US-NY"), [], ["US-NY"], "ev_1")

        restriction_logs = [r for r in log_records if "blocked" in r["message"]]
        assert len(restriction_logs) == 1
        assert restriction_logs[0]["level"].name == "INFO"
        assert restriction_logs[0]["extra"]["event_id"] == "ev_1"
