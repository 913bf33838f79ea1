"""Patron geo eligibility."""

from loguru import logger

from app.schemas.patron import PatronData

from .live_stream_models import Eligibility, PatronRestriction, RestrictionReason


def check_patron_eligibility(
    patron: PatronData,
    geo_allow: list[str],
    geo_block: list[str],
    event_id: str,
) -> Eligibility | PatronRestriction:
    """Decide whether the patron's region may watch the event.

    The block list wins over the allow list. An empty allow list allows every
    region that is not blocked.
    """
    if geo_block and patron.region in geo_block:
        logger.bind(event_id=event_id, patron_id=patron.patron_id, region=patron.region).info(
            "live_stream patron region is blocked"
        )
        return PatronRestriction.new(RestrictionReason.OUT_OF_REGION, geo_allow, geo_block, event_id)

    if geo_allow and patron.region not in geo_allow:
        logger.bind(event_id=event_id, patron_id=patron.patron_id, region=patron.region).info(
            "live_stream patron region is not allowed"
        )
        return PatronRestriction.new(RestrictionReason.OUT_OF_REGION, geo_allow, geo_block, event_id)

    return Eligibility.ELIGIBLE
