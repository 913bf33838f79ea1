"""Live stream resolution outcomes.

`LiveStreamResult.live_stream_result` holds exactly one of the outcome
variants, discriminated by `kind`.
"""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from app.schemas.live_stream import LiveStreamRecord
from app.services.stream_provider.stream_provider_schemas import (
    PlayerLinkPayload,
    StreamLinkPayload,
)


class Eligibility(str, Enum):
    ELIGIBLE = "eligible"


class RestrictionReason(str, Enum):
    OUT_OF_REGION = "out_of_region"


class ProviderDenialReason(str, Enum):
    EVENT_PENDING = "event_pending"
    EVENT_CLOSED = "event_closed"
    EVENT_CANCELLED = "event_cancelled"
    RATE_LIMITED = "rate_limited"
    ERROR = "error"


class PlayerLink(BaseModel):
    """Playable stream for an eligible patron."""

    kind: Literal["player_link"] = "player_link"
    provider_event_id: str
    stream_name: str
    stream_link: str
    player_link: str
    stream_link_payload: dict[str, Any] = Field(default_factory=dict)
    player_link_payload: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def new(
        cls,
        live_stream: LiveStreamRecord,
        stream_link: StreamLinkPayload,
        player_link: PlayerLinkPayload,
    ) -> "PlayerLink":
        return cls(
            provider_event_id=live_stream.provider_event_id,
            stream_name=live_stream.stream_name,
            stream_link=stream_link.stream_link,
            player_link=player_link.player_link,
            stream_link_payload=stream_link.model_dump(by_alias=True),
            player_link_payload=player_link.model_dump(by_alias=True),
        )


class PatronRestriction(BaseModel):
    """Patron may not watch the event from their region."""

    kind: Literal["patron_restriction"] = "patron_restriction"
    reason: RestrictionReason
    geo_allow: list[str] = Field(default_factory=list)
    geo_block: list[str] = Field(default_factory=list)
    event_id: str | None = None

    @classmethod
    def new(
        cls,
        reason: RestrictionReason,
        geo_allow: list[str],
        geo_block: list[str],
        event_id: str | None = None,
    ) -> "PatronRestriction":
        return cls(
            reason=reason,
            geo_allow=list(geo_allow),
            geo_block=list(geo_block),
            event_id=event_id,
        )


class ProviderDenial(BaseModel):
    """Stream provider refused playback for a reason other than region."""

    kind: Literal["provider_denial"] = "provider_denial"
    reason: ProviderDenialReason

    @classmethod
    def new(cls, reason: ProviderDenialReason) -> "ProviderDenial":
        return cls(reason=reason)


class ResolutionError(BaseModel):
    """Internal failure. Details are only available in the logs."""

    kind: Literal["resolution_error"] = "resolution_error"


ResolutionOutcome = Annotated[
    PlayerLink | PatronRestriction | ProviderDenial | ResolutionError,
    Field(discriminator="kind"),
]


class LiveStreamResult(BaseModel):
    """Resolution result for a requested event."""

    id: str
    live_stream_result: ResolutionOutcome


def describe_outcome(outcome: ResolutionOutcome) -> str:
    """Short human readable summary of an outcome, used in request logs."""
    if isinstance(outcome, PlayerLink):
        return f"player link for {outcome.provider_event_id}/{outcome.stream_name}"
    if isinstance(outcome, PatronRestriction):
        return f"patron restricted: {outcome.reason.value}"
    if isinstance(outcome, ProviderDenial):
        return f"provider denied: {outcome.reason.value}"
    if isinstance(outcome, ResolutionError):
        return "resolution failed"
    raise TypeError(f"Unknown live stream outcome: {type(outcome).__name__}")
