from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EventLiveStreamStatus(str, Enum):
    SCHEDULED = "scheduled"
    LIVE = "live"


class EventLiveStream(BaseModel):
    """Live stream configuration of a catalog event."""

    id: str = Field(..., description="Event ID")
    provider_event_id: str = Field(..., description="Event ID on the stream provider")
    status: EventLiveStreamStatus = EventLiveStreamStatus.SCHEDULED
    geo_allow: list[str] = Field(default_factory=list, description="Region codes allowed to watch")
    geo_block: list[str] = Field(default_factory=list, description="Region codes blocked from watching")

    model_config = ConfigDict(frozen=True)


class Event(BaseModel):
    """Catalog event. `event_live_stream` is None when the event is not streamed."""

    id: str
    event_live_stream: EventLiveStream | None = None

    model_config = ConfigDict(frozen=True)
