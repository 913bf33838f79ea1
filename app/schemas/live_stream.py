from pydantic import BaseModel, ConfigDict, Field


class StoredLiveStream(BaseModel):
    """Provider-agnostic live stream record as kept by the event catalog."""

    event_id: str = Field(..., alias="eventId")
    provider_event_id: str = Field(..., alias="providerEventId")
    stream_name: str = Field(..., alias="streamName")

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class LiveStreamRecord(BaseModel):
    """Stream instance used to request links from the stream provider."""

    provider_event_id: str
    stream_name: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_stored(cls, stored: StoredLiveStream) -> "LiveStreamRecord":
        return cls(provider_event_id=stored.provider_event_id, stream_name=stored.stream_name)
