"""Event catalog lookups for live streams."""

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

import orjson
from loguru import logger

from app.schemas.event import Event, EventLiveStream
from app.schemas.live_stream import LiveStreamRecord, StoredLiveStream


class LiveStreamLookupError(Exception):
    """Catalog does not hold what the live stream lookup needs."""

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(f"{type(self).__name__}: {event_id}")


class EventNotFoundError(LiveStreamLookupError):
    pass


class EventLiveStreamNilError(LiveStreamLookupError):
    pass


class LiveStreamNotFoundError(LiveStreamLookupError):
    pass


class EventCatalog(Protocol):
    def get_event(self, event_id: str) -> Event | None: ...

    def list_live_streams(self, event_id: str) -> list[StoredLiveStream]: ...


class InMemoryEventCatalog:
    """Read-mostly catalog keeping live streams in insertion order per event."""

    def __init__(
        self,
        events: Iterable[Event] = (),
        live_streams: Iterable[StoredLiveStream] = (),
    ):
        self._events: dict[str, Event] = {}
        self._live_streams: dict[str, list[StoredLiveStream]] = {}
        for event in events:
            self.put_event(event)
        for live_stream in live_streams:
            self.add_live_stream(live_stream)

    def put_event(self, event: Event) -> None:
        self._events[event.id] = event

    def add_live_stream(self, live_stream: StoredLiveStream) -> None:
        self._live_streams.setdefault(live_stream.event_id, []).append(live_stream)

    def get_event(self, event_id: str) -> Event | None:
        return self._events.get(event_id)

    def list_live_streams(self, event_id: str) -> list[StoredLiveStream]:
        return list(self._live_streams.get(event_id, []))


def get_event_live_stream(catalog: EventCatalog, event_id: str) -> EventLiveStream:
    """Return the event's live stream configuration.

    Raises EventNotFoundError when the event is missing and
    EventLiveStreamNilError when the event is not configured for streaming.
    """
    event = catalog.get_event(event_id)
    if event is None:
        raise EventNotFoundError(event_id)
    if event.event_live_stream is None:
        raise EventLiveStreamNilError(event_id)
    return event.event_live_stream


def get_live_stream_record(catalog: EventCatalog, event_id: str) -> LiveStreamRecord:
    """Return the earliest listed live stream of the event."""
    live_streams = catalog.list_live_streams(event_id)
    if not live_streams:
        raise LiveStreamNotFoundError(event_id)
    return LiveStreamRecord.from_stored(live_streams[0])


def load_event_catalog(path: str | Path) -> InMemoryEventCatalog:
    """Build a catalog from a JSON file.

    The file holds an `events` list of Event objects and a `live_streams` list
    of stored live stream records, in the order they should be listed.
    """
    path = Path(path)
    data = orjson.loads(path.read_bytes())

    catalog = InMemoryEventCatalog(
        events=[Event.model_validate(item) for item in data.get("events", [])],
        live_streams=[StoredLiveStream.model_validate(item) for item in data.get("live_streams", [])],
    )
    logger.info(
        "Loaded event catalog from {}: {} events, {} live streams",
        path,
        len(data.get("events", [])),
        len(data.get("live_streams", [])),
    )
    return catalog
