"""Plain data records read by the live stream domain."""

from .event import Event, EventLiveStream, EventLiveStreamStatus
from .live_stream import LiveStreamRecord, StoredLiveStream
from .patron import PatronData

__all__ = [
    "Event",
    "EventLiveStream",
    "EventLiveStreamStatus",
    "LiveStreamRecord",
    "PatronData",
    "StoredLiveStream",
]
