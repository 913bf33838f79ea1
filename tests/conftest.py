from typing import Any

import pytest
from loguru import logger

from app.app_config import AppEnvironConfig
from app.domain.live.live_stream._catalog import InMemoryEventCatalog
from app.schemas import Event, EventLiveStream, PatronData, StoredLiveStream


@pytest.fixture
def app_config() -> AppEnvironConfig:
    """Deployment config for a supported brand."""
    return AppEnvironConfig(
        APPLICATION="tsb",
        ACTIVE_REGION="US-NJ",
        STREAM_PROVIDER_BASE_URL="https://api.provider.test",
        STREAM_PROVIDER_PLAYER_BASE_URL="https://player.provider.test",
        STREAM_PROVIDER_CUSTOMER_ID="customer_123",
        STREAM_PROVIDER_API_KEY="key_abc",
        STREAM_PROVIDER_TIMEOUT_SECONDS=5,
    )


@pytest.fixture
def event_live_stream() -> EventLiveStream:
    return EventLiveStream(
        id="ev_1001",
        provider_event_id="prov_555",
        status="live",
        geo_allow=["US-NJ", "US-NY"],
        geo_block=["US-CA"],
    )


@pytest.fixture
def catalog(event_live_stream: EventLiveStream) -> InMemoryEventCatalog:
    """Catalog with one streamed event, one unstreamed event and one event without streams."""
    return InMemoryEventCatalog(
        events=[
            Event(id="ev_1001", event_live_stream=event_live_stream),
            Event(id="ev_no_config"),
            Event(
                id="ev_no_stream",
                event_live_stream=EventLiveStream(id="ev_no_stream", provider_event_id="prov_777"),
            ),
        ],
        live_streams=[
            StoredLiveStream(event_id="ev_1001", provider_event_id="prov_555", stream_name="main"),
            StoredLiveStream(event_id="ev_1001", provider_event_id="prov_555", stream_name="backup"),
        ],
    )


@pytest.fixture
def patron() -> PatronData:
    return PatronData(patron_id="patron_42", region="US-NJ", client_ip="203.0.113.7")


@pytest.fixture
def log_records() -> Any:
    """Capture loguru records emitted during the test."""
    records: list[dict[str, Any]] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
