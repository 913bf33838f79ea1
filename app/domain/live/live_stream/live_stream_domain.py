"""Live stream domain service.

Resolves whether a patron may watch an event's live stream:

1. event live stream configuration from the catalog
2. patron geo eligibility
3. live stream record from the catalog
4. deployment identity parameters
5. stream link, then player link, from the stream provider

The first failing step decides the outcome. `resolve` never raises.
"""

from loguru import logger

from app.app_config import AppEnvironConfig, get_app_environ_config
from app.schemas.event import EventLiveStream
from app.schemas.live_stream import LiveStreamRecord
from app.schemas.patron import PatronData
from app.services.stream_provider.stream_provider_client import StreamProviderClient
from app.services.stream_provider.stream_provider_schemas import (
    StreamProviderError,
    StreamProviderTransportError,
)

from ._catalog import (
    EventCatalog,
    EventLiveStreamNilError,
    EventNotFoundError,
    LiveStreamNotFoundError,
    get_event_live_stream,
    get_live_stream_record,
)
from ._eligibility import check_patron_eligibility
from ._identity import AppIdentity, AppIdentityError, AppIdentityResolver
from .live_stream_models import (
    LiveStreamResult,
    PatronRestriction,
    PlayerLink,
    ProviderDenial,
    ProviderDenialReason,
    ResolutionError,
    ResolutionOutcome,
    RestrictionReason,
)

OUT_OF_REGION_OPERATION_CODE = 306

_OPERATION_CODE_DENIALS = {
    402: ProviderDenialReason.EVENT_PENDING,
    403: ProviderDenialReason.EVENT_CLOSED,
    404: ProviderDenialReason.EVENT_CANCELLED,
}


def map_provider_error(
    error: StreamProviderError,
    event_id: str,
    event_live_stream: EventLiveStream,
) -> PatronRestriction | ProviderDenial:
    """Map a provider error to an outcome.

    Operation code 306 reports the event's own geo lists, not a
    patron-specific match from the provider.
    """
    if error.operation_code == OUT_OF_REGION_OPERATION_CODE:
        return PatronRestriction.new(
            RestrictionReason.OUT_OF_REGION,
            event_live_stream.geo_allow,
            event_live_stream.geo_block,
            event_id,
        )
    if error.operation_code in _OPERATION_CODE_DENIALS:
        return ProviderDenial.new(_OPERATION_CODE_DENIALS[error.operation_code])
    if error.status_code == 429:
        return ProviderDenial.new(ProviderDenialReason.RATE_LIMITED)
    return ProviderDenial.new(ProviderDenialReason.ERROR)


class LiveStreamService:
    """Resolves live stream access for patrons."""

    def __init__(
        self,
        catalog: EventCatalog,
        provider_client: StreamProviderClient | None = None,
        identity_resolver: AppIdentityResolver | None = None,
        cfg: AppEnvironConfig | None = None,
    ):
        self._cfg = cfg or get_app_environ_config()
        self._catalog = catalog
        self._provider = provider_client or StreamProviderClient.from_config(self._cfg)
        self._identity = identity_resolver or AppIdentityResolver(self._cfg)

    async def resolve(
        self,
        event_id: str,
        patron: PatronData,
        client_ip: str,
    ) -> LiveStreamResult:
        """Resolve the live stream of `event_id` for `patron`."""
        log = logger.bind(event_id=event_id)
        outcome: ResolutionOutcome

        try:
            outcome = await self._resolve_outcome(event_id, patron, client_ip)
        except EventNotFoundError:
            log.error(f"{__name__}.live_stream event not found in catalog")
            outcome = ResolutionError()
        except EventLiveStreamNilError:
            log.error(f"{__name__}.live_stream live stream config is nil")
            outcome = ResolutionError()
        except LiveStreamNotFoundError:
            log.error(f"{__name__}.live_stream live stream not found in catalog")
            outcome = ResolutionError()
        except AppIdentityError as e:
            log.error(f"{__name__}.live_stream app identity unavailable: {e}")
            outcome = ResolutionError()
        except StreamProviderTransportError as e:
            log.bind(user_ip=client_ip).error(f"{__name__}.live_stream provider request failed: {e}")
            outcome = ResolutionError()
        except Exception as e:
            log.exception(f"{__name__}.live_stream {type(e).__name__}: {e}")
            outcome = ResolutionError()

        return LiveStreamResult(id=event_id, live_stream_result=outcome)

    async def _resolve_outcome(
        self,
        event_id: str,
        patron: PatronData,
        client_ip: str,
    ) -> ResolutionOutcome:
        event_live_stream = get_event_live_stream(self._catalog, event_id)

        eligibility = check_patron_eligibility(
            patron,
            event_live_stream.geo_allow,
            event_live_stream.geo_block,
            event_id,
        )
        if isinstance(eligibility, PatronRestriction):
            return eligibility

        live_stream = get_live_stream_record(self._catalog, event_id)
        identity = self._identity.resolve()

        return await self._get_player_link(
            event_id, event_live_stream, live_stream, patron.patron_id, client_ip, identity
        )

    async def _get_player_link(
        self,
        event_id: str,
        event_live_stream: EventLiveStream,
        live_stream: LiveStreamRecord,
        patron_id: str,
        client_ip: str,
        identity: AppIdentity,
    ) -> PlayerLink | PatronRestriction | ProviderDenial:
        try:
            stream_link = await self._provider.get_live_stream_link(
                live_stream.provider_event_id,
                live_stream.stream_name,
                patron_id,
                client_ip,
                customer_id=identity.customer_id,
                redirect_url=identity.home_page_url,
            )
            player_link = await self._provider.get_player_link(
                stream_link.stream_link,
                client_ip,
                customer_id=identity.customer_id,
                redirect_url=identity.home_page_url,
            )
        except StreamProviderError as e:
            logger.bind(
                event_id=event_id,
                operation_code=e.operation_code,
                user_ip=client_ip,
                status_code=e.status_code,
                provider_event_id=live_stream.provider_event_id,
                jurisdiction=self._cfg.ACTIVE_REGION,
            ).error(f"{__name__}.live_stream {e.status_code} {e.message}")
            return map_provider_error(e, event_id, event_live_stream)

        return PlayerLink.new(live_stream, stream_link, player_link)
