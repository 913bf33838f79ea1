from fastapi import APIRouter, Depends, Request
from loguru import logger

from app.api.v1.schemas.base import ApiOut
from app.api.v1.schemas.live_stream import GetLiveStreamIn
from app.domain.live.live_stream.live_stream_domain import LiveStreamService
from app.domain.live.live_stream.live_stream_models import LiveStreamResult, describe_outcome
from app.schemas.patron import PatronData

router = APIRouter(prefix="/live_stream")


def get_live_stream_service(request: Request) -> LiveStreamService:
    """Get the LiveStreamService created at application startup."""
    return request.app.state.live_stream_service


def get_client_ip(request: Request) -> str:
    """First hop of X-Forwarded-For, falling back to the socket peer."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop
    return request.client.host if request.client else ""


@router.post("/get_live_stream")
async def get_live_stream(
    body: GetLiveStreamIn,
    request: Request,
    service: LiveStreamService = Depends(get_live_stream_service),
) -> ApiOut[LiveStreamResult]:
    """Resolve the live stream of an event for a patron."""
    client_ip = get_client_ip(request)
    patron = PatronData(patron_id=body.patron_id, region=body.region, client_ip=client_ip)

    result = await service.resolve(body.event_id, patron, client_ip)

    logger.info(f"live_stream {body.event_id}: {describe_outcome(result.live_stream_result)}")
    return ApiOut[LiveStreamResult](results=result)
