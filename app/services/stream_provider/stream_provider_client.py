"""HTTP client for the live stream provider.

Playback takes two chained calls: first a signed stream link for the event,
then a player link built from that stream link. Paths under `liveStream`
are served from the player host, everything else from the API host.
"""

from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from app.app_config import AppEnvironConfig, get_app_environ_config
from app.services.stream_provider.stream_provider_schemas import (
    PlayerLinkPayload,
    StreamLinkPayload,
    StreamProviderError,
    StreamProviderTransportError,
)

PLAYER_PATH_PREFIX = "liveStream"


class StreamProviderClient:
    def __init__(
        self,
        base_url: str,
        player_base_url: str,
        api_key: str | None = None,
        timeout: float = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.player_base_url = player_base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(
        cls,
        cfg: AppEnvironConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "StreamProviderClient":
        cfg = cfg or get_app_environ_config()
        return cls(
            base_url=cfg.STREAM_PROVIDER_BASE_URL,
            player_base_url=cfg.STREAM_PROVIDER_PLAYER_BASE_URL,
            api_key=cfg.STREAM_PROVIDER_API_KEY,
            timeout=cfg.STREAM_PROVIDER_TIMEOUT_SECONDS,
            transport=transport,
        )

    def get_base_path_by_query(self, path: str) -> str:
        """Return the host serving `path`."""
        if path.startswith(PLAYER_PATH_PREFIX):
            return self.player_base_url
        return self.base_url

    def _build_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Accept": "application/json"}
        if self.api_key:
            headers["X-Api-Key"] = self.api_key
        return headers

    async def _get(self, path: str, params: dict[str, str]) -> dict[str, Any]:
        url = f"{self.get_base_path_by_query(path)}/{path}"
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                response = await client.get(url, params=params, headers=self._build_headers())
        except httpx.HTTPError as e:
            raise StreamProviderTransportError(f"{path}: {type(e).__name__}: {e}") from e

        if response.is_error:
            raise StreamProviderError.from_response(response)

        try:
            data = response.json()
        except ValueError as e:
            raise StreamProviderTransportError(f"{path}: response is not JSON") from e

        logger.debug(f"stream provider {path} response: {data}")
        if not isinstance(data, dict):
            raise StreamProviderTransportError(f"{path}: unexpected response {data!r}")
        return data

    async def get_live_stream_link(
        self,
        provider_event_id: str,
        stream_name: str,
        patron_id: str,
        user_ip: str,
        *,
        customer_id: str,
        redirect_url: str,
    ) -> StreamLinkPayload:
        """Request a signed stream link for a patron."""
        data = await self._get(
            f"api/v2/events/{provider_event_id}/streamLink",
            {
                "customerId": customer_id,
                "streamName": stream_name,
                "userId": patron_id,
                "userIp": user_ip,
                "redirectUrl": redirect_url,
            },
        )
        try:
            return StreamLinkPayload.model_validate(data)
        except ValidationError as e:
            raise StreamProviderTransportError(f"invalid stream link response: {e}") from e

    async def get_player_link(
        self,
        stream_link: str,
        user_ip: str,
        *,
        customer_id: str,
        redirect_url: str,
    ) -> PlayerLinkPayload:
        """Exchange a signed stream link for a player link."""
        data = await self._get(
            f"{PLAYER_PATH_PREFIX}/playerLink",
            {
                "customerId": customer_id,
                "streamLink": stream_link,
                "userIp": user_ip,
                "redirectUrl": redirect_url,
            },
        )
        try:
            return PlayerLinkPayload.model_validate(data)
        except ValidationError as e:
            raise StreamProviderTransportError(f"invalid player link response: {e}") from e
