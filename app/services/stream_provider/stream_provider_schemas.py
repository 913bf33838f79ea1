from typing import Any

import httpx
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError


class StreamLinkPayload(BaseModel):
    """Stream link response. Unknown keys are kept for the player link result."""

    stream_link: str = Field(..., alias="streamLink", description="Signed stream link")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class PlayerLinkPayload(BaseModel):
    """Player link response. Unknown keys are kept for the player link result."""

    player_link: str = Field(..., alias="playerLink", description="Playable player URL")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class StreamProviderErrorBody(BaseModel):
    """Error body returned by the stream provider on non-2xx responses."""

    operation_code: int | None = Field(None, validation_alias="OperationCode")
    message: str | None = Field(None, validation_alias=AliasChoices("Message", "message"))

    model_config = ConfigDict(extra="ignore")


class StreamProviderError(Exception):
    """Provider rejected the request with an HTTP error and operation code."""

    def __init__(self, status_code: int, operation_code: int | None, message: str | None):
        self.status_code = status_code
        self.operation_code = operation_code
        self.message = message
        super().__init__(f"{status_code} {operation_code} {message}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> "StreamProviderError":
        data: Any
        try:
            data = response.json()
        except ValueError:
            data = None

        try:
            body = StreamProviderErrorBody.model_validate(data if isinstance(data, dict) else {})
        except ValidationError:
            body = StreamProviderErrorBody()

        return cls(
            status_code=response.status_code,
            operation_code=body.operation_code,
            message=body.message or response.text or None,
        )


class StreamProviderTransportError(Exception):
    """Request did not produce a usable provider response (network, timeout, bad payload)."""
