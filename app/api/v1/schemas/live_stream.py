from pydantic import BaseModel, Field, field_validator

from app.utils.app_errors import AppError, AppErrorCode, HttpStatusCode


class GetLiveStreamIn(BaseModel):
    event_id: str = Field(description="Catalog event ID")
    patron_id: str = Field(description="Patron requesting the stream")
    region: str = Field(description="Resolved region code of the patron, e.g. US-NY")

    @field_validator("event_id", "patron_id")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise AppError(
                errcode=AppErrorCode.E_INVALID_REQUEST,
                errmesg="event_id and patron_id cannot be blank",
                status_code=HttpStatusCode.BAD_REQUEST,
            )
        return v

    @field_validator("region")
    @classmethod
    def validate_region(cls, v: str) -> str:
        v = v.strip().upper()
        if not v:
            raise AppError(
                errcode=AppErrorCode.E_INVALID_REQUEST,
                errmesg="region cannot be blank",
                status_code=HttpStatusCode.BAD_REQUEST,
            )
        return v
