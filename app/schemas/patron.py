from pydantic import BaseModel, ConfigDict


class PatronData(BaseModel):
    """Patron identity and resolved location for the current request."""

    patron_id: str
    region: str
    client_ip: str | None = None

    model_config = ConfigDict(frozen=True)
