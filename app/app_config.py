from functools import lru_cache

from pydantic import BaseModel

from app.cw.config import config


def _str(key: str, default: str = "") -> str:
    return (config.get(key) or default).strip()


class AppEnvironConfig(BaseModel):
    DEBUG: bool = _str("DEBUG", "false").lower() == "true"

    # Brand identity of this deployment, e.g. "tsb" or "espnbet"
    APPLICATION: str = _str("APPLICATION", "tsb")
    # Jurisdiction the deployment is serving, attached to provider error logs
    ACTIVE_REGION: str = _str("ACTIVE_REGION")

    # Stream provider configuration
    STREAM_PROVIDER_BASE_URL: str = _str("STREAM_PROVIDER_BASE_URL", "http://localhost:8081")
    STREAM_PROVIDER_PLAYER_BASE_URL: str = _str(
        "STREAM_PROVIDER_PLAYER_BASE_URL", "http://localhost:8081"
    )
    STREAM_PROVIDER_CUSTOMER_ID: str = _str("STREAM_PROVIDER_CUSTOMER_ID")
    STREAM_PROVIDER_API_KEY: str | None = _str("STREAM_PROVIDER_API_KEY") or None
    STREAM_PROVIDER_TIMEOUT_SECONDS: float = float(_str("STREAM_PROVIDER_TIMEOUT_SECONDS") or 10)

    # JSON file with "events" and "live_streams" loaded into the event catalog at startup
    LIVE_STREAM_CATALOG_PATH: str | None = _str("LIVE_STREAM_CATALOG_PATH") or None

    API_HOST: str = _str("API_HOST", "0.0.0.0")
    API_PORT: int = int(_str("API_PORT") or 8000)
    API_WORKERS: int = int(_str("API_WORKERS") or 1)


@lru_cache(maxsize=1)
def get_app_environ_config() -> AppEnvironConfig:
    return AppEnvironConfig()
