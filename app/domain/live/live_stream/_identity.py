"""Deployment identity parameters sent to the stream provider."""

from loguru import logger
from pydantic import BaseModel

from app.app_config import AppEnvironConfig, get_app_environ_config

# The provider requires a redirect URL; the brand home page is sent.
HOME_PAGE_URLS = {
    "tsb": "https://thescore.bet",
    "espnbet": "https://espnbet.com",
}


class AppIdentityError(Exception):
    """Deployment identity cannot produce provider request parameters."""


class UnsupportedApplicationError(AppIdentityError):
    def __init__(self, application: str):
        self.application = application
        super().__init__(f"Unsupported application: {application}")


class CustomerIdNotConfiguredError(AppIdentityError):
    def __init__(self, application: str):
        self.application = application
        super().__init__(f"STREAM_PROVIDER_CUSTOMER_ID not configured for {application}")


class AppIdentity(BaseModel):
    customer_id: str
    home_page_url: str


class AppIdentityResolver:
    """Maps the deployment's brand identity to provider request parameters."""

    def __init__(self, cfg: AppEnvironConfig | None = None):
        self._cfg = cfg or get_app_environ_config()

    @property
    def application(self) -> str:
        return self._cfg.APPLICATION

    def customer_id(self) -> str:
        """Return the provider customer id. Only "tsb" and "espnbet" are supported.

        Raises CustomerIdNotConfiguredError when the customer id is blank.
        """
        if self.application not in HOME_PAGE_URLS:
            logger.error(f"{__name__}.customer_id {self.application} not supported")
            raise UnsupportedApplicationError(self.application)
        customer_id = self._cfg.STREAM_PROVIDER_CUSTOMER_ID.strip()
        if not customer_id:
            logger.error(f"{__name__}.customer_id STREAM_PROVIDER_CUSTOMER_ID not configured")
            raise CustomerIdNotConfiguredError(self.application)
        return customer_id

    def home_page_url(self) -> str:
        """Return the brand home page. Only "tsb" and "espnbet" are supported."""
        url = HOME_PAGE_URLS.get(self.application)
        if url is None:
            logger.error(f"{__name__}.home_page_url {self.application} not supported")
            raise UnsupportedApplicationError(self.application)
        return url

    def resolve(self) -> AppIdentity:
        return AppIdentity(customer_id=self.customer_id(), home_page_url=self.home_page_url())
