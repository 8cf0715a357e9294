"""
Process-scoped application context
"""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx

from .config import Settings, settings as default_settings
from .datasources import DogAPI
from .logging import get_logger

logger = get_logger(__name__)


def build_http_client(app_settings: Settings) -> httpx.AsyncClient:
    """Create the shared upstream client; no timeout unless one is configured."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(app_settings.upstream_timeout),
        headers={"Accept": "application/json"},
    )


@dataclass
class AppContext:
    """Owns the upstream HTTP client for the lifetime of the server."""

    settings: Settings = field(default_factory=lambda: default_settings)
    http_client: httpx.AsyncClient | None = None

    async def startup(self) -> None:
        if self.http_client is None:
            self.http_client = build_http_client(self.settings)
        logger.info("Upstream client ready", base_url=self.settings.dog_api_base_url)

    async def shutdown(self) -> None:
        if self.http_client is not None:
            await self.http_client.aclose()
            self.http_client = None
        logger.info("Upstream client closed")

    def dog_api(self) -> DogAPI:
        """Build a data source bound to the shared client."""
        if self.http_client is None:
            raise RuntimeError("AppContext.startup() has not been called")
        return DogAPI(self.http_client, base_url=self.settings.dog_api_base_url)
