"""Data source for the Dog CEO REST API.

Translates the four lookups the graph needs into GET requests and unwraps the
``{"status": ..., "message": ...}`` envelope every response comes in.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from ..logging import get_logger
from .errors import (
    UpstreamConnectionError,
    UpstreamHTTPError,
    UpstreamPayloadError,
)

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://dog.ceo/api"


def unwrap(path: str, payload: Any) -> Any:
    """Return the ``message`` member of an upstream envelope.

    Raises:
        UpstreamPayloadError: If ``payload`` is not an envelope
    """
    if not isinstance(payload, dict) or "message" not in payload:
        raise UpstreamPayloadError(
            f"Dog API response for '{path}' has no 'message' field", path
        )
    return payload["message"]


class DogAPI:
    """Thin async client for the breed and image endpoints.

    The ``httpx.AsyncClient`` is owned by the caller and shared across
    instances, so building one of these per request is cheap.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str = DEFAULT_BASE_URL):
        self.client = client
        self.base_url = base_url.rstrip("/")

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path}"

    async def get(self, path: str) -> Any:
        """GET ``path`` relative to the base URL and return the unwrapped payload.

        Raises:
            UpstreamConnectionError: If no response was received
            UpstreamHTTPError: If the response status is not 2xx
            UpstreamPayloadError: If the body is not a JSON envelope
        """
        try:
            response = await self.client.get(self._url(path))
        except httpx.HTTPError as e:
            logger.warning("Dog API request failed", path=path, error=str(e))
            raise UpstreamConnectionError(
                f"Dog API request to '{path}' failed: {e}", path
            ) from e

        logger.debug("Dog API response", path=path, status_code=response.status_code)

        if not response.is_success:
            detail = None
            try:
                body = response.json()
                if isinstance(body, dict) and isinstance(body.get("message"), str):
                    detail = body["message"]
            except ValueError:
                pass
            logger.warning(
                "Dog API returned an error status",
                path=path,
                status_code=response.status_code,
                detail=detail,
            )
            raise UpstreamHTTPError(path, response.status_code, detail)

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamPayloadError(
                f"Dog API response for '{path}' is not valid JSON", path
            ) from e

        return unwrap(path, payload)

    async def get_dogs(self) -> dict[str, list[str]]:
        """All breeds, mapped to their subbreed names."""
        return await self.get("breeds/list/all")

    async def get_subbreeds(self, breed: str) -> list[str]:
        """Subbreed names of ``breed`` (empty when it has none)."""
        return await self.get(f"breed/{quote(breed, safe='')}/list")

    async def get_display_image(self, breed: str) -> str:
        """URL of one random image of ``breed``."""
        return await self.get(f"breed/{quote(breed, safe='')}/images/random")

    async def get_images(self, breed: str) -> list[str]:
        """URLs of every image of ``breed``."""
        return await self.get(f"breed/{quote(breed, safe='')}/images")
