"""
Errors raised by upstream data sources.

Resolvers never catch these: they propagate to the GraphQL execution layer,
which reports them as field errors while sibling fields keep resolving.
"""

from __future__ import annotations


class DogAPIError(Exception):
    """Base class for failures talking to the Dog CEO API."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class UpstreamHTTPError(DogAPIError):
    """The upstream answered with a non-success status code."""

    def __init__(self, path: str, status_code: int, detail: str | None = None):
        message = f"Dog API request to '{path}' failed with status {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, path)
        self.status_code = status_code
        self.detail = detail


class UpstreamConnectionError(DogAPIError):
    """The request never produced a response (DNS, connect, read errors)."""


class UpstreamPayloadError(DogAPIError):
    """The response body was not the expected ``{status, message}`` envelope."""
