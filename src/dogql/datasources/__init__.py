"""
Upstream data sources
"""

from .dog_api import DEFAULT_BASE_URL, DogAPI
from .errors import (
    DogAPIError,
    UpstreamConnectionError,
    UpstreamHTTPError,
    UpstreamPayloadError,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DogAPI",
    "DogAPIError",
    "UpstreamConnectionError",
    "UpstreamHTTPError",
    "UpstreamPayloadError",
]
