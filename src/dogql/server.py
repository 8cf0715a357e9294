"""
uvicorn server that announces where the GraphQL endpoint is listening
"""

from __future__ import annotations

import socket

import uvicorn

from .config import get_public_url
from .logging import get_logger

logger = get_logger(__name__)


def bound_addresses(servers: list) -> list[tuple[str, int]]:
    """(host, port) of every TCP socket the asyncio servers are listening on."""
    addresses = []
    for server in servers:
        for sock in server.sockets:
            if sock.family in (socket.AF_INET, socket.AF_INET6):
                host, port = sock.getsockname()[:2]
                addresses.append((host, port))
    return addresses


class DogqlServer(uvicorn.Server):
    """Logs "Server ready" once the listening socket is actually bound.

    uvicorn runs the application lifespan before binding, and exits from
    ``startup`` when the bind fails, so nothing is announced in that case.
    """

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.should_exit:
            return

        for host, port in bound_addresses(self.servers):
            logger.info("Server ready", url=get_public_url(host, port))
