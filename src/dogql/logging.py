"""
Structured logging for dogql.

Every log line emitted while a GraphQL request is being served carries the
request id and the GraphQL operation name, so upstream Dog API calls made by
resolvers can be traced back to the query that caused them.
"""

import base64
import logging
import re
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
graphql_operation_ctx: ContextVar[str | None] = ContextVar("graphql_operation", default=None)

# Client-supplied request ids are only trusted when they look like ids
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def add_request_context(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor: attach the current request id and GraphQL operation."""
    _ = logger, method_name

    request_id = request_id_ctx.get()
    if request_id:
        event_dict.setdefault("request_id", request_id)

    operation = graphql_operation_ctx.get()
    if operation:
        event_dict.setdefault("graphql_operation", operation)

    return event_dict


def configure_logging(debug: bool = False) -> None:
    """Route structlog through stdlib logging on stdout.

    Debug mode renders colored console lines at DEBUG level, which includes
    one line per upstream Dog API call; otherwise JSON lines at INFO.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_request_context,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """14-character url-safe id: microsecond timestamp plus two random bytes."""
    raw = int(time.time() * 1_000_000).to_bytes(8, byteorder="big") + secrets.token_bytes(2)
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def accept_request_id(candidate: str | None) -> str:
    """Keep a client-supplied id if it is well formed, else mint a new one."""
    if candidate and _REQUEST_ID_PATTERN.match(candidate):
        return candidate
    return generate_request_id()


def set_request_context(
    request_id: str | None = None, graphql_operation: str | None = None
) -> str:
    """Bind the request id (validated or generated) and operation name.

    Returns:
        The request id now in effect
    """
    request_id = accept_request_id(request_id)
    request_id_ctx.set(request_id)
    graphql_operation_ctx.set(graphql_operation)
    return request_id


def clear_request_context() -> None:
    request_id_ctx.set(None)
    graphql_operation_ctx.set(None)


def get_request_id() -> str | None:
    return request_id_ctx.get()


def get_graphql_operation() -> str | None:
    return graphql_operation_ctx.get()
