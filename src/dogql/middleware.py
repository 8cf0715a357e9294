"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

_GRAPHQL_PAYLOAD_PARAMS = ("query", "variables", "extensions")


def redact_graphql_params(params: dict[str, Any]) -> dict[str, Any]:
    """Replace raw GraphQL payload members of a query string with a marker."""
    return {
        key: "[REDACTED]" if key in _GRAPHQL_PAYLOAD_PARAMS else value
        for key, value in params.items()
    }


def operation_name_from_query(query: Any) -> str | None:
    """Derive a loggable operation name from GraphQL query text."""
    if not isinstance(query, str) or not query:
        return None
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    match = re.search(r"\bquery\s+(\w+)", query) or re.search(r"\bmutation\s+(\w+)", query)
    if match:
        kind = "mutation:" if query.lstrip().startswith("mutation") else ""
        return f"{kind}{match.group(1)}"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    """Operation name of a GET or POST /graphql request, if there is one."""
    if request.url.path != "/graphql":
        return None

    if request.method == "GET":
        params = dict(request.query_params)
        op = params.get("operationName")
        if isinstance(op, str) and op:
            return op
        return operation_name_from_query(params.get("query"))

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict):
            return None
        op = data.get("operationName")
        if isinstance(op, str) and op:
            return op
        return operation_name_from_query(data.get("query"))

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and set logging context."""
        request_id = set_request_context(
            request.headers.get(REQUEST_ID_HEADER),
            graphql_operation=await extract_graphql_operation_name(request),
        )

        try:
            params = None
            if request.query_params:
                params = dict(request.query_params)
                if request.url.path == "/graphql":
                    params = redact_graphql_params(params)

            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                query_params=params,
                user_agent=request.headers.get("user-agent"),
                remote_addr=request.client.host if request.client else None,
            )

            response = await call_next(request)

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
            )

            response.headers[REQUEST_ID_HEADER] = request_id
            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
