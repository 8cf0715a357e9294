"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import GraphQLSchema, get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..context import AppContext
from ..logging import get_logger
from .queries.root import Query

logger = get_logger(__name__)

# Create the GraphQL schema
schema = strawberry.Schema(query=Query)


class SchemaValidationError(Exception):
    """Raised when the compiled GraphQL schema is unusable."""


def collect_schema_errors(graphql_schema: GraphQLSchema | None = None) -> list[str]:
    """Structural problems of the schema, then any introspection failure."""
    if graphql_schema is None:
        graphql_schema = schema._schema

    messages = [str(e) for e in gql_validate_schema(graphql_schema)]
    if messages:
        return messages

    result = graphql_sync(graphql_schema, get_introspection_query())
    return [str(e) for e in result.errors or []]


def validate_schema() -> None:
    """Fail fast at app creation if the schema cannot serve queries.

    Raises:
        SchemaValidationError: With every collected problem joined by "; "
    """
    errors = collect_schema_errors()
    if errors:
        logger.error("GraphQL schema is invalid", errors=errors)
        raise SchemaValidationError("; ".join(errors))

    logger.info("GraphQL schema validated", types=len(schema._schema.type_map))


def print_schema() -> str:
    """Render the schema as SDL."""
    return schema.as_str()


def create_graphql_router(
    app_context: AppContext, graphiql: bool = True
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI bound to ``app_context``."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "dog_api": app_context.dog_api(),
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
