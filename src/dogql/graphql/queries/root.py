"""
Root GraphQL query definitions
"""

import strawberry

from ..types.dog import Dog


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def dogs(self, info: strawberry.Info) -> list[Dog | None] | None:
        """Get every breed."""
        from ..resolvers.dog import resolve_dogs

        return await resolve_dogs(info)

    @strawberry.field
    async def dog(self, info: strawberry.Info, breed: str) -> Dog | None:
        """Get a single breed by name."""
        from ..resolvers.dog import resolve_dog

        return await resolve_dog(info, breed)
