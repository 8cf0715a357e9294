"""
Dog GraphQL type definitions
"""

import strawberry

from .image import Image


@strawberry.type
class Dog:
    """A breed, with lazily fetched images."""

    id: str
    breed: str
    subbreeds: list[str | None] | None

    @strawberry.field
    async def display_image(self, info: strawberry.Info) -> str | None:
        """One random image URL for this breed."""
        from ..resolvers.dog import resolve_dog_display_image

        return await resolve_dog_display_image(self, info)

    @strawberry.field
    async def images(self, info: strawberry.Info) -> list[Image | None] | None:
        """Every image of this breed."""
        from ..resolvers.dog import resolve_dog_images

        return await resolve_dog_images(self, info)
