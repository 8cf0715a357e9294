"""
Dog resolvers for GraphQL API
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...hashing import unique
from ..types.dog import Dog
from ..types.image import Image

if TYPE_CHECKING:
    from ...datasources import DogAPI


def get_dog_api(info: strawberry.Info) -> DogAPI:
    """Fetch the per-request data source from the GraphQL context."""
    return info.context["dog_api"]


def create_dog(subbreeds: list[str], breed: str) -> Dog:
    """Build a Dog; an empty subbreed list is reported as null."""
    return Dog(
        id=unique(breed),
        breed=breed,
        subbreeds=list(subbreeds) if subbreeds else None,
    )


def create_image(url: str) -> Image:
    return Image(url=url, id=unique(url))


async def resolve_dogs(info: strawberry.Info) -> list[Dog]:
    """Get every breed, in the order the upstream listing returns them."""
    breeds = await get_dog_api(info).get_dogs()
    return [create_dog(subbreeds, breed) for breed, subbreeds in breeds.items()]


async def resolve_dog(info: strawberry.Info, breed: str) -> Dog:
    """Get a single breed.

    The name is not checked locally; an unknown breed fails upstream and
    surfaces as a field error.
    """
    subbreeds = await get_dog_api(info).get_subbreeds(breed)
    return create_dog(subbreeds, breed)


async def resolve_dog_display_image(dog: Dog, info: strawberry.Info) -> str:
    return await get_dog_api(info).get_display_image(dog.breed)


async def resolve_dog_images(dog: Dog, info: strawberry.Info) -> list[Image]:
    urls = await get_dog_api(info).get_images(dog.breed)
    return [create_image(url) for url in urls]
