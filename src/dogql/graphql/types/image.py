"""
Image GraphQL type definitions
"""

import strawberry


@strawberry.type
class Image:
    """A single picture of a breed."""

    url: str
    id: str
