"""
dogql
GraphQL API over the Dog CEO breed and image service
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
