"""Resolver package for the GraphQL schema.

Field resolvers live in sibling modules and read their data source from the
request context (``info.context["dog_api"]``).
"""
