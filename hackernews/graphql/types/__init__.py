"""
GraphQL Types Package

Strawberry type definitions. Class names carry a ``Type`` suffix; the
GraphQL names match the public schema (Link, Comment, Movie, MovieDetail).
"""

from hackernews.graphql.types.comment import CommentType, comment_to_graphql
from hackernews.graphql.types.link import LinkType
from hackernews.graphql.types.movie import MovieDetailType, MovieType

__all__ = [
    "CommentType",
    "comment_to_graphql",
    "LinkType",
    "MovieType",
    "MovieDetailType",
]
