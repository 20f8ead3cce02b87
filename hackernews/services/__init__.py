"""
Services Package

- store: Link/Comment persistence and database error classification
- movies: YTS movie API client
- rate_limiter: slowapi limiter shared by all routes
"""

from hackernews.services.movies import MovieClient, MovieServiceError
from hackernews.services.store import (
    CommentStore,
    ForeignKeyViolation,
    LinkStore,
    StoreError,
    link_filter,
)

__all__ = [
    "CommentStore",
    "ForeignKeyViolation",
    "LinkStore",
    "MovieClient",
    "MovieServiceError",
    "StoreError",
    "link_filter",
]
