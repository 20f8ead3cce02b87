"""
GraphQL Context

Provides request context to all GraphQL resolvers:
- Database session and the link/comment stores built on it
- Movie API client
- Per-request DataLoaders

The context is created fresh for each GraphQL request from FastAPI
dependencies and passed to resolvers via the `info` parameter. Nothing
in it is shared between requests.
"""

from fastapi import Depends
from sqlalchemy.orm import Session
from strawberry.fastapi import BaseContext

from hackernews.database import get_db
from hackernews.graphql.loaders import Loaders
from hackernews.services.movies import MovieClient
from hackernews.services.store import CommentStore, LinkStore


class GraphQLContext(BaseContext):
    """
    Context object available to all GraphQL resolvers.

    Attributes:
        db: SQLAlchemy database session for this request
        links: Link store bound to ``db``
        comments: Comment store bound to ``db``
        movies: Movie API client
        loaders: DataLoaders scoped to this request
    """

    def __init__(self, db: Session, movies: MovieClient):
        super().__init__()
        self.db = db
        self.links = LinkStore(db)
        self.comments = CommentStore(db)
        self.movies = movies
        self.loaders = Loaders(self.comments)


def get_movie_client() -> MovieClient:
    """Movie client dependency, overridable in tests."""
    return MovieClient()


async def get_context(
    db: Session = Depends(get_db),
    movies: MovieClient = Depends(get_movie_client),
) -> GraphQLContext:
    """
    Create GraphQL context for each request.

    Called by Strawberry for every GraphQL request. The session comes
    from get_db, so it is closed when the request finishes.
    """
    return GraphQLContext(db=db, movies=movies)
