"""
GraphQL Query Resolvers

Defines all read operations (queries) for the GraphQL API.
Link and comment resolvers read through the stores in the context;
movie resolvers delegate to the movie API client.
"""

from typing import Any

import strawberry
from strawberry.types import Info

from hackernews.config import get_settings
from hackernews.graphql.context import GraphQLContext
from hackernews.graphql.types.comment import CommentType, comment_to_graphql
from hackernews.graphql.types.link import LinkType
from hackernews.graphql.types.movie import MovieDetailType, MovieType
from hackernews.graphql.validation import apply_take_constraints, parse_int_safe
from hackernews.models import Link
from hackernews.services.store import link_filter

API_INFO = "This is the API of a Hackernews Clone"


def link_to_graphql(link: Link) -> LinkType:
    """Convert SQLAlchemy Link model to GraphQL LinkType."""
    return LinkType(
        id=strawberry.ID(str(link.id)),
        description=link.description,
        url=link.url,
        pk=link.id,
    )


def movie_to_graphql(movie: dict[str, Any]) -> MovieType:
    """Convert a movie listing entry from the YTS API to GraphQL MovieType."""
    return MovieType(
        id=int(movie.get("id") or 0),
        title=movie.get("title") or "",
        rating=float(movie.get("rating") or 0),
        summary=movie.get("summary") or "",
        language=movie.get("language") or "",
        medium_cover_image=movie.get("medium_cover_image") or "",
    )


def movie_detail_to_graphql(movie: dict[str, Any]) -> MovieDetailType:
    """Convert a movie details payload from the YTS API to GraphQL MovieDetailType."""
    return MovieDetailType(
        id=int(movie.get("id") or 0),
        title=movie.get("title") or "",
        rating=float(movie.get("rating") or 0),
        description_full=movie.get("description_full") or "",
        language=movie.get("language") or "",
        medium_cover_image=movie.get("medium_cover_image") or "",
    )


@strawberry.type
class Query:
    """
    GraphQL Query type containing all read operations.

    All resolvers receive an `info` parameter that contains the
    GraphQL context with the stores and the movie client.
    """

    @strawberry.field(name="info", description="Describe this API")
    def api_info(self) -> str:
        return API_INFO

    @strawberry.field(description="Get the list of links, optionally filtered")
    def feed(
        self,
        info: Info[GraphQLContext, None],
        filter_needle: str | None = None,
        skip: int | None = None,
        take: int | None = None,
    ) -> list[LinkType]:
        """
        Get links ordered by id.

        Args:
            filter_needle: Keep links whose description or url contains it
            skip: Number of links to skip (passed to the database as is)
            take: Number of links to return (default 30, allowed 1 to 50)

        Returns:
            List of links

        Raises:
            ValidationError: If take is outside the allowed range
        """
        settings = get_settings()
        take = apply_take_constraints(
            take if take is not None else settings.feed_default_take,
            min=settings.feed_min_take,
            max=settings.feed_max_take,
        )

        links = info.context.links.find_many(
            where=link_filter(filter_needle),
            skip=skip,
            take=take,
        )
        return [link_to_graphql(link) for link in links]

    @strawberry.field(description="Get a single comment by ID")
    def comment(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
    ) -> CommentType | None:
        """
        Get a single comment by its ID.

        IDs are parsed like postCommentOnLink's linkId: a non-numeric ID
        cannot belong to any comment, so it resolves to null.
        """
        comment_id = parse_int_safe(id)
        if comment_id is None:
            return None

        comment = info.context.comments.find_unique(comment_id)
        if comment is None:
            return None

        return comment_to_graphql(comment)

    @strawberry.field(description="List movies, optionally above a minimum rating")
    async def movies(
        self,
        info: Info[GraphQLContext, None],
        limit: int | None = None,
        rating: float | None = None,
    ) -> list[MovieType | None]:
        movies = await info.context.movies.get_movies(limit=limit, rating=rating)
        return [movie_to_graphql(m) for m in movies]

    @strawberry.field(description="Get the details of a single movie")
    async def movie(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
    ) -> MovieDetailType:
        movie = await info.context.movies.get_movie(id)
        return movie_detail_to_graphql(movie)

    @strawberry.field(
        name="movie_suggestions",
        description="Get movies suggested for a given movie",
    )
    async def movie_suggestions(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
    ) -> list[MovieType | None]:
        movies = await info.context.movies.get_suggestions(id)
        return [movie_to_graphql(m) for m in movies]
