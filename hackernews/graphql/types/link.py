"""
GraphQL Link Type

Defines the Link type with its comments relationship.
"""

import strawberry
from strawberry.types import Info

from hackernews.graphql.context import GraphQLContext
from hackernews.graphql.types.comment import CommentType, comment_to_graphql


@strawberry.type(name="Link", description="A submitted URL with its description")
class LinkType:
    """
    GraphQL type representing a link.

    Maps to the Link SQLAlchemy model. ``pk`` keeps the integer primary
    key for the comments lookup and is not exposed in the schema.
    """

    id: strawberry.ID
    description: str
    url: str
    pk: strawberry.Private[int]

    @strawberry.field(description="Comments posted on this link")
    async def comments(self, info: Info[GraphQLContext, None]) -> list[CommentType]:
        # Batched per request: one query for every link in the response
        comments = await info.context.loaders.comments_by_link.load(self.pk)
        return [comment_to_graphql(c) for c in comments]
