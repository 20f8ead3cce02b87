"""
GraphQL Mutation Resolvers

Defines all write operations (mutations) for the GraphQL API.
Links and comments can be created; nothing is updated or deleted.
"""

import logging

import strawberry
from strawberry.types import Info

from hackernews.graphql.context import GraphQLContext
from hackernews.graphql.errors import NotFoundError
from hackernews.graphql.queries import link_to_graphql
from hackernews.graphql.types.comment import CommentType, comment_to_graphql
from hackernews.graphql.types.link import LinkType
from hackernews.graphql.validation import parse_int_safe
from hackernews.services.store import ForeignKeyViolation

logger = logging.getLogger(__name__)


def missing_link_error(link_id: str) -> NotFoundError:
    return NotFoundError(
        f"Cannot post comment on non-existing link with id '{link_id}'."
    )


@strawberry.type
class Mutation:
    """
    GraphQL Mutation type containing all write operations.
    """

    @strawberry.mutation(description="Submit a new link")
    def post_link(
        self,
        info: Info[GraphQLContext, None],
        url: str,
        description: str,
    ) -> LinkType:
        """
        Create a new link.

        The url is stored as given; duplicates are allowed.
        """
        link = info.context.links.create({"url": url, "description": description})
        return link_to_graphql(link)

    @strawberry.mutation(description="Post a comment on an existing link")
    def post_comment_on_link(
        self,
        info: Info[GraphQLContext, None],
        link_id: strawberry.ID,
        body: str,
    ) -> CommentType:
        """
        Create a comment on a link.

        Raises:
            NotFoundError: If link_id is not numeric (checked before touching
                the database) or no link has that id
        """
        parsed_id = parse_int_safe(link_id)
        if parsed_id is None:
            logger.info(f"Rejected comment on non-numeric link id '{link_id}'")
            raise missing_link_error(link_id)

        try:
            comment = info.context.comments.create(
                {"link_id": parsed_id, "body": body}
            )
        except ForeignKeyViolation as e:
            logger.info(f"Rejected comment on missing link {parsed_id}")
            raise missing_link_error(link_id) from e

        return comment_to_graphql(comment)
