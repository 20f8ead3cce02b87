"""
GraphQL Comment Type
"""

import strawberry

from hackernews.models import Comment


@strawberry.type(name="Comment", description="A reply attached to a link")
class CommentType:
    """
    GraphQL type representing a comment.

    Maps to the Comment SQLAlchemy model. The parent link id is not part
    of the public schema.
    """

    id: strawberry.ID
    body: str


def comment_to_graphql(comment: Comment) -> CommentType:
    """Convert SQLAlchemy Comment model to GraphQL CommentType."""
    return CommentType(id=strawberry.ID(str(comment.id)), body=comment.body)
