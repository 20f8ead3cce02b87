"""
SQLAlchemy Models Package

Model Relationships:
- Link -> Comment: One-to-Many (a link has many comments,
                   a comment belongs to exactly one link)

Importing every model here registers it with Base.metadata so Alembic
and create_tables() see the full schema.
"""

from hackernews.models.link import Link
from hackernews.models.comment import Comment

__all__ = [
    "Link",
    "Comment",
]
