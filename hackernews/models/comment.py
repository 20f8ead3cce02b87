"""
Comment Model

Represents a reply attached to exactly one Link.

Business Rules:
- link_id must reference an existing link (foreign key constraint)
- Comments are never updated or deleted through the API
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hackernews.database import Base

if TYPE_CHECKING:
    from hackernews.models.link import Link


class Comment(Base):
    """
    Comment model for replies on links.

    Attributes:
        id: Primary key
        body: Comment text
        link_id: Foreign key to links table
        created_at: When the comment was posted
    """

    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    body: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Comment text",
    )

    # Indexed: every Link.comments lookup filters on it
    link_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("links.id"),
        nullable=False,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    link: Mapped["Link"] = relationship("Link", back_populates="comments")

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, link_id={self.link_id})>"
