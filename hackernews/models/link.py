"""
Link Model

Represents a submitted URL with its description, the primary content
entity of the Hackernews clone.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List

from sqlalchemy import DateTime, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hackernews.database import Base

if TYPE_CHECKING:
    from hackernews.models.comment import Comment


class Link(Base):
    """
    Link model representing a submitted URL.

    Table: links

    Relationships:
    - comments: One-to-Many relationship to Comment (comments.link_id)

    Example:
        link = Link(url="https://www.python.org", description="Python")
        db.add(link)
        db.commit()
    """

    __tablename__ = "links"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    # No uniqueness or format constraint: the same URL may be posted twice
    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Free-text description of the link"
    )
    url: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="The submitted URL"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    comments: Mapped[List["Comment"]] = relationship(
        "Comment",
        back_populates="link",
    )

    def __repr__(self) -> str:
        return f"Link(id={self.id}, url='{self.url}')"
