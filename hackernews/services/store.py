"""
Link and Comment Store

Thin persistence layer between the GraphQL resolvers and SQLAlchemy.

Each store wraps the request's Session and offers the three operations
the resolvers need:
- find_many(where, skip, take): filtered, paginated listing
- find_unique(id): single row by primary key, or None
- create(data): insert and commit a single row

Database failures are classified here rather than in the resolvers: a
foreign key violation is raised as ForeignKeyViolation, every other error
propagates unchanged after the session has been rolled back.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from hackernews.database import Base
from hackernews.models import Comment, Link

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# SQLSTATE class 23 code for foreign_key_violation (PostgreSQL and others)
FOREIGN_KEY_VIOLATION_SQLSTATE = "23503"


# =============================================================================
# Store Errors
# =============================================================================


class StoreError(Exception):
    """Base class for classified persistence failures."""

    pass


class ForeignKeyViolation(StoreError):
    """Raised when a write references a row that does not exist."""

    pass


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    """
    Check whether an IntegrityError was caused by a foreign key constraint.

    Server databases report a SQLSTATE (psycopg2 exposes it as ``pgcode``,
    psycopg 3 as ``sqlstate``). SQLite has no SQLSTATE and only reports the
    failure in its message.
    """
    orig = exc.orig
    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if sqlstate:
        return sqlstate == FOREIGN_KEY_VIOLATION_SQLSTATE
    return "FOREIGN KEY constraint failed" in str(orig)


# =============================================================================
# Filters
# =============================================================================


def link_filter(needle: str | None) -> ColumnElement[bool] | None:
    """
    Build the feed filter for a search needle.

    Matches links whose description or url contains the needle as a
    literal substring. Returns None (match everything) for a missing or
    empty needle.
    """
    if not needle:
        return None
    return or_(
        Link.description.contains(needle, autoescape=True),
        Link.url.contains(needle, autoescape=True),
    )


# =============================================================================
# Stores
# =============================================================================


class ModelStore(Generic[ModelT]):
    """Shared read/create operations for a single model."""

    model: type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def find_many(
        self,
        where: ColumnElement[bool] | None = None,
        skip: int | None = None,
        take: int | None = None,
    ) -> Sequence[ModelT]:
        """
        List rows matching ``where`` ordered by id.

        ``skip`` and ``take`` are handed to the database as OFFSET and
        LIMIT without further checks.
        """
        stmt = select(self.model).order_by(self.model.id)
        if where is not None:
            stmt = stmt.where(where)
        if skip is not None:
            stmt = stmt.offset(skip)
        if take is not None:
            stmt = stmt.limit(take)
        return self.db.execute(stmt).scalars().all()

    def find_unique(self, id: int) -> ModelT | None:
        """Get a single row by primary key, or None."""
        return self.db.get(self.model, id)

    def create(self, data: Mapping[str, Any]) -> ModelT:
        """
        Insert a new row and commit it.

        Raises:
            ForeignKeyViolation: If the row references a missing parent
            Exception: Any other failure, after the session is rolled back
        """
        instance = self.model(**data)
        self.db.add(instance)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if is_foreign_key_violation(exc):
                raise ForeignKeyViolation(str(exc.orig)) from exc
            raise
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(instance)
        return instance


class LinkStore(ModelStore[Link]):
    """Persistence operations for links."""

    model = Link

    def create(self, data: Mapping[str, Any]) -> Link:
        link = super().create(data)
        logger.info(f"Created link {link.id}: {link.url}")
        return link


class CommentStore(ModelStore[Comment]):
    """Persistence operations for comments."""

    model = Comment

    def create(self, data: Mapping[str, Any]) -> Comment:
        comment = super().create(data)
        logger.info(f"Created comment {comment.id} on link {comment.link_id}")
        return comment

    def find_by_link_ids(self, link_ids: Iterable[int]) -> dict[int, list[Comment]]:
        """
        Get the comments of several links with one query.

        Returns:
            Mapping of link id to its comments; links without comments
            are absent from the mapping
        """
        grouped: dict[int, list[Comment]] = defaultdict(list)
        for comment in self.find_many(where=Comment.link_id.in_(list(link_ids))):
            grouped[comment.link_id].append(comment)
        return dict(grouped)
