#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample links and comments for development.

USAGE:
    # From the project root with the virtualenv active
    python scripts/seed_data.py

    # Keep existing rows
    python scripts/seed_data.py --keep
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from hackernews.database import SessionLocal, create_tables
from hackernews.models import Comment, Link
from hackernews.services.store import CommentStore, LinkStore

LINKS = [
    {
        "url": "https://www.python.org",
        "description": "The official home of the Python programming language",
        "comments": ["Batteries included.", "Still my favourite scripting language."],
    },
    {
        "url": "https://fastapi.tiangolo.com",
        "description": "FastAPI framework, high performance, easy to learn",
        "comments": ["Type hints everywhere."],
    },
    {
        "url": "https://strawberry.rocks",
        "description": "Strawberry GraphQL: a Python library for GraphQL",
        "comments": [],
    },
    {
        "url": "https://www.sqlalchemy.org",
        "description": "The Python SQL toolkit and object relational mapper",
        "comments": ["The 2.0 API is a big improvement.", "select() all the things."],
    },
    {
        "url": "https://news.ycombinator.com",
        "description": "The site this API is cloning",
        "comments": ["Very meta."],
    },
]


def clear_data(db: Session) -> None:
    """Delete all comments and links."""
    print("Clearing existing data...")
    db.execute(delete(Comment))
    db.execute(delete(Link))
    db.commit()
    print("Data cleared.")


def create_links(db: Session) -> tuple[int, int]:
    """Create sample links with their comments through the stores."""
    print("Creating links and comments...")
    links = LinkStore(db)
    comments = CommentStore(db)

    link_count = 0
    comment_count = 0
    for entry in LINKS:
        link = links.create({"url": entry["url"], "description": entry["description"]})
        link_count += 1
        for body in entry["comments"]:
            comments.create({"link_id": link.id, "body": body})
            comment_count += 1

    return link_count, comment_count


def seed_database(clear_existing: bool = True) -> None:
    """
    Seed the database with sample data.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()

    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        link_count, comment_count = create_links(db)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Links: {link_count}")
        print(f"  - Comments: {comment_count}")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the Hackernews clone database")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Keep existing links and comments",
    )
    args = parser.parse_args()
    seed_database(clear_existing=not args.keep)
