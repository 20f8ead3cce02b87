"""
pytest Fixtures for Hackernews API Tests

Shared fixtures:
- engine / db_session: fresh in-memory SQLite database per test
- movie_client: in-process stand-in for the YTS API client
- client: FastAPI TestClient wired to both of the above
- sample data: links and comments
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# Set environment variables BEFORE importing the app so settings pick them up
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from hackernews.database import Base, get_db
from hackernews.graphql.context import get_movie_client
from hackernews.main import app
from hackernews.models import Comment, Link

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory: fast and isolated. Foreign keys are enforced through the
# connect listener in hackernews.database, so comment-on-missing-link
# failures behave as they do on PostgreSQL.


@pytest.fixture
def engine():
    """
    Create a SQLite in-memory database engine with all tables.

    StaticPool keeps the single connection alive; without it the in-memory
    database would disappear between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    """Create a database session for one test."""
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    session = TestSessionLocal()

    yield session

    session.close()


# =============================================================================
# MOVIE API FIXTURES
# =============================================================================

SAMPLE_MOVIES = [
    {
        "id": 10,
        "title": "The Matrix",
        "rating": 8.7,
        "summary": "A hacker learns the truth about reality.",
        "description_full": "Thomas Anderson learns the world is a simulation.",
        "language": "en",
        "medium_cover_image": "https://img.example.com/matrix.jpg",
    },
    {
        "id": 11,
        "title": "Spirited Away",
        "rating": 8.6,
        "summary": "A girl wanders into the world of spirits.",
        "description_full": "Chihiro must work in a bathhouse for spirits.",
        "language": "ja",
        "medium_cover_image": "https://img.example.com/spirited.jpg",
    },
    {
        "id": 12,
        "title": "Plan 9 from Outer Space",
        "rating": 4,
        "summary": "Aliens resurrect the dead.",
        "description_full": "Aliens resurrect the dead to stop humanity.",
        "language": "en",
        "medium_cover_image": "https://img.example.com/plan9.jpg",
    },
]


class FakeMovieClient:
    """Stand-in for MovieClient that serves SAMPLE_MOVIES and records calls."""

    def __init__(self):
        self.calls: list[tuple] = []

    async def get_movies(self, limit=None, rating=None):
        self.calls.append(("get_movies", limit, rating))
        movies = [m for m in SAMPLE_MOVIES if rating is None or m["rating"] >= rating]
        return movies[:limit] if limit else movies

    async def get_movie(self, id):
        self.calls.append(("get_movie", id))
        for movie in SAMPLE_MOVIES:
            if str(movie["id"]) == str(id):
                return movie
        return {}

    async def get_suggestions(self, id):
        self.calls.append(("get_suggestions", id))
        return [m for m in SAMPLE_MOVIES if str(m["id"]) != str(id)]


@pytest.fixture
def movie_client() -> FakeMovieClient:
    return FakeMovieClient()


# =============================================================================
# CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(
    db_session: Session,
    movie_client: FakeMovieClient,
) -> Generator[TestClient, None, None]:
    """
    Create a test client using the test database and fake movie client.

    get_db and get_movie_client are overridden, so every GraphQL context
    built during the test uses these fixtures.
    """

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_movie_client] = lambda: movie_client

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_link(db_session: Session) -> Link:
    """Create a sample link."""
    link = Link(
        url="https://www.python.org",
        description="The Python programming language",
    )
    db_session.add(link)
    db_session.commit()
    db_session.refresh(link)
    return link


@pytest.fixture
def sample_comment(db_session: Session, sample_link: Link) -> Comment:
    """Create a comment on sample_link."""
    comment = Comment(link_id=sample_link.id, body="Batteries included.")
    db_session.add(comment)
    db_session.commit()
    db_session.refresh(comment)
    return comment


@pytest.fixture
def multiple_links(db_session: Session) -> list[Link]:
    """Create links with varied urls and descriptions for filtering tests."""
    data = [
        ("https://foo.example.com", "first site"),
        ("https://bar.example.com", "all about foo bars"),
        ("https://baz.example.com", "nothing to see"),
        ("https://example.org/foo", "path match"),
        ("https://qux.example.com", "another one"),
    ]
    links = [Link(url=url, description=description) for url, description in data]
    db_session.add_all(links)
    db_session.commit()
    for link in links:
        db_session.refresh(link)
    return links
