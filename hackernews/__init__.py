"""
Hackernews Clone API Package

Main application package for the Hackernews clone backend.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and declarative base
- main.py: FastAPI application factory
- models/: SQLAlchemy ORM models (Link, Comment)
- services/: Link/Comment store, movie API client, rate limiting
- graphql/: Strawberry schema, resolvers and request context
"""

__version__ = "0.1.0"
