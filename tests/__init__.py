"""
Test Suite for the Hackernews Clone API

Test Organization:
- conftest.py: Shared fixtures (test database, client, fake movie client, sample data)
- test_graphql.py: Schema, feed/comment queries, Link.comments, mutations
- test_store.py: Link/comment store and database error classification
- test_movies.py: YTS client and movie queries
- test_validation.py: ID parsing and 'take' bounds
- test_app.py: Health/root endpoints, settings, rate limiter client IP

Running Tests:
    pytest
    pytest tests/test_graphql.py -v
"""
