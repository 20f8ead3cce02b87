"""
GraphQL Package

GraphQL API of the Hackernews clone, built with Strawberry GraphQL.

Usage:
    The GraphQL endpoint is available at /graphql, with an interactive
    IDE in the browser unless disabled in settings.

Example Query:
    query {
        feed(filterNeedle: "python", take: 10) {
            id
            url
            description
            comments { id body }
        }
    }
"""

import strawberry
from strawberry.fastapi import GraphQLRouter

from hackernews.config import get_settings
from hackernews.graphql.context import get_context
from hackernews.graphql.mutations import Mutation
from hackernews.graphql.queries import Query

schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def create_graphql_router() -> GraphQLRouter:
    """
    Create the GraphQL router for FastAPI.

    Returns:
        GraphQLRouter configured with schema and context
    """
    settings = get_settings()
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide=settings.graphql_ide or None,
    )


__all__ = ["schema", "create_graphql_router"]
