"""
GraphQL Movie Types

Read-only projections of the YTS movie dataset.

The schema keeps the dataset's snake_case field names, so those fields
set their GraphQL name explicitly instead of relying on camel-casing.
"""

import strawberry


@strawberry.type(name="Movie", description="A movie in a listing or suggestion set")
class MovieType:
    id: int
    title: str
    rating: float
    summary: str
    language: str
    medium_cover_image: str = strawberry.field(name="medium_cover_image")


@strawberry.type(name="MovieDetail", description="A single movie with its full description")
class MovieDetailType:
    id: int
    title: str
    rating: float
    description_full: str = strawberry.field(name="description_full")
    language: str
    medium_cover_image: str = strawberry.field(name="medium_cover_image")
