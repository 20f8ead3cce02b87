"""
Application Configuration Module

Type-safe configuration using Pydantic Settings.

Values are read from environment variables (case-insensitive) and fall
back to a local .env file, then to the defaults below. Invalid values
fail at startup rather than at request time.

Usage:
    from hackernews.config import get_settings

    settings = get_settings()
    print(settings.app_name)
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Field(...) carries a description for every option so the settings
    class doubles as the configuration reference.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="Hackernews Clone API",
        description="Application name displayed in docs and logs"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (detailed errors, SQL echo, auto-reload)"
    )
    api_version: str = Field(
        default="v1",
        description="API version reported by the health endpoint"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )
    port: int = Field(
        default=4000,
        description="Port to bind the server to"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )

    # -------------------------------------------------------------------------
    # Database Settings
    # -------------------------------------------------------------------------
    database_url: str = Field(
        default="sqlite:///./hackernews.db",
        description="SQLAlchemy database URL (SQLite or PostgreSQL)"
    )
    db_pool_size: int = Field(
        default=5,
        description="Number of permanent database connections (non-SQLite only)"
    )
    db_max_overflow: int = Field(
        default=10,
        description="Maximum additional connections during high load (non-SQLite only)"
    )

    # -------------------------------------------------------------------------
    # Feed Settings
    # -------------------------------------------------------------------------
    feed_default_take: int = Field(
        default=30,
        description="Number of links returned by feed when 'take' is omitted"
    )
    feed_min_take: int = Field(
        default=1,
        description="Smallest accepted 'take' value for feed"
    )
    feed_max_take: int = Field(
        default=50,
        description="Largest accepted 'take' value for feed"
    )

    # -------------------------------------------------------------------------
    # Movie API Settings
    # -------------------------------------------------------------------------
    movies_api_url: str = Field(
        default="https://yts.mx/api/v2/",
        description="Base URL of the YTS movie API"
    )
    movies_timeout: float = Field(
        default=10.0,
        description="Timeout in seconds for movie API requests"
    )

    # -------------------------------------------------------------------------
    # Rate Limiting Settings
    # -------------------------------------------------------------------------
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable per-client rate limiting"
    )
    rate_limit_default: str = Field(
        default="100/minute",
        description="Default rate limit applied to every route"
    )

    # -------------------------------------------------------------------------
    # HTTP / GraphQL Settings
    # -------------------------------------------------------------------------
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        description="Comma-separated list of allowed CORS origins"
    )
    graphql_ide: str = Field(
        default="graphiql",
        description="GraphQL IDE served at /graphql: graphiql, apollo-sandbox, or empty to disable"
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite."""
        return self.database_url.startswith("sqlite")

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that log_level is a valid Python logging level.

        Returns:
            The validated value (uppercase)

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        valid_envs = {"development", "staging", "production"}
        if v.lower() not in valid_envs:
            raise ValueError(f"environment must be one of {valid_envs}")
        return v.lower()

    @field_validator("graphql_ide")
    @classmethod
    def validate_graphql_ide(cls, v: str) -> str:
        """Validate the GraphQL IDE is one Strawberry can serve."""
        valid_ides = {"graphiql", "apollo-sandbox", "pathfinder", ""}
        if v.lower() not in valid_ides:
            raise ValueError(f"graphql_ide must be one of {valid_ides}")
        return v.lower()

    @model_validator(mode="after")
    def validate_feed_bounds(self) -> "Settings":
        """
        Validate that the feed 'take' bounds are consistent.

        The default must itself be accepted by feed, otherwise every
        request without an explicit 'take' would fail.
        """
        if self.feed_min_take < 1:
            raise ValueError("feed_min_take must be at least 1")
        if self.feed_min_take > self.feed_max_take:
            raise ValueError("feed_min_take must not exceed feed_max_take")
        if not self.feed_min_take <= self.feed_default_take <= self.feed_max_take:
            raise ValueError(
                "feed_default_take must be between feed_min_take and feed_max_take"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    The first call reads the environment and .env file and validates;
    later calls return the same instance.

    Returns:
        Cached Settings instance
    """
    return Settings()
