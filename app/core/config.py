"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables (and .env)
- Centralizes config values (store URI, bind address, CORS)
- Validates configuration on startup
- Environment-specific settings
"""

from pydantic import Field, validator
from pydantic_settings import BaseSettings
from typing import Literal


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Validates all required configs on startup.
    """

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # MongoDB
    MONGO_URI: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URI"
    )
    MONGO_DB_NAME: str = Field(
        default="userposts",
        description="MongoDB database name"
    )
    USERS_COLLECTION: str = Field(
        default="users",
        description="Collection holding User documents"
    )
    POSTS_COLLECTION: str = Field(
        default="posts",
        description="Collection holding Post documents"
    )
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = Field(
        default=5000,
        description="How long the driver waits for a reachable server"
    )

    # Server
    HOST: str = Field(
        default="0.0.0.0",
        description="Bind address"
    )
    PORT: int = Field(
        default=4000,
        description="Bind port"
    )
    GRAPHQL_PATH: str = Field(
        default="/",
        description="Path of the GraphQL endpoint"
    )
    GRAPHIQL: bool = Field(
        default=True,
        description="Serve the GraphiQL IDE (never in production)"
    )
    CORS_ORIGINS: list = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    @validator("GRAPHQL_PATH")
    def validate_graphql_path(cls, v):
        """Router paths must be absolute."""
        if not v.startswith("/"):
            return f"/{v}"
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    @property
    def graphiql_enabled(self) -> bool:
        return self.GRAPHIQL and not self.is_production

    class Config:
        env_file = ".env"
        case_sensitive = True
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()


def validate_settings(config: Settings = settings):
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.
    """
    errors = []

    if not config.MONGO_URI:
        errors.append("MONGO_URI is required")
    elif not config.MONGO_URI.startswith(("mongodb://", "mongodb+srv://")):
        errors.append("MONGO_URI must start with mongodb:// or mongodb+srv://")

    if not config.MONGO_DB_NAME:
        errors.append("MONGO_DB_NAME is required")

    if not 0 < config.PORT < 65536:
        errors.append(f"PORT must be between 1 and 65535, got {config.PORT}")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
