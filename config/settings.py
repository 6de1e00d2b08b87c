"""
Application configuration module using Pydantic Settings.
Loads configuration from environment variables and .env file.
"""

from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    app_name: str = Field(default="Table Recipes API", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: str = Field(default="development", description="Environment (development/production)")
    debug: bool = Field(default=True, description="Debug mode")

    # API
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8080, description="API port")
    api_prefix: str = Field(default="/api/v1", description="API prefix")

    # MongoDB
    mongo_uri: str = Field(default="mongodb://localhost:27017", description="MongoDB connection URL")
    mongodb_db_name: str = Field(default="table_recipes", description="MongoDB database name")
    mongodb_min_pool_size: int = Field(default=10, description="MongoDB min pool size")
    mongodb_max_pool_size: int = Field(default=100, description="MongoDB max pool size")

    # Identity provider (Keycloak userinfo endpoint)
    kc_userinfo_endpoint: str = Field(..., description="OpenID Connect userinfo endpoint")

    # Outbound calls and store operations
    request_timeout_seconds: float = Field(default=10.0, description="Timeout for identity and store calls")

    # CORS
    cors_allowed_list: str = Field(default="", description="Comma-separated list of allowed origins")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: str = Field(default="logs/app.log", description="Log file path")

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Timeouts must be bounded and positive."""
        if v <= 0:
            raise ValueError("request_timeout_seconds must be positive")
        return v

    @property
    def allowed_origins(self) -> List[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_allowed_list.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment.lower() == "production"


# Global settings instance
settings = Settings()
