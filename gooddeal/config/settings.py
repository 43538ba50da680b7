from typing import Any
from urllib.parse import quote_plus

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables and an optional .env file.
    """

    # API Configuration
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "GoodDeal Storefront API"
    PROJECT_DESCRIPTION: str = "Product catalog, customer orders and admin console"
    VERSION: str = "0.1.0"

    # Application Settings
    DEBUG: bool = Field(False, description="Debug mode")
    ENVIRONMENT: str = Field("production", description="Runtime environment")
    CORS_ORIGINS: str = Field("http://localhost:3000", description="Comma-separated allowed CORS origins")

    # Database Settings
    DATABASE_URL: str | None = Field(None, description="Full async SQLAlchemy URL, overrides DB_* values")
    DB_HOST: str = Field("localhost", description="PostgreSQL host")
    DB_PORT: int = Field(5432, description="PostgreSQL port")
    DB_NAME: str = Field("gooddeal", description="Database name")
    DB_USER: str = Field("postgres", description="Database user")
    DB_PASSWORD: str | None = Field(None, description="Database password")
    DB_ECHO: bool = Field(False, description="Log SQL statements")
    DB_CREATE_TABLES: bool = Field(False, description="Create missing tables on startup")

    # Database connection pool settings
    DB_POOL_SIZE: int = Field(20, description="Connection pool size")
    DB_MAX_OVERFLOW: int = Field(30, description="Pool overflow limit")
    DB_POOL_RECYCLE: int = Field(3600, description="Recycle connections after N seconds")
    DB_POOL_TIMEOUT: int = Field(30, description="Seconds to wait for a pooled connection")

    # JWT Settings
    JWT_SECRET_KEY: str = Field(..., description="Secret used to sign access tokens")
    JWT_ALGORITHM: str = Field("HS256", description="JWT signing algorithm")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60 * 24 * 7, description="Access token lifetime in minutes")

    # Admin bootstrap
    ADMIN_EMAIL: str | None = Field(None, description="Admin account ensured at startup and by create_admin")
    ADMIN_PASSWORD: str | None = Field(None, description="Password for the bootstrap admin account")
    ADMIN_NAME: str = Field("GoodDeal Admin", description="Display name for the bootstrap admin account")

    # Client package
    CLIENT_API_BASE_URL: str = Field("http://localhost:5000", description="Base URL used by StorefrontClient")
    CLIENT_TIMEOUT_SECONDS: float = Field(10.0, description="HTTP timeout for StorefrontClient")

    # Sentry Configuration
    SENTRY_DSN: str | None = Field(None, description="Sentry DSN for error tracking")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def __init__(self, **data: Any):
        super().__init__(**data)

    @field_validator("DB_POOL_SIZE")
    @classmethod
    def validate_pool_size(cls, v):
        if v < 1:
            raise ValueError("DB_POOL_SIZE must be at least 1")
        if v > 100:
            raise ValueError("DB_POOL_SIZE should not exceed 100")
        return v

    @field_validator("DB_MAX_OVERFLOW")
    @classmethod
    def validate_max_overflow(cls, v):
        if v < 0:
            raise ValueError("DB_MAX_OVERFLOW must be 0 or greater")
        if v > 200:
            raise ValueError("DB_MAX_OVERFLOW should not exceed 200")
        return v

    @field_validator("ACCESS_TOKEN_EXPIRE_MINUTES")
    @classmethod
    def validate_token_lifetime(cls, v):
        if v < 1:
            raise ValueError("ACCESS_TOKEN_EXPIRE_MINUTES must be at least 1")
        return v

    @computed_field
    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL for the configured database."""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        user = quote_plus(self.DB_USER)
        if self.DB_PASSWORD:
            password = quote_plus(self.DB_PASSWORD)
            return f"postgresql+asyncpg://{user}:{password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        return f"postgresql+asyncpg://{user}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return the cached settings instance.

    Environment variables are read only once per process.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
