"""Identity service configuration loaded with pydantic-settings.

Each section reads its own prefixed environment variables (or `.env`).
Defaults only suit local development; the JWT secret in particular must be
set in any shared environment.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        IDENTITY_DB_HOST: Database host (default: localhost)
        IDENTITY_DB_PORT: Database port (default: 5432)
        IDENTITY_DB_DATABASE: Database name (default: identity)
        IDENTITY_DB_USERNAME: Database user (default: identity)
        IDENTITY_DB_PASSWORD: Database password (required in production)
        IDENTITY_DB_POOL_MAX_CONNECTIONS: Engine pool size, no overflow (default: 10)
        IDENTITY_DB_ECHO: Log emitted SQL (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="IDENTITY_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="identity", description="Database name")
    username: str = Field(default="identity", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_max_connections: int = Field(
        default=10,
        description="Engine pool size",
        ge=1,
        le=100,
    )
    echo: bool = Field(default=False, description="Log emitted SQL")

    @property
    def connection_string(self) -> str:
        """Connection string safe to log (no password)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class JWTSettings(BaseSettings):
    """Bearer token settings.

    Environment variables:
        IDENTITY_JWT_SECRET_KEY: HMAC signing key, at least 32 characters
        IDENTITY_JWT_ISSUER: Token issuer claim (default: identity-service)
        IDENTITY_JWT_AUDIENCE: Token audience claim (default: identity-service)
        IDENTITY_JWT_EXPIRATION_MINUTES: Token lifetime (default: 60)
        IDENTITY_JWT_ALGORITHM: Signing algorithm (default: HS256)
    """

    model_config = SettingsConfigDict(
        env_prefix="IDENTITY_JWT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    secret_key: SecretStr = Field(
        default=SecretStr("change-me-development-only-secret-key-32+"),
        description="HMAC signing key",
    )
    issuer: str = Field(default="identity-service", description="Token issuer")
    audience: str = Field(default="identity-service", description="Token audience")
    expiration_minutes: int = Field(
        default=60,
        description="Token lifetime in minutes",
        ge=1,
        le=1440,
    )
    algorithm: str = Field(default="HS256", description="Signing algorithm")

    @model_validator(mode="after")
    def validate_secret_key(self) -> "JWTSettings":
        """Reject signing keys too short for HMAC-SHA256."""
        if len(self.secret_key.get_secret_value()) < 32:
            raise ValueError("secret_key must be at least 32 characters")
        return self


class SecuritySettings(BaseSettings):
    """Password hashing settings.

    Environment variables:
        IDENTITY_BCRYPT_ROUNDS: bcrypt work factor (default: 12)
    """

    model_config = SettingsConfigDict(
        env_prefix="IDENTITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    bcrypt_rounds: int = Field(
        default=12,
        description="bcrypt work factor",
        ge=4,
        le=31,
    )


class Settings(BaseSettings):
    """Top-level settings exposing each configuration section."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Identity Service", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def jwt(self) -> JWTSettings:
        """Get token settings."""
        return get_jwt_settings()

    @property
    def security(self) -> SecuritySettings:
        """Get password hashing settings."""
        return get_security_settings()


@lru_cache
def get_settings() -> Settings:
    """Load application settings once per process."""
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings."""
    return DatabaseSettings()


@lru_cache
def get_jwt_settings() -> JWTSettings:
    """Get cached token settings."""
    return JWTSettings()


@lru_cache
def get_security_settings() -> SecuritySettings:
    """Get cached password hashing settings."""
    return SecuritySettings()
