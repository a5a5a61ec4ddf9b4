"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="NorthWind Extension", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, ge=1, le=65535, description="Server port")

    # Local record store
    database_url: str = Field(
        default="sqlite:///./bookshop.db",
        description="SQLAlchemy URL of the local book store",
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    db_init_attempts: int = Field(
        default=3, ge=1, description="Database initialization retry attempts"
    )
    db_init_delay_sec: float = Field(
        default=1.0, ge=0, description="Delay between DB init attempts"
    )
    seed_sample_data: bool = Field(
        default=True, description="Insert sample books when the table is empty"
    )

    # Remote (on-premise) record source
    remote_destination: str = Field(
        default="S4HANA_ONPREMISE",
        description="Connectivity destination of the on-premise OData service",
    )

    # Security. Both protections are OFF by default for the demo deployment;
    # create_app logs a warning for each disabled one.
    auth_enabled: bool = Field(
        default=False,
        description="Require HTTP Basic credentials (disabled: non-production default)",
    )
    auth_username: str = Field(default="admin", description="HTTP Basic username")
    auth_password: str = Field(default="admin", description="HTTP Basic password")
    csrf_protection_enabled: bool = Field(
        default=False,
        description="Require X-CSRF-Token on modifying requests (disabled: non-production default)",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:4004", "http://localhost:8080"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_prefix: str = Field(default="/odata/v4", description="API route prefix")
    api_title: str = Field(
        default="NorthWind Extension API", description="API documentation title"
    )
    api_description: str = Field(
        default="Side-by-side extension blending on-premise products with local books",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def disabled_protections(self) -> list[str]:
        """Names of the HTTP protections switched off by this configuration"""
        disabled = []
        if not self.auth_enabled:
            disabled.append("authentication")
        if not self.csrf_protection_enabled:
            disabled.append("csrf")
        return disabled


# Global settings instance
settings = Settings()
