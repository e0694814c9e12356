"""Configuration management with Pydantic Settings.

Environment variables are loaded from:
1. Environment variables (highest priority)
2. .env file (development)
3. Defaults (lowest priority)
"""

from enum import Enum
from functools import lru_cache

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Logging format."""

    JSON = "json"
    TEXT = "text"


class ClusterLocatorMethod(str, Enum):
    """Where the cluster supplier reads its clusters from."""

    CONFIG = "config"  # CLUSTERS setting
    HTTP = "http"  # Cluster Registry API


class ClusterConfig(BaseModel):
    """A single cluster entry as declared in configuration."""

    name: str = Field(min_length=1, description="Unique cluster name")
    url: str = Field(description="Kubernetes API server URL")
    auth_provider: str = Field(default="serviceAccount", description="Auth provider key")
    service_account_token: str | None = Field(default=None, description="Static bearer token")
    oidc_token_provider: str | None = Field(
        default=None, description="Key into auth.oidc of the request body"
    )
    skip_tls_verify: bool = Field(default=False, description="Skip TLS verification")
    ca_file: str | None = Field(default=None, description="Path to a PEM CA bundle")


class Settings(BaseSettings):
    """Main application settings.

    All settings can be overridden via environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="fleet-workloads", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        alias="ENV",
        description="Deployment environment",
    )

    # Logging configuration
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    log_format: LogFormat = Field(default=LogFormat.JSON, description="Logging format")

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Server bind host")
    port: int = Field(default=8080, description="Server bind port")
    workers: int = Field(default=1, description="Number of worker processes")
    debug: bool = Field(default=False, description="Enable debug mode")

    @field_validator("workers")
    @classmethod
    def validate_workers(cls, v: int) -> int:
        """Ensure workers is at least 1."""
        return max(1, v)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses LRU cache to avoid re-parsing environment variables.
    """
    return Settings()


class WorkloadAggregatorSettings(Settings):
    """Settings specific to the Workload Aggregator service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    cluster_locator_method: ClusterLocatorMethod = Field(
        default=ClusterLocatorMethod.CONFIG,
        description="Source of the cluster list",
    )
    clusters: list[ClusterConfig] = Field(
        default_factory=list,
        description="Clusters served when the locator method is 'config' (JSON)",
    )
    cluster_registry_url: str = Field(
        default="http://cluster-registry:8080",
        description="Cluster Registry service URL",
    )
    fetch_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout against cluster API servers",
    )

    @field_validator("clusters")
    @classmethod
    def validate_unique_names(cls, v: list[ClusterConfig]) -> list[ClusterConfig]:
        names = [c.name for c in v]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate cluster names: {', '.join(duplicates)}")
        return v
