"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        BENJAMIN_DB_HOST: Database host (default: localhost)
        BENJAMIN_DB_PORT: Database port (default: 5432)
        BENJAMIN_DB_DATABASE: Database name (default: benjamin)
        BENJAMIN_DB_USERNAME: Database user (default: benjamin)
        BENJAMIN_DB_PASSWORD: Database password (required in production)
        BENJAMIN_DB_POOL_SIZE: Connections kept in the pool (default: 10)
        BENJAMIN_DB_CREATE_SCHEMA: Create missing tables on startup (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="BENJAMIN_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="benjamin", description="Database name")
    username: str = Field(default="benjamin", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_size: int = Field(
        default=10,
        description="Connections kept in the pool",
        ge=1,
        le=100,
    )
    create_schema: bool = Field(
        default=False,
        description="Create missing tables on startup (development only)",
    )

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class OIDCSettings(BaseSettings):
    """Identity provider settings for bearer token validation.

    Environment variables:
        BENJAMIN_OIDC_ISSUER_URL: Issuer URL (e.g. Keycloak realm URL)
        BENJAMIN_OIDC_AUDIENCE: Expected audience claim
        BENJAMIN_OIDC_USERNAME_CLAIM: Claim carrying the caller's username
    """

    model_config = SettingsConfigDict(
        env_prefix="BENJAMIN_OIDC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    issuer_url: str = Field(
        default="http://localhost:8080/realms/benjamin",
        description="OIDC issuer URL",
    )
    audience: str = Field(default="benjamin-api", description="Expected audience")
    username_claim: str = Field(
        default="user_name",
        description="JWT claim holding the username",
    )


class BrokerSettings(BaseSettings):
    """Message broker settings for outbox publishing.

    Environment variables:
        BENJAMIN_BROKER_HOST: RabbitMQ host (default: localhost)
        BENJAMIN_BROKER_PORT: RabbitMQ port (default: 5672)
        BENJAMIN_BROKER_USERNAME / BENJAMIN_BROKER_PASSWORD: Credentials
        BENJAMIN_BROKER_VIRTUAL_HOST: Virtual host (default: /)
        BENJAMIN_BROKER_EXCHANGE: Topic exchange messages are published to
        BENJAMIN_BROKER_TOPIC: Routing key for email events
        BENJAMIN_BROKER_QUEUE: Durable queue bound to the topic (empty to skip)
    """

    model_config = SettingsConfigDict(
        env_prefix="BENJAMIN_BROKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Broker host")
    port: int = Field(default=5672, description="Broker port")
    username: str = Field(default="guest", description="Broker username")
    password: SecretStr = Field(
        default=SecretStr("guest"),
        description="Broker password",
    )
    virtual_host: str = Field(default="/", description="Broker virtual host")
    exchange: str = Field(default="benjamin", description="Topic exchange name")
    topic: str = Field(default="BENJAMIN.EMAIL", description="Email events topic")
    queue: str = Field(
        default="benjamin.email",
        description="Queue bound to the topic, declared on connect",
    )


class OutboxSettings(BaseSettings):
    """Outbox publisher settings.

    Environment variables:
        BENJAMIN_OUTBOX_ENABLED: Run the publisher in this process (default: true)
        BENJAMIN_OUTBOX_POLL_INTERVAL_SECONDS: Delay between cycles (default: 3)
        BENJAMIN_OUTBOX_BATCH_SIZE: Events fetched per cycle (default: 100)
        BENJAMIN_OUTBOX_PUBLISH_TIMEOUT_SECONDS: Wait for broker ack (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="BENJAMIN_OUTBOX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    enabled: bool = Field(default=True, description="Run the outbox publisher")
    poll_interval_seconds: float = Field(
        default=3.0,
        description="Delay between publisher cycles",
        gt=0,
    )
    batch_size: int = Field(
        default=100,
        description="Maximum events fetched per cycle",
        ge=1,
        le=10_000,
    )
    publish_timeout_seconds: float = Field(
        default=10.0,
        description="How long to wait for a broker acknowledgment",
        gt=0,
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Benjamin API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def oidc(self) -> OIDCSettings:
        """Get identity provider settings."""
        return get_oidc_settings()

    @property
    def broker(self) -> BrokerSettings:
        """Get message broker settings."""
        return get_broker_settings()

    @property
    def outbox(self) -> OutboxSettings:
        """Get outbox publisher settings."""
        return get_outbox_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings."""
    return DatabaseSettings()


@lru_cache
def get_oidc_settings() -> OIDCSettings:
    """Get cached identity provider settings."""
    return OIDCSettings()


@lru_cache
def get_broker_settings() -> BrokerSettings:
    """Get cached broker settings."""
    return BrokerSettings()


@lru_cache
def get_outbox_settings() -> OutboxSettings:
    """Get cached outbox publisher settings."""
    return OutboxSettings()
