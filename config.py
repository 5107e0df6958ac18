"""Application configuration loaded from environment variables."""

import os
from typing import Literal

from pydantic import BaseModel, Field, computed_field

from exceptions import MissingConfigurationError

DEFAULT_MAX_UPLOAD_BYTES = 25 * 1024 * 1024
DEFAULT_PROVIDER_TIMEOUT_SECONDS = 120.0
DEFAULT_STORE_PING_INTERVAL_SECONDS = 10.0

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _normalize_database_url(url: str) -> str:
    """Maps bare PostgreSQL URLs onto the psycopg driver."""
    u = url.strip()
    if u.startswith("postgres://"):
        u = u.replace("postgres://", "postgresql+psycopg://", 1)
    elif u.startswith("postgresql://"):
        u = u.replace("postgresql://", "postgresql+psycopg://", 1)
    return u


class DatabaseConfig(BaseModel, frozen=True):
    """Immutable data-store connection configuration."""

    raw_url: str = Field(min_length=1)
    # 0 turns off the background connectivity check
    ping_interval_seconds: float = Field(default=DEFAULT_STORE_PING_INTERVAL_SECONDS, ge=0)

    @computed_field
    @property
    def url(self) -> str:
        """Returns the SQLAlchemy connection URL with an explicit driver."""
        return _normalize_database_url(self.raw_url)


class ProviderConfig(BaseModel, frozen=True):
    """Speech-to-text provider configuration."""

    api_key: str | None = None
    base_url: str = "https://api.elevenlabs.io"
    model_id: str = "scribe_v1"
    upload_filename: str = "audio.webm"
    timeout_seconds: float | None = DEFAULT_PROVIDER_TIMEOUT_SECONDS

    @computed_field
    @property
    def is_configured(self) -> bool:
        """Whether a credential is available for outbound calls."""
        return bool(self.api_key)


class UploadConfig(BaseModel, frozen=True):
    """Limits applied to incoming uploads. A max_bytes of 0 disables the check."""

    max_bytes: int = Field(default=DEFAULT_MAX_UPLOAD_BYTES, ge=0)


class ServerConfig(BaseModel, frozen=True):
    """HTTP server and routing configuration."""

    port: int = 8000
    cors_origin: str = "http://localhost:3000"
    api_prefix: str = "/api/v1"
    log_level: LogLevel = "INFO"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    database: DatabaseConfig
    provider: ProviderConfig = ProviderConfig()
    upload: UploadConfig = UploadConfig()
    server: ServerConfig = ServerConfig()


def _optional_env(name: str) -> str | None:
    value = (os.getenv(name) or "").strip()
    return value or None


def _timeout_from_env() -> float | None:
    raw = _optional_env("PROVIDER_TIMEOUT_SECONDS")
    if raw is None:
        return DEFAULT_PROVIDER_TIMEOUT_SECONDS
    seconds = float(raw)
    return seconds if seconds > 0 else None


def load_config() -> AppConfig:
    """
    Loads configuration from environment variables.

    Raises:
        MissingConfigurationError: If DATABASE_URL is not set.
    """
    database_url = _optional_env("DATABASE_URL")
    if database_url is None:
        raise MissingConfigurationError("DATABASE_URL")

    return AppConfig(
        database=DatabaseConfig(
            raw_url=database_url,
            ping_interval_seconds=float(
                os.getenv(
                    "STORE_PING_INTERVAL_SECONDS", str(DEFAULT_STORE_PING_INTERVAL_SECONDS)
                )
            ),
        ),
        provider=ProviderConfig(
            api_key=_optional_env("ELEVENLABS_API_KEY"),
            base_url=os.getenv("PROVIDER_BASE_URL", "https://api.elevenlabs.io"),
            timeout_seconds=_timeout_from_env(),
        ),
        upload=UploadConfig(
            max_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(DEFAULT_MAX_UPLOAD_BYTES))),
        ),
        server=ServerConfig(
            port=int(os.getenv("PORT", "8000")),
            cors_origin=os.getenv("CORS_ORIGIN", "http://localhost:3000"),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        ),
    )
