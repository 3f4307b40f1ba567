"""Application configuration and settings."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_BASE_DIR = Path(__file__).resolve().parents[2]
_ENV_FILE = _BASE_DIR / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE, env_file_encoding="utf-8", extra="ignore"
    )

    # Database
    database_url: str = Field(
        default="sqlite:///travelplanner.db",
        description="SQLAlchemy database URL",
    )

    # CORS
    ui_origin: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origin for the web frontend",
    )

    # JWT Configuration
    jwt_private_key_pem: str = Field(
        default="dummy-private-key-for-tests",
        description="RSA private key for JWT signing (PEM format)",
    )
    jwt_public_key_pem: str = Field(
        default="dummy-public-key-for-tests",
        description="RSA public key for JWT verification (PEM format)",
    )
    jwt_access_ttl_minutes: int = Field(
        default=60 * 24 * 7, description="Access token lifetime in minutes"
    )
    password_min_length: int = Field(
        default=6, description="Minimum accepted password length"
    )

    # Completion provider
    openai_api_key: str = Field(
        default="",
        description="OpenAI API key used for itinerary generation",
    )
    openai_plan_model: str = Field(
        default="gpt-4o-mini", description="Chat model used for itinerary generation"
    )
    openai_temperature: float = Field(
        default=0.7, ge=0.0, le=2.0, description="Sampling temperature for planning"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("database_url", mode="after")
    @classmethod
    def _normalize_sqlite_url(cls, value: str) -> str:
        """Ensure sqlite URLs always point to the repo root."""
        sqlite_prefixes = ("sqlite:///", "sqlite+pysqlite:///")
        for prefix in sqlite_prefixes:
            if value.startswith(prefix):
                path = value[len(prefix) :]
                if path and not path.startswith("/") and path != ":memory:":
                    abs_path = (_BASE_DIR / path).resolve()
                    return f"{prefix}{abs_path.as_posix()}"
        return value


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


class MissingOpenAIKeyError(RuntimeError):
    """Raised when an OpenAI API key is not configured."""


def get_openai_api_key() -> str:
    """Return a validated OpenAI API key or raise a helpful error.

    Read on every call; the key is never cached separately from settings.
    """
    api_key = (get_settings().openai_api_key or "").strip()
    if not api_key or api_key.startswith("dummy-"):
        raise MissingOpenAIKeyError("OPENAI_API_KEY is not configured on the server")
    return api_key
