"""Application settings using Pydantic Settings for configuration management."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BILLBRIDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Application
    app_name: str = "BillBridge Gateway"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    api_key: SecretStr
    api_key_header: str = "x-api-key"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    enable_echo_endpoint: bool = True

    # Ingestion ceiling for the JSON endpoints; outbound forwards are unbounded
    max_request_mb: float = Field(default=10.0, gt=0)
    forward_timeout_seconds: float = Field(default=60.0, gt=0)

    # Orchestrator -> gateway
    gateway_url: str = "http://localhost:3000"

    # Downstream accounting API
    accounting_api_base: str = "https://www.zohoapis.com/books/v3/"
    accounting_organization_id: str | None = None
    accounting_auth_scheme: str = "Zoho-oauthtoken"
    accounting_access_token: SecretStr | None = None

    # Directory attachment source
    attachments_root: Path = Path("attachments")

    @computed_field
    @property
    def max_request_bytes(self) -> int:
        """Ingestion ceiling in bytes."""
        return int(self.max_request_mb * 1024 * 1024)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
