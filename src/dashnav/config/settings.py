"""Helper settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """dashnav configuration from ``DASHNAV_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DASHNAV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Dashboard under test
    base_url: str = Field(
        default="https://localhost:8443", description="Dashboard base URL"
    )

    # Polling
    default_timeout_ms: int = Field(
        default=10_000, ge=1, description="Timeout for each locate/assert step"
    )
    poll_interval_ms: int = Field(
        default=100, ge=10, description="Delay between polls of the DOM"
    )

    # Walk behaviour
    verify_submenu_components: bool = Field(
        default=False,
        description="Assert the component marker after each submenu click",
    )
    fixtures_dir: Path | None = Field(
        default=None, description="Directory holding status fixture payloads"
    )

    # Browser (CLI only, pytest-playwright has its own flags)
    headless: bool = Field(default=True, description="Run the browser headless")
    storage_state: Path | None = Field(
        default=None, description="Playwright storage state with a logged-in session"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Log level"
    )
    debug: bool = Field(default=False, description="Pretty console logs")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate dashboard URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @property
    def default_timeout_seconds(self) -> float:
        return self.default_timeout_ms / 1000

    @property
    def poll_interval_seconds(self) -> float:
        return self.poll_interval_ms / 1000


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
