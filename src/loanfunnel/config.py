"""Run configuration using pydantic-settings.

Values come from the process environment (or a ``.env`` file). The config is
built once and handed to every page explicitly; pages never read the
environment themselves.
"""

from functools import lru_cache
from pathlib import Path
from typing import Dict, Literal, Optional
from urllib.parse import urljoin, urlparse

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://www.upgrade.com/"


class FunnelConfig(BaseSettings):
    """Configuration for a funnel run."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Target
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Application root URL")

    # Timeouts (milliseconds)
    default_timeout_ms: int = Field(
        default=60_000, gt=0, description="Default timeout for actions and navigation"
    )
    assertion_timeout_ms: int = Field(
        default=6_000, gt=0, description="Default timeout for expect() assertions"
    )

    # Browser
    browser_name: Literal["chromium", "firefox", "webkit"] = Field(
        default="chromium", description="Playwright browser type"
    )
    headless: bool = Field(default=True, description="Run the browser without a window")
    viewport_width: int = Field(default=1920, gt=0)
    viewport_height: int = Field(default=1080, gt=0)

    # Diagnostics
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    debug: bool = Field(default=False, description="Pretty console logs instead of JSON")
    trace_dir: Optional[Path] = Field(
        default=None, description="Keep Playwright traces of failed tests here"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"base_url must be an http(s) URL, got {v!r}")
        return v if v.endswith("/") else v + "/"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @property
    def viewport(self) -> Dict[str, int]:
        return {"width": self.viewport_width, "height": self.viewport_height}

    def url_for(self, path: str = "/") -> str:
        """Resolve ``path`` against ``base_url``.

        Absolute paths ("/funnel") replace the base URL's path; relative ones
        are appended to it.
        """
        return urljoin(self.base_url, path)


@lru_cache
def get_config() -> FunnelConfig:
    """Get the cached process-wide config instance."""
    return FunnelConfig()
