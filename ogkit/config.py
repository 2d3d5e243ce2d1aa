from __future__ import annotations

from importlib.util import find_spec

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DOTENV_AVAILABLE = find_spec("dotenv") is not None

CHROME_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OG_",
        env_file=".env" if DOTENV_AVAILABLE else None,
        case_sensitive=False,
        extra="ignore",
    )

    font_cache_size: int = Field(default=30, ge=1)
    font_cache_ttl_seconds: float | None = Field(default=30 * 60, ge=0)
    image_cache_size: int = Field(default=50, ge=1)
    image_cache_ttl_seconds: float | None = Field(default=10 * 60, ge=0)
    emoji_cache_size: int = Field(default=200, ge=1)
    emoji_cache_ttl_seconds: float | None = Field(default=None, ge=0)
    google_fonts_css_url: str = "https://fonts.googleapis.com/css2"
    user_agent: str = CHROME_USER_AGENT
    http_timeout_seconds: float = 10.0
    http_retry_attempts: int = Field(default=2, ge=0)
    http_retry_backoff: float = 0.5
    log_level: str = "INFO"
    log_file: str | None = None


settings = Settings()
