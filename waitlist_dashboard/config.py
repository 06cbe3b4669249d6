"""Application configuration."""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings."""

    # Upstream waitlist API
    waitlist_api_url: str = "http://localhost:5000/api/waitlist"
    request_timeout_seconds: Optional[float] = 10.0

    # Application
    log_level: str = "INFO"
    fetch_on_startup: bool = True

    # UI
    app_name: str = "Waitlist Dashboard"
    app_version: str = "1.0.0"
    display_timezone: str = "UTC"

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
