"""Configuration settings for the nutricache server."""

from pathlib import Path
from functools import lru_cache
from pydantic_settings import BaseSettings


def _find_env_file() -> str:
    """Find .env file - check current dir, then parent (repository root)."""
    current = Path.cwd()

    # Check current directory
    if (current / ".env").exists():
        return str(current / ".env")

    # Check parent directory (when running from server/)
    if (current.parent / ".env").exists():
        return str(current.parent / ".env")

    # Default to current directory
    return ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server settings
    port: int = 3457
    host: str = "0.0.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Nutrition backend
    api_base_url: str = "https://nutricion-backend-343042748851.us-east1.run.app"
    api_version: str = "v1"
    api_token: str = ""
    request_timeout: float = 15.0

    # Cache TTLs (in seconds)
    cache_ttl: float = 300  # 5 minutes
    profile_cache_ttl: float = 300  # 5 minutes
    preferences_cache_ttl: float = 120  # 2 minutes

    class Config:
        env_file = _find_env_file()
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def api_root(self) -> str:
        """Backend base URL with the /api segment and version applied."""
        base = self.api_base_url.rstrip("/")
        if not base.lower().endswith("/api"):
            base = f"{base}/api"
        if self.api_version:
            base = f"{base}/{self.api_version}"
        return base


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
