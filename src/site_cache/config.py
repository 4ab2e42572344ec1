import os
from dataclasses import dataclass
from functools import lru_cache

import httpx
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Site API
    api_base_url: str = os.getenv("SITE_API_URL", "http://localhost:5000")
    request_timeout: float = float(os.getenv("REQUEST_TIMEOUT", "30"))

    # Request cache
    request_cache_ttl: int = int(os.getenv("REQUEST_CACHE_TTL", "300"))  # 5 minutes default
    request_cache_max_entries: int = int(os.getenv("REQUEST_CACHE_MAX_ENTRIES", "100"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Development backend
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.request_cache_ttl < 0:
            raise ValueError("REQUEST_CACHE_TTL must be zero or positive")

        if self.request_cache_max_entries < 1:
            raise ValueError(
                f"REQUEST_CACHE_MAX_ENTRIES must be at least 1, got {self.request_cache_max_entries}"
            )

        if self.request_timeout <= 0:
            raise ValueError("REQUEST_TIMEOUT must be positive")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_http_client(timeout: float | None = None) -> httpx.AsyncClient:
    """Create a pooled async HTTP client for the site API."""
    return httpx.AsyncClient(
        timeout=timeout or settings.request_timeout,
        limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
    )
