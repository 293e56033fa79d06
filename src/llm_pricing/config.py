"""Configuration for llm-pricing."""

from dataclasses import dataclass

OPENROUTER_MODELS_URL = "https://openrouter.ai/api/v1/models"
DEFAULT_TIMEOUT_SECONDS = 30.0

# TTLs at or below this many minutes bill cache writes at the 5-minute tier
DEFAULT_CACHE_TTL_THRESHOLD_MINUTES = 5
DEFAULT_CACHE_TTL_MINUTES = 5


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    api_url: str = OPENROUTER_MODELS_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    cache_ttl_threshold_minutes: int = DEFAULT_CACHE_TTL_THRESHOLD_MINUTES
