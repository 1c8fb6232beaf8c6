"""
Geocoding configuration.

Centralizes the lookup endpoint and the retry/concurrency limits used by
the resolver.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GeocodingConfig:
    """
    Configuration for the geocoding resolver.

    Attributes:
        search_url: Nominatim search endpoint
        user_agent: User-Agent header (Nominatim rejects anonymous clients)
        timeout_seconds: Per-request timeout
        max_attempts: Attempts for the full query before the fallback query
        retry_delay_seconds: Fixed delay between attempts
        max_concurrency: Maximum in-flight lookups
        cache_misses: Whether unresolved queries are cached as the sentinel
    """

    search_url: str = "https://nominatim.openstreetmap.org/search"
    user_agent: str = "itinerary-planner/0.1 (contact@example.com)"
    timeout_seconds: float = 10.0
    max_attempts: int = 3
    retry_delay_seconds: float = 1.0
    max_concurrency: int = 4
    cache_misses: bool = True


# Default configuration instance
DEFAULT_CONFIG = GeocodingConfig()


def get_config(
    search_url: Optional[str] = None,
    max_attempts: Optional[int] = None,
    retry_delay_seconds: Optional[float] = None,
    max_concurrency: Optional[int] = None,
    cache_misses: Optional[bool] = None,
) -> GeocodingConfig:
    """
    Create a configuration with optional overrides.

    Returns:
        GeocodingConfig with specified overrides applied
    """
    return GeocodingConfig(
        search_url=search_url or DEFAULT_CONFIG.search_url,
        user_agent=DEFAULT_CONFIG.user_agent,
        timeout_seconds=DEFAULT_CONFIG.timeout_seconds,
        max_attempts=max_attempts or DEFAULT_CONFIG.max_attempts,
        retry_delay_seconds=retry_delay_seconds
        if retry_delay_seconds is not None
        else DEFAULT_CONFIG.retry_delay_seconds,
        max_concurrency=max_concurrency or DEFAULT_CONFIG.max_concurrency,
        cache_misses=cache_misses
        if cache_misses is not None
        else DEFAULT_CONFIG.cache_misses,
    )
