"""
Geocoding resolver.

Resolves free-text addresses to coordinates through the Nominatim search
API. Lookups are cached, retried a bounded number of times, and fall back
to a looser query. The resolver never raises: anything it cannot resolve
comes back as the (0, 0) sentinel.
"""

import asyncio
import logging
import re
from typing import Optional, Protocol

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    retry_if_result,
    stop_after_attempt,
    wait_fixed,
)

from itinerary.geocoding.cache import GeocodeCache
from itinerary.geocoding.config import GeocodingConfig, DEFAULT_CONFIG
from itinerary.shared.contracts.travel_plan import GeoPoint, UNRESOLVED_LOCATION


logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^\w\s,.-]")

_LOOKUP_ERRORS = (httpx.HTTPError, ValueError, KeyError, IndexError, TypeError)


class Geocoder(Protocol):
    """Anything that can turn a query into a GeoPoint without raising."""

    async def geocode(self, query: str) -> GeoPoint:
        ...


def clean_query(query: str) -> str:
    """Drop characters other than word characters, whitespace and ``,.-``."""
    return _UNSAFE_CHARS.sub("", query).strip()


class GeocodingResolver:
    """
    Cached, retrying geocoder backed by Nominatim.

    Args:
        cache: Shared process-wide cache
        client: Optional httpx client. One is created (and owned) if omitted.
        config: Optional configuration. Uses DEFAULT_CONFIG if not provided.
    """

    def __init__(
        self,
        cache: GeocodeCache,
        client: Optional[httpx.AsyncClient] = None,
        config: Optional[GeocodingConfig] = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.cache = cache
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self.config.timeout_seconds)
        self._semaphore = asyncio.Semaphore(self.config.max_concurrency)
        self.lookups = 0

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _search(self, query: str) -> Optional[GeoPoint]:
        """Single Nominatim lookup. Returns None when nothing matched."""
        params = {"q": query, "format": "json", "limit": 1}
        headers = {"User-Agent": self.config.user_agent}
        async with self._semaphore:
            self.lookups += 1
            response = await self._client.get(
                self.config.search_url, params=params, headers=headers
            )
        response.raise_for_status()
        results = response.json()
        if not results:
            return None
        return GeoPoint(lat=float(results[0]["lat"]), lng=float(results[0]["lon"]))

    async def _search_with_retry(self, query: str) -> Optional[GeoPoint]:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.config.max_attempts),
            wait=wait_fixed(self.config.retry_delay_seconds),
            retry=(
                retry_if_exception_type(_LOOKUP_ERRORS)
                | retry_if_result(lambda point: point is None)
            ),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            retry_error_callback=lambda retry_state: None,
        )
        return await retrying(self._search, query)

    async def geocode(self, query: str) -> GeoPoint:
        """
        Resolve a query to coordinates.

        Order of operations: cache, full query with bounded retry, then a
        single lookup with only the text before the first comma.

        Returns:
            Resolved GeoPoint, or the (0, 0) sentinel when unresolved.
        """
        cached = self.cache.get(query)
        if cached is not None:
            return cached

        cleaned = clean_query(query)
        if not cleaned:
            logger.warning(f"Empty or invalid address provided for geocoding: {query!r}")
            return UNRESOLVED_LOCATION

        point: Optional[GeoPoint] = None
        try:
            point = await self._search_with_retry(cleaned)

            if point is None:
                general = cleaned.split(",")[0].strip()
                if general and general != cleaned:
                    logger.info(f"Retrying with general query | query={general!r}")
                    try:
                        point = await self._search(general)
                    except _LOOKUP_ERRORS as e:
                        logger.warning(f"General query failed | query={general!r}, error={e}")
        except Exception as e:
            logger.exception(f"Geocoding error | query={query!r}: {e}")
            point = None

        if point is None:
            logger.warning(f"No geocoding results found for address: {query!r}")
            if self.config.cache_misses:
                self.cache.set(query, UNRESOLVED_LOCATION)
            return UNRESOLVED_LOCATION

        self.cache.set(query, point)
        return point


async def locate(geocoder: Geocoder, address: str, destination: str) -> GeoPoint:
    """
    Resolve an extracted address within the trip destination.

    An empty address short-circuits to the sentinel without a lookup.
    """
    if not address:
        return UNRESOLVED_LOCATION
    return await geocoder.geocode(f"{address}, {destination}")
