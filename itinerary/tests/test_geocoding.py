"""
Tests for the geocoding cache and resolver.

The resolver talks to an httpx.MockTransport so no request leaves the
process.
"""

import httpx
import pytest

from itinerary.geocoding.cache import GeocodeCache, normalize_key
from itinerary.geocoding.config import get_config
from itinerary.geocoding.resolver import GeocodingResolver, clean_query, locate
from itinerary.shared.contracts.travel_plan import GeoPoint, UNRESOLVED_LOCATION

from conftest import FakeGeocoder


def _make_resolver(handler, cache=None, **config_overrides):
    """Resolver wired to a mock transport; returns (resolver, seen queries)."""
    seen = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.params["q"])
        return handler(request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(record))
    config_overrides.setdefault("retry_delay_seconds", 0)
    resolver = GeocodingResolver(
        cache if cache is not None else GeocodeCache(),
        client=client,
        config=get_config(**config_overrides),
    )
    return resolver, seen


def _found(request):
    return httpx.Response(200, json=[{"lat": "12.97", "lon": "77.59"}])


def _empty(request):
    return httpx.Response(200, json=[])


def _server_error(request):
    return httpx.Response(500, text="boom")


class TestGeocodeCache:
    """Tests for the in-memory cache."""

    def test_normalize_key(self):
        """Whitespace and case differences collapse."""
        assert normalize_key("  Main   Square,  CityX ") == "main square, cityx"

    def test_set_and_get(self):
        """Stored points are found under equivalent keys."""
        cache = GeocodeCache()
        cache.set("Main Square", GeoPoint(lat=1.0, lng=2.0))

        assert cache.get("main  square") == GeoPoint(lat=1.0, lng=2.0)
        assert "MAIN SQUARE" in cache
        assert len(cache) == 1
        assert cache.get("Elsewhere") is None


class TestCleanQuery:
    """Tests for query sanitation."""

    def test_strips_unsafe_characters(self):
        """Only word characters, whitespace and ',.-' survive."""
        assert clean_query("Fort #1 (Old City)!") == "Fort 1 Old City"

    def test_symbols_only(self):
        """A query of symbols cleans to nothing."""
        assert clean_query("@@@") == ""


class TestGeocodingResolver:
    """Tests for GeocodingResolver."""

    @pytest.mark.asyncio
    async def test_resolves_and_caches(self):
        """A second identical query is served from the cache."""
        resolver, seen = _make_resolver(_found)

        first = await resolver.geocode("Main Square, CityX")
        second = await resolver.geocode("Main Square, CityX")

        assert first == GeoPoint(lat=12.97, lng=77.59)
        assert second == first
        assert seen == ["Main Square, CityX"]
        assert resolver.lookups == 1

    @pytest.mark.asyncio
    async def test_sends_nominatim_parameters(self):
        """Requests carry the expected query string and User-Agent."""
        requests = []

        def handler(request):
            requests.append(request)
            return _found(request)

        resolver, _ = _make_resolver(handler)
        await resolver.geocode("Main Square")

        params = requests[0].url.params
        assert params["format"] == "json"
        assert params["limit"] == "1"
        assert requests[0].headers["User-Agent"].startswith("itinerary-planner")

    @pytest.mark.asyncio
    async def test_retries_then_falls_back_to_general_query(self):
        """Empty results retry the full query, then try the first component."""
        resolver, seen = _make_resolver(_empty)

        point = await resolver.geocode("Main Square, CityX")

        assert point == UNRESOLVED_LOCATION
        assert seen == [
            "Main Square, CityX",
            "Main Square, CityX",
            "Main Square, CityX",
            "Main Square",
        ]

    @pytest.mark.asyncio
    async def test_fallback_query_can_resolve(self):
        """The general query's result is returned and cached."""

        def handler(request):
            if request.url.params["q"] == "Main Square":
                return _found(request)
            return _empty(request)

        cache = GeocodeCache()
        resolver, seen = _make_resolver(handler, cache=cache)

        point = await resolver.geocode("Main Square, CityX")

        assert point == GeoPoint(lat=12.97, lng=77.59)
        assert cache.get("Main Square, CityX") == point
        assert len(seen) == 4

    @pytest.mark.asyncio
    async def test_no_fallback_without_comma(self):
        """A single-component query has no looser form."""
        resolver, seen = _make_resolver(_empty)

        await resolver.geocode("Nowhere")
        assert seen == ["Nowhere", "Nowhere", "Nowhere"]

    @pytest.mark.asyncio
    async def test_attempts_are_configurable(self):
        """max_attempts bounds the retries of the full query."""
        resolver, seen = _make_resolver(_empty, max_attempts=1)

        await resolver.geocode("Nowhere")
        assert seen == ["Nowhere"]

    @pytest.mark.asyncio
    async def test_transient_error_recovers(self):
        """A failed attempt followed by a hit resolves normally."""
        calls = []

        def handler(request):
            calls.append(request)
            if len(calls) == 1:
                return _server_error(request)
            return _found(request)

        resolver, seen = _make_resolver(handler)

        point = await resolver.geocode("Main Square, CityX")
        assert point == GeoPoint(lat=12.97, lng=77.59)
        assert len(seen) == 2

    @pytest.mark.asyncio
    async def test_server_errors_yield_sentinel(self):
        """Persistent HTTP errors never raise."""
        resolver, seen = _make_resolver(_server_error)

        point = await resolver.geocode("Main Square, CityX")

        assert point == UNRESOLVED_LOCATION
        assert len(seen) == 4

    @pytest.mark.asyncio
    async def test_malformed_payload_yields_sentinel(self):
        """Non-JSON bodies are treated like failed lookups."""
        resolver, _ = _make_resolver(lambda request: httpx.Response(200, text="<html>"))

        assert await resolver.geocode("Nowhere") == UNRESOLVED_LOCATION

    @pytest.mark.asyncio
    async def test_invalid_query_makes_no_request(self):
        """A query that cleans to nothing short-circuits."""
        resolver, seen = _make_resolver(_found)

        assert await resolver.geocode("@@@") == UNRESOLVED_LOCATION
        assert seen == []

    @pytest.mark.asyncio
    async def test_misses_are_cached(self):
        """An unresolved query is not looked up again."""
        cache = GeocodeCache()
        resolver, seen = _make_resolver(_empty, cache=cache)

        await resolver.geocode("Nowhere")
        await resolver.geocode("Nowhere")

        assert cache.get("Nowhere") == UNRESOLVED_LOCATION
        assert len(seen) == 3

    @pytest.mark.asyncio
    async def test_miss_caching_can_be_disabled(self):
        """With cache_misses off every call looks up again."""
        resolver, seen = _make_resolver(_empty, max_attempts=1, cache_misses=False)

        await resolver.geocode("Nowhere")
        await resolver.geocode("Nowhere")

        assert len(seen) == 2

    @pytest.mark.asyncio
    async def test_shared_cache_across_resolvers(self):
        """A process-wide cache serves lookups made by another resolver."""
        cache = GeocodeCache()
        first, _ = _make_resolver(_found, cache=cache)
        second, seen = _make_resolver(_found, cache=cache)

        await first.geocode("Main Square")
        await second.geocode("main square")

        assert seen == []


class TestLocate:
    """Tests for locate."""

    @pytest.mark.asyncio
    async def test_empty_address_skips_lookup(self):
        """No address means no geocoder call."""
        geocoder = FakeGeocoder()

        assert await locate(geocoder, "", "CityX") == UNRESOLVED_LOCATION
        assert geocoder.queries == []

    @pytest.mark.asyncio
    async def test_destination_appended(self):
        """The destination narrows the query."""
        geocoder = FakeGeocoder(points={"Fort Road, CityX": GeoPoint(lat=1.0, lng=2.0)})

        assert await locate(geocoder, "Fort Road", "CityX") == GeoPoint(lat=1.0, lng=2.0)
        assert geocoder.queries == ["Fort Road, CityX"]
