"""
Process-wide geocoding cache.

One instance is constructed at application start and injected into the
resolver; it lives for the whole session and is never reset.
"""

from typing import Dict, Optional

from itinerary.shared.contracts.travel_plan import GeoPoint


def normalize_key(query: str) -> str:
    """Collapse whitespace and lower-case a query for cache lookups."""
    return " ".join(query.split()).lower()


class GeocodeCache:
    """Mapping from normalized address text to resolved GeoPoint."""

    def __init__(self) -> None:
        self._entries: Dict[str, GeoPoint] = {}

    def get(self, query: str) -> Optional[GeoPoint]:
        return self._entries.get(normalize_key(query))

    def set(self, query: str, point: GeoPoint) -> None:
        self._entries[normalize_key(query)] = point

    def __contains__(self, query: str) -> bool:
        return normalize_key(query) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
