"""
Geocoding for extracted addresses.

The resolver is an external collaborator of the parser: it absorbs every
lookup failure and returns the (0, 0) sentinel instead of raising.
"""

from itinerary.geocoding.cache import GeocodeCache
from itinerary.geocoding.config import GeocodingConfig
from itinerary.geocoding.resolver import Geocoder, GeocodingResolver, locate

__all__ = ["GeocodeCache", "GeocodingConfig", "Geocoder", "GeocodingResolver", "locate"]
