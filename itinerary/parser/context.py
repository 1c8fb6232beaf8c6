"""
Per-request parsing context.
"""

from dataclasses import dataclass, field

from itinerary.geocoding.resolver import Geocoder
from itinerary.parser.config import ParserConfig, DEFAULT_CONFIG


@dataclass(frozen=True)
class ParseContext:
    """Trip parameters and collaborators every extractor needs."""

    destination: str
    number_of_travelers: int
    geocoder: Geocoder
    config: ParserConfig = field(default_factory=lambda: DEFAULT_CONFIG)
