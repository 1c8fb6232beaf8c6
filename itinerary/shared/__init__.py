"""
Shared infrastructure for the itinerary service.

Modules:
- llm: OpenAI client with retry logic
- logging: Structured JSON logging
- contracts: Trip request and travel plan models
"""

from itinerary.shared.llm.client import get_cached_client, generate_text
from itinerary.shared.logging.config import setup_logging, log_generation_event

__all__ = [
    "get_cached_client",
    "generate_text",
    "setup_logging",
    "log_generation_event",
]
