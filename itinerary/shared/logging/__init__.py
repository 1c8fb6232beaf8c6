"""Structured logging for generation events."""

from itinerary.shared.logging.config import (
    EVENT_LOGGER_NAME,
    StructuredFormatter,
    log_generation_event,
    setup_logging,
)

__all__ = [
    "EVENT_LOGGER_NAME",
    "StructuredFormatter",
    "log_generation_event",
    "setup_logging",
]
