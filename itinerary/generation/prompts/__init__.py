"""Prompt templates and builders for itinerary generation."""

from itinerary.generation.prompts.templates import (
    ItineraryPromptConfig,
    ITINERARY_PROMPT_TEMPLATE,
)
from itinerary.generation.prompts.builders import build_itinerary_prompt

__all__ = [
    "ItineraryPromptConfig",
    "ITINERARY_PROMPT_TEMPLATE",
    "build_itinerary_prompt",
]
