"""
Graph configuration for itinerary generation.

Centralizes configuration options for the generation LangGraph workflow.
"""

from dataclasses import dataclass

from itinerary.shared.llm.client import DEFAULT_MODEL


@dataclass
class GenerationGraphConfig:
    """
    Configuration for the generation graph.

    Attributes:
        recursion_limit: Maximum number of graph steps
        model: LLM model used when no text generator is injected
    """

    recursion_limit: int = 10
    model: str = DEFAULT_MODEL


# Default configuration instance
DEFAULT_CONFIG = GenerationGraphConfig()
