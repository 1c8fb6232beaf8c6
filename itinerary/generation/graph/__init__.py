"""Graph construction for the generation pipeline."""

from itinerary.generation.graph.build import create_generation_graph

__all__ = ["create_generation_graph"]
