"""Node functions for the generation graph."""

from itinerary.generation.nodes.generate import generate_node, TextGenerator
from itinerary.generation.nodes.parse import parse_node
from itinerary.generation.nodes.validate import validate_node

__all__ = ["generate_node", "parse_node", "validate_node", "TextGenerator"]
