"""
Graph construction for itinerary generation.

Builds and compiles the LangGraph workflow that turns a trip request into
a validated travel plan.
"""

from langgraph.graph import StateGraph, END

from itinerary.generation.schemas import GenerationState
from itinerary.generation.nodes.generate import generate_node
from itinerary.generation.nodes.parse import parse_node
from itinerary.generation.nodes.validate import validate_node


def create_generation_graph():
    """
    Create and compile the LangGraph workflow for generation.

    The graph structure is:
        Entry -> generate -> parse -> validate -> END

    Any node error ends the run and propagates to the caller. Run settings
    (recursion limit, collaborators) are supplied per invocation.

    Returns:
        Compiled LangGraph application ready for execution.
    """
    graph = StateGraph(GenerationState)

    graph.add_node("generate", generate_node)
    graph.add_node("parse", parse_node)
    graph.add_node("validate", validate_node)

    graph.set_entry_point("generate")
    graph.add_edge("generate", "parse")
    graph.add_edge("parse", "validate")
    graph.add_edge("validate", END)

    app = graph.compile()

    return app
