"""
Parse node for the LangGraph workflow.

Converts the model's prose into a TravelPlan.
"""

import logging
from typing import Any, Dict

from langchain_core.runnables import RunnableConfig

from itinerary.generation.schemas import GenerationState
from itinerary.parser.response_parser import parse_travel_plan


logger = logging.getLogger(__name__)


async def parse_node(state: GenerationState, config: RunnableConfig) -> Dict[str, Any]:
    """
    Parse raw model text into a structured plan.

    Args:
        state: Current generation state with raw_text
        config: Run config; configurable carries "geocoder" and "parser_config"

    Returns:
        Dictionary with state updates including plan
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=generation] [node=parse] "
    configurable = config["configurable"]

    plan = await parse_travel_plan(
        state["raw_text"],
        state["request"],
        configurable["geocoder"],
        configurable.get("parser_config"),
    )

    num_activities = sum(len(d.activities) for d in plan.days)
    unresolved = sum(
        1
        for d in plan.days
        for item in (*d.activities, *d.meals)
        if item.address and not item.location.is_resolved
    )
    logger.info(
        f"{_log}Parsing complete | plan={plan.id}, days={len(plan.days)}, "
        f"activities={num_activities}, unresolved_addresses={unresolved}"
    )

    return {
        "plan": plan,
        "messages": [
            {
                "role": "system",
                "agent": "parse",
                "content": (
                    f"Parsed {len(plan.days)} days with {num_activities} activities"
                ),
            }
        ],
    }
