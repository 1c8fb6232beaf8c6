"""
Validate node for the LangGraph workflow.

Enforces the budget on the parsed plan. A plan over budget fails the whole
generation; it is never clamped or returned partially.
"""

import logging
from typing import Any, Dict

from itinerary.generation.budget import validate_budget
from itinerary.generation.errors import BudgetExceededError
from itinerary.generation.schemas import GenerationState
from itinerary.shared.logging.config import log_generation_event


logger = logging.getLogger(__name__)


async def validate_node(state: GenerationState) -> Dict[str, Any]:
    """
    Check the plan's total cost against its budget.

    Args:
        state: Current generation state with plan

    Returns:
        Dictionary with state updates including total_cost

    Raises:
        BudgetExceededError: If the plan costs more than the budget
    """
    session_id = state.get("session_id", "unknown")
    _log = f"[session={session_id}] [graph=generation] [node=validate] "
    plan = state["plan"]

    try:
        total = validate_budget(plan)
    except BudgetExceededError as e:
        logger.warning(f"{_log}Budget exceeded | total={e.total}, budget={e.budget}")
        raise

    logger.info(f"{_log}Budget OK | total={total}/{plan.budget}")
    log_generation_event("plan_validated", {**state, "total_cost": total})

    return {
        "total_cost": total,
        "messages": [
            {
                "role": "system",
                "agent": "validate",
                "content": f"Plan total ₹{total} within budget ₹{plan.budget}",
            }
        ],
    }
