"""
Travel plan generation entry point and FastAPI endpoints.

generate_travel_plan runs the generate -> parse -> validate graph and
either returns a budget-checked TravelPlan or raises; it never returns a
partially valid plan.
"""

import functools
import logging
import uuid
from typing import Optional

from fastapi import APIRouter, HTTPException, Request, status

from itinerary.geocoding.cache import GeocodeCache
from itinerary.geocoding.resolver import Geocoder, GeocodingResolver
from itinerary.generation.budget import summarize_costs
from itinerary.generation.errors import (
    BudgetExceededError,
    GenerationError,
)
from itinerary.generation.graph.build import create_generation_graph
from itinerary.generation.graph.config import GenerationGraphConfig, DEFAULT_CONFIG
from itinerary.generation.nodes.generate import TextGenerator
from itinerary.generation.schemas import GeneratePlanResponse
from itinerary.parser.config import ParserConfig
from itinerary.shared.contracts.travel_plan import TravelPlan, TripRequest
from itinerary.shared.llm.client import generate_text


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/generation", tags=["generation"])

# Compiled graph instance (shared across requests)
_graph = None


def get_graph():
    """Get or create the shared graph instance."""
    global _graph
    if _graph is None:
        _graph = create_generation_graph()
    return _graph


async def generate_travel_plan(
    request: TripRequest,
    *,
    text_generator: Optional[TextGenerator] = None,
    geocoder: Optional[Geocoder] = None,
    parser_config: Optional[ParserConfig] = None,
    graph_config: Optional[GenerationGraphConfig] = None,
) -> TravelPlan:
    """
    Generate a structured, budget-checked travel plan.

    Args:
        request: Validated trip request
        text_generator: Async prompt -> text callable. Defaults to the
            OpenAI client.
        geocoder: Address resolver. Callers should pass the process-wide
            resolver; a throwaway one (with its own cache) is used otherwise.
        parser_config: Optional parser heuristics
        graph_config: Optional graph configuration

    Returns:
        The validated TravelPlan

    Raises:
        UpstreamFailureError: If the model call failed
        UpstreamEmptyError: If the model returned no text
        BudgetExceededError: If the parsed plan exceeds the budget
    """
    graph_config = graph_config or DEFAULT_CONFIG
    if text_generator is None:
        text_generator = functools.partial(generate_text, model=graph_config.model)

    owned_resolver = None
    if geocoder is None:
        owned_resolver = GeocodingResolver(GeocodeCache())
        geocoder = owned_resolver

    session_id = str(uuid.uuid4())
    _log = f"[session={session_id}] [graph=generation] [api=generate] "
    logger.info(
        f"{_log}Generation starting | destination={request.destination}, "
        f"days={request.number_of_days}, budget={request.budget}"
    )

    initial_state = {
        "request": request,
        "prompt": None,
        "raw_text": None,
        "plan": None,
        "total_cost": None,
        "messages": [],
        "session_id": session_id,
    }
    run_config = {
        "recursion_limit": graph_config.recursion_limit,
        "configurable": {
            "text_generator": text_generator,
            "geocoder": geocoder,
            "parser_config": parser_config,
        },
    }

    try:
        final_state = await get_graph().ainvoke(initial_state, run_config)
    finally:
        if owned_resolver is not None:
            await owned_resolver.aclose()

    plan = final_state["plan"]
    logger.info(
        f"{_log}Generation finished | plan={plan.id}, days={len(plan.days)}, "
        f"total={final_state['total_cost']}/{request.budget}"
    )
    return plan


# ============================================================================
# Endpoints
# ============================================================================


@router.post("/plan", response_model=GeneratePlanResponse)
async def generate_plan(trip: TripRequest, request: Request) -> GeneratePlanResponse:
    """
    Generate a travel plan and make it the current plan.

    The plan is saved only when generation succeeds; on failure nothing is
    stored and the error message is returned for display.
    """
    app_state = request.app.state

    try:
        plan = await generate_travel_plan(
            trip,
            text_generator=app_state.text_generator,
            geocoder=app_state.geocoder,
            parser_config=app_state.parser_config,
        )
    except BudgetExceededError as e:
        raise HTTPException(
            status_code=422,
            detail={"message": str(e), "total": e.total, "budget": e.budget},
        )
    except GenerationError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    except Exception as e:
        logger.exception(f"Generation failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate travel plan: {str(e)}",
        )

    app_state.plan_store.set_current_plan(plan)
    app_state.plan_store.save_plan(plan)
    app_state.map_view.fit_plan(plan)

    return GeneratePlanResponse(plan=plan, cost_summary=summarize_costs(plan))
