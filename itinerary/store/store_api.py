"""
FastAPI endpoints for stored plans and the map.

Provides REST API for reading the current plan, listing and removing
saved plans, and driving the map's location focus.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel, Field

from itinerary.generation.budget import summarize_costs
from itinerary.presentation.map_view import MapViewState
from itinerary.shared.contracts.travel_plan import CostSummary, GeoPoint, TravelPlan


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/plans", tags=["plans"])


# ============================================================================
# Request/Response Models
# ============================================================================


class PlanResponse(BaseModel):
    """A stored plan with its cost summary."""

    plan: TravelPlan
    cost_summary: CostSummary


class PlanListResponse(BaseModel):
    """Saved plans, oldest first."""

    plans: List[TravelPlan] = Field(default_factory=list)


class FocusResponse(BaseModel):
    """Result of a focus request."""

    focused: bool = Field(description="False when the location was unresolved")
    map: MapViewState


# ============================================================================
# Endpoints
# ============================================================================


@router.get("", response_model=PlanListResponse)
async def list_plans(request: Request) -> PlanListResponse:
    """List saved plans."""
    return PlanListResponse(plans=list(request.app.state.plan_store.saved_plans))


@router.get("/current", response_model=PlanResponse)
async def get_current_plan(request: Request) -> PlanResponse:
    """Return the most recently generated plan."""
    plan = request.app.state.plan_store.current_plan
    if plan is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No plan has been generated yet",
        )
    return PlanResponse(plan=plan, cost_summary=summarize_costs(plan))


@router.get("/map", response_model=MapViewState)
async def get_map(request: Request) -> MapViewState:
    """Return the current map view."""
    return request.app.state.map_view.snapshot()


@router.post("/focus", response_model=FocusResponse)
async def focus_location(point: GeoPoint, request: Request) -> FocusResponse:
    """Ask the map to centre on a location."""
    focused = request.app.state.focus_channel.emit(point)
    return FocusResponse(focused=focused, map=request.app.state.map_view.snapshot())


@router.get("/{plan_id}", response_model=PlanResponse)
async def get_plan(plan_id: str, request: Request) -> PlanResponse:
    """Return a plan by id."""
    plan = request.app.state.plan_store.get_plan(plan_id)
    if plan is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Plan {plan_id} not found",
        )
    return PlanResponse(plan=plan, cost_summary=summarize_costs(plan))


@router.delete("/{plan_id}")
async def remove_plan(plan_id: str, request: Request):
    """Remove a saved plan."""
    if not request.app.state.plan_store.remove_plan(plan_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Plan {plan_id} not found",
        )
    logger.info(f"[plan={plan_id}] Removed saved plan")
    return {"status": "deleted", "plan_id": plan_id}
