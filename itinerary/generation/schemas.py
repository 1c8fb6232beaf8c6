"""
Schemas for the generation pipeline.

Defines the LangGraph state and the API request/response models.
"""

import operator
from typing import Annotated, List, Optional, TypedDict

from pydantic import BaseModel, Field

from itinerary.shared.contracts.travel_plan import CostSummary, TravelPlan, TripRequest


class GenerationState(TypedDict, total=False):
    """
    State schema for the generation graph.

    Carries the trip request through prompt -> model text -> parsed plan
    -> validated total.
    """

    # Input
    request: TripRequest

    # Model exchange
    prompt: Optional[str]
    raw_text: Optional[str]

    # Parsed output
    plan: Optional[TravelPlan]
    total_cost: Optional[int]

    # Tracking
    messages: Annotated[List[dict], operator.add]
    session_id: Optional[str]


class GeneratePlanResponse(BaseModel):
    """Response from the generation endpoint."""

    plan: TravelPlan = Field(description="The generated plan")
    cost_summary: CostSummary = Field(description="Cost totals for display")
