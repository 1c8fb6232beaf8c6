"""
In-memory plan store.

Holds the current plan and the list of saved plans for the running
process. Plans are immutable, so the store only ever swaps references.
"""

from typing import List, Optional, Tuple

from itinerary.shared.contracts.travel_plan import TravelPlan


class PlanStore:
    """State container for generated plans."""

    def __init__(self) -> None:
        self._current_plan: Optional[TravelPlan] = None
        self._saved_plans: List[TravelPlan] = []

    @property
    def current_plan(self) -> Optional[TravelPlan]:
        return self._current_plan

    @property
    def saved_plans(self) -> Tuple[TravelPlan, ...]:
        return tuple(self._saved_plans)

    def set_current_plan(self, plan: Optional[TravelPlan]) -> None:
        self._current_plan = plan

    def save_plan(self, plan: TravelPlan) -> None:
        self._saved_plans.append(plan)

    def remove_plan(self, plan_id: str) -> bool:
        """Remove a saved plan. Returns False if no plan had that id."""
        remaining = [plan for plan in self._saved_plans if plan.id != plan_id]
        removed = len(remaining) != len(self._saved_plans)
        self._saved_plans = remaining
        return removed

    def get_plan(self, plan_id: str) -> Optional[TravelPlan]:
        if self._current_plan is not None and self._current_plan.id == plan_id:
            return self._current_plan
        return next((plan for plan in self._saved_plans if plan.id == plan_id), None)
