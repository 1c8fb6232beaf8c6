"""
Budget validation for generated plans.

validate_budget is the hard post-condition of generation. summarize_costs
is the display-side summary; it never rejects a plan.
"""

from itinerary.generation.errors import BudgetExceededError
from itinerary.shared.contracts.travel_plan import CostSummary, TravelPlan


def activity_cost(plan: TravelPlan) -> int:
    return sum(activity.cost for day in plan.days for activity in day.activities)


def meal_cost(plan: TravelPlan) -> int:
    return sum(meal.cost for day in plan.days for meal in day.meals)


def calculate_total_cost(plan: TravelPlan) -> int:
    """Sum every activity and meal cost across every day."""
    return activity_cost(plan) + meal_cost(plan)


def validate_budget(plan: TravelPlan) -> int:
    """
    Enforce the plan's budget.

    Returns:
        The computed total cost

    Raises:
        BudgetExceededError: If the total is greater than the budget
    """
    total = calculate_total_cost(plan)
    if total > plan.budget:
        raise BudgetExceededError(total=total, budget=plan.budget)
    return total


def summarize_costs(plan: TravelPlan) -> CostSummary:
    activities = activity_cost(plan)
    meals = meal_cost(plan)
    total = activities + meals
    return CostSummary(
        total=total,
        budget=plan.budget,
        remaining=plan.budget - total,
        is_over_budget=total > plan.budget,
        over_budget_by=max(total - plan.budget, 0),
        breakdown={"activities": activities, "meals": meals},
    )
