"""In-memory plan storage and its API."""

from itinerary.store.plan_store import PlanStore

__all__ = ["PlanStore"]
