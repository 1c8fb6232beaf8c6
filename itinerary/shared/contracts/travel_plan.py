"""
Travel plan contracts.

Defines the trip request that drives generation and the structured,
immutable plan recovered from the model's prose itinerary.
"""

import uuid
from datetime import datetime, timezone
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


INTEREST_OPTIONS = (
    "Adventure",
    "Culture",
    "Food",
    "History",
    "Nature",
    "Nightlife",
    "Shopping",
    "Relaxation",
)

MealType = Literal["breakfast", "lunch", "dinner"]
MEAL_TYPES: tuple = ("breakfast", "lunch", "dinner")


class TripRequest(BaseModel):
    """Trip parameters collected from the user."""

    model_config = ConfigDict(frozen=True)

    destination: str = Field(min_length=1, description="Trip destination")
    budget: int = Field(gt=0, description="Total budget in INR for the whole group")
    interests: List[str] = Field(
        min_length=1, description="Interest tags (e.g., 'Culture', 'Food')"
    )
    number_of_travelers: int = Field(default=1, ge=1, description="Group size")
    transportation: Literal["own", "rental"] = Field(
        default="own", description="Own vehicle or rental"
    )
    number_of_days: int = Field(default=1, ge=1, description="Trip length in days")
    accommodation: Literal["hotel", "hostel", "resort"] = Field(
        default="hotel", description="Accommodation type"
    )
    description: str = Field(default="", description="Additional requirements")

    @field_validator("destination")
    @classmethod
    def strip_destination(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("destination must not be blank")
        return v


class GeoPoint(BaseModel):
    """
    Geographic coordinates.

    (0, 0) is reserved to mean "no resolved location" and is never a
    real place for our purposes.
    """

    model_config = ConfigDict(frozen=True)

    lat: float = Field(default=0.0, description="Latitude")
    lng: float = Field(default=0.0, description="Longitude")

    @property
    def is_resolved(self) -> bool:
        return not (self.lat == 0 and self.lng == 0)


UNRESOLVED_LOCATION = GeoPoint(lat=0.0, lng=0.0)


class Activity(BaseModel):
    """A timed activity within a day."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Activity name")
    description: str = Field(description="Activity text with the cost removed")
    time: str = Field(description="Time slot as written, e.g. '09:00 - 10:30'")
    cost: int = Field(ge=0, description="Cost for the whole group in INR")
    location: GeoPoint = Field(default=UNRESOLVED_LOCATION)
    address: str = Field(default="", description="Address as written, may be empty")


class Meal(BaseModel):
    """One of the three daily meals."""

    model_config = ConfigDict(frozen=True)

    type: MealType = Field(description="breakfast, lunch or dinner")
    name: str = Field(description="Display name (e.g., 'Breakfast')")
    restaurant: str = Field(description="Restaurant name")
    cuisine: str = Field(description="Cuisine classification")
    cost: int = Field(ge=0, description="Cost for the whole group in INR")
    location: GeoPoint = Field(default=UNRESOLVED_LOCATION)
    address: str = Field(default="")


class TravelDay(BaseModel):
    """A single day of the itinerary."""

    model_config = ConfigDict(frozen=True)

    day: int = Field(ge=1, description="Day number (1-indexed, positional)")
    activities: List[Activity] = Field(default_factory=list)
    meals: List[Meal] = Field(default_factory=list)
    check_in: Optional[str] = Field(default=None, description="Check-in time HH:MM")
    check_out: Optional[str] = Field(default=None, description="Check-out time HH:MM")


class TravelPlan(BaseModel):
    """
    Contract for a generated travel plan.

    Echoes the trip request and carries the days recovered from the
    model response. Created once per successful generation and never
    mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    destination: str
    budget: int
    interests: List[str] = Field(default_factory=list)
    number_of_travelers: int
    transportation: Literal["own", "rental"]
    number_of_days: int
    accommodation: Literal["hotel", "hostel", "resort"]
    description: str = ""
    days: List[TravelDay] = Field(default_factory=list)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @classmethod
    def from_request(cls, request: TripRequest, days: List[TravelDay]) -> "TravelPlan":
        return cls(
            destination=request.destination,
            budget=request.budget,
            interests=list(request.interests),
            number_of_travelers=request.number_of_travelers,
            transportation=request.transportation,
            number_of_days=request.number_of_days,
            accommodation=request.accommodation,
            description=request.description,
            days=days,
        )


class CostSummary(BaseModel):
    """Plan cost summary for display."""

    total: int = Field(description="Sum of all activity and meal costs")
    budget: int = Field(description="Requested budget")
    remaining: int = Field(description="Budget minus total (negative when over)")
    is_over_budget: bool = Field(default=False)
    over_budget_by: int = Field(default=0, ge=0)
    breakdown: Dict[str, int] = Field(
        default_factory=dict,
        description="Cost breakdown by category (activities, meals)",
    )
