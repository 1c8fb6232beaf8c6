"""
Typed prompt templates for itinerary generation.

Prompts are structured as Pydantic models for validation and testability.
"""

from typing import List

from pydantic import BaseModel, Field


class ItineraryPromptConfig(BaseModel):
    """
    Inputs needed to build the itinerary prompt.

    Mirrors the trip request, with list fields pre-joined for the template.
    """

    destination: str = Field(description="Trip destination")
    budget: int = Field(gt=0, description="Total budget in INR")
    travelers: int = Field(ge=1, description="Number of travelers")
    transportation: str = Field(description="own or rental")
    number_of_days: int = Field(ge=1, description="Number of days")
    accommodation: str = Field(description="hotel, hostel or resort")
    interests: List[str] = Field(default_factory=list)
    description: str = Field(default="")

    def format_prompt(self, template: str) -> str:
        """
        Format the template with this config's values.

        Args:
            template: The ITINERARY_PROMPT_TEMPLATE string

        Returns:
            Formatted prompt string with all placeholders filled
        """
        return template.format(
            destination=self.destination,
            budget=self.budget,
            travelers=self.travelers,
            transportation=self.transportation,
            number_of_days=self.number_of_days,
            accommodation=self.accommodation,
            interests=", ".join(self.interests) if self.interests else "None specified",
            description=self.description or "No additional requirements",
        )


# =============================================================================
# Itinerary Prompt Template
# =============================================================================

ITINERARY_PROMPT_TEMPLATE = """Create a detailed {number_of_days}-day travel itinerary for {destination} with a STRICT total budget of ₹{budget} for {travelers} travelers. DO NOT exceed this budget.

Trip Details:
- Accommodation: {accommodation} ({travelers} travelers)
- Transportation: {transportation}
- Interests: {interests}
- Additional Requirements: {description}

Budget Breakdown Guidelines (Total: ₹{budget}):
Accommodation: 30% of budget
Activities: 40% of budget
Meals: 20% of budget
Transportation: 10% of budget

Provide a VERY detailed itinerary with:
1. Check-in and check-out times for accommodation
2. Detailed daily schedule with specific times (morning, afternoon, evening activities)
3. Restaurant recommendations for breakfast (₹300-500/person), lunch (₹500-800/person), and dinner (₹700-1000/person)
4. Exact costs in INR (₹) for each activity, meal, and accommodation
5. Transportation details between locations with estimated times
6. Specific locations and landmarks with complete addresses

CRITICAL: Ensure all costs combined DO NOT exceed the total budget of ₹{budget}.

Format each day as follows:

Day X:
Check-in: HH:MM (if applicable)
Check-out: HH:MM (if applicable)

Morning Activities:
09:00 - 10:30 Activity Name (Full Address) ₹Cost
[Brief description of the activity]

Afternoon Activities:
13:00 - 14:30 Activity Name (Full Address) ₹Cost
[Brief description of the activity]

Evening Activities:
18:00 - 19:30 Activity Name (Full Address) ₹Cost
[Brief description of the activity]

Meals:
Breakfast: Restaurant Name (Full Address) - Cuisine Type ₹Cost
Lunch: Restaurant Name (Full Address) - Cuisine Type ₹Cost
Dinner: Restaurant Name (Full Address) - Cuisine Type ₹Cost

Transportation Details:
[Specific details about getting between locations]

Important:
- All costs must be in INR (₹) and adjusted for {travelers} travelers
- Include specific time slots for each activity
- Provide actual restaurant names and cuisines with addresses
- Include brief descriptions for each activity/location
- Factor in travel time between locations"""
