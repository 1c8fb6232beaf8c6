"""
Tests for meal extraction.
"""

import pytest

from itinerary.parser.context import ParseContext
from itinerary.parser.meals import extract_meal, extract_meals
from itinerary.shared.contracts.travel_plan import GeoPoint, UNRESOLVED_LOCATION

from conftest import FakeGeocoder


def _make_context(geocoder=None, travelers=2):
    return ParseContext(
        destination="CityX",
        number_of_travelers=travelers,
        geocoder=geocoder or FakeGeocoder(),
    )


class TestExtractMeals:
    """Tests for the three-meal extraction."""

    @pytest.mark.asyncio
    async def test_always_three_meals_in_order(self):
        """Even an empty segment yields breakfast, lunch and dinner."""
        meals = await extract_meals("", _make_context())

        assert [m.type for m in meals] == ["breakfast", "lunch", "dinner"]
        assert [m.name for m in meals] == ["Breakfast", "Lunch", "Dinner"]

    @pytest.mark.asyncio
    async def test_missing_meals_use_defaults(self):
        """Default per-person costs are scaled by the group size."""
        meals = await extract_meals("09:00 Fort", _make_context(travelers=2))

        assert [m.cost for m in meals] == [800, 1200, 1600]
        assert all(m.restaurant == "Local Restaurant" for m in meals)
        assert all(m.address == "" for m in meals)
        assert all(m.location == UNRESOLVED_LOCATION for m in meals)

    @pytest.mark.asyncio
    async def test_labelled_meal(self, geocoder):
        """Restaurant, address, cost and location come from the label line."""
        text = "Breakfast: Cafe A (Main Square, CityX) ₹400"
        meals = await extract_meals(text, _make_context(geocoder))

        breakfast = meals[0]
        assert breakfast.restaurant == "Cafe A"
        assert breakfast.address == "Main Square, CityX"
        assert breakfast.cost == 800
        assert breakfast.location == GeoPoint(lat=12.97, lng=77.59)

    @pytest.mark.asyncio
    async def test_missing_dinner_only(self):
        """A day with breakfast and lunch still gets a default dinner."""
        text = "Breakfast: Cafe A ₹300\nLunch: Dhaba ₹500"
        meals = await extract_meals(text, _make_context(travelers=2))

        assert [m.cost for m in meals] == [600, 1000, 1600]
        assert meals[2].restaurant == "Local Restaurant"


class TestExtractMeal:
    """Tests for a single meal label."""

    @pytest.mark.asyncio
    async def test_cost_scaled_and_cuisine_classified(self):
        """Meal figures are per-person; the cuisine comes from the label."""
        meal = await extract_meal(
            "Dinner: Spice Route - Thai ₹750", "dinner", _make_context(travelers=2)
        )

        assert meal.cost == 1500
        assert meal.cuisine == "Thai"
        assert meal.restaurant == "Spice Route - Thai"

    @pytest.mark.asyncio
    async def test_large_meal_cost_still_scaled(self):
        """Meals ignore the activity threshold."""
        meal = await extract_meal(
            "Dinner: Grand Buffet ₹2,000", "dinner", _make_context(travelers=3)
        )
        assert meal.cost == 6000

    @pytest.mark.asyncio
    async def test_first_label_wins(self):
        """Duplicate labels keep the first match."""
        text = "Lunch: First Place ₹100\nLunch: Second Place ₹200"
        meal = await extract_meal(text, "lunch", _make_context(travelers=2))

        assert meal.restaurant == "First Place"
        assert meal.cost == 200

    @pytest.mark.asyncio
    async def test_label_case_insensitive(self):
        """'LUNCH:' matches the lunch pattern."""
        meal = await extract_meal("LUNCH: Canteen ₹100", "lunch", _make_context(travelers=1))
        assert meal.restaurant == "Canteen"
        assert meal.cost == 100

    @pytest.mark.asyncio
    async def test_zero_cost_kept(self):
        """An explicit ₹0 is not replaced by the default."""
        meal = await extract_meal("Lunch: Temple langar ₹0", "lunch", _make_context())
        assert meal.cost == 0

    @pytest.mark.asyncio
    async def test_label_without_cost_uses_default_cost(self):
        """The restaurant is kept and the cost falls back."""
        meal = await extract_meal(
            "Breakfast: Saravana Bhavan - South Indian", "breakfast", _make_context(travelers=2)
        )

        assert meal.restaurant == "Saravana Bhavan - South Indian"
        assert meal.cuisine == "Indian"
        assert meal.cost == 800

    @pytest.mark.asyncio
    async def test_address_looked_up_within_destination(self):
        """The geocoder is queried with the destination appended."""
        geocoder = FakeGeocoder()
        await extract_meal("Dinner: Bistro (Lake Road) ₹500", "dinner", _make_context(geocoder))
        assert geocoder.queries == ["Lake Road, CityX"]
