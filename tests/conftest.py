"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from fittrack.main import app
from fittrack.plan.shopping_list import ShoppingItem
from fittrack.ratelimit import FixedWindowRateLimitStore, get_rate_limit_store

# =============================================================================
# Clock Fixtures
# =============================================================================


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    """A clock that only moves when told to."""
    return FakeClock()


# =============================================================================
# Shopping Item Fixtures
# =============================================================================


@pytest.fixture
def garlic_items():
    """Two garlic lines that differ only in casing and unit spelling."""
    return [
        ShoppingItem(food="Garlic", quantity=2, measure="cloves", category="Produce"),
        ShoppingItem(food="garlic", quantity=3, measure="clove", category="Produce", checked=True),
    ]


@pytest.fixture
def mixed_shopping_items():
    """A week's worth of meal plan ingredients across several categories."""
    return [
        ShoppingItem(food="Chicken Breast", quantity=600, measure="g", category="Meat"),
        ShoppingItem(food="Milk", quantity=2, measure="cups", category="Dairy"),
        ShoppingItem(food="Spinach", quantity=200, measure="g", category="Produce"),
        ShoppingItem(food="chicken breast", quantity=500, measure="grams", category="Meat"),
        ShoppingItem(food="Eggs", quantity=6, measure="pieces", category="Dairy", checked=True),
        ShoppingItem(food="milk", quantity=250, measure="ml", category="Dairy"),
        ShoppingItem(food="Salt", quantity=1, measure="pinch", category="Pantry"),
    ]


@pytest.fixture
def shopping_list_payload():
    """JSON body for the shopping list endpoints."""
    return {
        "name": "Week 42 Meal Plan",
        "created_at": "2026-10-12T09:30:00",
        "items": [
            {"food": "Garlic", "quantity": 2, "measure": "cloves", "category": "Produce"},
            {
                "food": "garlic",
                "quantity": 3,
                "measure": "clove",
                "category": "Produce",
                "checked": True,
            },
            {"food": "Oats", "quantity": 500, "measure": "g", "category": "Pantry"},
            {"food": "Oats", "quantity": 600, "measure": "g", "category": "Pantry"},
            {"food": "Olive Oil", "quantity": 2, "measure": "tbsp", "category": "Pantry"},
        ],
    }


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def rate_limit_store(fake_clock):
    """A generous limiter so API tests are not throttled."""
    return FixedWindowRateLimitStore(max_requests=100, window_seconds=60, clock=fake_clock)


@pytest.fixture
def client(rate_limit_store):
    """Test client with the rate limit store replaced."""
    app.dependency_overrides[get_rate_limit_store] = lambda: rate_limit_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
