"""Shared test fixtures and helpers."""

from itertools import count
from typing import Optional

import pytest

from eventcart.cart.notifications import NoticeCollector
from eventcart.cart.state import CartStore
from eventcart.schemas.cart_schema import (
    Cart,
    CartService,
    CartVenue,
    PriceModel,
    VenueImage,
    VenueLocation,
    VenuePrice,
)
from eventcart.tools.persistence import MemoryStorage


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def notices():
    return NoticeCollector()


@pytest.fixture
def store(storage, notices):
    ids = count(1)
    return CartStore(storage=storage, notify=notices, id_factory=lambda: f"id-{next(ids)}")


def make_venue(
    venue_id: str = "v1",
    name: str = "Sunset Hall",
    base_price: float = 1000,
    model: PriceModel = PriceModel.DAY,
    images: Optional[list[VenueImage]] = None,
) -> CartVenue:
    """Helper to create a catalog CartVenue."""
    return CartVenue(
        id=venue_id,
        name=name,
        location=VenueLocation(address="123 Sunset Blvd", city="Los Angeles"),
        price=VenuePrice(base_price=base_price, model=model),
        images=images if images is not None else [VenueImage(url="https://img.example/v1.jpg")],
    )


def make_service(
    service_id: str = "s1",
    name: str = "DJ Services",
    total: float = 200,
    selected_days: Optional[list[str]] = None,
    price_model: PriceModel = PriceModel.DAY,
) -> CartService:
    """Helper to create a CartService with a precomputed total."""
    return CartService(
        id=service_id,
        name=name,
        image="https://img.example/s.jpg",
        price=total,
        price_model=price_model,
        selected_days=selected_days or [],
        total_calculated_price=total,
    )


def make_cart(
    dates: Optional[list[str]] = None,
    services: Optional[list[CartService]] = None,
    venue: Optional[CartVenue] = None,
) -> Cart:
    """Helper to create a Cart snapshot with sensible defaults."""
    return Cart(
        venue=venue or make_venue(),
        selected_dates=["2024-06-01", "2024-06-02"] if dates is None else dates,
        time_slot="Full day",
        services=services or [],
    )
