"""
Mock venue and service catalog.

In production the catalog lives in the marketplace database; detail
pages map a catalog record into its cart shape before attaching it.
"""

import logging
from typing import Optional

from eventcart.cart.pricing import calculate_service_total
from eventcart.schemas.cart_schema import (
    CartService,
    CartVenue,
    PriceModel,
    VenueImage,
    VenueLocation,
    VenuePrice,
    VenueRating,
)

logger = logging.getLogger(__name__)

VENUE_CATALOG: dict[str, dict] = {
    "sunset-hall": {
        "name": "Sunset Hall",
        "address": "123 Sunset Blvd",
        "city": "Los Angeles",
        "base_price": 500,
        "model": "day",
        "type": "Banquet Hall",
        "rating": (4.6, 38),
        "images": [
            ("https://images.unsplash.com/photo-1549895058-36748fa6c6a7", "Sunset Hall main room"),
            ("https://images.unsplash.com/photo-1519167758481-83f550bb49b3", "Reception setup"),
        ],
    },
    "rooftop-garden": {
        "name": "Rooftop Garden",
        "address": "789 Skyline Ave",
        "city": "New York",
        "base_price": 800,
        "model": "hour",
        "type": "Rooftop",
        "rating": (4.8, 52),
        "images": [
            ("https://images.unsplash.com/photo-1541922633525-b39c46b1b219", "Rooftop at dusk"),
        ],
    },
    "harbour-loft": {
        "name": "Harbour Loft",
        "address": "12 Wharf Street",
        "city": "Boston",
        "base_price": 4200,
        "model": "week",
        "type": "Loft",
        "rating": (4.3, 11),
        "images": [],
    },
}

SERVICE_CATALOG: dict[str, dict] = {
    "ethereal-blooms": {
        "name": "Ethereal Blooms Floral Design",
        "category": "Decoration",
        "base_price": 1500,
        "model": "day",
        "image": "https://images.unsplash.com/photo-1717778444574-f2a865927769",
    },
    "moment-capturers": {
        "name": "Moment Capturers Photography",
        "category": "Photography",
        "base_price": 3000,
        "model": "day",
        "image": "https://images.unsplash.com/photo-1629756048377-09540f52caa1",
    },
    "gourmet-gatherings": {
        "name": "Gourmet Gatherings Catering",
        "category": "Catering",
        "base_price": 95,
        "model": "hour",
        "image": "https://images.unsplash.com/photo-1555244162-803834f70033",
    },
    "rhythm-revolution": {
        "name": "Rhythm Revolution DJ Services",
        "category": "Entertainment",
        "base_price": 1200,
        "model": "day",
        "image": "https://images.unsplash.com/photo-1516873240891-4bf014598ab4",
    },
}


def list_venues() -> list[dict]:
    """Return all venues with basic info."""
    return [
        {"id": vid, "name": info["name"], "city": info["city"], "base_price": info["base_price"]}
        for vid, info in VENUE_CATALOG.items()
    ]


def list_services() -> list[dict]:
    """Return all services with basic info."""
    return [
        {"id": sid, "name": info["name"], "category": info["category"]}
        for sid, info in SERVICE_CATALOG.items()
    ]


def get_venue(venue_id: str) -> Optional[dict]:
    info = VENUE_CATALOG.get(venue_id)
    return {"id": venue_id, **info} if info else None


def get_service(service_id: str) -> Optional[dict]:
    info = SERVICE_CATALOG.get(service_id)
    return {"id": service_id, **info} if info else None


def to_cart_venue(venue_id: str) -> Optional[CartVenue]:
    """Map a catalog venue into the shape the cart stores."""
    info = VENUE_CATALOG.get(venue_id)
    if info is None:
        logger.debug("Unknown venue id '%s'", venue_id)
        return None
    average, count = info["rating"]
    return CartVenue(
        id=venue_id,
        name=info["name"],
        location=VenueLocation(address=info["address"], city=info["city"]),
        price=VenuePrice(base_price=info["base_price"], model=PriceModel(info["model"])),
        images=[VenueImage(url=url, alt=alt) for url, alt in info["images"]],
        type=info["type"],
        rating=VenueRating(average=average, count=count),
    )


def to_cart_service(
    service_id: str,
    selected_days: list[str],
    event_dates: list[str],
) -> Optional[CartService]:
    """Map a catalog service into its cart shape, pricing it for the chosen days.

    Day selection only applies to multi-day events; on a single-day event
    the service covers the whole event and ``selected_days`` is dropped.
    """
    info = SERVICE_CATALOG.get(service_id)
    if info is None:
        logger.debug("Unknown service id '%s'", service_id)
        return None
    model = PriceModel(info["model"])
    days = list(selected_days) if len(event_dates) > 1 else []
    return CartService(
        id=service_id,
        name=info["name"],
        image=info["image"],
        price=info["base_price"],
        price_model=model,
        selected_days=days,
        total_calculated_price=calculate_service_total(
            info["base_price"], model, days, event_dates
        ),
    )
