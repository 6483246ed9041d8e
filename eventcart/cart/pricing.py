"""
Price aggregation over a cart snapshot.

All functions are pure and accept ``None`` for "no cart". Service totals
are computed once by the caller when a service is attached
(``calculate_service_total``) and only summed here.
"""

from typing import Optional

from eventcart.schemas.cart_schema import Cart, CartService, PriceModel
from eventcart.utils import format_amount

# Fewer explicit service days than this are listed one by one.
DATE_LIST_LIMIT = 4

_PRICE_SUFFIXES: dict[PriceModel, str] = {
    PriceModel.HOUR: " / hour*",
    PriceModel.DAY: " / event day",
    PriceModel.WEEK: " / week",
}


def billable_days(cart: Cart) -> int:
    """Number of days the venue is charged for; never less than one."""
    return max(1, len(cart.selected_dates))


def venue_cost(cart: Optional[Cart]) -> float:
    """
    Venue total for the booking.

    Every price model is multiplied by the day count, hourly and weekly
    venues included.
    """
    if cart is None or cart.venue is None or cart.venue.price is None:
        return 0
    return cart.venue.price.base_price * billable_days(cart)


def services_cost(cart: Optional[Cart]) -> float:
    if cart is None:
        return 0
    return sum((s.total_calculated_price or 0) for s in cart.services)


def total_cost(cart: Optional[Cart]) -> float:
    return venue_cost(cart) + services_cost(cart)


def calculate_service_total(
    base_price: float,
    price_model: PriceModel,
    selected_days: list[str],
    event_dates: list[str],
) -> float:
    """Total for one service at attach time.

    Day-priced services on a multi-day event are charged per selected
    day; everything else is charged the base price once.
    """
    if price_model == PriceModel.DAY and len(event_dates) > 1:
        return base_price * len(selected_days)
    return base_price


def format_service_date_summary(service: CartService, cart: Optional[Cart]) -> str:
    """Label describing which event days a service covers."""
    days = list(service.selected_days)
    event_dates = list(cart.selected_dates) if cart else []

    if not days and len(event_dates) == 1:
        return f"Event day ({event_dates[0]})"
    if days and days == event_dates:
        return f"All event days ({len(days)})"
    if len(days) == 1:
        return f"1 day ({days[0]})"
    if 1 < len(days) < DATE_LIST_LIMIT:
        return f"{len(days)} days: {', '.join(days)}"
    if len(days) >= DATE_LIST_LIMIT:
        ordered = sorted(days)
        return f"{len(days)} days ({ordered[0]} to {ordered[-1]})"
    return "Specific dates selected"


def format_display_price(amount: Optional[float], model: Optional[PriceModel] = None) -> str:
    """Price label with the unit suffix for its model, e.g. ``$500 / event day``."""
    if amount is None:
        return "N/A"
    suffix = _PRICE_SUFFIXES.get(model, "") if model is not None else ""
    return f"{format_amount(amount)}{suffix}"


def venue_price_breakdown(cart: Optional[Cart]) -> str:
    """``($1,000 × 2 days)`` for day-priced venues, empty otherwise."""
    if cart is None or cart.venue.price.model != PriceModel.DAY:
        return ""
    count = len(cart.selected_dates)
    plural = "s" if count != 1 else ""
    return f"({format_amount(cart.venue.price.base_price)} × {count} day{plural})"


def cart_summary(cart: Optional[Cart]) -> dict[str, float]:
    """Venue, services and grand totals in one dict, for display and checkout."""
    return {
        "venue": venue_cost(cart),
        "services": services_cost(cart),
        "total": total_cost(cart),
    }
