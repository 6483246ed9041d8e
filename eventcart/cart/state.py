"""
Cart state model: the one in-progress booking for a browsing session.

The store owns a single ``Cart | None`` and is the only writer of it.
Every mutation replaces the cart with a new snapshot, writes it through
to storage, and notifies subscribers. Mutations never raise on bad
input: an absent venue, a duplicate service or an unknown id turns the
call into a no-op plus a user-facing notice.

Usage:
    store = CartStore(storage=MemoryStorage(), notify=NoticeCollector())
    store.attach_catalog_venue(venue, ["2024-06-01", "2024-06-02"], "Evening")
    store.add_service(service)
    store.remove_service(service.id)
    store.clear()
"""

import uuid
from typing import Callable, Optional

from eventcart.cart.notifications import Notice, NoticeVariant, NotificationSink, log_notice
from eventcart.config import settings
from eventcart.logging_context import get_session_logger
from eventcart.schemas.cart_schema import (
    Cart,
    CartService,
    CartVenue,
    PriceModel,
    VenueImage,
    VenueLocation,
    VenuePrice,
    VenueRating,
)
from eventcart.tools.persistence import CartStorage, NullStorage, load_cart, save_cart
from eventcart.utils import describe_date_span

logger = get_session_logger(__name__)

CartListener = Callable[[Optional[Cart]], None]


def _default_id_factory() -> str:
    return str(uuid.uuid4())


class CartStore:
    """
    Holds the current cart and enforces its attachment rules.

    Services belong to the venue they were added against: replacing a
    catalog venue with a different one drops them. Switching between two
    external venues keeps them.
    """

    def __init__(
        self,
        storage: Optional[CartStorage] = None,
        notify: Optional[NotificationSink] = None,
        id_factory: Optional[Callable[[], str]] = None,
        storage_key: Optional[str] = None,
    ) -> None:
        self._storage = storage if storage is not None else NullStorage()
        self._notify = notify or log_notice
        self._id_factory = id_factory or _default_id_factory
        self._key = storage_key or settings.cart.storage_key
        self._listeners: list[CartListener] = []
        self._closed = False
        self._cart: Optional[Cart] = load_cart(self._storage, self._key)
        logger.debug("Cart store opened (venue=%s)", self._cart.venue.id if self._cart else None)

    # --- lifecycle ---

    def close(self) -> None:
        """Detach all subscribers. The stored cart is left as last written."""
        self._listeners.clear()
        self._closed = True

    def __enter__(self) -> "CartStore":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register a listener for cart changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_cart(self, cart: Optional[Cart]) -> None:
        self._cart = cart
        save_cart(self._storage, cart, self._key)
        for listener in list(self._listeners):
            listener(cart)

    def _emit(self, title: str, description: Optional[str] = None,
              variant: NoticeVariant = NoticeVariant.DEFAULT) -> None:
        self._notify(Notice(title=title, description=description, variant=variant))

    # --- derived views ---

    @property
    def cart(self) -> Optional[Cart]:
        return self._cart

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def has_venue(self) -> bool:
        return self._cart is not None and self._cart.venue is not None

    @property
    def selected_dates(self) -> list[str]:
        return list(self._cart.selected_dates) if self._cart else []

    @property
    def event_time_slot(self) -> str:
        return self._cart.time_slot if self._cart else ""

    @property
    def is_multi_day(self) -> bool:
        return len(self.selected_dates) > 1

    # --- mutations ---

    def attach_catalog_venue(self, venue: CartVenue, dates: list[str], time_slot: str) -> None:
        """Attach a catalog venue. Services survive only a re-attach of the same venue."""
        current = self._cart
        keep_services = current is not None and current.venue.id == venue.id
        services = list(current.services) if keep_services else []

        if current is not None and not keep_services and current.services:
            self._emit(
                "Venue Changed",
                f"Venue updated to {venue.name}. Previous services removed.",
            )

        self._set_cart(Cart(
            venue=venue,
            selected_dates=list(dates),
            time_slot=time_slot,
            services=services,
        ))
        logger.info("Venue '%s' attached for %d date(s)", venue.id, len(dates))
        self._emit("Venue Added", f"{venue.name} added for {describe_date_span(list(dates))}.")

    def attach_external_venue(self, name: str, location_text: str, dates: list[str]) -> None:
        """Attach a venue the customer booked elsewhere, so services can still be added."""
        cart_settings = settings.cart
        venue = CartVenue(
            id=f"{cart_settings.external_id_prefix}{self._id_factory()}",
            name=name,
            location=VenueLocation(address=location_text, city=""),
            price=VenuePrice(base_price=0, model=PriceModel.DAY),
            images=[VenueImage(url=cart_settings.placeholder_image_url, alt=name)],
            type="External",
            rating=VenueRating(average=0, count=0),
        )

        current = self._cart
        drop_services = current is not None and not current.venue.is_external
        services = [] if drop_services or current is None else list(current.services)

        if drop_services and current.services:
            self._emit(
                "Venue Changed",
                f"External venue {name} added. Previous services removed.",
            )

        self._set_cart(Cart(
            venue=venue,
            selected_dates=list(dates),
            time_slot=cart_settings.default_time_slot,
            services=services,
        ))
        logger.info("External venue '%s' attached for %d date(s)", venue.id, len(dates))
        self._emit("External Venue Added", f"{name} added for {describe_date_span(list(dates))}.")

    def update_dates(self, dates: list[str], time_slot: Optional[str] = None) -> None:
        """Change the event dates (and optionally the time slot) of the current booking."""
        if self._cart is None:
            self._emit("No venue selected", variant=NoticeVariant.DESTRUCTIVE)
            return

        update: dict = {"selected_dates": list(dates)}
        if time_slot is not None:
            update["time_slot"] = time_slot
        self._set_cart(self._cart.model_copy(update=update))
        self._emit("Dates Updated", f"Your booking now covers {describe_date_span(list(dates))}.")

    def add_service(self, service: CartService) -> None:
        """Append a service to the booking unless there is no venue or it is already there."""
        cart = self._cart
        if cart is None:
            logger.debug("Rejected service '%s': no venue selected", service.id)
            self._emit("No venue selected", variant=NoticeVariant.DESTRUCTIVE)
            return
        if cart.find_service(service.id) is not None:
            self._emit("Service already added", f"{service.name} is already in your booking.")
            return

        self._set_cart(cart.model_copy(update={"services": [*cart.services, service]}))
        logger.info("Service '%s' added", service.id)

        days = len(service.selected_days)
        days_text = "your event date" if days == 0 else f"{days} day(s)"
        self._emit("Service Added", f"{service.name} added for {days_text}.")

    def remove_service(self, service_id: str) -> None:
        """Remove a service by id. Unknown ids and a missing cart are ignored."""
        cart = self._cart
        if cart is None:
            return
        service = cart.find_service(service_id)
        if service is None:
            return

        remaining = [s for s in cart.services if s.id != service_id]
        self._set_cart(cart.model_copy(update={"services": remaining}))
        logger.info("Service '%s' removed", service_id)
        self._emit("Service removed", f"{service.name} removed.")

    def clear(self) -> None:
        """Drop the booking entirely."""
        self._set_cart(None)
        logger.info("Cart cleared")
        self._emit("Booking Cleared", "Your booking details have been cleared.")
