"""
Checkout: turn the cart into payment-session line items and request a session.

The payment provider itself is external. This module only builds the
request, posts it, and reports the outcome. On success the caller
redirects away with the returned session id; on failure a notice is
emitted and the loading flag is reset so the customer can retry.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from eventcart.cart.notifications import Notice, NoticeVariant, NotificationSink, log_notice
from eventcart.cart.pricing import venue_cost
from eventcart.cart.state import CartStore
from eventcart.config import settings
from eventcart.schemas.cart_schema import Cart
from eventcart.schemas.checkout_schema import CheckoutItem, CheckoutRequest, CheckoutResponse

logger = logging.getLogger(__name__)


class CheckoutError(Exception):
    """Raised when a payment session could not be created."""


def build_checkout_items(cart: Optional[Cart]) -> list[CheckoutItem]:
    """Venue line (when it costs anything) followed by one line per service."""
    if cart is None:
        return []

    items: list[CheckoutItem] = []
    amount = venue_cost(cart)
    if amount > 0:
        items.append(CheckoutItem(
            id=cart.venue.id,
            name=cart.venue.name,
            price=amount,
            image=cart.venue.images[0].url if cart.venue.images else None,
        ))
    for service in cart.services:
        items.append(CheckoutItem(
            id=service.id,
            name=service.name,
            price=service.total_calculated_price or 0,
            image=service.image or None,
        ))
    return items


class CheckoutClient:
    """Posts line items to the payment-session endpoint."""

    def __init__(
        self,
        endpoint_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._endpoint_url = endpoint_url or settings.checkout.endpoint_url
        self._client = client or httpx.Client(
            timeout=timeout or settings.checkout.timeout_sec
        )

    def create_session(self, items: list[CheckoutItem]) -> str:
        """
        Create a payment session.

        Returns:
            The provider session id.

        Raises:
            CheckoutError: On transport failure, an error reply, or a reply
                without a session id.
        """
        if len(items) > settings.checkout.max_items:
            raise CheckoutError(
                f"Too many items for checkout ({len(items)} > {settings.checkout.max_items})"
            )

        body = CheckoutRequest(items=items).model_dump(mode="json", exclude_none=True)
        try:
            response = self._client.post(self._endpoint_url, json=body)
        except httpx.HTTPError as e:
            raise CheckoutError(f"Could not reach checkout service: {e}") from e

        try:
            reply = CheckoutResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            reply = CheckoutResponse()

        if response.is_error or reply.error:
            message = reply.error or f"Checkout service returned {response.status_code}"
            raise CheckoutError(message)
        if not reply.session_id:
            raise CheckoutError("Checkout service returned no session id")

        logger.info("Checkout session created for %d item(s)", len(items))
        return reply.session_id

    def close(self) -> None:
        self._client.close()


class CheckoutFlow:
    """Drives checkout for one cart store and tracks the in-flight flag."""

    def __init__(
        self,
        store: CartStore,
        client: CheckoutClient,
        notify: Optional[NotificationSink] = None,
    ) -> None:
        self._store = store
        self._client = client
        self._notify = notify or log_notice
        self.loading = False
        self.session_id: Optional[str] = None

    def start(self) -> Optional[str]:
        """Request a payment session; returns its id, or None after emitting a notice."""
        items = build_checkout_items(self._store.cart)
        if not items:
            self._notify(Notice(
                title="Your booking is empty",
                description="Add a venue or services before checking out.",
                variant=NoticeVariant.DESTRUCTIVE,
            ))
            return None

        self.loading = True
        try:
            self.session_id = self._client.create_session(items)
        except CheckoutError as e:
            logger.error("Checkout failed: %s", e)
            self.loading = False
            self._notify(Notice(
                title="Checkout failed",
                description=str(e),
                variant=NoticeVariant.DESTRUCTIVE,
            ))
            return None
        return self.session_id

    def confirm(self) -> None:
        """Payment confirmed by the provider: the booking is done, drop the cart."""
        logger.info("Checkout confirmed (session=%s)", self.session_id)
        self.loading = False
        self._store.clear()
