"""Cart data models: the venue, its attached services, and the cart itself.

Python field names are snake_case; every model serializes with camelCase
aliases so the persisted document keeps the ``basePrice`` /
``selectedDates`` / ``totalCalculatedPrice`` layout.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from eventcart.config import settings


class PriceModel(str, Enum):
    """Unit a base price is denominated in."""

    HOUR = "hour"
    DAY = "day"
    WEEK = "week"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VenueLocation(_CamelModel):
    address: str
    city: Optional[str] = None
    street: Optional[str] = None
    house_number: Optional[str] = None


class VenueImage(_CamelModel):
    url: str
    alt: Optional[str] = None
    caption: Optional[str] = None


class VenuePrice(_CamelModel):
    base_price: float = Field(ge=0)
    model: PriceModel


class VenueRating(_CamelModel):
    average: float = 0
    count: int = 0


class CartVenue(_CamelModel):
    """The venue currently attached to a booking."""

    id: str
    name: str
    description: Optional[str] = None
    location: VenueLocation
    price: VenuePrice
    images: list[VenueImage] = Field(default_factory=list)
    type: Optional[str] = None
    rating: Optional[VenueRating] = None

    @property
    def is_external(self) -> bool:
        return self.id.startswith(settings.cart.external_id_prefix)


class CartService(_CamelModel):
    """A service attached to a booking with its precomputed total."""

    id: str
    name: str
    image: str = ""
    price: float = Field(ge=0)
    price_model: PriceModel
    selected_days: list[str] = Field(default_factory=list)
    total_calculated_price: float = Field(default=0, ge=0)


class Cart(_CamelModel):
    """
    The single in-progress booking.

    A session without a venue has no cart at all (``None``), never an
    empty ``Cart``.
    """

    venue: CartVenue
    selected_dates: list[str]
    time_slot: str = ""
    services: list[CartService] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_service_ids(self) -> "Cart":
        seen: set[str] = set()
        for service in self.services:
            if service.id in seen:
                raise ValueError(f"Duplicate service id: {service.id}")
            seen.add(service.id)
        return self

    def find_service(self, service_id: str) -> Optional[CartService]:
        for service in self.services:
            if service.id == service_id:
                return service
        return None

    def to_storage_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
