from eventcart.cart.notifications import Notice, NoticeCollector, NoticeVariant
from eventcart.cart.pricing import (
    format_service_date_summary,
    services_cost,
    total_cost,
    venue_cost,
)
from eventcart.cart.state import CartStore

__all__ = [
    "CartStore",
    "Notice",
    "NoticeCollector",
    "NoticeVariant",
    "venue_cost",
    "services_cost",
    "total_cost",
    "format_service_date_summary",
]
