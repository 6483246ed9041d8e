"""Payment-session request and response models."""

from pydantic import BaseModel, Field
from typing import Optional


class CheckoutItem(BaseModel):
    """One purchasable line sent to the payment-session endpoint."""
    id: str
    name: str
    price: float = Field(ge=0)
    quantity: int = 1
    image: Optional[str] = None


class CheckoutRequest(BaseModel):
    """Body of the create-session POST."""
    items: list[CheckoutItem] = Field(default_factory=list)


class CheckoutResponse(BaseModel):
    """Endpoint reply: a session id on success, an error message otherwise."""
    session_id: Optional[str] = Field(default=None, alias="sessionId")
    error: Optional[str] = None
