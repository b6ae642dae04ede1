"""Customer profile as returned by the Customer Account API."""

from typing import Optional

from customer_account.domain.model.common import DomainModel


class Order(DomainModel):
    """Order summary."""

    id: str
    name: str


class Customer(DomainModel):
    """Authenticated customer with their most recent orders."""

    id: str
    email_address: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    orders: tuple[Order, ...] = ()
