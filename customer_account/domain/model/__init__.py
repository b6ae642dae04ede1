"""Domain model entities."""

from customer_account.domain.model.access_token import CustomerAccessToken
from customer_account.domain.model.code_verifier import CodeVerifier
from customer_account.domain.model.customer import Customer, Order

__all__ = [
    "CodeVerifier",
    "Customer",
    "CustomerAccessToken",
    "Order",
]
