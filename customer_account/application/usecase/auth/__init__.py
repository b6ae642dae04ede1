"""Customer authorization use cases."""

from .complete_authorization import CompleteAuthorizationUseCase
from .get_order_list import GetOrderListUseCase
from .initiate_authorization import InitiateAuthorizationUseCase

__all__ = [
    "CompleteAuthorizationUseCase",
    "GetOrderListUseCase",
    "InitiateAuthorizationUseCase",
]
