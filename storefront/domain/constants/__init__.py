"""Constants for domain model field names"""

from .user_fields import UserFields
from .product_fields import ProductFields
from .cart_fields import CartFields
from .payment_fields import PaymentFields

__all__ = [
    "UserFields",
    "ProductFields",
    "CartFields",
    "PaymentFields",
]
