from .user import User, normalize_email
from .product import Product
from .cart import Cart, CartItem
from .payment import Payment, PaymentStatus

__all__ = ["User", "normalize_email", "Product", "Cart", "CartItem", "Payment", "PaymentStatus"]
