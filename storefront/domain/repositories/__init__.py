from .user_repository import UserRepository
from .product_repository import ProductRepository
from .cart_repository import CartRepository
from .payment_repository import PaymentRepository

__all__ = ["UserRepository", "ProductRepository", "CartRepository", "PaymentRepository"]
