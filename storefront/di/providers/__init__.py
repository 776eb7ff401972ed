from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .user_provider import UserProvider
from .cart_provider import CartProvider
from .payment_provider import PaymentProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "UserProvider",
    "CartProvider",
    "PaymentProvider",
]
