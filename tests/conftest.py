"""
Shared pytest fixtures for storefront tests.

The in-memory repositories behave like the Mongo ones as far as the use
cases can tell: IDs look like ObjectIds, emails are unique case-insensitively,
and stored carts are copies so callers cannot mutate them in place.
"""
import copy
from typing import Dict, Iterable, List, Optional
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId

from storefront.domain.exceptions import ConflictError
from storefront.domain.models.user import User, normalize_email
from storefront.domain.models.product import Product
from storefront.domain.models.cart import Cart
from storefront.domain.models.payment import Payment
from storefront.domain.repositories import (
    CartRepository,
    PaymentRepository,
    ProductRepository,
    UserRepository,
)


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        wanted = normalize_email(email)
        for user in self.users.values():
            if user.email == wanted:
                return copy.deepcopy(user)
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        user = self.users.get(user_id)
        return copy.deepcopy(user) if user else None

    async def save(self, user: User) -> User:
        for existing in self.users.values():
            if existing.email == user.email and existing.id != user.id:
                raise ConflictError("duplicate email", user_message="Email already exists")
        stored = copy.deepcopy(user)
        if not stored.id:
            stored.id = str(ObjectId())
        self.users[stored.id] = stored
        return copy.deepcopy(stored)


class InMemoryProductRepository(ProductRepository):
    def __init__(self, products: Iterable[Product] = ()) -> None:
        self.products: Dict[str, Product] = {product.id: product for product in products}

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        return self.products.get(product_id)

    async def find_by_ids(self, product_ids: Iterable[str]) -> Dict[str, Product]:
        return {pid: self.products[pid] for pid in set(product_ids) if pid in self.products}


class InMemoryCartRepository(CartRepository):
    def __init__(self) -> None:
        self.carts: Dict[str, Cart] = {}
        self.saved_for: List[str] = []

    async def find_by_user(self, user_id: str) -> Optional[Cart]:
        cart = self.carts.get(user_id)
        return copy.deepcopy(cart) if cart else None

    async def save(self, cart: Cart) -> Cart:
        stored = copy.deepcopy(cart)
        if not stored.id:
            existing = self.carts.get(cart.user_id)
            stored.id = existing.id if existing else str(ObjectId())
        self.carts[cart.user_id] = stored
        self.saved_for.append(cart.user_id)
        return copy.deepcopy(stored)


class InMemoryPaymentRepository(PaymentRepository):
    def __init__(self) -> None:
        self.history: List[Payment] = []

    async def save(self, payment: Payment) -> Payment:
        if not payment.id:
            payment.id = str(ObjectId())
        self.history.append(copy.deepcopy(payment))
        return payment


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def apple():
    return Product(id=str(ObjectId()), name="Apple", price=30.0, stock=10, description="Red apple")


@pytest.fixture
def milk():
    return Product(id=str(ObjectId()), name="Milk", price=52.5, stock=3, description="1L milk")


@pytest.fixture
def product_repo(apple, milk):
    return InMemoryProductRepository([apple, milk])


@pytest.fixture
def cart_repo():
    return InMemoryCartRepository()


@pytest.fixture
def payment_repo():
    return InMemoryPaymentRepository()


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for token tests. Patches the modules that read it."""
    mock = MagicMock()
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.bcrypt_rounds = 4

    with patch("storefront.core.config.get_settings", return_value=mock), patch(
        "storefront.core.security.get_settings", return_value=mock
    ):
        yield mock
