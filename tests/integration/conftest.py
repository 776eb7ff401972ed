"""
Fixtures for API tests.

The app runs with a container wired to the in-memory repositories from the
parent conftest and a fake payment gateway, so no MongoDB or Stripe is needed.
"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from storefront.di.base_container import BaseContainer
from storefront.di.providers import AuthProvider, CartProvider, PaymentProvider, UserProvider
from storefront.domain.exceptions import UpstreamError
from storefront.domain.payment_gateway import PaymentGateway
from storefront.domain.repositories import (
    CartRepository,
    PaymentRepository,
    ProductRepository,
    UserRepository,
)

CONTROLLER_MODULES = (
    "storefront.api.v1.auth_controller",
    "storefront.api.v1.user_controller",
    "storefront.api.v1.cart_controller",
    "storefront.api.v1.payment_controller",
    "storefront.api.v1.dependencies",
)


class FakeGateway(PaymentGateway):
    def __init__(self) -> None:
        self.declined = False
        self.calls = []

    async def create_charge(self, source_token, amount, currency, description):
        self.calls.append({"source": source_token, "amount": amount, "currency": currency})
        if self.declined:
            raise UpstreamError("card_declined", user_message="Payment could not be processed. Please try again.")
        return f"ch_{len(self.calls)}"


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def container(user_repo, product_repo, cart_repo, payment_repo, gateway):
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repo)
    container.register_singleton(ProductRepository, product_repo)
    container.register_singleton(CartRepository, cart_repo)
    container.register_singleton(PaymentRepository, payment_repo)
    container.register_singleton(PaymentGateway, gateway)
    AuthProvider.register(container)
    UserProvider.register(container)
    CartProvider.register(container)
    PaymentProvider.register(container)
    return container


@pytest.fixture
def client(container):
    """Create test client with the in-memory container patched into every controller."""
    from storefront.main import app

    patches = [patch(f"{module}.get_container", return_value=container) for module in CONTROLLER_MODULES]
    for p in patches:
        p.start()
    try:
        with TestClient(app) as c:
            yield c
    finally:
        for p in patches:
            p.stop()


@pytest.fixture
def signup(client):
    """Register a user through the API and return the response body."""
    def _signup(name="Ann", email="a@x.com", password="secret1", **extra) -> dict:
        response = client.post("/api/register", json={"name": name, "email": email, "password": password, **extra})
        assert response.status_code == 201, response.text
        return response.json()
    return _signup


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_header():
    return bearer
