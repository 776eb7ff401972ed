from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.product_repository import ProductRepository
from ...domain.repositories.cart_repository import CartRepository
from ...domain.repositories.payment_repository import PaymentRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_product_repository import MongoProductRepository
from ...infrastructure.db.mongo_cart_repository import MongoCartRepository
from ...infrastructure.db.mongo_payment_repository import MongoPaymentRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=container.get("user_collection"))
        )

        container.register_singleton(
            ProductRepository,
            MongoProductRepository(product_collection=container.get("product_collection"))
        )

        container.register_singleton(
            CartRepository,
            MongoCartRepository(cart_collection=container.get("cart_collection"))
        )

        container.register_singleton(
            PaymentRepository,
            MongoPaymentRepository(payment_collection=container.get("payment_collection"))
        )
