from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_user_collection,
    get_product_collection,
    get_cart_collection,
    get_payment_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all database collections in the container as singletons.
        Repositories receive their collection from here, never from globals.
        """
        container.register_singleton("database", get_database())
        container.register_singleton("user_collection", get_user_collection())
        container.register_singleton("product_collection", get_product_collection())
        container.register_singleton("cart_collection", get_cart_collection())
        container.register_singleton("payment_collection", get_payment_collection())
