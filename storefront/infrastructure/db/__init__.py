from .mongo_connection import (
    get_database,
    close_database,
    ensure_indexes,
    get_user_collection,
    get_product_collection,
    get_cart_collection,
    get_payment_collection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_product_repository import MongoProductRepository
from .mongo_cart_repository import MongoCartRepository
from .mongo_payment_repository import MongoPaymentRepository

__all__ = [
    "get_database",
    "close_database",
    "ensure_indexes",
    "get_user_collection",
    "get_product_collection",
    "get_cart_collection",
    "get_payment_collection",
    "MongoUserRepository",
    "MongoProductRepository",
    "MongoCartRepository",
    "MongoPaymentRepository",
]
