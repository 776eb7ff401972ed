# Standard library imports
import asyncio
import logging
from typing import Awaitable, Optional, TypeVar

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import UserFields, CartFields, PaymentFields
from ...domain.exceptions import InternalError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    The client is created lazily with explicit timeouts so an unreachable
    server fails requests quickly instead of hanging them.

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
        connectTimeoutMS=settings.mongo_timeout_ms,
        socketTimeoutMS=settings.mongo_timeout_ms,
        tz_aware=True,
    )
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def close_database() -> None:
    """Close the shared client (call on application shutdown)."""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("Closed MongoDB client")
    _mongo_client = None
    _mongo_database = None


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()["users"]


def get_product_collection() -> AsyncIOMotorCollection:
    """
    Get products collection from MongoDB

    Returns:
        MongoDB collection for the product catalog
    """
    return get_database()["products"]


def get_cart_collection() -> AsyncIOMotorCollection:
    """
    Get carts collection from MongoDB

    Returns:
        MongoDB collection for carts (one document per user)
    """
    return get_database()["carts"]


def get_payment_collection() -> AsyncIOMotorCollection:
    """
    Get payments collection from MongoDB

    Returns:
        MongoDB collection for payment records
    """
    return get_database()["payments"]


async def ensure_indexes() -> None:
    """
    Create the indexes the data model relies on.

    - users.email unique: duplicate registrations fail at write time
    - carts.user_id unique: exactly one cart per user
    """
    await get_user_collection().create_index([(UserFields.EMAIL, ASCENDING)], unique=True)
    await get_cart_collection().create_index([(CartFields.USER_ID, ASCENDING)], unique=True)
    await get_payment_collection().create_index([(PaymentFields.USER_ID, ASCENDING)])
    logger.info("MongoDB indexes ensured")


async def with_timeout(operation: Awaitable[T], description: str) -> T:
    """
    Await a database operation, bounded by MONGO_OPERATION_TIMEOUT_SECONDS.

    Raises:
        InternalError: If the operation does not finish in time
    """
    timeout = get_settings().mongo_operation_timeout_seconds
    try:
        return await asyncio.wait_for(operation, timeout=timeout)
    except asyncio.TimeoutError:
        raise InternalError(f"Timed out after {timeout}s while {description}")
