# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.cart_repository import CartRepository
from ...domain.models.cart import Cart, CartItem
from ...domain.constants import CartFields
from ...domain.exceptions import InternalError, StorefrontError
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_cart_collection, with_timeout


class MongoCartRepository(CartRepository):
    """
    MongoDB implementation of CartRepository.

    One document per user, keyed by ``user_id`` (unique index). Every query
    filters on ``user_id``; carts are never looked up by their own ``_id``.
    """

    def __init__(self, cart_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.cart_collection = cart_collection if cart_collection is not None else get_cart_collection()

    async def find_by_user(self, user_id: str) -> Optional[Cart]:
        """
        Find the cart owned by a user

        Args:
            user_id: Owner's user ID

        Returns:
            Cart domain model if the user has one, None otherwise
        """
        if not user_id:
            return None

        try:
            document = await with_timeout(
                self.cart_collection.find_one({CartFields.USER_ID: user_id}),
                "finding cart",
            )
        except PyMongoError as e:
            raise InternalError(f"Error finding cart for user {user_id}: {str(e)}")
        if document is None:
            return None
        return self._document_to_cart(document)

    async def save(self, cart: Cart) -> Cart:
        """
        Replace the stored line items of the user's cart, creating it on first save

        Args:
            cart: Cart domain model

        Returns:
            Cart as stored
        """
        if not cart:
            raise ValueError("Cart cannot be None")

        try:
            await with_timeout(
                self.cart_collection.update_one(
                    {CartFields.USER_ID: cart.user_id},
                    {"$set": {
                        CartFields.ITEMS: [self._item_to_dict(item) for item in cart.items],
                        CartFields.UPDATED_AT: utc_now(),
                    }},
                    upsert=True,
                ),
                "saving cart",
            )
            document = await with_timeout(
                self.cart_collection.find_one({CartFields.USER_ID: cart.user_id}),
                "reloading saved cart",
            )
        except PyMongoError as e:
            raise InternalError(f"Error saving cart for user {cart.user_id}: {str(e)}")

        if document is None:
            raise InternalError(f"Cart for user {cart.user_id} was saved but could not be retrieved")
        return self._document_to_cart(document)

    def _document_to_cart(self, document: dict) -> Cart:
        """
        Convert MongoDB document to Cart domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Cart domain model
        """
        try:
            items = [
                CartItem(
                    product_id=str(raw[CartFields.PRODUCT_ID]),
                    quantity=int(raw[CartFields.QUANTITY]),
                )
                for raw in document.get(CartFields.ITEMS, [])
            ]
            return Cart(
                id=str(document[CartFields.MONGO_ID]),
                user_id=document[CartFields.USER_ID],
                items=items,
                updated_at=ensure_utc(document.get(CartFields.UPDATED_AT)),
            )
        except (KeyError, ValueError, TypeError, StorefrontError) as e:
            raise InternalError(f"Corrupt cart document: {str(e)}")

    @staticmethod
    def _item_to_dict(item: CartItem) -> dict:
        return {
            CartFields.PRODUCT_ID: item.product_id,
            CartFields.QUANTITY: item.quantity,
        }
