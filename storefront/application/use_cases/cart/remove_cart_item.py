# Standard library imports
import logging

# Local application imports
from .base import BaseCartUseCase
from ...dto.cart_dto import CartResponse

logger = logging.getLogger(__name__)


class RemoveCartItemUseCase(BaseCartUseCase):
    """Use case for removing a product line from the cart"""

    async def execute(self, user_id: str, product_id: str) -> CartResponse:
        await self._ensure_user(user_id)
        cart = await self._load_cart(user_id)
        cart.remove_item(product_id)

        saved_cart = await self.cart_repository.save(cart)
        logger.info(f"User {user_id} cart: product {product_id} removed")
        return await self._render(saved_cart)
