# Standard library imports
import logging

# Local application imports
from .base import BaseCartUseCase
from ...dto.cart_dto import CartResponse, UpdateCartItemRequest

logger = logging.getLogger(__name__)


class UpdateCartItemUseCase(BaseCartUseCase):
    """Use case for setting the quantity of a line already in the cart"""

    async def execute(self, user_id: str, product_id: str, request: UpdateCartItemRequest) -> CartResponse:
        await self._ensure_user(user_id)
        cart = await self._load_cart(user_id)
        product = await self._get_product(product_id)

        self._check_stock(product, request.quantity)
        cart.set_quantity(product_id, request.quantity)

        saved_cart = await self.cart_repository.save(cart)
        logger.info(f"User {user_id} cart: product {product_id} quantity set to {request.quantity}")
        return await self._render(saved_cart)
