# Standard library imports
import logging

# Local application imports
from .base import BaseCartUseCase
from ...dto.cart_dto import AddCartItemRequest, CartResponse

logger = logging.getLogger(__name__)


class AddCartItemUseCase(BaseCartUseCase):
    """Use case for adding a product to the authenticated user's cart"""

    async def execute(self, user_id: str, request: AddCartItemRequest) -> CartResponse:
        """
        Add a product to the cart, creating the cart on first use

        Adding a product that is already in the cart increases that line's
        quantity instead of creating a second line.

        Args:
            user_id: ID of the authenticated user
            request: Product ID and quantity (>= 1)

        Returns:
            CartResponse after the change

        Raises:
            NotFoundError: If the user or product does not exist
            ValidationError: If the resulting quantity exceeds stock
        """
        await self._ensure_user(user_id)
        product = await self._get_product(request.product_id)
        cart = await self._load_cart(user_id)

        self._check_stock(product, cart.quantity_of(request.product_id) + request.quantity)
        item = cart.add_item(request.product_id, request.quantity)

        # Read-modify-write without a transaction: two concurrent adds for the
        # same user can overwrite each other (last write wins).
        saved_cart = await self.cart_repository.save(cart)
        logger.info(f"User {user_id} cart: product {item.product_id} quantity now {item.quantity}")
        return await self._render(saved_cart)
