# Local application imports
from .base import BaseCartUseCase
from ...dto.cart_dto import CartResponse


class GetCartUseCase(BaseCartUseCase):
    """Use case for reading the authenticated user's cart"""

    async def execute(self, user_id: str) -> CartResponse:
        """
        Get the user's cart with product details resolved

        Args:
            user_id: ID of the authenticated user

        Returns:
            CartResponse (empty if the user has never added anything)

        Raises:
            NotFoundError: If the user does not exist
        """
        await self._ensure_user(user_id)
        cart = await self._load_cart(user_id)
        return await self._render(cart)
