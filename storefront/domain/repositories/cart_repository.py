from abc import ABC, abstractmethod
from typing import Optional
from ..models.cart import Cart


class CartRepository(ABC):
    """Repository interface - defines contract for cart data access"""

    @abstractmethod
    async def find_by_user(self, user_id: str) -> Optional[Cart]:
        """Find the cart owned by a user"""
        pass

    @abstractmethod
    async def save(self, cart: Cart) -> Cart:
        """Save the cart of ``cart.user_id``, creating it if it does not exist"""
        pass
