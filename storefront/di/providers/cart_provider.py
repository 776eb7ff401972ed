from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.cart_repository import CartRepository
from ...domain.repositories.product_repository import ProductRepository
from ...application.use_cases.cart.get_cart import GetCartUseCase
from ...application.use_cases.cart.add_cart_item import AddCartItemUseCase
from ...application.use_cases.cart.update_cart_item import UpdateCartItemUseCase
from ...application.use_cases.cart.remove_cart_item import RemoveCartItemUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CartProvider:
    """Cart use case provider - registers all cart-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all cart use cases.
        They share the same three repositories, so one factory builder serves all of them.
        """
        def factory(use_case_class):
            return lambda: use_case_class(
                user_repository=container.get(UserRepository),
                cart_repository=container.get(CartRepository),
                product_repository=container.get(ProductRepository),
            )

        for use_case_class in (GetCartUseCase, AddCartItemUseCase, UpdateCartItemUseCase, RemoveCartItemUseCase):
            container.register_factory(use_case_class, factory(use_case_class))
