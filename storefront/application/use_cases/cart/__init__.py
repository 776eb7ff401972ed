from .get_cart import GetCartUseCase
from .add_cart_item import AddCartItemUseCase
from .update_cart_item import UpdateCartItemUseCase
from .remove_cart_item import RemoveCartItemUseCase

__all__ = [
    "GetCartUseCase",
    "AddCartItemUseCase",
    "UpdateCartItemUseCase",
    "RemoveCartItemUseCase",
]
