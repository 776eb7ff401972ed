from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .user import GetUserByEmailUseCase
from .cart import (
    GetCartUseCase,
    AddCartItemUseCase,
    UpdateCartItemUseCase,
    RemoveCartItemUseCase,
)
from .payment import CreatePaymentUseCase

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "GetUserByEmailUseCase",
    "GetCartUseCase",
    "AddCartItemUseCase",
    "UpdateCartItemUseCase",
    "RemoveCartItemUseCase",
    "CreatePaymentUseCase",
]
