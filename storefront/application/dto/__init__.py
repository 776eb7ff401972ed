from .auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from .user_dto import UserResponse, UserProfile, UserProfileResponse, CurrentUserResponse, to_user_response
from .cart_dto import (
    AddCartItemRequest,
    UpdateCartItemRequest,
    ProductResponse,
    CartItemResponse,
    CartResponse,
)
from .payment_dto import PaymentRequest, PaymentResponse
from .common_dto import MessageResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "AuthResponse",
    "UserResponse",
    "UserProfile",
    "UserProfileResponse",
    "CurrentUserResponse",
    "to_user_response",
    "AddCartItemRequest",
    "UpdateCartItemRequest",
    "ProductResponse",
    "CartItemResponse",
    "CartResponse",
    "PaymentRequest",
    "PaymentResponse",
    "MessageResponse",
]
