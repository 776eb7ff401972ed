# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.cart_dto import AddCartItemRequest, UpdateCartItemRequest, CartResponse
from ...application.use_cases.cart.get_cart import GetCartUseCase
from ...application.use_cases.cart.add_cart_item import AddCartItemUseCase
from ...application.use_cases.cart.update_cart_item import UpdateCartItemUseCase
from ...application.use_cases.cart.remove_cart_item import RemoveCartItemUseCase
from ...di.container import get_container
from .dependencies import get_current_user_id


router = APIRouter(tags=["cart"])

# The owner of the cart is always the token subject; no route takes a user ID.


@router.get("", response_model=CartResponse)
async def get_cart(current_user_id: str = Depends(get_current_user_id)) -> CartResponse:
    """
    Get the authenticated user's cart with product details
    """
    container = get_container()
    get_cart_use_case = container.get(GetCartUseCase)
    return await get_cart_use_case.execute(user_id=current_user_id)


@router.post("/items", response_model=CartResponse)
async def add_cart_item(
    request: AddCartItemRequest,
    current_user_id: str = Depends(get_current_user_id),
) -> CartResponse:
    """
    Add a product to the cart (increments the line if already present)
    """
    container = get_container()
    add_item_use_case = container.get(AddCartItemUseCase)
    return await add_item_use_case.execute(user_id=current_user_id, request=request)


@router.patch("/items/{product_id}", response_model=CartResponse)
async def update_cart_item(
    product_id: str,
    request: UpdateCartItemRequest,
    current_user_id: str = Depends(get_current_user_id),
) -> CartResponse:
    """
    Set the quantity of a product already in the cart
    """
    container = get_container()
    update_item_use_case = container.get(UpdateCartItemUseCase)
    return await update_item_use_case.execute(user_id=current_user_id, product_id=product_id, request=request)


@router.delete("/items/{product_id}", response_model=CartResponse)
async def remove_cart_item(
    product_id: str,
    current_user_id: str = Depends(get_current_user_id),
) -> CartResponse:
    """
    Remove a product from the cart
    """
    container = get_container()
    remove_item_use_case = container.get(RemoveCartItemUseCase)
    return await remove_item_use_case.execute(user_id=current_user_id, product_id=product_id)
