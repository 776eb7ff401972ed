# Standard library imports
from typing import Dict

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.repositories.cart_repository import CartRepository
from ....domain.repositories.product_repository import ProductRepository
from ....domain.models.cart import Cart
from ....domain.models.product import Product
from ....domain.exceptions import NotFoundError, ValidationError
from ...dto.cart_dto import CartResponse, CartItemResponse, ProductResponse


class BaseCartUseCase:
    """
    Shared plumbing for cart use cases.

    Every cart use case receives the owner's user ID from the verified access
    token and only ever loads or saves the cart keyed by that ID.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        cart_repository: CartRepository,
        product_repository: ProductRepository,
    ) -> None:
        self.user_repository = user_repository
        self.cart_repository = cart_repository
        self.product_repository = product_repository

    async def _ensure_user(self, user_id: str) -> None:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"Cart requested for unknown user {user_id}", user_message="User not found")

    async def _load_cart(self, user_id: str) -> Cart:
        cart = await self.cart_repository.find_by_user(user_id)
        if cart is None:
            return Cart(id=None, user_id=user_id)
        return cart

    async def _get_product(self, product_id: str) -> Product:
        product = await self.product_repository.find_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product {product_id} not found", user_message="Product not found")
        return product

    @staticmethod
    def _check_stock(product: Product, quantity: int) -> None:
        if quantity > product.stock:
            raise ValidationError(
                f"Requested {quantity} of product {product.id}, stock is {product.stock}",
                user_message=f"Only {product.stock} items left in stock",
            )

    async def _render(self, cart: Cart) -> CartResponse:
        products = await self.product_repository.find_by_ids([item.product_id for item in cart.items])
        return build_cart_response(cart, products)


def build_cart_response(cart: Cart, products: Dict[str, Product]) -> CartResponse:
    """
    Resolve cart lines against the catalog.

    Lines whose product has since been removed from the catalog are left out
    of the view (and of the totals) but stay in the stored cart.
    """
    items = []
    for item in cart.items:
        product = products.get(item.product_id)
        if product is None:
            continue
        items.append(
            CartItemResponse(
                product=ProductResponse(
                    id=product.id or item.product_id,
                    name=product.name,
                    description=product.description,
                    price=product.price,
                    image=product.image,
                    stock=product.stock,
                ),
                quantity=item.quantity,
                line_total=round(product.price * item.quantity, 2),
            )
        )

    return CartResponse(
        items=items,
        total_items=sum(line.quantity for line in items),
        total_amount=cart.total_amount(products),
    )
