# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

# Local application imports
from ..exceptions import NotFoundError, ValidationError
from .product import Product


def _check_quantity(quantity: int) -> None:
    # bool is an int subclass; True must not count as a quantity of 1
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValidationError(f"Invalid quantity {quantity!r}", user_message="Quantity must be a positive integer")


@dataclass
class CartItem:
    """One line of a cart: a product reference and how many of it."""
    product_id: str
    quantity: int

    def __post_init__(self) -> None:
        if not self.product_id:
            raise ValidationError("Cart item without product id", user_message="Product ID is required")
        _check_quantity(self.quantity)


@dataclass
class Cart:
    """
    Shopping cart owned by exactly one user.

    A product appears at most once; adding a product that is already in the
    cart increases the quantity of the existing line.
    """
    id: Optional[str]
    user_id: str
    items: List[CartItem] = field(default_factory=list)
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not self.user_id:
            raise ValueError("Owner user ID is required")
        merged: Dict[str, CartItem] = {}
        for item in self.items:
            if item.product_id in merged:
                merged[item.product_id].quantity += item.quantity
            else:
                merged[item.product_id] = CartItem(product_id=item.product_id, quantity=item.quantity)
        self.items = list(merged.values())

    def find_item(self, product_id: str) -> Optional[CartItem]:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def quantity_of(self, product_id: str) -> int:
        item = self.find_item(product_id)
        return item.quantity if item else 0

    def add_item(self, product_id: str, quantity: int = 1) -> CartItem:
        """
        Add ``quantity`` units of a product.

        Returns:
            The (new or updated) line item
        """
        _check_quantity(quantity)
        item = self.find_item(product_id)
        if item is None:
            item = CartItem(product_id=product_id, quantity=quantity)
            self.items.append(item)
        else:
            item.quantity += quantity
        return item

    def set_quantity(self, product_id: str, quantity: int) -> CartItem:
        _check_quantity(quantity)
        item = self.find_item(product_id)
        if item is None:
            raise NotFoundError(f"Product {product_id} is not in cart of user {self.user_id}",
                                user_message="Item not found in cart")
        item.quantity = quantity
        return item

    def remove_item(self, product_id: str) -> None:
        item = self.find_item(product_id)
        if item is None:
            raise NotFoundError(f"Product {product_id} is not in cart of user {self.user_id}",
                                user_message="Item not found in cart")
        self.items.remove(item)

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)

    def total_amount(self, products: Dict[str, Product]) -> float:
        """Sum of price * quantity for every line whose product is known."""
        total = 0.0
        for item in self.items:
            product = products.get(item.product_id)
            if product is not None:
                total += product.price * item.quantity
        return round(total, 2)
