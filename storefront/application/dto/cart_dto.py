from typing import List

from pydantic import AliasChoices, BaseModel, Field


class AddCartItemRequest(BaseModel):
    """DTO for adding a product to the cart"""
    product_id: str = Field(min_length=1, validation_alias=AliasChoices("productId", "product_id"))
    quantity: int = Field(default=1, ge=1)


class UpdateCartItemRequest(BaseModel):
    """DTO for changing the quantity of a line already in the cart"""
    quantity: int = Field(ge=1)


class ProductResponse(BaseModel):
    """DTO for product details embedded in cart lines"""
    id: str
    name: str
    description: str = ""
    price: float
    image: str = ""
    stock: int


class CartItemResponse(BaseModel):
    """DTO for one cart line with the product resolved"""
    product: ProductResponse
    quantity: int
    line_total: float


class CartResponse(BaseModel):
    """DTO for the cart view"""
    success: bool = True
    items: List[CartItemResponse] = []
    total_items: int = 0
    total_amount: float = 0.0
