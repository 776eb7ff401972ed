from dataclasses import dataclass
from typing import Optional


@dataclass
class Product:
    """Catalog product. The storefront only reads products; they are managed elsewhere."""
    id: Optional[str]
    name: str
    price: float
    stock: int = 0
    description: str = ""
    image: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Product name is required")
        if self.price < 0:
            raise ValueError("Product price cannot be negative")
        if self.stock < 0:
            raise ValueError("Product stock cannot be negative")
