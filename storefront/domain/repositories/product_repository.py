from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional
from ..models.product import Product


class ProductRepository(ABC):
    """Repository interface - read-only access to the product catalog"""

    @abstractmethod
    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find product by ID"""
        pass

    @abstractmethod
    async def find_by_ids(self, product_ids: Iterable[str]) -> Dict[str, Product]:
        """Find several products at once, keyed by product ID. Unknown IDs are left out."""
        pass
