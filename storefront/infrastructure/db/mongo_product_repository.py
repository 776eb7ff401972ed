# Standard library imports
from typing import Dict, Iterable, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.product_repository import ProductRepository
from ...domain.models.product import Product
from ...domain.constants import ProductFields
from ...domain.exceptions import InternalError
from .mongo_connection import get_product_collection, with_timeout


def _to_object_id(product_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(product_id)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoProductRepository(ProductRepository):
    """MongoDB implementation of ProductRepository (read-only)"""

    def __init__(self, product_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.product_collection = (
            product_collection if product_collection is not None else get_product_collection()
        )

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        object_id = _to_object_id(product_id)
        if object_id is None:
            return None

        try:
            document = await with_timeout(
                self.product_collection.find_one({ProductFields.MONGO_ID: object_id}),
                "finding product by ID",
            )
        except PyMongoError as e:
            raise InternalError(f"Error finding product by ID: {str(e)}")
        if document is None:
            return None
        return self._document_to_product(document)

    async def find_by_ids(self, product_ids: Iterable[str]) -> Dict[str, Product]:
        object_ids: List[ObjectId] = []
        for product_id in set(product_ids):
            object_id = _to_object_id(product_id)
            if object_id is not None:
                object_ids.append(object_id)
        if not object_ids:
            return {}

        try:
            cursor = self.product_collection.find({ProductFields.MONGO_ID: {"$in": object_ids}})
            documents = await with_timeout(cursor.to_list(length=len(object_ids)), "finding products by IDs")
        except PyMongoError as e:
            raise InternalError(f"Error finding products: {str(e)}")

        products = {}
        for document in documents:
            product = self._document_to_product(document)
            products[product.id] = product
        return products

    def _document_to_product(self, document: dict) -> Product:
        """
        Convert MongoDB document to Product domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Product domain model
        """
        try:
            return Product(
                id=str(document[ProductFields.MONGO_ID]),
                name=document.get(ProductFields.NAME, ""),
                description=document.get(ProductFields.DESCRIPTION, ""),
                price=float(document.get(ProductFields.PRICE, 0)),
                image=document.get(ProductFields.IMAGE, ""),
                stock=int(document.get(ProductFields.STOCK, 0)),
            )
        except (KeyError, ValueError, TypeError) as e:
            raise InternalError(f"Corrupt product document: {str(e)}")
