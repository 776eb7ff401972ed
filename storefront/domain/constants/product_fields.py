"""Constants for Product model field names"""


class ProductFields:
    """Field name constants for Product model"""
    ID = "id"
    NAME = "name"
    DESCRIPTION = "description"
    PRICE = "price"
    IMAGE = "image"
    STOCK = "stock"

    # MongoDB specific
    MONGO_ID = "_id"
