"""Constants for Cart model field names"""


class CartFields:
    """Field name constants for Cart model"""
    ID = "id"
    USER_ID = "user_id"
    ITEMS = "items"
    UPDATED_AT = "updated_at"

    # Line item fields
    PRODUCT_ID = "product_id"
    QUANTITY = "quantity"

    # MongoDB specific
    MONGO_ID = "_id"
