"""Constants for MarketplaceListing model field names"""


class ListingFields:
    """Field name constants for MarketplaceListing model"""
    ID = "id"
    TITLE = "title"
    DESCRIPTION = "description"
    PRICE = "price"
    SELLER = "seller"
    IMAGE_URLS = "imageUrls"
    CATEGORY = "category"
    IS_AVAILABLE = "isAvailable"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
