"""Constants for Post and Comment model field names"""


class PostFields:
    """Field name constants for Post model"""
    ID = "id"
    CONTENT = "content"
    AUTHOR = "author"
    IMAGE_URL = "imageUrl"
    LIKES = "likes"
    COMMENTS = "comments"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class CommentFields:
    """Field name constants for comments embedded in a Post"""
    ID = "id"
    AUTHOR = "author"
    CONTENT = "content"
    CREATED_AT = "createdAt"

    # MongoDB specific
    MONGO_ID = "_id"
