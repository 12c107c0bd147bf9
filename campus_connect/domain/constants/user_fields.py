"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    BIO = "bio"
    MAJOR = "major"
    PROFILE_PICTURE_URL = "profilePictureUrl"
    NOTIFICATION_TOKEN = "notificationToken"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # Fields a profile update may touch
    UPDATABLE = (NAME, BIO, MAJOR, PROFILE_PICTURE_URL, NOTIFICATION_TOKEN)

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
