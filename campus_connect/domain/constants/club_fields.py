"""Constants for Club model field names"""


class ClubFields:
    """Field name constants for Club model"""
    ID = "id"
    NAME = "name"
    DESCRIPTION = "description"
    MEMBERS = "members"
    OFFICERS = "officers"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
