"""Constants for Event model field names"""


class EventFields:
    """Field name constants for Event model"""
    ID = "id"
    TITLE = "title"
    DESCRIPTION = "description"
    LOCATION_NAME = "locationName"
    LOCATION_COORDS = "locationCoords"
    START_TIME = "startTime"
    END_TIME = "endTime"
    HOST = "host"
    ATTENDEES = "attendees"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # GeoJSON point sub-fields
    GEO_TYPE = "type"
    GEO_COORDINATES = "coordinates"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
