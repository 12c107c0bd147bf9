# External package imports
from bson import ObjectId


def new_id() -> str:
    """Fresh creation-time-sortable identifier (24 hex characters)"""
    return str(ObjectId())
