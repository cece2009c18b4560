"""Configuration and API enums.

These enums provide type safety and IDE autocomplete for configuration values
and TripIt API path segments. They inherit from str so they can be dropped
straight into URLs and JSON.
"""

from enum import Enum


class Environment(str, Enum):
    """Deployment environments."""

    LOCAL = "local"
    TEST = "test"
    DEV = "dev"
    PRD = "prd"


class ObjectType(str, Enum):
    """TripIt object types accepted by get, create, replace and delete."""

    AIR = "air"
    ACTIVITY = "activity"
    CAR = "car"
    CRUISE = "cruise"
    DIRECTIONS = "directions"
    LODGING = "lodging"
    MAP = "map"
    NOTE = "note"
    RAIL = "rail"
    RESTAURANT = "restaurant"
    TRANSPORT = "transport"
    TRIP = "trip"


class ListType(str, Enum):
    """Object kinds that can be listed."""

    TRIP = "trip"
    OBJECT = "object"
    POINTS_PROGRAM = "points_program"


class Filter(str, Enum):
    """Filter parameters for list requests.

    Which filters combine with which list type is decided by the API, see the
    TripIt API documentation.
    """

    TRAVELER = "traveler"  # trip, object: true, false, all
    PAST = "past"  # trip, object: true, false
    MODIFIED_SINCE = "modified_since"  # trip, object: integer
    INCLUDE_OBJECTS = "include_objects"  # trip: true, false
    TRIP_ID = "trip_id"  # object: integer trip id
    TYPE = "type"  # object: any ObjectType
    PAGE_NUM = "page_num"
    PAGE_SIZE = "page_size"
