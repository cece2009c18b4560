"""Pydantic models of the TripIt JSON API."""

from tripit.schemas.envelope import ApiError, ApiWarning, Request, Response
from tripit.schemas.objects import (
    Address,
    AirObject,
    AirSegment,
    DateTime,
    FlightStatus,
    Image,
    Invitation,
    LodgingObject,
    NoteObject,
    Profile,
    ReservationObject,
    Traveler,
    Trip,
    TripItObject,
    TripShare,
)

__all__ = [
    "Address",
    "AirObject",
    "AirSegment",
    "ApiError",
    "ApiWarning",
    "DateTime",
    "FlightStatus",
    "Image",
    "Invitation",
    "LodgingObject",
    "NoteObject",
    "Profile",
    "Request",
    "ReservationObject",
    "Response",
    "Traveler",
    "Trip",
    "TripItObject",
    "TripShare",
]
