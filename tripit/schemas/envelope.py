"""Request and response envelopes of the TripIt API."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field

from tripit.schemas.common import (
    ApiFloat,
    ApiInt,
    ListOf,
    TripItModel,
    parse_unix_timestamp,
    parse_xs_datetime,
)
from tripit.schemas.objects import (
    AirObject,
    Invitation,
    LodgingObject,
    NoteObject,
    Profile,
    ReservationObject,
    Trip,
    TripItObject,
)


class ApiError(TripItModel):
    """Error condition reported by TripIt."""

    code: Optional[ApiInt] = None
    detailed_error_code: Optional[ApiFloat] = None
    description: Optional[str] = None
    entity_type: Optional[str] = None
    timestamp: Optional[str] = None  # xs:datetime

    def time(self) -> datetime:
        return parse_xs_datetime(self.timestamp, "timestamp")

    def __str__(self) -> str:
        return f"TripIt Error {self.code}: {self.description}"


class ApiWarning(TripItModel):
    """Warning condition reported by TripIt."""

    description: Optional[str] = None
    entity_type: Optional[str] = None
    timestamp: Optional[str] = None  # xs:datetime

    def time(self) -> datetime:
        return parse_xs_datetime(self.timestamp, "timestamp")

    def __str__(self) -> str:
        return f"TripIt Warning: {self.description}"


class Request(TripItModel):
    """Objects that can be sent to TripIt in a create or replace request.

    Set exactly the object being created or replaced.
    """

    invitation: Optional[ListOf[Invitation]] = Field(None, alias="Invitation")
    trip: Optional[Trip] = Field(None, alias="Trip")
    activity_object: Optional[ReservationObject] = Field(None, alias="ActivityObject")
    air_object: Optional[AirObject] = Field(None, alias="AirObject")
    car_object: Optional[ReservationObject] = Field(None, alias="CarObject")
    cruise_object: Optional[ReservationObject] = Field(None, alias="CruiseObject")
    directions_object: Optional[TripItObject] = Field(None, alias="DirectionsObject")
    lodging_object: Optional[LodgingObject] = Field(None, alias="LodgingObject")
    map_object: Optional[TripItObject] = Field(None, alias="MapObject")
    note_object: Optional[NoteObject] = Field(None, alias="NoteObject")
    rail_object: Optional[ReservationObject] = Field(None, alias="RailObject")
    restaurant_object: Optional[ReservationObject] = Field(None, alias="RestaurantObject")
    transport_object: Optional[ReservationObject] = Field(None, alias="TransportObject")

    def to_json(self) -> str:
        """Serialize with TripIt field names, omitting unset fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class Response(TripItModel):
    """A TripIt API response.

    Every object list is empty when TripIt sent nothing for it.
    """

    timestamp: Optional[str] = None  # Unix seconds
    num_bytes: Optional[ApiInt] = None
    errors: ListOf[ApiError] = Field(default_factory=list, alias="Error")
    warnings: ListOf[ApiWarning] = Field(default_factory=list, alias="Warning")
    trips: ListOf[Trip] = Field(default_factory=list, alias="Trip")
    activity_objects: ListOf[ReservationObject] = Field(
        default_factory=list, alias="ActivityObject"
    )
    air_objects: ListOf[AirObject] = Field(default_factory=list, alias="AirObject")
    car_objects: ListOf[ReservationObject] = Field(default_factory=list, alias="CarObject")
    cruise_objects: ListOf[ReservationObject] = Field(default_factory=list, alias="CruiseObject")
    directions_objects: ListOf[TripItObject] = Field(
        default_factory=list, alias="DirectionsObject"
    )
    lodging_objects: ListOf[LodgingObject] = Field(default_factory=list, alias="LodgingObject")
    map_objects: ListOf[TripItObject] = Field(default_factory=list, alias="MapObject")
    note_objects: ListOf[NoteObject] = Field(default_factory=list, alias="NoteObject")
    rail_objects: ListOf[ReservationObject] = Field(default_factory=list, alias="RailObject")
    restaurant_objects: ListOf[ReservationObject] = Field(
        default_factory=list, alias="RestaurantObject"
    )
    transport_objects: ListOf[ReservationObject] = Field(
        default_factory=list, alias="TransportObject"
    )
    weather_objects: ListOf[TripItObject] = Field(default_factory=list, alias="WeatherObject")
    points_programs: ListOf[Dict[str, Any]] = Field(default_factory=list, alias="PointsProgram")
    profiles: ListOf[Profile] = Field(default_factory=list, alias="Profile")

    # Present when pagination is activated
    page_num: Optional[ApiInt] = None
    page_size: Optional[ApiInt] = None
    max_page: Optional[ApiInt] = None

    @property
    def has_problems(self) -> bool:
        """True if TripIt reported any error or warning."""
        return bool(self.errors or self.warnings)

    def time(self) -> datetime:
        return parse_unix_timestamp(self.timestamp, "timestamp")
