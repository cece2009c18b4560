"""TripIt travel objects: trips, reservations and their building blocks.

Only the commonly used part of the TripIt schema is modelled. Every model
keeps unknown fields as extras, so nothing TripIt sends is dropped.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Optional

from pydantic import Field

from tripit.schemas.common import (
    ApiBool,
    ApiFloat,
    ApiInt,
    ListOf,
    TripItModel,
    parse_date,
    parse_unix_timestamp,
)

# Flight status values
FLIGHT_STATUS_NOT_MONITORABLE = 100
FLIGHT_STATUS_NOT_MONITORED = 200
FLIGHT_STATUS_SCHEDULED = 300
FLIGHT_STATUS_ON_TIME = 301
FLIGHT_STATUS_IN_FLIGHT_ON_TIME = 302
FLIGHT_STATUS_ARRIVED_ON_TIME = 303
FLIGHT_STATUS_CANCELLED = 400
FLIGHT_STATUS_DELAYED = 401
FLIGHT_STATUS_IN_FLIGHT_LATE = 402
FLIGHT_STATUS_ARRIVED_LATE = 403
FLIGHT_STATUS_DIVERTED = 404


class Address(TripItModel):
    """Address of a location.

    For create, use either ``address`` for a single-line address, or
    ``addr1``/``addr2``/``city``/``state``/``zip``/``country``. The multi-line
    form is ignored by TripIt when ``address`` is present.
    """

    address: Optional[str] = None
    addr1: Optional[str] = None
    addr2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None
    latitude: Optional[ApiFloat] = None  # read-only
    longitude: Optional[ApiFloat] = None  # read-only


class DateTime(TripItModel):
    """Date and time zone information.

    Example: {"date": "2009-11-10", "time": "14:00:00",
    "timezone": "America/Los_Angeles", "utc_offset": "-08:00"}
    """

    date: Optional[str] = None
    time: Optional[str] = None
    timezone: Optional[str] = None  # read-only
    utc_offset: Optional[str] = None  # read-only

    def to_datetime(self) -> datetime:
        """Return an aware datetime. A missing offset is taken as UTC."""
        if not self.date or not self.time:
            raise ValueError("DateTime needs both date and time")
        return datetime.fromisoformat(f"{self.date}T{self.time}{self.utc_offset or '+00:00'}")

    @classmethod
    def from_datetime(cls, value: datetime) -> "DateTime":
        """Build from a datetime. Naive datetimes are taken as UTC."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        offset = value.utcoffset() or timedelta(0)
        sign = "-" if offset < timedelta(0) else "+"
        minutes = abs(int(offset.total_seconds())) // 60
        return cls(
            date=value.strftime("%Y-%m-%d"),
            time=value.strftime("%H:%M:%S"),
            timezone=value.tzname(),
            utc_offset=f"{sign}{minutes // 60:02d}:{minutes % 60:02d}",
        )


class Image(TripItModel):
    """Image attached to an object."""

    caption: Optional[str] = None
    url: str


class Traveler(TripItModel):
    """Traveler on a reservation."""

    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    frequent_traveler_num: Optional[str] = None
    frequent_traveler_supplier: Optional[str] = None
    meal_preference: Optional[str] = None
    seat_preference: Optional[str] = None
    ticket_num: Optional[str] = None


class FlightStatus(TripItModel):
    """Flight status, read-only and only for monitored TripIt Pro air segments."""

    scheduled_departure: Optional[DateTime] = Field(None, alias="ScheduledDepartureDateTime")
    estimated_departure: Optional[DateTime] = Field(None, alias="EstimatedDepartureDateTime")
    scheduled_arrival: Optional[DateTime] = Field(None, alias="ScheduledArrivalDateTime")
    estimated_arrival: Optional[DateTime] = Field(None, alias="EstimatedArrivalDateTime")
    flight_status: Optional[ApiInt] = None
    is_connection_at_risk: Optional[ApiBool] = None
    departure_terminal: Optional[str] = None
    departure_gate: Optional[str] = None
    arrival_terminal: Optional[str] = None
    arrival_gate: Optional[str] = None
    layover_minutes: Optional[str] = None
    baggage_claim: Optional[str] = None
    diverted_airport_code: Optional[str] = None
    last_modified: Optional[str] = None

    def last_modified_time(self) -> datetime:
        return parse_unix_timestamp(self.last_modified, "last_modified")


class TripItObject(TripItModel):
    """Fields shared by every object that belongs to a trip."""

    id: Optional[str] = None  # read-only
    trip_id: Optional[str] = None
    is_client_traveler: Optional[ApiBool] = None  # read-only
    relative_url: Optional[str] = None  # read-only
    display_name: Optional[str] = None
    images: Optional[ListOf[Image]] = Field(None, alias="Image")


class ReservationObject(TripItObject):
    """Fields shared by bookable objects (air, lodging, car, rail, ...)."""

    cancellation_date_time: Optional[DateTime] = Field(None, alias="CancellationDateTime")
    booking_date: Optional[str] = None  # xs:date
    booking_rate: Optional[str] = None
    booking_site_conf_num: Optional[str] = None
    booking_site_name: Optional[str] = None
    booking_site_phone: Optional[str] = None
    booking_site_url: Optional[str] = None
    record_locator: Optional[str] = None
    supplier_conf_num: Optional[str] = None
    supplier_contact: Optional[str] = None
    supplier_email_address: Optional[str] = None
    supplier_name: Optional[str] = None
    supplier_phone: Optional[str] = None
    supplier_url: Optional[str] = None
    is_purchased: Optional[ApiBool] = None
    notes: Optional[str] = None
    restrictions: Optional[str] = None
    total_cost: Optional[str] = None

    def booking_time(self) -> date:
        """Booking date, without time zone information."""
        return parse_date(self.booking_date, "booking_date")


class AirSegment(TripItModel):
    """A single flight within an AirObject."""

    status: Optional[FlightStatus] = Field(None, alias="Status")
    start_date_time: Optional[DateTime] = Field(None, alias="StartDateTime")
    end_date_time: Optional[DateTime] = Field(None, alias="EndDateTime")
    start_airport_code: Optional[str] = None
    start_airport_latitude: Optional[ApiFloat] = None  # read-only
    start_airport_longitude: Optional[ApiFloat] = None  # read-only
    start_city_name: Optional[str] = None
    start_gate: Optional[str] = None
    start_terminal: Optional[str] = None
    end_airport_code: Optional[str] = None
    end_airport_latitude: Optional[ApiFloat] = None  # read-only
    end_airport_longitude: Optional[ApiFloat] = None  # read-only
    end_city_name: Optional[str] = None
    end_gate: Optional[str] = None
    end_terminal: Optional[str] = None
    marketing_airline: Optional[str] = None
    marketing_airline_code: Optional[str] = None  # read-only
    marketing_flight_number: Optional[str] = None
    operating_airline: Optional[str] = None
    operating_airline_code: Optional[str] = None  # read-only
    operating_flight_number: Optional[str] = None
    alternate_flights_url: Optional[str] = None  # read-only
    aircraft: Optional[str] = None
    aircraft_display_name: Optional[str] = None  # read-only
    distance: Optional[str] = None
    duration: Optional[str] = None
    entertainment: Optional[str] = None
    meal: Optional[str] = None
    notes: Optional[str] = None
    ontime_perc: Optional[str] = None
    seats: Optional[str] = None
    service_class: Optional[str] = None
    stops: Optional[str] = None
    baggage_claim: Optional[str] = None
    check_in_url: Optional[str] = None
    conflict_resolution_url: Optional[str] = None  # read-only
    is_hidden: Optional[ApiBool] = None  # read-only
    id: Optional[str] = None  # read-only


class AirObject(ReservationObject):
    """A flight booking made of one or more segments."""

    segments: Optional[ListOf[AirSegment]] = Field(None, alias="Segment")
    travelers: Optional[ListOf[Traveler]] = Field(None, alias="Traveler")


class LodgingObject(ReservationObject):
    """Hotel or other lodging.

    Cancellation remarks go in ``restrictions``, the room description in
    ``notes`` and the average daily rate in ``booking_rate``.
    """

    start_date_time: Optional[DateTime] = Field(None, alias="StartDateTime")
    end_date_time: Optional[DateTime] = Field(None, alias="EndDateTime")
    address: Optional[Address] = Field(None, alias="Address")
    guests: Optional[ListOf[Traveler]] = Field(None, alias="Guest")
    number_guests: Optional[str] = None
    number_rooms: Optional[str] = None
    room_type: Optional[str] = None


class NoteObject(TripItObject):
    """Note added by the traveler."""

    date_time: Optional[DateTime] = Field(None, alias="DateTime")
    address: Optional[Address] = Field(None, alias="Address")
    detail_type_code: Optional[str] = None
    source: Optional[str] = None
    text: Optional[str] = None
    url: Optional[str] = None
    notes: Optional[str] = None


class Trip(TripItModel):
    """A trip."""

    id: Optional[str] = None  # read-only
    relative_url: Optional[str] = None  # read-only
    start_date: Optional[str] = None  # xs:date
    end_date: Optional[str] = None  # xs:date
    description: Optional[str] = None
    display_name: Optional[str] = None
    image_url: Optional[str] = None
    is_private: Optional[ApiBool] = None
    primary_location: Optional[str] = None
    primary_location_address: Optional[Address] = None  # read-only

    def start_time(self) -> date:
        return parse_date(self.start_date, "start_date")

    def end_time(self) -> date:
        return parse_date(self.end_date, "end_date")


class TripShare(TripItModel):
    """Which users a trip is shared with."""

    trip_id: Optional[str] = None
    is_traveler: Optional[ApiBool] = None
    is_read_only: Optional[ApiBool] = None
    is_sent_with_details: Optional[ApiBool] = None


class Invitation(TripItModel):
    """Users invited to see a trip."""

    email_addresses: Optional[ListOf[str]] = Field(None, alias="EmailAddresses")
    trip_share: Optional[TripShare] = Field(None, alias="TripShare")
    message: Optional[str] = None


class ProfileAttributes(TripItModel):
    ref: Optional[str] = None


class Profile(TripItModel):
    """User profile. All fields are read-only."""

    attributes: Optional[ProfileAttributes] = Field(None, alias="@attributes")
    is_client: Optional[ApiBool] = None
    is_pro: Optional[ApiBool] = None
    screen_name: Optional[str] = None
    public_display_name: Optional[str] = None
    profile_url: Optional[str] = None
    home_city: Optional[str] = None
    company: Optional[str] = None
    about_me_info: Optional[str] = None
    photo_url: Optional[str] = None
    activity_feed_url: Optional[str] = None
    alerts_feed_url: Optional[str] = None
    ical_url: Optional[str] = None
