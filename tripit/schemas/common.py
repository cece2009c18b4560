"""Shared field types and base model for TripIt JSON.

TripIt sends numbers and booleans as JSON strings and collapses one-element
lists into a bare object. The annotated types below accept both forms on the
way in and write the string form back out.
"""

from datetime import date, datetime, timezone
from typing import Annotated, Any, List, Optional, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer

T = TypeVar("T")


def _as_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _bool_to_str(value: bool) -> str:
    return "true" if value else "false"


ListOf = Annotated[List[T], BeforeValidator(_as_list)]
"""A list that also accepts a single element or null."""

ApiBool = Annotated[bool, PlainSerializer(_bool_to_str, return_type=str)]
ApiInt = Annotated[int, PlainSerializer(str, return_type=str)]
ApiFloat = Annotated[float, PlainSerializer(str, return_type=str)]


class TripItModel(BaseModel):
    """Base for all TripIt records.

    Fields are populated by their TripIt (alias) name or their Python name,
    and fields this package does not model are kept as extras.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


def parse_date(value: Optional[str], field_name: str) -> date:
    """Parse an xs:date field, raising ValueError when it is absent."""
    if not value:
        raise ValueError(f"{field_name} is not set")
    return date.fromisoformat(value)


def parse_unix_timestamp(value: Optional[str], field_name: str) -> datetime:
    """Parse a Unix timestamp sent as a decimal string into an aware UTC datetime."""
    if not value:
        raise ValueError(f"{field_name} is not set")
    return datetime.fromtimestamp(int(value), tz=timezone.utc)


def parse_xs_datetime(value: Optional[str], field_name: str) -> datetime:
    """Parse an xs:datetime field. Values without an offset are taken as UTC."""
    if not value:
        raise ValueError(f"{field_name} is not set")
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
