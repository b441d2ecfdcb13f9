"""Pydantic schemas for guest check-in, dashboard and reports."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# Head counts are parsed leniently by parse_count
Count = Optional[Any]


class CheckInRequest(BaseModel):
    name: Optional[str] = None
    contact: Optional[str] = None
    email: Optional[str] = None
    id_type: Optional[str] = None
    id_number: Optional[str] = None
    nationality: Optional[str] = None
    adults: Count = None
    children: Count = None
    expected_checkout: Optional[str] = None
    room_number: Optional[str] = None
    notes: Optional[str] = None

    model_config = _camel


class GuestRead(BaseModel):
    id: str
    name: str
    contact: str
    email: str
    id_type: str
    id_number: str
    nationality: str
    adults: int
    children: int
    checkin_time: datetime
    expected_checkout: str
    room_number: str
    notes: str
    status: str
    checked_in_by: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class DashboardSummary(BaseModel):
    current_in_house_guests: int
    total_guests_in_house: int
    occupied_rooms: int
    available_rooms: int
    total_rooms: int
    todays_checkins: int

    model_config = _camel


class Report(BaseModel):
    period: str
    filename: str
    content: str
    row_count: int
