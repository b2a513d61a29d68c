from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^\d{2}:\d{2}$"
# time window fields may arrive as "" from the booking form
OPTIONAL_TIME_PATTERN = r"^(\d{2}:\d{2})?$"


class ReservationStatus(str, Enum):
    ACTIVE = "active"
    CANCELLED = "cancelled"


class ReservationCreate(BaseModel):
    """
    Incoming reservation as sent by the booking form.

    Start and end time are only meaningful together with has_time_limit;
    the store drops them otherwise.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True)

    table_id: int
    customer_name: str = Field(min_length=1)
    customer_phone: str = Field(min_length=1)
    guests: int = Field(gt=0)
    date: str = Field(pattern=DATE_PATTERN)
    time: str = Field(pattern=TIME_PATTERN)
    duration: Optional[int] = Field(default=None, gt=0)
    comment: Optional[str] = None
    status: Optional[ReservationStatus] = None
    has_time_limit: Optional[bool] = None
    start_time: Optional[str] = Field(default=None, pattern=OPTIONAL_TIME_PATTERN)
    end_time: Optional[str] = Field(default=None, pattern=OPTIONAL_TIME_PATTERN)


class ReservationUpdate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True)

    table_id: Optional[int] = None
    customer_name: Optional[str] = Field(default=None, min_length=1)
    customer_phone: Optional[str] = Field(default=None, min_length=1)
    guests: Optional[int] = Field(default=None, gt=0)
    date: Optional[str] = Field(default=None, pattern=DATE_PATTERN)
    time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    duration: Optional[int] = Field(default=None, gt=0)
    comment: Optional[str] = None
    status: Optional[ReservationStatus] = None
    has_time_limit: Optional[bool] = None
    start_time: Optional[str] = Field(default=None, pattern=OPTIONAL_TIME_PATTERN)
    end_time: Optional[str] = Field(default=None, pattern=OPTIONAL_TIME_PATTERN)


class Reservation(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    table_id: int
    customer_name: str
    customer_phone: str
    guests: int
    date: str
    time: str
    duration: int
    comment: Optional[str] = None
    status: ReservationStatus
    has_time_limit: bool
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    created_at: datetime


class ReservationResponse(BaseModel):
    success: bool
    reservation: Reservation
