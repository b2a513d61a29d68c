from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TableStatus(str, Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"
    OCCUPIED = "occupied"


class TableShape(str, Enum):
    ROUND = "round"
    RECTANGULAR = "rectangular"


class TableCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True)

    number: int
    name: Optional[str] = None
    capacity: int = Field(gt=0)
    x: float
    y: float
    width: float
    height: float
    status: Optional[TableStatus] = None
    shape: Optional[TableShape] = None
    hall_id: Optional[str] = None


class TableUpdate(BaseModel):
    """Partial table update, only the fields that were sent are applied."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True)

    number: Optional[int] = None
    name: Optional[str] = None
    capacity: Optional[int] = Field(default=None, gt=0)
    x: Optional[float] = None
    y: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    status: Optional[TableStatus] = None
    shape: Optional[TableShape] = None
    hall_id: Optional[str] = None


class TableStatusUpdate(BaseModel):
    status: TableStatus


class Table(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    number: int
    name: Optional[str] = None
    capacity: int
    x: float
    y: float
    width: float
    height: float
    status: TableStatus
    shape: TableShape
    hall_id: str


class TableResponse(BaseModel):
    success: bool
    table: Table
