from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from core.models.activity import ActivityRecord
from core.models.day import DayRecord
from core.models.envelope import INPUT_CONFIG, RECORD_CONFIG

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class CreateTripInput(BaseModel):
    model_config = INPUT_CONFIG

    name: str = Field(..., min_length=1)
    destination: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    primary_time_zone: str | None = None
    notes: str | None = None


class UpdateTripInput(BaseModel):
    """Partial update. Only fields present in the payload are applied."""

    model_config = INPUT_CONFIG

    id: str = Field(..., min_length=1)
    name: str | None = Field(default=None, min_length=1)
    destination: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    primary_time_zone: str | None = None
    notes: str | None = None

    @field_validator("name")
    @classmethod
    def name_not_cleared(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("name cannot be cleared")
        return value


class TripIdInput(BaseModel):
    model_config = INPUT_CONFIG

    id: str = Field(..., min_length=1)


class ListMyTripsInput(BaseModel):
    model_config = INPUT_CONFIG

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)


class TripRecord(BaseModel):
    model_config = RECORD_CONFIG

    id: str
    user_id: str
    name: str
    destination: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    primary_time_zone: str | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class TripData(BaseModel):
    model_config = RECORD_CONFIG

    trip: TripRecord


class DeletedTrip(BaseModel):
    model_config = RECORD_CONFIG

    id: str


class TripPage(BaseModel):
    model_config = RECORD_CONFIG

    items: list[TripRecord]
    total: int
    page: int
    page_size: int


class TripDetails(BaseModel):
    model_config = RECORD_CONFIG

    trip: TripRecord
    days: list[DayRecord]
    activities: list[ActivityRecord]
