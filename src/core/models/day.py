from datetime import datetime

from pydantic import BaseModel, Field

from core.models.envelope import INPUT_CONFIG, INT_COLUMN_MAX, RECORD_CONFIG


class UpsertTripDayInput(BaseModel):
    """Creates a day when ``id`` is omitted, otherwise updates it in place."""

    model_config = INPUT_CONFIG

    id: str | None = None
    trip_id: str = Field(..., min_length=1)
    day_number: int = Field(..., gt=0, le=INT_COLUMN_MAX)
    date: str | None = None
    summary: str | None = None


class DayRecord(BaseModel):
    model_config = RECORD_CONFIG

    id: str
    trip_id: str
    day_number: int
    date: datetime | None = None
    summary: str | None = None
    created_at: datetime


class DayData(BaseModel):
    model_config = RECORD_CONFIG

    day: DayRecord
