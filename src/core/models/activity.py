from datetime import datetime

from pydantic import BaseModel, Field

from core.models.envelope import INPUT_CONFIG, INT_COLUMN_MAX, INT_COLUMN_MIN, RECORD_CONFIG

# Optional descriptive columns shared by the input model, the record and the upsert.
ACTIVITY_DETAIL_FIELDS = (
    "trip_day_id",
    "order_index",
    "type",
    "description",
    "location_name",
    "address",
    "start_time_local",
    "end_time_local",
    "booking_reference",
    "booking_url",
    "notes",
)


class UpsertTripActivityInput(BaseModel):
    """Creates an activity when ``id`` is omitted, otherwise updates it in place."""

    model_config = INPUT_CONFIG

    id: str | None = None
    trip_id: str = Field(..., min_length=1)
    trip_day_id: str | None = None
    order_index: int | None = Field(default=None, ge=INT_COLUMN_MIN, le=INT_COLUMN_MAX)
    type: str | None = None
    title: str = Field(..., min_length=1)
    description: str | None = None
    location_name: str | None = None
    address: str | None = None
    start_time_local: str | None = None
    end_time_local: str | None = None
    booking_reference: str | None = None
    booking_url: str | None = None
    notes: str | None = None


class ActivityRecord(BaseModel):
    model_config = RECORD_CONFIG

    id: str
    trip_id: str
    trip_day_id: str | None = None
    order_index: int | None = None
    type: str | None = None
    title: str
    description: str | None = None
    location_name: str | None = None
    address: str | None = None
    start_time_local: str | None = None
    end_time_local: str | None = None
    booking_reference: str | None = None
    booking_url: str | None = None
    notes: str | None = None
    created_at: datetime


class ActivityData(BaseModel):
    model_config = RECORD_CONFIG

    activity: ActivityRecord
