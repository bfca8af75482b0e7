"""
Pydantic models for the Itinerary Builder.
"""

from core.models.activity import ActivityData, ActivityRecord, UpsertTripActivityInput
from core.models.day import DayData, DayRecord, UpsertTripDayInput
from core.models.envelope import ActionResult
from core.models.trip import (
    CreateTripInput,
    DeletedTrip,
    ListMyTripsInput,
    TripData,
    TripDetails,
    TripIdInput,
    TripPage,
    TripRecord,
    UpdateTripInput,
)

__all__ = [
    "ActionResult",
    "ActivityData",
    "ActivityRecord",
    "CreateTripInput",
    "DayData",
    "DayRecord",
    "DeletedTrip",
    "ListMyTripsInput",
    "TripData",
    "TripDetails",
    "TripIdInput",
    "TripPage",
    "TripRecord",
    "UpdateTripInput",
    "UpsertTripActivityInput",
    "UpsertTripDayInput",
]
