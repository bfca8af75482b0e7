"""upsertTripDay action: create or update a numbered day."""

from typing import Any

from core.http import run_operation
from core.models import UpsertTripDayInput
from core.services.itinerary import upsert_trip_day


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return run_operation(event, upsert_trip_day, UpsertTripDayInput)
