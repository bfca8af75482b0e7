"""upsertTripActivity action: create or update an activity."""

from typing import Any

from core.http import run_operation
from core.models import UpsertTripActivityInput
from core.services.itinerary import upsert_trip_activity


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return run_operation(event, upsert_trip_activity, UpsertTripActivityInput)
