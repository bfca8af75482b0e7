"""updateTrip action: partial update of an owned trip."""

from typing import Any

from core.http import run_operation
from core.models import UpdateTripInput
from core.services.trips import update_trip


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return run_operation(event, update_trip, UpdateTripInput)
