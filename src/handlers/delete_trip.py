"""deleteTrip action: removes a trip with its days and activities."""

from typing import Any

from core.http import run_operation
from core.models import TripIdInput
from core.services.trips import delete_trip


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return run_operation(event, delete_trip, TripIdInput)
