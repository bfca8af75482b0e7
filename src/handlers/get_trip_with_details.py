"""getTripWithDetails action: trip plus all of its days and activities."""

from typing import Any

from core.http import run_operation
from core.models import TripIdInput
from core.services.trips import get_trip_with_details


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return run_operation(event, get_trip_with_details, TripIdInput)
