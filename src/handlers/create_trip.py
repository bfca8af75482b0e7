"""createTrip action: new trip owned by the caller."""

from typing import Any

from core.http import run_operation
from core.models import CreateTripInput
from core.services.trips import create_trip


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return run_operation(event, create_trip, CreateTripInput)
