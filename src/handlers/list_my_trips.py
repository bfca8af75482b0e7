"""listMyTrips action: one page of the caller's trips."""

from typing import Any

from core.http import run_operation
from core.models import ListMyTripsInput
from core.services.trips import list_my_trips


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return run_operation(event, list_my_trips, ListMyTripsInput)
