"""Unit tests for trip operations against an in-memory store."""

from datetime import datetime, timezone

import pytest
from sqlalchemy import select, update

from core.db import Trip, TripActivity, TripDay
from core.errors import BadRequestError, NotFoundError, UnauthorizedError
from core.models import (
    CreateTripInput,
    ListMyTripsInput,
    TripIdInput,
    UpdateTripInput,
    UpsertTripActivityInput,
    UpsertTripDayInput,
)
from core.services.itinerary import upsert_trip_activity, upsert_trip_day
from core.services.trips import create_trip, delete_trip, get_trip_with_details, list_my_trips, update_trip


# --- create_trip ---


def test_create_trip(session, owner):
    result = create_trip(
        session,
        owner,
        CreateTripInput.model_validate(
            {"name": "Dubai Trip", "destination": "Dubai, UAE", "startDate": "2026-12-01", "primaryTimeZone": "Asia/Dubai"}
        ),
    )

    trip = result.data.trip
    assert result.success is True
    assert trip.user_id == "user_owner"
    assert trip.name == "Dubai Trip"
    assert trip.destination == "Dubai, UAE"
    assert trip.start_date.year == 2026 and trip.start_date.day == 1
    assert trip.end_date is None
    assert trip.created_at == trip.updated_at
    assert session.get(Trip, trip.id) is not None


def test_create_trip_generates_unique_ids(make_trip):
    assert make_trip().id != make_trip().id


def test_create_trip_requires_identity(session, anonymous):
    with pytest.raises(UnauthorizedError):
        create_trip(session, anonymous, CreateTripInput(name="Dubai Trip"))


def test_create_trip_rejects_bad_date(session, owner):
    with pytest.raises(BadRequestError, match="startDate"):
        create_trip(session, owner, CreateTripInput(name="Dubai Trip", start_date="someday"))

    assert session.scalars(select(Trip)).all() == []


# --- update_trip ---


def test_update_trip_applies_only_submitted_fields(session, owner, make_trip):
    trip = make_trip(destination="Dubai", notes="Bring adapters", start_date="2026-12-01")

    result = update_trip(session, owner, UpdateTripInput.model_validate({"id": trip.id, "name": "Dubai Winter Trip"}))

    updated = result.data.trip
    assert updated.name == "Dubai Winter Trip"
    assert updated.destination == "Dubai"
    assert updated.notes == "Bring adapters"
    assert updated.start_date is not None


def test_update_trip_clears_explicit_nulls(session, owner, make_trip):
    trip = make_trip(destination="Dubai", notes="Bring adapters", start_date="2026-12-01")

    result = update_trip(
        session, owner, UpdateTripInput.model_validate({"id": trip.id, "notes": None, "startDate": ""})
    )

    updated = result.data.trip
    assert updated.notes is None
    assert updated.start_date is None
    assert updated.destination == "Dubai"


def test_update_trip_bumps_updated_at(session, owner, make_trip):
    trip = make_trip()

    updated = update_trip(session, owner, UpdateTripInput(id=trip.id, destination="Abu Dhabi")).data.trip

    # SQLite hands timestamps back without tzinfo; compare wall-clock UTC.
    assert updated.updated_at.replace(tzinfo=None) >= trip.updated_at.replace(tzinfo=None)
    assert updated.destination == "Abu Dhabi"


def test_update_trip_without_fields_is_bad_request(session, owner, make_trip):
    trip = make_trip()
    with pytest.raises(BadRequestError, match="No updates provided."):
        update_trip(session, owner, UpdateTripInput(id=trip.id))


def test_update_trip_without_fields_fails_even_for_missing_trip(session, owner):
    with pytest.raises(BadRequestError, match="No updates provided."):
        update_trip(session, owner, UpdateTripInput(id="no-such-trip"))


def test_update_trip_not_owned(session, stranger, make_trip):
    trip = make_trip()
    with pytest.raises(NotFoundError):
        update_trip(session, stranger, UpdateTripInput(id=trip.id, name="Hijacked"))

    assert session.get(Trip, trip.id).name == "Dubai Trip"


def test_update_trip_bad_date(session, owner, make_trip):
    trip = make_trip()
    with pytest.raises(BadRequestError, match="endDate"):
        update_trip(session, owner, UpdateTripInput.model_validate({"id": trip.id, "endDate": "not-a-date"}))


# --- delete_trip ---


def test_delete_trip_cascades(session, owner, make_trip):
    trip = make_trip()
    day = upsert_trip_day(session, owner, UpsertTripDayInput(trip_id=trip.id, day_number=1)).data.day
    upsert_trip_activity(session, owner, UpsertTripActivityInput(trip_id=trip.id, trip_day_id=day.id, title="Flight DXB"))
    upsert_trip_activity(session, owner, UpsertTripActivityInput(trip_id=trip.id, title="Desert safari"))

    result = delete_trip(session, owner, TripIdInput(id=trip.id))

    assert result.data.id == trip.id
    assert session.scalars(select(Trip).where(Trip.id == trip.id)).all() == []
    assert session.scalars(select(TripDay).where(TripDay.trip_id == trip.id)).all() == []
    assert session.scalars(select(TripActivity).where(TripActivity.trip_id == trip.id)).all() == []


def test_delete_trip_leaves_other_trips(session, owner, make_trip):
    doomed = make_trip("Doomed")
    kept = make_trip("Kept")
    upsert_trip_day(session, owner, UpsertTripDayInput(trip_id=kept.id, day_number=1))

    delete_trip(session, owner, TripIdInput(id=doomed.id))

    assert session.get(Trip, kept.id) is not None
    assert len(session.scalars(select(TripDay).where(TripDay.trip_id == kept.id)).all()) == 1


def test_delete_trip_not_owned(session, stranger, make_trip):
    trip = make_trip()
    with pytest.raises(NotFoundError):
        delete_trip(session, stranger, TripIdInput(id=trip.id))

    assert session.get(Trip, trip.id) is not None


def test_delete_then_details_is_not_found(session, owner, make_trip):
    trip = make_trip()
    delete_trip(session, owner, TripIdInput(id=trip.id))

    with pytest.raises(NotFoundError):
        get_trip_with_details(session, owner, TripIdInput(id=trip.id))


# --- list_my_trips ---


def test_list_my_trips_second_page(session, owner, make_trip):
    make_trip("First")
    second = make_trip("Second")

    page = list_my_trips(session, owner, ListMyTripsInput(page=2, page_size=1)).data

    assert [trip.id for trip in page.items] == [second.id]
    assert page.total == 2
    assert page.page == 2
    assert page.page_size == 1


def test_list_my_trips_breaks_created_at_ties_by_id(session, owner, make_trip):
    trips = [make_trip("Dubai"), make_trip("Abu Dhabi"), make_trip("Sharjah")]
    session.execute(update(Trip).values(created_at=datetime(2026, 12, 1, tzinfo=timezone.utc)))
    session.commit()

    pages = [list_my_trips(session, owner, ListMyTripsInput(page=n, page_size=1)).data for n in (1, 2, 3)]

    assert [page.items[0].id for page in pages] == sorted(trip.id for trip in trips)


def test_list_my_trips_only_returns_own_trips(session, owner, stranger, make_trip):
    mine = make_trip("Mine")
    make_trip("Theirs", context=stranger)

    page = list_my_trips(session, owner, ListMyTripsInput()).data

    assert [trip.id for trip in page.items] == [mine.id]
    assert page.total == 1


def test_list_my_trips_empty(session, owner):
    page = list_my_trips(session, owner, ListMyTripsInput()).data
    assert page.items == []
    assert page.total == 0


def test_list_my_trips_page_past_end(session, owner, make_trip):
    make_trip()
    page = list_my_trips(session, owner, ListMyTripsInput(page=5, page_size=10)).data
    assert page.items == []
    assert page.total == 1


# --- get_trip_with_details ---


def test_get_trip_with_details_scopes_children(session, owner, make_trip):
    trip = make_trip()
    other = make_trip("Other")
    upsert_trip_day(session, owner, UpsertTripDayInput(trip_id=trip.id, day_number=2))
    upsert_trip_day(session, owner, UpsertTripDayInput(trip_id=trip.id, day_number=1))
    upsert_trip_day(session, owner, UpsertTripDayInput(trip_id=other.id, day_number=1))
    upsert_trip_activity(session, owner, UpsertTripActivityInput(trip_id=trip.id, title="Unscheduled"))
    upsert_trip_activity(session, owner, UpsertTripActivityInput(trip_id=other.id, title="Elsewhere"))

    details = get_trip_with_details(session, owner, TripIdInput(id=trip.id)).data

    assert details.trip.id == trip.id
    assert [day.day_number for day in details.days] == [1, 2]
    assert [activity.title for activity in details.activities] == ["Unscheduled"]


def test_get_trip_with_details_orders_activities(session, owner, make_trip):
    trip = make_trip()
    upsert_trip_activity(session, owner, UpsertTripActivityInput(trip_id=trip.id, title="Loose end"))
    upsert_trip_activity(session, owner, UpsertTripActivityInput(trip_id=trip.id, title="Dinner", order_index=2))
    upsert_trip_activity(session, owner, UpsertTripActivityInput(trip_id=trip.id, title="Breakfast", order_index=1))

    details = get_trip_with_details(session, owner, TripIdInput(id=trip.id)).data

    assert [activity.title for activity in details.activities] == ["Breakfast", "Dinner", "Loose end"]


def test_get_trip_with_details_not_owned(session, stranger, make_trip):
    trip = make_trip()
    with pytest.raises(NotFoundError):
        get_trip_with_details(session, stranger, TripIdInput(id=trip.id))
