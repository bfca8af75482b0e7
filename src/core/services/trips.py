"""Trip operations: create, partial update, cascading delete, paging and detail."""

import logging
from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import and_, delete, select, update
from sqlalchemy.orm import Session

from core.auth.interface import RequestContext
from core.db.schemas.trip import Trip
from core.db.schemas.trip_activity import TripActivity
from core.db.schemas.trip_day import TripDay
from core.errors import BadRequestError, NotFoundError
from core.models import (
    ActionResult,
    ActivityRecord,
    CreateTripInput,
    DayRecord,
    DeletedTrip,
    ListMyTripsInput,
    TripData,
    TripDetails,
    TripIdInput,
    TripPage,
    TripRecord,
    UpdateTripInput,
)
from core.services.ownership import assert_trip_ownership, require_identity
from core.validation import optional_change, parse_optional_date, raw_field

logger = logging.getLogger(__name__)

_TEXT_FIELDS = ("name", "destination", "primary_time_zone", "notes")
_DATE_FIELDS = {"start_date": "startDate", "end_date": "endDate"}


def _now() -> datetime:
    return datetime.now(timezone.utc)


def create_trip(session: Session, context: RequestContext, data: CreateTripInput) -> ActionResult[TripData]:
    user = require_identity(context)
    now = _now()

    start_date = parse_optional_date(data.start_date, "startDate")
    end_date = parse_optional_date(data.end_date, "endDate")

    trip = Trip(
        id=str(uuid4()),
        user_id=user.user_id,
        name=data.name,
        destination=data.destination,
        start_date=start_date.or_none(),
        end_date=end_date.or_none(),
        primary_time_zone=data.primary_time_zone,
        notes=data.notes,
        created_at=now,
        updated_at=now,
    )
    session.add(trip)
    session.commit()

    logger.info("Created trip %s for user %s", trip.id, user.user_id)
    return ActionResult[TripData](data=TripData(trip=TripRecord.model_validate(trip)))


def update_trip(session: Session, context: RequestContext, data: UpdateTripInput) -> ActionResult[TripData]:
    user = require_identity(context)

    updates: dict[str, object] = {}
    for column in _TEXT_FIELDS:
        optional_change(data, column).apply(updates, column)
    for column, label in _DATE_FIELDS.items():
        parse_optional_date(raw_field(data, column), label).apply(updates, column)

    # Checked before the lookup so a no-op fails the same way for any id.
    if not updates:
        raise BadRequestError("No updates provided.")

    assert_trip_ownership(session, data.id, user.user_id)

    updates["updated_at"] = _now()
    owned = and_(Trip.id == data.id, Trip.user_id == user.user_id)
    session.execute(update(Trip).where(owned).values(**updates))
    session.commit()

    trip = session.scalars(select(Trip).where(owned).execution_options(populate_existing=True)).first()
    if trip is None:
        raise NotFoundError("Trip not found.")

    logger.info("Updated trip %s fields %s", data.id, sorted(updates))
    return ActionResult[TripData](data=TripData(trip=TripRecord.model_validate(trip)))


def delete_trip(session: Session, context: RequestContext, data: TripIdInput) -> ActionResult[DeletedTrip]:
    user = require_identity(context)
    assert_trip_ownership(session, data.id, user.user_id)

    # Activities reference days, days reference the trip: delete leaves first.
    # The three statements share one transaction.
    session.execute(delete(TripActivity).where(TripActivity.trip_id == data.id))
    session.execute(delete(TripDay).where(TripDay.trip_id == data.id))
    session.execute(delete(Trip).where(and_(Trip.id == data.id, Trip.user_id == user.user_id)))
    session.commit()

    logger.info("Deleted trip %s for user %s", data.id, user.user_id)
    return ActionResult[DeletedTrip](data=DeletedTrip(id=data.id))


def list_my_trips(session: Session, context: RequestContext, data: ListMyTripsInput) -> ActionResult[TripPage]:
    user = require_identity(context)

    all_trips = session.scalars(
        select(Trip).where(Trip.user_id == user.user_id).order_by(Trip.created_at, Trip.id)
    ).all()

    offset = (data.page - 1) * data.page_size
    items = all_trips[offset : offset + data.page_size]

    return ActionResult[TripPage](
        data=TripPage(
            items=[TripRecord.model_validate(trip) for trip in items],
            total=len(all_trips),
            page=data.page,
            page_size=data.page_size,
        )
    )


def get_trip_with_details(session: Session, context: RequestContext, data: TripIdInput) -> ActionResult[TripDetails]:
    user = require_identity(context)
    trip = assert_trip_ownership(session, data.id, user.user_id)

    days = session.scalars(
        select(TripDay).where(TripDay.trip_id == data.id).order_by(TripDay.day_number, TripDay.created_at)
    ).all()
    activities = session.scalars(
        select(TripActivity)
        .where(TripActivity.trip_id == data.id)
        .order_by(TripActivity.order_index.is_(None), TripActivity.order_index, TripActivity.created_at)
    ).all()

    return ActionResult[TripDetails](
        data=TripDetails(
            trip=TripRecord.model_validate(trip),
            days=[DayRecord.model_validate(day) for day in days],
            activities=[ActivityRecord.model_validate(activity) for activity in activities],
        )
    )
