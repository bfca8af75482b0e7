"""Day and activity upserts.

Both operations create a row when no ``id`` is given and otherwise update the
row matching ``id`` within the owned trip. Fields left out of an update
payload keep their stored value; fields sent as null are cleared.
"""

import logging
from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import and_, select, update
from sqlalchemy.orm import Session

from core.auth.interface import RequestContext
from core.db.schemas.trip_activity import TripActivity
from core.db.schemas.trip_day import TripDay
from core.errors import NotFoundError
from core.models import (
    ActionResult,
    ActivityData,
    ActivityRecord,
    DayData,
    DayRecord,
    UpsertTripActivityInput,
    UpsertTripDayInput,
)
from core.models.activity import ACTIVITY_DETAIL_FIELDS
from core.services.ownership import assert_day_belongs_to_trip, assert_trip_ownership, require_identity
from core.validation import CLEAR, optional_change, parse_optional_date, raw_field

logger = logging.getLogger(__name__)


def upsert_trip_day(session: Session, context: RequestContext, data: UpsertTripDayInput) -> ActionResult[DayData]:
    user = require_identity(context)
    assert_trip_ownership(session, data.trip_id, user.user_id)

    date = parse_optional_date(raw_field(data, "date"), "date")

    if data.id:
        updates: dict[str, object] = {"day_number": data.day_number}
        date.apply(updates, "date")
        optional_change(data, "summary").apply(updates, "summary")

        target = and_(TripDay.id == data.id, TripDay.trip_id == data.trip_id)
        session.execute(update(TripDay).where(target).values(**updates))
        session.commit()

        day = session.scalars(select(TripDay).where(target).execution_options(populate_existing=True)).first()
        if day is None:
            raise NotFoundError("Trip day not found.")

        logger.info("Updated day %s in trip %s", day.id, data.trip_id)
        return ActionResult[DayData](data=DayData(day=DayRecord.model_validate(day)))

    day = TripDay(
        id=str(uuid4()),
        trip_id=data.trip_id,
        day_number=data.day_number,
        date=date.or_none(),
        summary=data.summary,
        created_at=datetime.now(timezone.utc),
    )
    session.add(day)
    session.commit()

    logger.info("Created day %s (#%d) in trip %s", day.id, day.day_number, data.trip_id)
    return ActionResult[DayData](data=DayData(day=DayRecord.model_validate(day)))


def upsert_trip_activity(
    session: Session, context: RequestContext, data: UpsertTripActivityInput
) -> ActionResult[ActivityData]:
    user = require_identity(context)
    assert_trip_ownership(session, data.trip_id, user.user_id)

    if data.trip_day_id:
        assert_day_belongs_to_trip(session, data.trip_day_id, data.trip_id)

    if data.id:
        updates: dict[str, object] = {"title": data.title}
        for column in ACTIVITY_DETAIL_FIELDS:
            change = optional_change(data, column)
            # An empty day id detaches the activity from its day.
            if column == "trip_day_id" and data.trip_day_id == "":
                change = CLEAR
            change.apply(updates, column)

        target = and_(TripActivity.id == data.id, TripActivity.trip_id == data.trip_id)
        session.execute(update(TripActivity).where(target).values(**updates))
        session.commit()

        activity = session.scalars(
            select(TripActivity).where(target).execution_options(populate_existing=True)
        ).first()
        if activity is None:
            raise NotFoundError("Activity not found.")

        logger.info("Updated activity %s in trip %s", activity.id, data.trip_id)
        return ActionResult[ActivityData](data=ActivityData(activity=ActivityRecord.model_validate(activity)))

    values = {column: getattr(data, column) for column in ACTIVITY_DETAIL_FIELDS}
    values["trip_day_id"] = data.trip_day_id or None

    activity = TripActivity(
        id=str(uuid4()),
        trip_id=data.trip_id,
        title=data.title,
        created_at=datetime.now(timezone.utc),
        **values,
    )
    session.add(activity)
    session.commit()

    logger.info("Created activity %s in trip %s", activity.id, data.trip_id)
    return ActionResult[ActivityData](data=ActivityData(activity=ActivityRecord.model_validate(activity)))
