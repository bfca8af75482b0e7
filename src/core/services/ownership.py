"""Ownership guard: binds every write to the caller's own trips.

A trip that exists but belongs to someone else is reported exactly like a
trip that does not exist, so identifiers cannot be guessed from the response.
"""

import logging

from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from core.auth.interface import AuthUser, RequestContext
from core.db.schemas.trip import Trip
from core.db.schemas.trip_day import TripDay
from core.errors import NotFoundError, UnauthorizedError

logger = logging.getLogger(__name__)


def require_identity(context: RequestContext) -> AuthUser:
    if context.user is None or not context.user.user_id:
        raise UnauthorizedError("You must be signed in to perform this action.")
    return context.user


def assert_trip_ownership(session: Session, trip_id: str, user_id: str) -> Trip:
    trip = session.scalars(select(Trip).where(and_(Trip.id == trip_id, Trip.user_id == user_id))).first()
    if trip is None:
        logger.warning("Trip %s not found for user %s", trip_id, user_id)
        raise NotFoundError("Trip not found.")
    return trip


def assert_day_belongs_to_trip(session: Session, trip_day_id: str, trip_id: str) -> TripDay:
    day = session.scalars(select(TripDay).where(and_(TripDay.id == trip_day_id, TripDay.trip_id == trip_id))).first()
    if day is None:
        logger.warning("Trip day %s not found in trip %s", trip_day_id, trip_id)
        raise NotFoundError("Trip day not found for this trip.")
    return day
