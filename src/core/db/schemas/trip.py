"""SQLAlchemy ORM model for the trips table."""

from datetime import datetime

from sqlalchemy import DateTime, Index, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from core.db.schemas.base import Base


class Trip(Base):
    __tablename__ = "trips"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    destination: Mapped[str | None] = mapped_column(Text)
    start_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    end_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    primary_time_zone: Mapped[str | None] = mapped_column(Text)
    notes: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # No ORM cascade: deletion of days and activities is issued explicitly.
    days: Mapped[list["TripDay"]] = relationship(back_populates="trip", passive_deletes=True)
    activities: Mapped[list["TripActivity"]] = relationship(back_populates="trip", passive_deletes=True)

    __table_args__ = (Index("idx_trips_user_id", "user_id"),)


# Avoid circular import: TripDay and TripActivity are resolved by string reference above
from core.db.schemas.trip_activity import TripActivity  # noqa: E402, F401
from core.db.schemas.trip_day import TripDay  # noqa: E402, F401
