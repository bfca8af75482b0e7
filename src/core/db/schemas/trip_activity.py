"""SQLAlchemy ORM model for the trip_activities table."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from core.db.schemas.base import Base

if TYPE_CHECKING:
    from core.db.schemas.trip import Trip


class TripActivity(Base):
    __tablename__ = "trip_activities"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    trip_id: Mapped[str] = mapped_column(String(36), ForeignKey("trips.id"), nullable=False)
    trip_day_id: Mapped[str | None] = mapped_column(String(36), ForeignKey("trip_days.id"))
    order_index: Mapped[int | None] = mapped_column(Integer)
    type: Mapped[str | None] = mapped_column(Text)  # flight, hotel, visit, transport, meal
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    location_name: Mapped[str | None] = mapped_column(Text)
    address: Mapped[str | None] = mapped_column(Text)
    start_time_local: Mapped[str | None] = mapped_column(Text)
    end_time_local: Mapped[str | None] = mapped_column(Text)
    booking_reference: Mapped[str | None] = mapped_column(Text)
    booking_url: Mapped[str | None] = mapped_column(Text)
    notes: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())

    trip: Mapped["Trip"] = relationship(back_populates="activities")

    __table_args__ = (
        Index("idx_trip_activities_trip_id", "trip_id"),
        Index("idx_trip_activities_trip_day_id", "trip_day_id"),
    )
