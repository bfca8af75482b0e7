"""
Database ORM models and clients for the Itinerary Builder.

Importing this package registers all models on Base.metadata,
which Alembic needs for autogenerate.
"""

from core.db.aurora import AuroraClient
from core.db.schemas.base import Base
from core.db.schemas.trip import Trip
from core.db.schemas.trip_activity import TripActivity
from core.db.schemas.trip_day import TripDay

__all__ = ["AuroraClient", "Base", "Trip", "TripActivity", "TripDay"]
