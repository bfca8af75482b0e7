"""
Business services for the Itinerary Builder.

- ownership.py: identity and trip → day ownership checks
- trips.py: trip create/update/delete/list/detail
- itinerary.py: day and activity upserts
- migration.py: Alembic upgrade runner
"""

__all__: list[str] = []
