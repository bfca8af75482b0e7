#!/usr/bin/env python3
"""Create the itinerary tables for local development.

This script creates trips, trip_days and trip_activities against the local
PostgreSQL container (or DATABASE_URL, if set). Deployed environments use the
Alembic migration instead; both produce the same tables.

Usage:
    python scripts/create_local_tables.py
"""

import sys
from pathlib import Path

from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import get_config
from core.db import AuroraClient, Base


def main():
    """Create all itinerary tables."""
    config = get_config()
    print(f"Environment: {config.environment}")

    try:
        with AuroraClient(config) as client:
            existing = set(inspect(client.engine).get_table_names())
            Base.metadata.create_all(client.engine)

            for table in Base.metadata.sorted_tables:
                if table.name in existing:
                    print(f"✓ {table.name} table already exists")
                else:
                    print(f"✓ Created {table.name} table")
    except OperationalError as e:
        print(f"✗ Could not reach the database: {e}", file=sys.stderr)
        sys.exit(1)

    print("\n✓ All tables ready")


if __name__ == "__main__":
    main()
