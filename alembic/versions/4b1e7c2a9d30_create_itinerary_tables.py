"""create_itinerary_tables

Revision ID: 4b1e7c2a9d30
Revises: 
Create Date: 2026-10-18 09:12:44.105233

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1e7c2a9d30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'trips',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('destination', sa.Text()),
        sa.Column('start_date', sa.DateTime(timezone=True)),
        sa.Column('end_date', sa.DateTime(timezone=True)),
        sa.Column('primary_time_zone', sa.Text()),
        sa.Column('notes', sa.Text()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_trips'),
    )
    op.create_index('idx_trips_user_id', 'trips', ['user_id'])

    op.create_table(
        'trip_days',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('trip_id', sa.String(length=36), sa.ForeignKey('trips.id', name='fk_trip_days_trip_id_trips'), nullable=False),
        sa.Column('day_number', sa.Integer(), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True)),
        sa.Column('summary', sa.Text()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint('day_number > 0', name='chk_trip_days_day_number'),
        sa.PrimaryKeyConstraint('id', name='pk_trip_days'),
    )
    op.create_index('idx_trip_days_trip_id', 'trip_days', ['trip_id'])

    # No ON DELETE CASCADE: trip deletion removes children explicitly.
    op.create_table(
        'trip_activities',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('trip_id', sa.String(length=36), sa.ForeignKey('trips.id', name='fk_trip_activities_trip_id_trips'), nullable=False),
        sa.Column('trip_day_id', sa.String(length=36), sa.ForeignKey('trip_days.id', name='fk_trip_activities_trip_day_id_trip_days')),
        sa.Column('order_index', sa.Integer()),
        sa.Column('type', sa.Text()),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('location_name', sa.Text()),
        sa.Column('address', sa.Text()),
        sa.Column('start_time_local', sa.Text()),
        sa.Column('end_time_local', sa.Text()),
        sa.Column('booking_reference', sa.Text()),
        sa.Column('booking_url', sa.Text()),
        sa.Column('notes', sa.Text()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id', name='pk_trip_activities'),
    )
    op.create_index('idx_trip_activities_trip_id', 'trip_activities', ['trip_id'])
    op.create_index('idx_trip_activities_trip_day_id', 'trip_activities', ['trip_day_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_trip_activities_trip_day_id', table_name='trip_activities')
    op.drop_index('idx_trip_activities_trip_id', table_name='trip_activities')
    op.drop_table('trip_activities')

    op.drop_index('idx_trip_days_trip_id', table_name='trip_days')
    op.drop_table('trip_days')

    op.drop_index('idx_trips_user_id', table_name='trips')
    op.drop_table('trips')
