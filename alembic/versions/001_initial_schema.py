"""Initial schema: role, user, destination, attraction, hotel, restaurant, trip

Revision ID: 001
Revises:
Create Date: 2025-06-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def _place_columns() -> list[sa.Column]:
    """Columns shared by attraction, hotel and restaurant."""
    return [
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            'destination_id',
            sa.Integer(),
            sa.ForeignKey('destination.id', ondelete='CASCADE'),
            nullable=True,
        ),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('slug', sa.Text(), nullable=False, unique=True),
        sa.Column('short_description', sa.Text(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
    ]


def upgrade() -> None:
    """Create all tables with indexes and constraints."""

    op.create_table(
        'role',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('type', sa.Text(), nullable=False, unique=True),
        sa.Column('description', sa.Text(), nullable=True),
    )

    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('username', sa.Text(), nullable=False, unique=True),
        sa.Column('email', sa.Text(), nullable=False, unique=True),
        sa.Column('password_hash', sa.Text(), nullable=False),
        sa.Column(
            'role_id',
            sa.Integer(),
            sa.ForeignKey('role.id', ondelete='SET NULL'),
            nullable=True,
        ),
        *_timestamps(),
    )

    op.create_table(
        'destination',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('slug', sa.Text(), nullable=False, unique=True),
        sa.Column('country', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('average_daily_budget', sa.Integer(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        'attraction',
        *_place_columns(),
        sa.Column('category', sa.Text(), nullable=False),
        sa.Column('approximate_cost', sa.Integer(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_attraction_destination_id', 'attraction', ['destination_id'])

    op.create_table(
        'hotel',
        *_place_columns(),
        sa.Column('stars', sa.Integer(), nullable=True),
        sa.Column('price_per_night', sa.Integer(), nullable=False),
        sa.Column('is_budget_friendly', sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_hotel_destination_id', 'hotel', ['destination_id'])

    op.create_table(
        'restaurant',
        *_place_columns(),
        sa.Column('cuisine', sa.Text(), nullable=True),
        sa.Column('price_level', sa.Text(), nullable=False),
        sa.Column('average_price_per_person', sa.Integer(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_restaurant_destination_id', 'restaurant', ['destination_id'])

    # Trips are owned by exactly one user and listed newest first
    op.create_table(
        'trip',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column(
            'destination_id',
            sa.Integer(),
            sa.ForeignKey('destination.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column(
            'owner_id',
            sa.Integer(),
            sa.ForeignKey('user.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('duration_days', sa.Integer(), nullable=True),
        sa.Column('total_budget', sa.Float(), nullable=True),
        sa.Column('interests', sa.JSON(), nullable=True),
        sa.Column('itinerary', sa.JSON(), nullable=True),
        sa.Column('budget_breakdown', sa.JSON(), nullable=True),
        *_timestamps(),
    )
    op.create_index('idx_trip_owner_created', 'trip', ['owner_id', 'created_at'])


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_index('idx_trip_owner_created', table_name='trip')
    op.drop_table('trip')
    op.drop_index('ix_restaurant_destination_id', table_name='restaurant')
    op.drop_table('restaurant')
    op.drop_index('ix_hotel_destination_id', table_name='hotel')
    op.drop_table('hotel')
    op.drop_index('ix_attraction_destination_id', table_name='attraction')
    op.drop_table('attraction')
    op.drop_table('destination')
    op.drop_table('user')
    op.drop_table('role')
