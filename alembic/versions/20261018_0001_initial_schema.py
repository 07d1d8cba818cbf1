"""
Initial schema: users, rooms, bookings

Revision ID: 20261018_0001
Revises: 
Create Date: 2026-10-18
"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect

# revision identifiers, used by Alembic.
revision = '20261018_0001'
down_revision = None
branch_labels = None
depends_on = None


def _has_table(bind, name: str) -> bool:
    try:
        insp = inspect(bind)
        return insp.has_table(name)
    except Exception:
        return False


def upgrade() -> None:
    bind = op.get_bind()

    # users
    if not _has_table(bind, 'users'):
        op.create_table(
            'users',
            sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
            sa.Column('email', sa.String(length=255), nullable=False, unique=True),
            sa.Column('hashed_password', sa.String(length=255), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=True, server_default=sa.text("CURRENT_TIMESTAMP")),
        )
        op.create_index('ix_users_id', 'users', ['id'])
        op.create_index('ix_users_email', 'users', ['email'])

    # rooms
    if not _has_table(bind, 'rooms'):
        op.create_table(
            'rooms',
            sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
            sa.Column('hotel_name', sa.String(length=200), nullable=False),
            sa.Column('location', sa.String(length=200), nullable=False),
            sa.Column('name', sa.String(length=200), nullable=False),
            sa.Column('price', sa.Integer(), nullable=False),
            sa.Column('available', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('image', sa.String(length=500), nullable=False, server_default=''),
            sa.Column('amenities', sa.Text(), nullable=False, server_default='[]'),
            sa.CheckConstraint('available >= 0', name='ck_rooms_available_nonnegative'),
        )
        op.create_index('ix_rooms_location', 'rooms', ['location'])

    # bookings
    if not _has_table(bind, 'bookings'):
        op.create_table(
            'bookings',
            sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('room_id', sa.Integer(), nullable=False),
            sa.Column('check_in', sa.String(length=64), nullable=False),
            sa.Column('check_out', sa.String(length=64), nullable=False),
            sa.Column('booking_date', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
            sa.Column('room_count', sa.Integer(), nullable=False),
            sa.Column('total', sa.Integer(), nullable=False),
            sa.ForeignKeyConstraint(['user_id'], ['users.id']),
            sa.ForeignKeyConstraint(['room_id'], ['rooms.id']),
        )
        op.create_index('ix_bookings_id', 'bookings', ['id'])
        op.create_index('ix_bookings_user_id', 'bookings', ['user_id'])
        op.create_index('ix_bookings_room_id', 'bookings', ['room_id'])
        op.create_index('ix_bookings_user_date', 'bookings', ['user_id', 'booking_date'])


def downgrade() -> None:
    op.drop_table('bookings')
    op.drop_table('rooms')
    op.drop_table('users')
