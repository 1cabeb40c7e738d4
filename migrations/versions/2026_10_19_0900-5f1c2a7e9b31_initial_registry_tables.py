"""Initial migration - guests, rsvps and gifts

Revision ID: 5f1c2a7e9b31
Revises:
Create Date: 2026-10-19 09:00:00

"""
from typing import Union

from alembic import op
import sqlalchemy as sa
import sqlalchemy_utils

# revision identifiers, used by Alembic.
revision: str = '5f1c2a7e9b31'
down_revision: Union[str, None] = None
branch_labels: Union[str, None] = None
depends_on: Union[str, None] = None


def timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.current_timestamp(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.current_timestamp(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'guests',
        sa.Column('uuid', sqlalchemy_utils.UUIDType(binary=False), primary_key=True),
        *timestamps(),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(50), nullable=False),
    )
    op.create_index('ix_guests_full_name', 'guests', ['full_name'])
    op.create_index('ix_guests_phone', 'guests', ['phone'], unique=True)

    op.create_table(
        'rsvps',
        sa.Column('uuid', sqlalchemy_utils.UUIDType(binary=False), primary_key=True),
        sa.Column('guest_id', sqlalchemy_utils.UUIDType(binary=False), sa.ForeignKey('guests.uuid', ondelete='CASCADE'), nullable=False),
        sa.Column('event', sa.String(50), nullable=False),
        sa.Column('attending', sa.Boolean, nullable=False),
        sa.Column('guest_count', sa.Integer, nullable=False),
        sa.Column('message', sa.Text, nullable=True),
        sa.Column('confirmed_at', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('guest_id', 'event', name='uq_rsvps_guest_id_event'),
    )
    op.create_index('ix_rsvps_guest_id', 'rsvps', ['guest_id'])
    op.create_index('ix_rsvps_event', 'rsvps', ['event'])

    op.create_table(
        'gifts',
        sa.Column('uuid', sqlalchemy_utils.UUIDType(binary=False), primary_key=True),
        *timestamps(),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column('external_link', sa.String(500), nullable=True),
        sa.Column('position', sa.Integer, nullable=False, server_default='0'),
        sa.Column('price', sa.Numeric(10, 2), nullable=True),
        sa.Column('event', sa.String(50), nullable=False),
        sa.Column('status', sa.Enum('available', 'reserved', 'purchased', name='gift_status_enum'), nullable=False, server_default='available'),
        sa.Column('reserved_by', sa.String(255), nullable=True),
        sa.Column('reserved_by_phone', sa.String(50), nullable=True),
        sa.Column('reservation_code', sa.String(6), nullable=True),
        sa.Column('reserved_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('purchased_at', sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint('price >= 0', name='ck_gifts_price_non_negative'),
    )
    op.create_index('ix_gifts_event', 'gifts', ['event'])


def downgrade() -> None:
    op.drop_index('ix_gifts_event', table_name='gifts')
    op.drop_table('gifts')
    op.drop_index('ix_rsvps_event', table_name='rsvps')
    op.drop_index('ix_rsvps_guest_id', table_name='rsvps')
    op.drop_table('rsvps')
    op.drop_index('ix_guests_phone', table_name='guests')
    op.drop_index('ix_guests_full_name', table_name='guests')
    op.drop_table('guests')
    sa.Enum(name='gift_status_enum').drop(op.get_bind(), checkfirst=True)
