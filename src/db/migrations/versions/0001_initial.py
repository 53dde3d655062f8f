"""create events, sessions, photos and archives tables

Revision ID: 0001_initial
Revises:
Create Date: 2025-11-02 10:12:41.208331

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None

event_status = postgresql.ENUM('active', 'inactive', 'closed', name='eventstatus', create_type=False)
archive_status = postgresql.ENUM('pending', 'processing', 'ready', 'failed', name='archivestatus', create_type=False)


def upgrade() -> None:
    event_status.create(op.get_bind(), checkfirst=True)
    archive_status.create(op.get_bind(), checkfirst=True)

    op.create_table(
        'events',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('code', sa.String(length=8), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('event_date', sa.Date(), nullable=True),
        sa.Column('status', event_status, nullable=False, server_default='active'),
        sa.Column('owner_email', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_events_id', 'events', ['id'])
    op.create_index('ix_events_code', 'events', ['code'], unique=True)
    op.create_index('ix_events_status', 'events', ['status'])
    op.create_index('ix_events_owner_email', 'events', ['owner_email'])
    op.create_index('ix_events_deleted_at', 'events', ['deleted_at'])

    op.create_table(
        'sessions',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('event_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('events.id', ondelete='CASCADE'), nullable=False),
        sa.Column('guest_name', sa.String(length=255), nullable=False),
        sa.Column('session_token', sa.String(length=128), nullable=False),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_sessions_id', 'sessions', ['id'])
    op.create_index('ix_sessions_event_id', 'sessions', ['event_id'])
    op.create_index('ix_sessions_guest_name', 'sessions', ['guest_name'])
    op.create_index('ix_sessions_session_token', 'sessions', ['session_token'], unique=True)
    op.create_index('ix_sessions_expires_at', 'sessions', ['expires_at'])

    op.create_table(
        'photos',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('event_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('events.id', ondelete='CASCADE'), nullable=False),
        sa.Column('uploader_name', sa.String(length=100), nullable=False),
        sa.Column('object_key', sa.String(length=255), nullable=False),
        sa.Column('size', sa.BigInteger(), nullable=False, server_default='0'),
        sa.Column('mime_type', sa.String(length=50), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_photos_id', 'photos', ['id'])
    op.create_index('ix_photos_event_id', 'photos', ['event_id'])
    op.create_index('ix_photos_uploader_name', 'photos', ['uploader_name'])
    op.create_index('ix_photos_object_key', 'photos', ['object_key'])
    op.create_index('ix_photos_deleted_at', 'photos', ['deleted_at'])

    op.create_table(
        'archives',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('event_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('events.id', ondelete='CASCADE'), nullable=False),
        sa.Column('object_key', sa.String(length=255), nullable=False, unique=True),
        sa.Column('status', archive_status, nullable=False, server_default='pending'),
        sa.Column('photo_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('size', sa.BigInteger(), nullable=True),
        sa.Column('error', sa.Text(), nullable=True),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_archives_id', 'archives', ['id'])
    op.create_index('ix_archives_event_id', 'archives', ['event_id'])
    op.create_index('ix_archives_status', 'archives', ['status'])


def downgrade() -> None:
    op.drop_table('archives')
    op.drop_table('photos')
    op.drop_table('sessions')
    op.drop_table('events')
    archive_status.drop(op.get_bind(), checkfirst=True)
    event_status.drop(op.get_bind(), checkfirst=True)
