"""add event owner tokens, photo uploader sessions and archive skip counts

Revision ID: 0002_owner_tokens_photo_sessions
Revises: 0001_initial
Create Date: 2025-11-09 16:40:03.512877

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = '0002_owner_tokens_photo_sessions'
down_revision = '0001_initial'
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Events created before this revision have no owner token and cannot be managed.
    op.add_column('events', sa.Column('owner_token_hash', sa.String(length=64), nullable=False, server_default=''))
    op.alter_column('events', 'owner_token_hash', server_default=None)

    op.add_column('photos', sa.Column('session_id', postgresql.UUID(as_uuid=True), nullable=True))
    op.create_foreign_key(
        'fk_photos_session_id_sessions',
        'photos', 'sessions',
        ['session_id'], ['id'],
        ondelete='SET NULL',
    )
    op.create_index('ix_photos_session_id', 'photos', ['session_id'])

    op.add_column('archives', sa.Column('skipped_count', sa.Integer(), nullable=False, server_default='0'))


def downgrade() -> None:
    op.drop_column('archives', 'skipped_count')
    op.drop_index('ix_photos_session_id', table_name='photos')
    op.drop_constraint('fk_photos_session_id_sessions', 'photos', type_='foreignkey')
    op.drop_column('photos', 'session_id')
    op.drop_column('events', 'owner_token_hash')
