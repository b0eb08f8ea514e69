"""media and media_tag

Revision ID: 4f1c2a9e7b10
Revises:
Create Date: 2026-10-18 09:12:40.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from galleryfeed.common.settings import get_settings

# revision identifiers, used by Alembic.
revision: str = '4f1c2a9e7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = get_settings().db_schema


def upgrade() -> None:
    op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto;")

    media_kind = postgresql.ENUM('video', 'image', name='media_kind', schema=SCHEMA, create_type=False)
    media_kind.create(op.get_bind(), checkfirst=True)

    op.create_table(
        'media',
        sa.Column('id', sa.UUID(), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.text('clock_timestamp()'), nullable=False),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.text('clock_timestamp()'), nullable=True),
        sa.Column('media_type', media_kind, nullable=False),
        sa.Column('media_url', sa.Text(), nullable=False),
        sa.Column('thumbnail_url', sa.Text(), nullable=True),
        sa.Column('title', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_media')),
        schema=SCHEMA,
    )
    op.create_index('ix_media_created_id', 'media', ['date_created', 'id'], unique=False, schema=SCHEMA)
    op.create_index('ix_media_type_created_id', 'media', ['media_type', 'date_created', 'id'],
                    unique=False, schema=SCHEMA)

    op.create_table(
        'media_tag',
        sa.Column('media_id', sa.UUID(), nullable=False),
        sa.Column('tag_category', sa.Text(), nullable=False),
        sa.Column('tag_value', sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(['media_id'], [f'{SCHEMA}.media.id'],
                                name=op.f('fk_media_tag_media_id_media'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('media_id', 'tag_category', 'tag_value', name=op.f('pk_media_tag')),
        schema=SCHEMA,
    )
    op.create_index('ix_media_tag_value', 'media_tag', ['tag_value'], unique=False, schema=SCHEMA)
    op.create_index('ix_media_tag_category_value', 'media_tag', ['tag_category', 'tag_value'],
                    unique=False, schema=SCHEMA)


def downgrade() -> None:
    op.drop_index('ix_media_tag_category_value', table_name='media_tag', schema=SCHEMA)
    op.drop_index('ix_media_tag_value', table_name='media_tag', schema=SCHEMA)
    op.drop_table('media_tag', schema=SCHEMA)
    op.drop_index('ix_media_type_created_id', table_name='media', schema=SCHEMA)
    op.drop_index('ix_media_created_id', table_name='media', schema=SCHEMA)
    op.drop_table('media', schema=SCHEMA)
    postgresql.ENUM(name='media_kind', schema=SCHEMA).drop(op.get_bind(), checkfirst=True)
