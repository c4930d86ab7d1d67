"""create kv_store table

Revision ID: 3c1f7a9e2b40
Revises:
Create Date: 2026-02-10 09:30:00
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3c1f7a9e2b40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'kv_store',
        sa.Column('key', sa.String(255), primary_key=True),
        sa.Column('value', sa.JSON(), nullable=True),  # 整条记录存 JSON
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
    )


def downgrade():
    op.drop_table('kv_store')
