"""Initial schema: users and search history

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.UniqueConstraint('email', name='uq_users_email'),
    )

    # Create search_history table (user_email is not a foreign key)
    op.create_table(
        'search_history',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_email', sa.String(255), nullable=False),
        sa.Column('search_url', sa.Text(), nullable=True),
        sa.Column('search_response', postgresql.JSONB(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )
    op.create_index('ix_search_history_user_email', 'search_history', ['user_email'])
    op.create_index('ix_search_history_created_at', 'search_history', ['created_at'])


def downgrade() -> None:
    op.drop_index('ix_search_history_created_at', table_name='search_history')
    op.drop_index('ix_search_history_user_email', table_name='search_history')
    op.drop_table('search_history')
    op.drop_table('users')
