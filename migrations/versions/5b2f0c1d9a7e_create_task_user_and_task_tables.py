"""create_task_user_and_task_tables

Revision ID: 5b2f0c1d9a7e
Revises:
Create Date: 2026-10-19 09:12:40.118205

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b2f0c1d9a7e'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'task_user',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('external_id', sa.String(length=255), nullable=False),
        sa.Column('user_name', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_task_user_external_id', 'task_user', ['external_id'], unique=True)

    op.create_table(
        'task',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.String(), nullable=False),
        sa.Column('priority', sa.String(length=32), nullable=False),
        sa.Column('status', sa.String(length=32), nullable=False),
        sa.Column(
            'owner_id',
            sa.Integer(),
            sa.ForeignKey('task_user.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_task_owner_id', 'task', ['owner_id'])
    op.create_index('ix_task_priority', 'task', ['priority'])
    op.create_index('ix_task_status', 'task', ['status'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_task_status', table_name='task')
    op.drop_index('ix_task_priority', table_name='task')
    op.drop_index('ix_task_owner_id', table_name='task')
    op.drop_table('task')
    op.drop_index('ix_task_user_external_id', table_name='task_user')
    op.drop_table('task_user')
