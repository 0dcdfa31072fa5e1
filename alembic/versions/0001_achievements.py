"""Achievement categories, achievements and completion records

Revision ID: 0001_achievements
Revises:
Create Date: 2026-10-19 10:00:00.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = '0001_achievements'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'achievement_categories',
        sa.Column('id', sa.String(length=64), primary_key=True),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('desc', sa.Text(), nullable=True),
    )
    op.create_table(
        'achievements',
        sa.Column('id', sa.String(length=64), primary_key=True),
        sa.Column(
            'category_id', sa.String(length=64),
            sa.ForeignKey('achievement_categories.id', ondelete='CASCADE'), nullable=False,
        ),
        sa.Column('name', sa.String(length=128), nullable=True),
        sa.Column('short_desc', sa.Text(), nullable=True),
        sa.Column('todo_title', sa.String(length=256), nullable=True),
        sa.Column('todo_desc', sa.Text(), nullable=True),
        sa.Column('done_title', sa.String(length=256), nullable=True),
        sa.Column('done_desc', sa.Text(), nullable=True),
        sa.Column('verify_type', sa.String(length=64), nullable=True),
    )
    op.create_index('ix_achievements_category_id', 'achievements', ['category_id'])
    # Completion records; duplicates allowed
    op.create_table(
        'achieved',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('achievement_id', sa.String(length=64), nullable=False),
        sa.Column('addr', sa.String(length=80), nullable=False),
    )
    op.create_index('ix_achieved_achievement_addr', 'achieved', ['achievement_id', 'addr'])


def downgrade() -> None:
    op.drop_index('ix_achieved_achievement_addr', table_name='achieved')
    op.drop_table('achieved')
    op.drop_index('ix_achievements_category_id', table_name='achievements')
    op.drop_table('achievements')
    op.drop_table('achievement_categories')
