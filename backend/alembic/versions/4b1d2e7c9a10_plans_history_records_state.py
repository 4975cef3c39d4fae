"""plans, plan day arena, history, personal records, check-ins, app state

Revision ID: 4b1d2e7c9a10
Revises:
Create Date: 2026-10-19 09:12:31.402117

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1d2e7c9a10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) plans + the (plan, week, day) arena
    op.create_table(
        'plans',
        sa.Column('id', sa.String(length=40), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('duration_weeks', sa.Integer(), nullable=False),
        sa.Column('split_name', sa.String(length=40), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_table(
        'plan_days',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('plan_id', sa.String(length=40), sa.ForeignKey('plans.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('week', sa.Integer(), nullable=False),
        sa.Column('day', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('completed_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('exercises', sa.JSON(), nullable=False),
        sa.UniqueConstraint('plan_id', 'week', 'day', name='uq_plan_days_slot'),
    )

    # 2) history and records
    op.create_table(
        'workout_history',
        sa.Column('id', sa.String(length=40), primary_key=True),
        sa.Column('plan_id', sa.String(length=40), nullable=False, index=True),
        sa.Column('plan_name', sa.String(length=120), nullable=False),
        sa.Column('workout_name', sa.String(length=120), nullable=False),
        sa.Column('completed_date', sa.DateTime(timezone=True), nullable=False, index=True),
        sa.Column('duration', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('volume', sa.Float(), nullable=False, server_default='0'),
        sa.Column('sets', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('exercises', sa.JSON(), nullable=False),
    )
    op.create_table(
        'personal_records',
        sa.Column('exercise_id', sa.String(length=160), primary_key=True),
        sa.Column('id', sa.String(length=200), nullable=False),
        sa.Column('exercise_name', sa.String(length=120), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('e1rm', sa.Integer(), nullable=False),
        sa.Column('units', sa.String(length=8), nullable=False, server_default='lbs'),
    )
    op.create_table(
        'daily_checkins',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('sleep', sa.Float(), nullable=False),
        sa.Column('stress', sa.Integer(), nullable=False),
    )

    # 3) single-row preferences
    op.create_table(
        'app_state',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_selections', sa.JSON(), nullable=False),
        sa.Column('settings', sa.JSON(), nullable=False),
        sa.Column('active_plan_id', sa.String(length=40), nullable=True),
        sa.Column('current_view', sa.JSON(), nullable=False),
        sa.Column('saved_templates', sa.JSON(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('app_state')
    op.drop_table('daily_checkins')
    op.drop_table('personal_records')
    op.drop_table('workout_history')
    op.drop_table('plan_days')
    op.drop_table('plans')
