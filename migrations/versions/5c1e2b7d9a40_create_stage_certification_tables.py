"""create stage certification tables

Revision ID: 5c1e2b7d9a40
Revises:
Create Date: 2026-10-18 10:12:44.318207

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '5c1e2b7d9a40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

role_enum = sa.Enum('ADMIN', 'STUDENT', 'SUPERVISOR', name='roleenum')
level_enum = sa.Enum('A1', 'A2', 'B1', 'B2', 'C1', 'C2', name='levelenum')
difficulty_enum = sa.Enum('EASY', 'MEDIUM', 'HARD', name='difficultyenum')
competency_area_enum = sa.Enum(
    'DIGITAL_LITERACY', 'INFORMATION_MANAGEMENT', 'COMMUNICATION', 'COLLABORATION',
    'CONTENT_CREATION', 'SAFETY', 'PROBLEM_SOLVING', 'CAREER_DEVELOPMENT',
    name='competencyareaenum'
)
attempt_status_enum = sa.Enum('IN_PROGRESS', 'COMPLETED', name='attemptstatusenum')
completion_reason_enum = sa.Enum('SUBMITTED', 'EXPIRED', name='completionreasonenum')


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('full_name', sa.String(), nullable=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('role', role_enum, nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=True),
        sa.Column('organization', sa.String(), nullable=True),
        sa.Column('country', sa.String(), nullable=True),
        sa.Column('current_level', level_enum, nullable=True),
        sa.Column('can_retake', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('last_attempt_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_full_name'), 'users', ['full_name'], unique=False)
    op.create_index(op.f('ix_users_current_level'), 'users', ['current_level'], unique=False)

    op.create_table(
        'questions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('prompt', sa.String(length=1000), nullable=False),
        sa.Column('options', sa.JSON(), nullable=False),
        sa.Column('stage', sa.Integer(), nullable=False),
        sa.Column('level', level_enum, nullable=False),
        sa.Column('competency_area', competency_area_enum, nullable=False),
        sa.Column('difficulty', difficulty_enum, nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['created_by'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_questions_id'), 'questions', ['id'], unique=False)
    op.create_index('ix_questions_stage_active', 'questions', ['stage', 'is_active'], unique=False)

    op.create_table(
        'test_attempts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('stage', sa.Integer(), nullable=False),
        sa.Column('question_snapshot', sa.JSON(), nullable=False),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('time_limit_minutes', sa.Integer(), nullable=False),
        sa.Column('status', attempt_status_enum, nullable=False),
        sa.Column('completion_reason', completion_reason_enum, nullable=True),
        sa.Column('score', sa.Integer(), nullable=True),
        sa.Column('percentage', sa.Float(), nullable=True),
        sa.Column('level_achieved', level_enum, nullable=True),
        sa.Column('can_proceed_to_next', sa.Boolean(), nullable=True),
        sa.Column('retake_allowed', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_test_attempts_id'), 'test_attempts', ['id'], unique=False)
    op.create_index('ix_test_attempts_user_stage_status', 'test_attempts', ['user_id', 'stage', 'status'], unique=False)
    op.create_index(
        'uq_test_attempts_active_user_stage',
        'test_attempts',
        ['user_id', 'stage'],
        unique=True,
        postgresql_where=sa.text("status = 'IN_PROGRESS'"),
        sqlite_where=sa.text("status = 'IN_PROGRESS'")
    )

    op.create_table(
        'attempt_answers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('attempt_id', sa.Integer(), nullable=False),
        sa.Column('question_id', sa.Integer(), nullable=False),
        sa.Column('selected_option', sa.Integer(), nullable=False),
        sa.Column('is_correct', sa.Boolean(), nullable=False),
        sa.Column('time_spent', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['attempt_id'], ['test_attempts.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('attempt_id', 'question_id', name='uq_attempt_answers_attempt_question')
    )
    op.create_index(op.f('ix_attempt_answers_id'), 'attempt_answers', ['id'], unique=False)
    op.create_index(op.f('ix_attempt_answers_attempt_id'), 'attempt_answers', ['attempt_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_attempt_answers_attempt_id'), table_name='attempt_answers')
    op.drop_index(op.f('ix_attempt_answers_id'), table_name='attempt_answers')
    op.drop_table('attempt_answers')
    op.drop_index('uq_test_attempts_active_user_stage', table_name='test_attempts')
    op.drop_index('ix_test_attempts_user_stage_status', table_name='test_attempts')
    op.drop_index(op.f('ix_test_attempts_id'), table_name='test_attempts')
    op.drop_table('test_attempts')
    op.drop_index('ix_questions_stage_active', table_name='questions')
    op.drop_index(op.f('ix_questions_id'), table_name='questions')
    op.drop_table('questions')
    op.drop_index(op.f('ix_users_current_level'), table_name='users')
    op.drop_index(op.f('ix_users_full_name'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')

    for enum in (completion_reason_enum, attempt_status_enum, competency_area_enum,
                 difficulty_enum, level_enum, role_enum):
        enum.drop(op.get_bind(), checkfirst=True)
