"""initial schema

Revision ID: 4a1c2e7b9d10
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4a1c2e7b9d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=150), nullable=False),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('profile_image', sa.String(length=255), nullable=True),
        sa.Column('average_rating', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table(
        'skills',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=False),
        sa.Column('is_teaching', sa.Boolean(), nullable=False),
        sa.Column('proficiency', sa.String(length=20), nullable=True),
        sa.Column('icon', sa.String(length=100), nullable=True),
        sa.Column('average_rating', sa.Integer(), nullable=True),
        sa.Column('active_students', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
    )
    op.create_index('ix_skills_id', 'skills', ['id'])
    op.create_index('ix_skills_user_id', 'skills', ['user_id'])
    op.create_index('ix_skills_name', 'skills', ['name'])

    op.create_table(
        'skill_assessments',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('skill_id', sa.Integer(), sa.ForeignKey('skills.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('current_step', sa.Integer(), nullable=False),
        sa.Column('knowledge_score', sa.Integer(), nullable=True),
        sa.Column('practical_score', sa.Integer(), nullable=True),
        sa.Column('teaching_score', sa.Integer(), nullable=True),
        sa.Column('overall_score', sa.Integer(), nullable=True),
        sa.Column('completed_at', sa.TIMESTAMP(), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint('current_step >= 1 AND current_step <= 4', name='check_current_step_range'),
    )
    op.create_index('ix_skill_assessments_id', 'skill_assessments', ['id'])
    op.create_index('ix_skill_assessments_skill_id', 'skill_assessments', ['skill_id'])
    op.create_index('ix_skill_assessments_user_id', 'skill_assessments', ['user_id'])

    op.create_table(
        'assessment_questions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('category', sa.String(length=50), nullable=False),
        sa.Column('question', sa.Text(), nullable=False),
        sa.Column('options', sa.JSON(), nullable=False),
        sa.Column('correct_option', sa.Integer(), nullable=False),
    )
    op.create_index('ix_assessment_questions_id', 'assessment_questions', ['id'])
    op.create_index('ix_assessment_questions_category', 'assessment_questions', ['category'])

    op.create_table(
        'messages',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('sender_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('receiver_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_messages_id', 'messages', ['id'])
    op.create_index('ix_messages_sender_id', 'messages', ['sender_id'])
    op.create_index('ix_messages_receiver_id', 'messages', ['receiver_id'])
    op.create_index('ix_messages_created_at', 'messages', ['created_at'])

    op.create_table(
        'skill_exchanges',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('teacher_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('teacher_skill_id', sa.Integer(), sa.ForeignKey('skills.id'), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('student_rating', sa.Integer(), nullable=True),
        sa.Column('teacher_rating', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.TIMESTAMP(), nullable=True),
        sa.CheckConstraint('student_rating IS NULL OR (student_rating >= 1 AND student_rating <= 5)', name='check_student_rating_range'),
        sa.CheckConstraint('teacher_rating IS NULL OR (teacher_rating >= 1 AND teacher_rating <= 5)', name='check_teacher_rating_range'),
    )
    op.create_index('ix_skill_exchanges_id', 'skill_exchanges', ['id'])
    op.create_index('ix_skill_exchanges_teacher_id', 'skill_exchanges', ['teacher_id'])
    op.create_index('ix_skill_exchanges_student_id', 'skill_exchanges', ['student_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('skill_exchanges')
    op.drop_table('messages')
    op.drop_table('assessment_questions')
    op.drop_table('skill_assessments')
    op.drop_table('skills')
    op.drop_table('users')
