"""create game_session, team, question_set, question_template, question

Revision ID: 4c7d9e2a1b3f
Revises:
Create Date: 2025-11-30 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4c7d9e2a1b3f'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    existing_tables = set(insp.get_table_names())

    if 'question_set' not in existing_tables:
        op.create_table(
            'question_set',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=128), nullable=False),
        )

    if 'question_template' not in existing_tables:
        op.create_table(
            'question_template',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('question_set_id', sa.Integer(), sa.ForeignKey('question_set.id'), nullable=False),
            sa.Column('text', sa.Text(), nullable=False),
            sa.Column('answer', sa.Text(), nullable=False),
            sa.Column('points', sa.Integer(), nullable=False),
            sa.Column('category', sa.String(length=128), nullable=False),
        )
        op.create_index('ix_question_template_question_set_id', 'question_template', ['question_set_id'])

    if 'game_session' not in existing_tables:
        op.create_table(
            'game_session',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('is_started', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('question_set_id', sa.Integer(), sa.ForeignKey('question_set.id'), nullable=True),
        )

    if 'team' not in existing_tables:
        op.create_table(
            'team',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=64), nullable=False),
            sa.Column('name_key', sa.String(length=192), nullable=False),
            sa.Column('session_id', sa.Integer(), sa.ForeignKey('game_session.id'), nullable=False),
            sa.Column('points', sa.Integer(), nullable=False, server_default='0'),
            sa.UniqueConstraint('session_id', 'name_key', name='uq_team_session_name_key'),
            sa.CheckConstraint('points >= 0', name='ck_team_points_non_negative'),
        )
        op.create_index('ix_team_session_id', 'team', ['session_id'])

    if 'question' not in existing_tables:
        op.create_table(
            'question',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('session_id', sa.Integer(), sa.ForeignKey('game_session.id'), nullable=False),
            sa.Column('text', sa.Text(), nullable=False),
            sa.Column('answer', sa.Text(), nullable=False),
            sa.Column('points', sa.Integer(), nullable=False),
            sa.Column('category', sa.String(length=128), nullable=False),
            sa.Column('selected_by_team_id', sa.Integer(), sa.ForeignKey('team.id'), nullable=True),
            sa.Column('answered_by_team_id', sa.Integer(), sa.ForeignKey('team.id'), nullable=True),
            sa.Column('answered_correctly', sa.Boolean(), nullable=True),
            sa.CheckConstraint(
                'selected_by_team_id IS NULL OR answered_by_team_id IS NULL',
                name='ck_question_single_owner',
            ),
        )
        op.create_index('ix_question_session_id', 'question', ['session_id'])


def downgrade():
    op.drop_index('ix_question_session_id', table_name='question')
    op.drop_table('question')
    op.drop_index('ix_team_session_id', table_name='team')
    op.drop_table('team')
    op.drop_table('game_session')
    op.drop_index('ix_question_template_question_set_id', table_name='question_template')
    op.drop_table('question_template')
    op.drop_table('question_set')
