"""create user, score_record and game tables

Revision ID: 4a7c9e2b1f30
Revises:
Create Date: 2026-10-19 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4a7c9e2b1f30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    existing_tables = set(sa.inspect(bind).get_table_names())

    if 'user' not in existing_tables:
        op.create_table(
            'user',
            sa.Column('id', sa.String(length=64), primary_key=True),
            sa.Column('username', sa.String(length=64), nullable=False),
            sa.Column('email', sa.String(length=255), nullable=False),
            sa.Column('password_hash', sa.String(length=256), nullable=False),
            sa.Column('avatar', sa.String(length=512), nullable=True),
            sa.Column('level', sa.Integer(), nullable=False),
            sa.Column('experience', sa.Integer(), nullable=False),
            sa.Column('coins', sa.Integer(), nullable=False),
            sa.Column('achievements', sa.JSON(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
            sa.Column('last_login', sa.DateTime(timezone=True), nullable=False),
            sa.Column('is_admin', sa.Boolean(), nullable=False),
        )
        op.create_index('ix_user_username', 'user', ['username'], unique=True)
        op.create_index('ix_user_email', 'user', ['email'], unique=True)

    if 'score_record' not in existing_tables:
        op.create_table(
            'score_record',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.String(length=64), sa.ForeignKey('user.id'), nullable=False),
            sa.Column('game_id', sa.String(length=128), nullable=False),
            sa.Column('score', sa.Integer(), nullable=False),
            sa.Column('play_time', sa.Integer(), nullable=False),
            sa.Column('completed_at', sa.DateTime(timezone=True), nullable=False),
        )
        op.create_index('ix_score_record_user_id', 'score_record', ['user_id'])
        op.create_index('ix_score_record_game_id', 'score_record', ['game_id'])

    if 'game' not in existing_tables:
        op.create_table(
            'game',
            sa.Column('id', sa.String(length=64), primary_key=True),
            sa.Column('title', sa.String(length=255), nullable=False),
            sa.Column('description', sa.Text(), nullable=False),
            sa.Column('thumbnail', sa.String(length=1024), nullable=False),
            sa.Column('game_url', sa.String(length=1024), nullable=False),
            sa.Column('game_file', sa.String(length=255), nullable=True),
            sa.Column('is_embedded', sa.Boolean(), nullable=False),
            sa.Column('category', sa.String(length=32), nullable=False),
            sa.Column('plays', sa.Integer(), nullable=False),
            sa.Column('rating', sa.Integer(), nullable=False),
            sa.Column('is_new', sa.Boolean(), nullable=False),
            sa.Column('is_trending', sa.Boolean(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        )
        op.create_index('ix_game_category', 'game', ['category'])


def downgrade():
    op.drop_index('ix_game_category', table_name='game')
    op.drop_table('game')
    op.drop_index('ix_score_record_game_id', table_name='score_record')
    op.drop_index('ix_score_record_user_id', table_name='score_record')
    op.drop_table('score_record')
    op.drop_index('ix_user_email', table_name='user')
    op.drop_index('ix_user_username', table_name='user')
    op.drop_table('user')
