"""create leaderboard_entries table and ranking index

Revision ID: 4b7c1d2e9f10
Revises:
Create Date: 2026-10-18 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4b7c1d2e9f10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)

    # Databases created by AUTO_CREATE_TABLES already have the table and index
    existing = set(insp.get_table_names())
    if 'leaderboard_entries' not in existing:
        op.create_table(
            'leaderboard_entries',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('game', sa.String(length=32), nullable=False),
            sa.Column('name', sa.String(length=12), nullable=False),
            sa.Column('score', sa.BigInteger(), nullable=False),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.current_timestamp(), nullable=False),
        )

    indexes = set()
    if 'leaderboard_entries' in existing:
        indexes = {ix['name'] for ix in insp.get_indexes('leaderboard_entries')}
    if 'idx_leaderboard_game_score' not in indexes:
        op.create_index(
            'idx_leaderboard_game_score',
            'leaderboard_entries',
            ['game', sa.text('score DESC')],
        )


def downgrade():
    op.drop_index('idx_leaderboard_game_score', table_name='leaderboard_entries')
    op.drop_table('leaderboard_entries')
