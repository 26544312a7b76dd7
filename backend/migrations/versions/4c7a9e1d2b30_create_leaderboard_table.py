"""create leaderboard table

Revision ID: 4c7a9e1d2b30
Revises:
Create Date: 2026-10-17 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4c7a9e1d2b30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if 'leaderboard' in set(insp.get_table_names()):
        return

    op.create_table(
        'leaderboard',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('wallet_address', sa.String(length=42), nullable=False),
        sa.Column('score', sa.Integer(), nullable=False),
        sa.Column('tx_hash', sa.String(length=66), nullable=True),
        sa.Column('player_name', sa.String(length=50), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_leaderboard_wallet_address', 'leaderboard', ['wallet_address'])
    op.create_index('ix_leaderboard_wallet_created_at', 'leaderboard', ['wallet_address', 'created_at'])


def downgrade():
    op.drop_index('ix_leaderboard_wallet_created_at', table_name='leaderboard')
    op.drop_index('ix_leaderboard_wallet_address', table_name='leaderboard')
    op.drop_table('leaderboard')
