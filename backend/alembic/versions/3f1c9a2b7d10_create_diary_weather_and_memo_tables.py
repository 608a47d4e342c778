"""Create diary, date_weather and memo tables

Revision ID: 3f1c9a2b7d10
Revises:
Create Date: 2024-05-05 10:12:41.402118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a2b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'date_weather',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('weather', sa.String(length=50), nullable=False),
        sa.Column('icon', sa.String(length=50), nullable=False),
        sa.Column('temperature', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_date_weather_date'), 'date_weather', ['date'], unique=False)

    op.create_table(
        'diary',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('weather', sa.String(length=50), nullable=False),
        sa.Column('icon', sa.String(length=50), nullable=False),
        sa.Column('temperature', sa.Float(), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_diary_date'), 'diary', ['date'], unique=False)

    op.create_table(
        'memo',
        sa.Column('id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('memo')

    op.drop_index(op.f('ix_diary_date'), table_name='diary')
    op.drop_table('diary')

    op.drop_index(op.f('ix_date_weather_date'), table_name='date_weather')
    op.drop_table('date_weather')
