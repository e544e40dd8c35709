"""Create places, place_lists and list_places

Revision ID: 0001_create_bookmark_schema
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_create_bookmark_schema'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('places',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('google_place_id', sa.String(length=255), nullable=True),
        sa.Column('source', sa.String(length=50), nullable=True),
        sa.Column('google_maps_url', sa.Text(), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('latitude', sa.Numeric(precision=10, scale=7), nullable=True),
        sa.Column('longitude', sa.Numeric(precision=10, scale=7), nullable=True),
        sa.Column('prefecture', sa.String(length=50), nullable=True),
        sa.Column('phone_number', sa.String(length=50), nullable=True),
        sa.Column('photo_url', sa.Text(), nullable=True),
        sa.Column('genre', sa.String(length=100), nullable=True),
        sa.Column('genre_parent', sa.String(length=50), nullable=True),
        sa.Column('genre_child', sa.String(length=50), nullable=True),
        sa.Column('features', sa.JSON(), nullable=True),
        sa.Column('summary', sa.Text(), nullable=True),
        sa.Column('rating', sa.Numeric(precision=2, scale=1), nullable=True),
        sa.Column('review_count', sa.Integer(), nullable=True),
        sa.Column('price_level', sa.Integer(), nullable=True),
        sa.Column('budget_lunch', sa.String(length=50), nullable=True),
        sa.Column('budget_dinner', sa.String(length=50), nullable=True),
        sa.Column('status', sa.String(length=20), server_default='none', nullable=False),
        sa.Column('user_rating', sa.Integer(), nullable=True),
        sa.Column('user_note', sa.Text(), nullable=True),
        sa.Column('visited_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('user_rating IS NULL OR (user_rating >= 1 AND user_rating <= 5)', name='ck_places_user_rating'),
        sa.CheckConstraint("status IN ('none', 'want_to_go', 'visited')", name='ck_places_status'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_places_id'), 'places', ['id'], unique=False)
    op.create_index(op.f('ix_places_user_id'), 'places', ['user_id'], unique=False)
    op.create_index(op.f('ix_places_prefecture'), 'places', ['prefecture'], unique=False)
    op.create_index(op.f('ix_places_genre_parent'), 'places', ['genre_parent'], unique=False)

    op.create_table('place_lists',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('color', sa.String(length=20), nullable=True),
        sa.Column('icon', sa.String(length=50), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_place_lists_id'), 'place_lists', ['id'], unique=False)
    op.create_index(op.f('ix_place_lists_user_id'), 'place_lists', ['user_id'], unique=False)

    op.create_table('list_places',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('list_id', sa.Integer(), nullable=False),
        sa.Column('place_id', sa.Integer(), nullable=False),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('added_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['list_id'], ['place_lists.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['place_id'], ['places.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('list_id', 'place_id', name='uq_list_places_list_place')
    )
    op.create_index(op.f('ix_list_places_id'), 'list_places', ['id'], unique=False)
    op.create_index(op.f('ix_list_places_list_id'), 'list_places', ['list_id'], unique=False)
    op.create_index(op.f('ix_list_places_place_id'), 'list_places', ['place_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_list_places_place_id'), table_name='list_places')
    op.drop_index(op.f('ix_list_places_list_id'), table_name='list_places')
    op.drop_index(op.f('ix_list_places_id'), table_name='list_places')
    op.drop_table('list_places')
    op.drop_index(op.f('ix_place_lists_user_id'), table_name='place_lists')
    op.drop_index(op.f('ix_place_lists_id'), table_name='place_lists')
    op.drop_table('place_lists')
    op.drop_index(op.f('ix_places_genre_parent'), table_name='places')
    op.drop_index(op.f('ix_places_prefecture'), table_name='places')
    op.drop_index(op.f('ix_places_user_id'), table_name='places')
    op.drop_index(op.f('ix_places_id'), table_name='places')
    op.drop_table('places')
