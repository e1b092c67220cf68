"""Initial migration: create users, categories, sentences and practice_logs

Revision ID: initial
Revises:
Create Date: 2025-01-01 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('role', sa.String(length=20), nullable=False, server_default='user'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    # Create categories table
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('color', sa.String(length=20), nullable=True, server_default='#3b82f6'),
        sa.Column('is_preset', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_categories_is_preset'), 'categories', ['is_preset'], unique=False)
    op.create_index(op.f('ix_categories_user_id'), 'categories', ['user_id'], unique=False)

    # Create sentences table
    op.create_table(
        'sentences',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('english_text', sa.String(), nullable=False),
        sa.Column('chinese_text', sa.String(), nullable=True),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('difficulty', sa.String(length=20), nullable=True, server_default='medium'),
        sa.Column('notes', sa.String(), nullable=True),
        sa.Column('is_shared', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('audio_url', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id'], ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_sentences_category_id'), 'sentences', ['category_id'], unique=False)
    op.create_index(op.f('ix_sentences_user_id'), 'sentences', ['user_id'], unique=False)
    op.create_index(op.f('ix_sentences_is_shared'), 'sentences', ['is_shared'], unique=False)

    # Create practice_logs table (append-only)
    op.create_table(
        'practice_logs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('sentence_id', sa.Integer(), nullable=False),
        sa.Column('practiced_at', sa.DateTime(), nullable=False),
        sa.Column('score', sa.Integer(), nullable=True),
        sa.Column('transcript', sa.String(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['sentence_id'], ['sentences.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_practice_logs_user_id'), 'practice_logs', ['user_id'], unique=False)
    op.create_index(op.f('ix_practice_logs_sentence_id'), 'practice_logs', ['sentence_id'], unique=False)
    op.create_index('practice_logs_user_practiced_at_idx', 'practice_logs', ['user_id', 'practiced_at'], unique=False)


def downgrade() -> None:
    op.drop_index('practice_logs_user_practiced_at_idx', table_name='practice_logs')
    op.drop_index(op.f('ix_practice_logs_sentence_id'), table_name='practice_logs')
    op.drop_index(op.f('ix_practice_logs_user_id'), table_name='practice_logs')
    op.drop_table('practice_logs')

    op.drop_index(op.f('ix_sentences_is_shared'), table_name='sentences')
    op.drop_index(op.f('ix_sentences_user_id'), table_name='sentences')
    op.drop_index(op.f('ix_sentences_category_id'), table_name='sentences')
    op.drop_table('sentences')

    op.drop_index(op.f('ix_categories_user_id'), table_name='categories')
    op.drop_index(op.f('ix_categories_is_preset'), table_name='categories')
    op.drop_table('categories')

    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
