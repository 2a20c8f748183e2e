"""initial

Revision ID: 0001
Revises: 
Create Date: 2024-08-12 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

revision = '0001'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table('posts',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('name', sa.String(255), nullable=True),
        sa.Column('breed', sa.String(255), nullable=True),
        sa.Column('age', sa.Integer, nullable=True),
        sa.Column('cause', sa.String(255), nullable=True),
        sa.Column('message', sa.Text(), nullable=True),
        sa.Column('date', sa.String(255), nullable=True),
        sa.Column('password', sa.String(255), nullable=True),
        sa.Column('is_public', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('expose_until', sa.Date(), nullable=True),
        sa.Column('lang', sa.String(16), nullable=False, server_default='ko'),
        sa.Column('image_url', sa.String(1024), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now())
    )
    op.create_index('ix_posts_id', 'posts', ['id'])
    op.create_index('ix_posts_created_at', 'posts', ['created_at'])
    # post_id carries no foreign key constraint: deleting a post keeps its comments
    op.create_table('comments',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('post_id', sa.Integer, nullable=False),
        sa.Column('name', sa.String(255), nullable=True),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now())
    )
    op.create_index('ix_comments_id', 'comments', ['id'])
    op.create_index('ix_comments_post_id', 'comments', ['post_id'])
    op.create_index('ix_comments_created_at', 'comments', ['created_at'])

def downgrade():
    op.drop_table('comments')
    op.drop_table('posts')
