"""Create documents table

Revision ID: 001
Revises:
Create Date: 2026-10-18 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    """Create documents table keyed by short document key."""

    op.create_table(
        'documents',
        sa.Column('id', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        # Unix epoch seconds
        sa.Column('created_at', sa.BigInteger(), nullable=False),
        sa.Column('expires_at', sa.BigInteger(), nullable=True),
        sa.Column('views', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    # Retention purge scans by expiry
    op.create_index('ix_documents_expires_at', 'documents', ['expires_at'])


def downgrade():
    """Drop documents table."""

    op.drop_index('ix_documents_expires_at', table_name='documents')
    op.drop_table('documents')
