"""Document SQLAlchemy model

A stored paste: content keyed by a generated short identifier, with creation
time, optional expiration time and a view counter. Timestamps are Unix epoch
seconds so expiry comparisons behave the same on SQLite and PostgreSQL.
"""

from sqlalchemy import Column, Text, BigInteger, Integer, Index, text

from .base import Base


class Document(Base):
    """Document model representing a stored paste.

    expires_at is NULL for documents that never expire. Rows past their
    expiry stay in the table until the retention purge removes them, but
    are never returned by reads.
    """
    __tablename__ = "documents"
    __table_args__ = (
        Index("ix_documents_expires_at", "expires_at"),
    )

    id = Column(Text, primary_key=True)
    content = Column(Text, nullable=False)
    created_at = Column(BigInteger, nullable=False)
    expires_at = Column(BigInteger, nullable=True)
    views = Column(Integer, nullable=False, default=0, server_default=text("0"))

