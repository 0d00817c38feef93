"""
Lead Entity

Marketing lead captured from the landing page (newsletter, voice assistant).
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import func
from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel


class Lead(SQLModel, table=True):
    """
    Lead entity - free-form payload tagged with its source.

    Business Rules:
    - Payload is stored as submitted (plus a client timestamp if absent)
    - created_at is assigned by the database for sorting
    """

    __tablename__ = "leads"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    source: Optional[str] = Field(default=None, max_length=100)
    payload: dict = Field(default_factory=dict, sa_column=Column(JSON))

    created_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime, server_default=func.now()),
    )

    __table_args__ = (Index("idx_lead_source", "source"),)
