"""
Identity Entity

Durable authentication record for a signed-up user.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


def generate_identity_id() -> str:
    return uuid4().hex


class Identity(SQLModel, table=True):
    """
    Identity entity - one per email address.

    Business Rules:
    - Email must be unique across all identities
    - Password stored as bcrypt hash
    - Never mutated by the signup flow after creation, except last_sign_in_at
    """

    __tablename__ = "identities"

    id: str = Field(default_factory=generate_identity_id, primary_key=True, max_length=64)
    email: str = Field(unique=True, index=True, max_length=255)
    display_name: str = Field(max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    verified: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    last_sign_in_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
