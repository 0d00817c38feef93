"""
SignupRecord Entity

Aggregate document summarizing the outcome of one signup across all
provisioning steps.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import JSON, Column, DateTime, Field, SQLModel

from .enums import Plan


class SignupRecord(SQLModel, table=True):
    """
    SignupRecord entity - keyed by the identity id.

    Business Rules:
    - Exists once identity creation succeeded, even if provisioning failed
    - A null snapshot means that provisioning step did not produce a result
    - created_at is assigned by the database on first insert
    """

    __tablename__ = "signup_records"

    identity_id: str = Field(primary_key=True, max_length=64)
    name: str = Field(max_length=255)
    email: str = Field(index=True, max_length=255)
    business_type: str = Field(max_length=50)
    plan: Plan = Field(default=Plan.free)

    organization: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    client: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    cloned_agent: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    created_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime, server_default=func.now()),
    )
