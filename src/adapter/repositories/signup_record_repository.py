from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.signup_record_repository import ISignupRecordRepository
from src.domain.entities import SignupRecord


class SignupRecordRepository(ISignupRecordRepository):
    """Signup record repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_identity_id(self, identity_id: str) -> Optional[SignupRecord]:
        """Get the signup record for an identity"""
        stmt = select(SignupRecord).where(SignupRecord.identity_id == identity_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def upsert(self, record: SignupRecord) -> SignupRecord:
        """Insert the record, or overwrite the one with the same identity id"""
        existing = await self.get_by_identity_id(record.identity_id)
        if existing is None:
            self.session.add(record)
            target = record
        else:
            # created_at stays as first stamped
            for field in (
                "name",
                "email",
                "business_type",
                "plan",
                "organization",
                "client",
                "cloned_agent",
            ):
                setattr(existing, field, getattr(record, field))
            self.session.add(existing)
            target = existing

        await self.session.flush()
        await self.session.refresh(target)
        return target
