from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.identity_repository import IdentityRepository
from src.adapter.repositories.lead_repository import LeadRepository
from src.adapter.repositories.signup_record_repository import SignupRecordRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.identities = IdentityRepository(self.session)
        self.signup_records = SignupRecordRepository(self.session)
        self.leads = LeadRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
