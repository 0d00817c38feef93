from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.lead_repository import ILeadRepository
from src.domain.entities import Lead


class LeadRepository(ILeadRepository):
    """Lead repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, lead: Lead) -> Lead:
        """Create a new lead"""
        self.session.add(lead)
        await self.session.flush()
        await self.session.refresh(lead)
        return lead
