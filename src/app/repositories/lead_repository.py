from abc import ABC, abstractmethod

from src.domain.entities import Lead


class ILeadRepository(ABC):
    """Lead repository interface - application layer"""

    @abstractmethod
    async def create(self, lead: Lead) -> Lead:
        """Create a new lead"""
        pass
