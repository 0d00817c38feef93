from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import SignupRecord


class ISignupRecordRepository(ABC):
    """Signup record repository interface - application layer"""

    @abstractmethod
    async def get_by_identity_id(self, identity_id: str) -> Optional[SignupRecord]:
        """Get the signup record for an identity"""
        pass

    @abstractmethod
    async def upsert(self, record: SignupRecord) -> SignupRecord:
        """Insert the record, or overwrite the one with the same identity id"""
        pass
